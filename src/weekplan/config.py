"""Configuration file loading and discovery.

Settings live in ``weekplan_config.yaml``::

    scheduling:
      daily_capacity: 6
      smart_schedule_weeks: 4
      max_weeks: 8
      tiebreak: day_of_month
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError, ValidationError
from .scheduler import SchedulingConfig

CONFIG_FILENAME = "weekplan_config.yaml"

# Config file named by the CLI --config option, checked before any search
_cli_config_path: Path | None = None


def get_config_path() -> Path | None:
    """Get the config path chosen on the command line."""
    return _cli_config_path


def set_config_path(path: Path | None) -> None:
    """Choose the config file for every later discover_config() call."""
    global _cli_config_path  # noqa: PLW0603 - set once per CLI invocation
    _cli_config_path = path


class WeekplanConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="forbid")

    scheduling: SchedulingConfig = Field(default_factory=SchedulingConfig)


def load_config(config_path: Path | str) -> WeekplanConfig:
    """Load configuration from a YAML file.

    An empty file yields the defaults.

    Raises:
        ParseError: If the file is missing or not valid YAML
        ValidationError: If a setting is unknown or has the wrong type
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ParseError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse config YAML: {e}") from e

    if data is None:
        return WeekplanConfig()
    if not isinstance(data, dict):
        raise ParseError("Config must contain a dictionary at the root level")

    try:
        return WeekplanConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid config in {config_path}: {e}") from e


def discover_config(
    task_file: Path | None = None, config_path: Path | None = None
) -> WeekplanConfig:
    """Find and load configuration.

    Search order:
    1. Explicit config_path argument
    2. Path set with set_config_path() (CLI --config)
    3. Task file directory / weekplan_config.yaml
    4. Current directory / weekplan_config.yaml

    Falls back to defaults when nothing is found.
    """
    if config_path is not None:
        return load_config(config_path)

    cli_config = get_config_path()
    if cli_config is not None:
        return load_config(cli_config)

    if task_file is not None:
        dir_config = Path(task_file).parent / CONFIG_FILENAME
        if dir_config.exists():
            return load_config(dir_config)

    cwd_config = Path(CONFIG_FILENAME)
    if cwd_config.exists():
        return load_config(cwd_config)

    return WeekplanConfig()
