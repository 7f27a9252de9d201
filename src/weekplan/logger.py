"""Logging configuration for weekplan with custom verbosity levels."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

# Custom levels between the standard logging levels
CHANGES_LEVEL = 25  # Between INFO (20) and WARNING (30) - placements, verbosity 1
CHECKS_LEVEL = 15  # Between DEBUG (10) and INFO (20) - skipped days, verbosity 2

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

# Verbosity level constants for the -v option
VERBOSITY_SILENT = 0  # Errors only
VERBOSITY_CHANGES = 1  # Tasks placed on days
VERBOSITY_CHECKS = 2  # Tasks considered and days skipped
VERBOSITY_DEBUG = 3  # Per-day scores


class WeekplanLogger(logging.Logger):
    """Logger with semantic verbosity methods.

    - changes(): verbosity 1 - tasks placed on days
    - checks(): verbosity 2 - tasks considered, days skipped as full
    - debug(): verbosity 3 - per-day scores
    """

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log changes (verbosity level 1)."""
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log checks (verbosity level 2)."""
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> WeekplanLogger:
    """Get the weekplan logger instance (singleton).

    Use setup_logger() to configure it before first use.
    """
    logging.setLoggerClass(WeekplanLogger)
    logger = logging.getLogger("weekplan")
    assert isinstance(logger, WeekplanLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the weekplan logger with verbosity level.

    Can be called multiple times to reconfigure the logger.

    Args:
        verbosity: 0=silent (errors only), 1=changes, 2=checks, 3=debug
        stream: Optional output stream (defaults to sys.stderr, useful for testing)
    """
    logger = get_logger()
    logger.handlers.clear()

    # Map verbosity to logging levels
    level_map = {
        VERBOSITY_SILENT: logging.ERROR,
        VERBOSITY_CHANGES: CHANGES_LEVEL,
        VERBOSITY_CHECKS: CHECKS_LEVEL,
        VERBOSITY_DEBUG: logging.DEBUG,
    }
    logger.setLevel(level_map.get(verbosity, logging.ERROR))

    # Use provided stream or default to stderr
    output_stream = stream if stream is not None else sys.stderr

    # Clean formatting (no level prefix)
    handler = logging.StreamHandler(output_stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Reset the logger to clean state.

    Useful for testing to ensure clean state between tests.
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def debug_enabled() -> bool:
    """Check if debug-level logging is enabled (verbosity >= 3)."""
    return get_logger().isEnabledFor(logging.DEBUG)
