"""Pytest configuration and fixtures for weekplan tests."""

from __future__ import annotations

from datetime import date

import pytest

from weekplan.config import set_config_path
from weekplan.logger import reset_logger
from weekplan.models import Priority, Status, Task

# Monday; the window runs Mon 3 - Sun 9 March 2025
MONDAY = date(2025, 3, 3)
SATURDAY = date(2025, 3, 8)
SUNDAY = date(2025, 3, 9)


@pytest.fixture(autouse=True)
def clean_state() -> None:
    """Reset logger and the CLI config path before each test for isolation."""
    reset_logger()
    set_config_path(None)


def make_task(  # noqa: PLR0913 - mirrors Task fields
    task_id: str,
    priority: str = "medium",
    status: str = "todo",
    *,
    scheduled: date | None = None,
    depends_on: tuple[str, ...] = (),
    archived: bool = False,
) -> Task:
    """Create a Task with string priority/status for brevity.

    Example:
        make_task("a", "high", depends_on=("b",))
    """
    return Task(
        id=task_id,
        title=task_id.title(),
        priority=Priority(priority),
        status=Status(status),
        scheduled_date=scheduled,
        dependencies=frozenset(depends_on),
        archived=archived,
    )


def make_tasks(count: int, priority: str = "medium", prefix: str = "t") -> list[Task]:
    """Create ``count`` tasks named t0, t1, ..."""
    return [make_task(f"{prefix}{i}", priority) for i in range(count)]
