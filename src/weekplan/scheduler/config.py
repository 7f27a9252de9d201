"""Configuration for the scheduling engine."""

from enum import Enum

from pydantic import BaseModel, Field

DEFAULT_DAILY_CAPACITY = 6
DEFAULT_SMART_SCHEDULE_WEEKS = 4
MAX_RECOMMENDED_CAPACITY = 20


class TiebreakMode(str, Enum):
    """Low-magnitude term added to every day score to make results reproducible."""

    DAY_OF_MONTH = "day_of_month"  # Calendar day number (1-31)
    DAYS_FROM_ANCHOR = "days_from_anchor"  # Days since the first day of the window


class SchedulingConfig(BaseModel):
    """Parameters for bulk and single-task scheduling."""

    daily_capacity: int = DEFAULT_DAILY_CAPACITY
    smart_schedule_weeks: int = Field(default=DEFAULT_SMART_SCHEDULE_WEEKS, ge=1)
    max_weeks: int | None = Field(default=None, ge=1)  # None = size window to backlog
    max_recommended_capacity: int = MAX_RECOMMENDED_CAPACITY
    tiebreak: TiebreakMode = TiebreakMode.DAY_OF_MONTH


def validate_config(
    daily_capacity: int,
    total_task_count: int,
    max_recommended: int = MAX_RECOMMENDED_CAPACITY,
) -> list[str]:
    """Check scheduler parameters before a run.

    Never raises; an empty list means the run can go ahead.

    Args:
        daily_capacity: Maximum tasks per day
        total_task_count: Number of tasks (active plus inbox) to schedule
        max_recommended: Capacity above which the limit is flagged as implausible

    Returns:
        Human-readable problems, in a stable order
    """
    errors: list[str] = []

    if daily_capacity <= 0:
        errors.append("Tasks per day limit must be greater than 0")

    if total_task_count <= 0:
        errors.append("No tasks to schedule")

    if daily_capacity > max_recommended:
        errors.append(f"Tasks per day limit seems too high (max recommended: {max_recommended})")

    return errors
