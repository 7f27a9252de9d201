"""Day window generation and sizing."""

import math
from datetime import date, datetime, timedelta

DAYS_PER_WEEK = 7
SATURDAY = 5
SUNDAY = 6


def to_day(anchor: date | datetime) -> date:
    """Calendar day of an anchor in local time.

    Naive datetimes are taken as already local; aware ones are converted to
    the local zone first.
    """
    if isinstance(anchor, datetime):
        if anchor.tzinfo is not None:
            anchor = anchor.astimezone()
        return anchor.date()
    return anchor


def generate_day_window(start: date | datetime, weeks: int) -> list[date]:
    """Generate ``7 * weeks`` consecutive days beginning at ``start``.

    Raises:
        ValueError: If weeks is less than 1
    """
    if weeks < 1:
        raise ValueError(f"Day window needs at least one week, got {weeks}")

    first_day = to_day(start)
    return [first_day + timedelta(days=offset) for offset in range(weeks * DAYS_PER_WEEK)]


def weeks_needed(total_tasks: int, daily_capacity: int) -> int:
    """Whole weeks required to fit ``total_tasks`` at ``daily_capacity`` per day.

    Always at least 1. A non-positive capacity can never fit anything, so
    one week is returned and every day in it is full.
    """
    if daily_capacity <= 0:
        return 1
    return max(1, math.ceil(total_tasks / (daily_capacity * DAYS_PER_WEEK)))


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)
