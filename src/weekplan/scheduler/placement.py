"""Single-task placement search."""

from collections.abc import Sequence
from datetime import date

from weekplan.logger import debug_enabled, get_logger
from weekplan.models import Task

from .config import TiebreakMode
from .core import DayLoadMap
from .scoring import score_day

logger = get_logger()


def find_best_day(
    task: Task,
    days: Sequence[date],
    day_loads: DayLoadMap,
    daily_capacity: int,
    *,
    tiebreak: TiebreakMode = TiebreakMode.DAY_OF_MONTH,
) -> date | None:
    """Pick the lowest-scoring day with spare capacity for ``task``.

    Days are scanned in order; a later day must score strictly lower to
    win, so ties go to the earliest day. ``day_loads`` is read, not modified.

    Returns:
        The chosen day, or None if every day is at capacity
    """
    best_day: date | None = None
    best_score: int | None = None
    window_start = days[0] if days else None

    for day in days:
        current_load = day_loads.get(day, 0)
        if current_load >= daily_capacity:
            logger.checks(f"    {day}: full ({current_load}/{daily_capacity}), skipping")
            continue

        score = score_day(task, day, current_load, tiebreak=tiebreak, window_start=window_start)
        if debug_enabled():
            logger.debug(f"    {day}: load={current_load} score={score}")

        if best_score is None or score < best_score:
            best_score = score
            best_day = day

    return best_day
