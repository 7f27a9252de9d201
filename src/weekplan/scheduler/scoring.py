"""Day scoring for task placement. Lower scores are better."""

from datetime import date

from weekplan.models import Priority, Task

from .config import TiebreakMode
from .days import is_weekend

LOAD_PENALTY = 100  # Per task already on the day
PRIORITY_PENALTY = 10  # Per point of priority weight
WEEKEND_PENALTY = 50  # High-priority tasks only


def score_day(
    task: Task,
    day: date,
    current_load: int,
    *,
    tiebreak: TiebreakMode = TiebreakMode.DAY_OF_MONTH,
    window_start: date | None = None,
) -> int:
    """Cost of placing ``task`` on ``day``.

    The score is the sum of:
    - load: 100 per task already on the day, which dominates everything else
    - priority: 10 x priority weight (high=3, medium=2, low=1)
    - weekend: +50 for high-priority tasks on Saturday or Sunday
    - tiebreak: the day of the month, or days since ``window_start`` when
      ``tiebreak`` is DAYS_FROM_ANCHOR

    Args:
        task: Task being placed
        day: Candidate day
        current_load: Tasks already placed on the day
        tiebreak: Which ordinal term to add
        window_start: First day of the window (DAYS_FROM_ANCHOR only; defaults to ``day``)

    Returns:
        Placement cost
    """
    score = current_load * LOAD_PENALTY
    score += task.priority.weight * PRIORITY_PENALTY

    if task.priority == Priority.HIGH and is_weekend(day):
        score += WEEKEND_PENALTY

    if tiebreak == TiebreakMode.DAYS_FROM_ANCHOR:
        score += (day - (window_start or day)).days
    else:
        score += day.day

    return score
