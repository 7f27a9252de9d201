"""Scheduler package - capacity-constrained placement of tasks on days.

Main entry points:
- auto_schedule: Place all active tasks and inbox items across a day window
- smart_schedule: Pick the best day for a single task
- validate_config: Check scheduler parameters before a run
- SchedulingService: Runs the entry points with a SchedulingConfig
"""

from .config import SchedulingConfig, TiebreakMode, validate_config
from .core import DayLoadMap, ScheduleResult
from .days import generate_day_window, is_weekend, weeks_needed
from .placement import find_best_day
from .scoring import score_day
from .service import (
    SchedulingService,
    apply_schedule,
    auto_schedule,
    promote_inbox_task,
    smart_schedule,
)

__all__ = [
    # Core dataclasses
    "ScheduleResult",
    "DayLoadMap",
    # Configuration
    "SchedulingConfig",
    "TiebreakMode",
    "validate_config",
    # Building blocks
    "generate_day_window",
    "weeks_needed",
    "is_weekend",
    "score_day",
    "find_best_day",
    # Entry points
    "auto_schedule",
    "smart_schedule",
    "apply_schedule",
    "promote_inbox_task",
    "SchedulingService",
]
