"""Core dataclasses for the scheduling engine."""

from dataclasses import dataclass, field
from datetime import date

from weekplan.models import Task

# Tasks already placed per day within one scheduling run
DayLoadMap = dict[date, int]


def _default_task_list() -> list[Task]:
    return []


def _default_load_map() -> DayLoadMap:
    return {}


@dataclass
class ScheduleResult:
    """Outcome of a bulk scheduling run."""

    scheduled_tasks: list[Task]  # Copies with scheduled_date set, in placement order
    weeks_used: int
    unplaced_tasks: list[Task] = field(default_factory=_default_task_list)
    day_loads: DayLoadMap = field(default_factory=_default_load_map)
    inbox_cleared: bool = False  # Inbox was non-empty and every item was placed

    @property
    def tasks_scheduled(self) -> int:
        return len(self.scheduled_tasks)
