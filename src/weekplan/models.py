"""Data models for weekplan."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class Priority(str, Enum):
    """Task priority. Ordered high > medium > low."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        """Ordinal weight used for sorting and scoring (high=3, medium=2, low=1)."""
        return _PRIORITY_WEIGHTS[self]


_PRIORITY_WEIGHTS = {Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}


class Status(str, Enum):
    """Task workflow status."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


# Only these statuses are eligible for scheduling
SCHEDULABLE_STATUSES = frozenset({Status.TODO, Status.IN_PROGRESS})


def _default_dependencies() -> frozenset[str]:
    return frozenset()


@dataclass(frozen=True)
class Task:
    """A unit of work that can be placed on a calendar day.

    Tasks are immutable; scheduling returns copies made with
    ``dataclasses.replace``.
    """

    id: str
    title: str = ""
    priority: Priority = Priority.MEDIUM
    status: Status = Status.TODO
    scheduled_date: date | None = None
    dependencies: frozenset[str] = field(default_factory=_default_dependencies)
    archived: bool = False

    @property
    def is_active(self) -> bool:
        """True if the task is eligible for bulk scheduling."""
        return not self.archived and self.status in SCHEDULABLE_STATUSES


@dataclass(frozen=True)
class DependencyStatus:
    """How many of a task's dependencies are still outstanding."""

    total: int
    unmet: int

    @property
    def blocked(self) -> bool:
        return self.unmet > 0

    def describe(self) -> str:
        """Short human-readable summary, e.g. ``Blocked by 2 tasks``."""
        if self.blocked:
            plural = "s" if self.unmet > 1 else ""
            return f"Blocked by {self.unmet} task{plural}"
        plural = "s" if self.total > 1 else ""
        return f"{self.total} dep{plural} met"


def _default_task_list() -> list[Task]:
    return []


@dataclass
class TaskList:
    """The tasks and inbox backlog loaded from one task file."""

    tasks: list[Task] = field(default_factory=_default_task_list)
    inbox: list[Task] = field(default_factory=_default_task_list)

    def get_task_by_id(self, task_id: str) -> Task | None:
        """Find a task (not an inbox item) by id."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def get_all_ids(self) -> set[str]:
        """Ids of all tasks and inbox items."""
        return {task.id for task in self.tasks} | {item.id for item in self.inbox}

    def replace_task(self, updated: Task) -> None:
        """Replace the task with the same id in place."""
        self.tasks = [updated if task.id == updated.id else task for task in self.tasks]
