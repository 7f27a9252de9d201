"""Bulk and single-task scheduling entry points."""

import dataclasses
from collections.abc import Iterable, Sequence
from datetime import date, datetime

from weekplan.logger import get_logger
from weekplan.models import Priority, Status, Task, TaskList

from .config import (
    DEFAULT_DAILY_CAPACITY,
    DEFAULT_SMART_SCHEDULE_WEEKS,
    SchedulingConfig,
    TiebreakMode,
    validate_config,
)
from .core import DayLoadMap, ScheduleResult
from .days import generate_day_window, weeks_needed
from .placement import find_best_day

logger = get_logger()


def promote_inbox_task(item: Task) -> Task:
    """Turn an untriaged inbox item into a low-priority todo task."""
    return dataclasses.replace(item, priority=Priority.LOW, status=Status.TODO, scheduled_date=None)


def auto_schedule(  # noqa: PLR0913 - mirrors the bulk scheduling inputs
    active_tasks: Iterable[Task],
    inbox_tasks: Iterable[Task],
    daily_capacity: int,
    week_anchor: date | datetime,
    *,
    max_weeks: int | None = None,
    tiebreak: TiebreakMode = TiebreakMode.DAY_OF_MONTH,
) -> ScheduleResult:
    """Place every active task and inbox item on a day, highest priority first.

    Archived tasks and tasks that are done are ignored. Inbox items are
    scheduled as low-priority todo tasks after any active task of equal
    priority. The window starts at ``week_anchor`` and spans as many whole
    weeks as the backlog needs at ``daily_capacity``, capped at ``max_weeks``
    but never below one week. Tasks that find no free day are returned in
    ``unplaced_tasks``; the window is never grown to fit them.

    Inputs are not modified; scheduled tasks are copies.

    Args:
        active_tasks: Current tasks
        inbox_tasks: Untriaged backlog items
        daily_capacity: Maximum tasks per day
        week_anchor: First day of the window
        max_weeks: Optional cap on the window length
        tiebreak: Ordinal term used by day scoring

    Returns:
        ScheduleResult with placed and unplaced tasks
    """
    candidates = [task for task in active_tasks if task.is_active]
    promoted = [promote_inbox_task(item) for item in inbox_tasks]
    inbox_ids = {item.id for item in promoted}

    # sorted() is stable: equal priorities keep their input order
    to_schedule = sorted(candidates + promoted, key=lambda t: t.priority.weight, reverse=True)

    weeks = weeks_needed(len(to_schedule), daily_capacity)
    if max_weeks is not None:
        weeks = max(1, min(weeks, max_weeks))
    days = generate_day_window(week_anchor, weeks)
    logger.checks(
        f"Scheduling {len(to_schedule)} tasks over {weeks} week(s) from {days[0]} "
        f"(capacity {daily_capacity}/day)"
    )

    day_loads: DayLoadMap = dict.fromkeys(days, 0)
    scheduled: list[Task] = []
    unplaced: list[Task] = []

    for task in to_schedule:
        logger.checks(f"  Considering {task.id} (priority={task.priority.value})")
        best_day = find_best_day(task, days, day_loads, daily_capacity, tiebreak=tiebreak)

        if best_day is None:
            logger.checks(f"  No free day for {task.id}")
            unplaced.append(task)
            continue

        scheduled.append(dataclasses.replace(task, scheduled_date=best_day))
        day_loads[best_day] += 1
        logger.changes(f"  {task.id} -> {best_day}")

    return ScheduleResult(
        scheduled_tasks=scheduled,
        weeks_used=weeks,
        unplaced_tasks=unplaced,
        day_loads=day_loads,
        inbox_cleared=bool(inbox_ids) and not any(t.id in inbox_ids for t in unplaced),
    )


def smart_schedule(  # noqa: PLR0913 - mirrors the single-task scheduling inputs
    task: Task,
    all_tasks: Iterable[Task],
    week_anchor: date | datetime,
    daily_capacity: int = DEFAULT_DAILY_CAPACITY,
    *,
    weeks: int = DEFAULT_SMART_SCHEDULE_WEEKS,
    tiebreak: TiebreakMode = TiebreakMode.DAY_OF_MONTH,
) -> date | None:
    """Find the best day for one task among already-scheduled work.

    Loads are the non-archived tasks (other than ``task`` itself) already
    scheduled on each day of a ``weeks``-long window from ``week_anchor``.
    No task is modified; the caller decides whether to apply the date.

    Returns:
        The chosen day, or None if every day in the window is full
    """
    days = generate_day_window(week_anchor, weeks)
    day_loads: DayLoadMap = dict.fromkeys(days, 0)

    for other in all_tasks:
        if other.archived or other.id == task.id:
            continue
        if other.scheduled_date in day_loads:
            day_loads[other.scheduled_date] += 1

    best_day = find_best_day(task, days, day_loads, daily_capacity, tiebreak=tiebreak)
    if best_day is None:
        logger.checks(f"No free day for {task.id} in {weeks} week(s) from {days[0]}")
    else:
        logger.changes(f"{task.id} -> {best_day}")
    return best_day


def apply_schedule(tasks: Sequence[Task], result: ScheduleResult) -> list[Task]:
    """Merge a schedule result into a task list.

    Scheduled copies replace the task with the same id; scheduled tasks
    not present in ``tasks`` (promoted inbox items) are appended in
    placement order. Returns a new list.
    """
    by_id = {task.id: task for task in result.scheduled_tasks}
    existing_ids = {task.id for task in tasks}

    merged = [by_id.get(task.id, task) for task in tasks]
    merged.extend(task for task in result.scheduled_tasks if task.id not in existing_ids)
    return merged


class SchedulingService:
    """Runs the scheduling entry points with settings from a SchedulingConfig."""

    def __init__(self, config: SchedulingConfig | None = None):
        self.config = config or SchedulingConfig()

    def schedule(self, task_list: TaskList, week_anchor: date | datetime) -> ScheduleResult:
        """Bulk-schedule all active tasks and inbox items of a task list."""
        return auto_schedule(
            task_list.tasks,
            task_list.inbox,
            self.config.daily_capacity,
            week_anchor,
            max_weeks=self.config.max_weeks,
            tiebreak=self.config.tiebreak,
        )

    def place(
        self, task: Task, all_tasks: Iterable[Task], week_anchor: date | datetime
    ) -> date | None:
        """Find the best day for a single task."""
        return smart_schedule(
            task,
            all_tasks,
            week_anchor,
            self.config.daily_capacity,
            weeks=self.config.smart_schedule_weeks,
            tiebreak=self.config.tiebreak,
        )

    def apply(self, task_list: TaskList, result: ScheduleResult) -> TaskList:
        """Return a new task list with the result merged in.

        Placed inbox items move to the task list; unplaced ones stay in the inbox.
        """
        placed_ids = {task.id for task in result.scheduled_tasks}
        return TaskList(
            tasks=apply_schedule(task_list.tasks, result),
            inbox=[item for item in task_list.inbox if item.id not in placed_ids],
        )

    def validate(self, total_task_count: int) -> list[str]:
        """Check the configured capacity against a backlog size."""
        return validate_config(
            self.config.daily_capacity,
            total_task_count,
            self.config.max_recommended_capacity,
        )
