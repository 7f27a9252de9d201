"""Dependency graph checks for tasks.

Edges point from a task to the tasks it depends on. The graph must stay
acyclic; ``would_create_cycle`` is the check run before an edge is stored.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from .exceptions import CircularDependencyError
from .logger import get_logger
from .models import DependencyStatus, Status, Task

logger = get_logger()

CYCLE_REJECTION_MESSAGE = (
    "Cannot add this dependency: it would create a circular dependency chain."
)


def _dependency_graph(tasks: Iterable[Task]) -> dict[str, frozenset[str]]:
    """Map task id to the ids it depends on."""
    return {task.id: task.dependencies for task in tasks}


def would_create_cycle(task_id: str, dependency_id: str, tasks: Iterable[Task]) -> bool:
    """Check whether making ``task_id`` depend on ``dependency_id`` closes a cycle.

    Walks the existing dependencies reachable from ``dependency_id``; if
    ``task_id`` is among them the new edge would close a loop. A task
    depending on itself is always a cycle. Existing cycles elsewhere in the
    graph do not prevent termination.

    Args:
        task_id: Task that would gain the dependency
        dependency_id: Proposed dependency
        tasks: All known tasks (the current graph)

    Returns:
        True if the edge must be rejected
    """
    if task_id == dependency_id:
        return True

    graph = _dependency_graph(tasks)
    visited: set[str] = set()
    stack = [dependency_id]

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)

        if current == task_id:
            logger.checks(f"Dependency {task_id} -> {dependency_id} would create a cycle")
            return True

        stack.extend(graph.get(current, ()))

    return False


def add_dependency(task: Task, dependency_id: str, tasks: Iterable[Task]) -> Task:
    """Return a copy of ``task`` that also depends on ``dependency_id``.

    Raises:
        CircularDependencyError: If the new edge would create a cycle
    """
    if would_create_cycle(task.id, dependency_id, tasks):
        raise CircularDependencyError(CYCLE_REJECTION_MESSAGE)
    return dataclasses.replace(task, dependencies=task.dependencies | {dependency_id})


def remove_dependency(task: Task, dependency_id: str) -> Task:
    """Return a copy of ``task`` without the dependency on ``dependency_id``.

    Removing an edge can never create a cycle, so no check is needed.
    Removing a dependency the task does not have returns an equal copy.
    """
    return dataclasses.replace(task, dependencies=task.dependencies - {dependency_id})


def find_cycle(tasks: Iterable[Task]) -> list[str] | None:
    """Find a dependency cycle anywhere in the graph.

    Iterative depth-first search. Tasks on the current path are grey, fully
    explored tasks are black and never entered again, so each task is
    visited once however long its dependency chain is.

    Returns:
        The ids along the cycle with the re-entered id repeated at the end,
        or None if the graph is acyclic
    """
    graph = _dependency_graph(tasks)
    finished: set[str] = set()

    for root in graph:
        if root in finished:
            continue

        path = [root]
        on_path = {root}
        pending = [iter(sorted(graph[root]))]

        while pending:
            dep_id = next(pending[-1], None)
            if dep_id is None:
                pending.pop()
                done_id = path.pop()
                on_path.discard(done_id)
                finished.add(done_id)
                continue

            if dep_id in on_path:
                return path[path.index(dep_id) :] + [dep_id]
            if dep_id in finished:
                continue

            path.append(dep_id)
            on_path.add(dep_id)
            pending.append(iter(sorted(graph.get(dep_id, ()))))

    return None


def validate_task_graph(tasks: Iterable[Task]) -> None:
    """Raise if the stored dependency graph already contains a cycle."""
    tasks = list(tasks)
    cycle = find_cycle(tasks)
    if cycle:
        raise CircularDependencyError(f"Circular dependency detected: {' -> '.join(cycle)}")

    known_ids = {task.id for task in tasks}
    for task in tasks:
        for dep_id in sorted(task.dependencies - known_ids):
            logger.checks(f"Task {task.id} depends on unknown task {dep_id}")


def dependency_status(task: Task, tasks: Iterable[Task]) -> DependencyStatus:
    """Count how many of ``task``'s dependencies are not done yet.

    Dependencies that refer to unknown tasks count as met.
    """
    by_id = {other.id: other for other in tasks}
    unmet = 0
    for dep_id in task.dependencies:
        dep_task = by_id.get(dep_id)
        if dep_task is not None and dep_task.status != Status.DONE:
            unmet += 1
    return DependencyStatus(total=len(task.dependencies), unmet=unmet)
