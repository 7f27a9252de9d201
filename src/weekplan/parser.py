"""YAML reading and writing of task files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .dependencies import validate_task_graph
from .exceptions import ParseError, ValidationError
from .models import Priority, Status, Task, TaskList
from .schemas import TaskFileSchema


class TaskFileParser:
    """Parser for task YAML files.

    This parser only handles YAML parsing and model creation.
    For loading with graph validation, use load_task_file().
    """

    def parse_file(self, file_path: Path | str) -> TaskList:
        """Parse a YAML file into a TaskList."""
        path = Path(file_path)
        if not path.exists():
            raise ParseError(f"File not found: {file_path}")

        try:
            with path.open(encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ParseError(f"Failed to parse YAML: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ParseError("YAML must contain a dictionary at the root level")

        return self.parse_data(data)  # type: ignore[arg-type]

    def parse_data(self, data: dict[str, Any]) -> TaskList:
        """Parse loaded YAML data into a TaskList."""
        try:
            schema = TaskFileSchema.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid task file: {e}") from e

        duplicates = sorted(set(schema.tasks) & set(schema.inbox))
        if duplicates:
            raise ParseError(f"Ids used in both tasks and inbox: {', '.join(duplicates)}")

        tasks = [
            Task(
                id=task_id,
                title=entry.title,
                priority=entry.priority,
                status=entry.status,
                scheduled_date=entry.scheduled_date,
                dependencies=frozenset(entry.dependencies),
                archived=entry.archived,
            )
            for task_id, entry in schema.tasks.items()
        ]
        inbox = [Task(id=item_id, title=entry.title) for item_id, entry in schema.inbox.items()]

        return TaskList(tasks=tasks, inbox=inbox)


def load_task_file(path: Path | str) -> TaskList:
    """Load a task file and check its dependency graph.

    Raises:
        ParseError: If the file is missing or not valid YAML
        ValidationError: If the content does not match the schema
        CircularDependencyError: If stored dependencies form a cycle
    """
    task_list = TaskFileParser().parse_file(path)
    validate_task_graph(task_list.tasks)
    return task_list


def _task_to_dict(task: Task) -> dict[str, Any]:
    """Convert a task to its YAML mapping, omitting default values."""
    data: dict[str, Any] = {}
    if task.title:
        data["title"] = task.title
    if task.priority != Priority.MEDIUM:
        data["priority"] = task.priority.value
    if task.status != Status.TODO:
        data["status"] = task.status.value
    if task.scheduled_date is not None:
        data["scheduled_date"] = task.scheduled_date
    if task.dependencies:
        data["dependencies"] = sorted(task.dependencies)
    if task.archived:
        data["archived"] = True
    return data


def task_list_to_dict(task_list: TaskList) -> dict[str, Any]:
    """Convert a TaskList to the task file structure."""
    data: dict[str, Any] = {"tasks": {task.id: _task_to_dict(task) for task in task_list.tasks}}
    if task_list.inbox:
        data["inbox"] = {
            item.id: {"title": item.title} if item.title else {} for item in task_list.inbox
        }
    return data


def write_task_file(task_list: TaskList, path: Path | str) -> None:
    """Write a TaskList back to YAML, keeping task order."""
    with Path(path).open("w", encoding="utf-8") as f:
        yaml.safe_dump(
            task_list_to_dict(task_list),
            f,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
