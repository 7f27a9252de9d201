"""Command-line interface for weekplan."""

from __future__ import annotations

import dataclasses
from datetime import date
from pathlib import Path
from typing import Annotated

import typer

from .config import WeekplanConfig, discover_config, set_config_path
from .dependencies import (
    CYCLE_REJECTION_MESSAGE,
    add_dependency,
    dependency_status,
    remove_dependency,
)
from .exceptions import CircularDependencyError, WeekplanError
from .logger import setup_logger
from .models import TaskList
from .parser import load_task_file, write_task_file
from .scheduler import SchedulingService

app = typer.Typer(
    name="weekplan",
    help="Personal task manager with capacity-aware auto-scheduling",
    add_completion=False,
)

TaskFileArgument = Annotated[Path, typer.Argument(help="Path to the task YAML file")]


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show placements, 2=show all checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: weekplan_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for weekplan commands."""
    setup_logger(verbose)
    set_config_path(config)


def _parse_date_option(date_str: str | None) -> date:
    """Parse a YYYY-MM-DD option, defaulting to today."""
    if date_str is None:
        return date.today()  # noqa: DTZ011 - local calendar day

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        typer.echo(
            f"Error: Invalid date format '{date_str}'. Use YYYY-MM-DD format.",
            err=True,
        )
        raise typer.Exit(1) from None


def _load(file: Path) -> tuple[TaskList, WeekplanConfig]:
    """Load a task file and its config, reporting library errors cleanly."""
    try:
        return load_task_file(file), discover_config(file)
    except WeekplanError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


def _service(
    config: WeekplanConfig, capacity: int | None, max_weeks: int | None = None
) -> SchedulingService:
    """Build a scheduling service with CLI overrides applied."""
    updates: dict[str, int] = {}
    if capacity is not None:
        updates["daily_capacity"] = capacity
    if max_weeks is not None:
        updates["max_weeks"] = max_weeks
    return SchedulingService(config.scheduling.model_copy(update=updates))


@app.command()
def schedule(  # noqa: PLR0913 - CLI command needs multiple options
    file: TaskFileArgument = Path("tasks.yaml"),
    *,
    capacity: Annotated[
        int | None,
        typer.Option("--capacity", "-n", help="Maximum tasks per day. Overrides config"),
    ] = None,
    week_of: Annotated[
        str | None,
        typer.Option("--week-of", help="First day of the window (YYYY-MM-DD). Defaults to today"),
    ] = None,
    max_weeks: Annotated[
        int | None,
        typer.Option("--max-weeks", help="Never use more than this many weeks", min=1),
    ] = None,
    write: Annotated[
        bool,
        typer.Option("--write", help="Write the assignments back to the task file"),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", help="Schedule even if the configuration check fails"),
    ] = False,
) -> None:
    """Auto-schedule all open tasks and the inbox across the coming weeks."""
    anchor = _parse_date_option(week_of)
    task_list, config = _load(file)
    service = _service(config, capacity, max_weeks)

    total = sum(1 for task in task_list.tasks if task.is_active) + len(task_list.inbox)
    errors = service.validate(total)
    if errors and not force:
        typer.echo("Scheduling validation failed:", err=True)
        for error in errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(1)

    result = service.schedule(task_list, anchor)

    for task in result.scheduled_tasks:
        typer.echo(f"{task.id}\t{task.scheduled_date}")
    week_text = "week" if result.weeks_used == 1 else "weeks"
    typer.echo(f"Scheduled {result.tasks_scheduled} tasks across {result.weeks_used} {week_text}")

    if result.unplaced_tasks:
        typer.echo("\nCould not place:", err=True)
        for task in result.unplaced_tasks:
            typer.echo(f"  - {task.id}", err=True)

    if write:
        write_task_file(service.apply(task_list, result), file)
        typer.echo(f"Schedule written to {file}")


@app.command()
def place(
    file: TaskFileArgument,
    task_id: Annotated[str, typer.Argument(help="Id of the task to place")],
    *,
    capacity: Annotated[
        int | None,
        typer.Option("--capacity", "-n", help="Maximum tasks per day. Overrides config"),
    ] = None,
    week_of: Annotated[
        str | None,
        typer.Option("--week-of", help="First day of the window (YYYY-MM-DD). Defaults to today"),
    ] = None,
    write: Annotated[
        bool,
        typer.Option("--write", help="Write the chosen day back to the task file"),
    ] = False,
) -> None:
    """Pick the best free day for a single task."""
    anchor = _parse_date_option(week_of)
    task_list, config = _load(file)
    service = _service(config, capacity)

    task = task_list.get_task_by_id(task_id)
    if task is None:
        typer.echo(f"Error: Unknown task: {task_id}", err=True)
        raise typer.Exit(1)

    best_day = service.place(task, task_list.tasks, anchor)
    if best_day is None:
        typer.echo(
            f"No free day for {task_id} in the next {service.config.smart_schedule_weeks} weeks",
            err=True,
        )
        raise typer.Exit(1)

    typer.echo(best_day.isoformat())

    if write:
        task_list.replace_task(dataclasses.replace(task, scheduled_date=best_day))
        write_task_file(task_list, file)
        typer.echo(f"Schedule written to {file}")


@app.command()
def depend(
    file: TaskFileArgument,
    task_id: Annotated[str, typer.Argument(help="Task that gains the dependency")],
    dependency_id: Annotated[str, typer.Argument(help="Task it should depend on")],
    *,
    remove: Annotated[
        bool,
        typer.Option("--remove", help="Remove the dependency instead of adding it"),
    ] = False,
    write: Annotated[
        bool,
        typer.Option("--write", help="Write the changed dependencies back to the task file"),
    ] = False,
) -> None:
    """Add a dependency, rejecting it if it would create a cycle. Use --remove to drop one."""
    task_list, _ = _load(file)

    task = task_list.get_task_by_id(task_id)
    if task is None:
        typer.echo(f"Error: Unknown task: {task_id}", err=True)
        raise typer.Exit(1)

    if remove:
        if dependency_id not in task.dependencies:
            typer.echo(f"Error: {task_id} does not depend on {dependency_id}", err=True)
            raise typer.Exit(1)
        updated = remove_dependency(task, dependency_id)
        typer.echo(f"{task_id} no longer depends on {dependency_id}")
    else:
        if task_list.get_task_by_id(dependency_id) is None:
            typer.echo(f"Error: Unknown task: {dependency_id}", err=True)
            raise typer.Exit(1)
        try:
            updated = add_dependency(task, dependency_id, task_list.tasks)
        except CircularDependencyError:
            typer.echo(CYCLE_REJECTION_MESSAGE, err=True)
            raise typer.Exit(1) from None
        typer.echo(f"{task_id} now depends on {dependency_id}")

    if write:
        task_list.replace_task(updated)
        write_task_file(task_list, file)
        typer.echo(f"Dependencies written to {file}")


@app.command()
def check(file: TaskFileArgument = Path("tasks.yaml")) -> None:
    """Check the configuration and show blocked tasks."""
    task_list, config = _load(file)
    service = SchedulingService(config.scheduling)

    total = sum(1 for task in task_list.tasks if task.is_active) + len(task_list.inbox)
    errors = service.validate(total)

    for task in task_list.tasks:
        if not task.is_active or not task.dependencies:
            continue
        status = dependency_status(task, task_list.tasks)
        if status.blocked:
            typer.echo(f"{task.id}: {status.describe()}")

    if errors:
        typer.echo("Configuration problems:", err=True)
        for error in errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(1)

    typer.echo("OK")


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
