"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from weekplan.cli import app
from weekplan.parser import load_task_file

runner = CliRunner()

TASKS = """
tasks:
  report:
    title: Write report
    priority: high
  review:
    title: Review slides
    dependencies: [report]
  archived-thing:
    archived: true
inbox:
  call-bob:
    title: Call Bob
"""


@pytest.fixture
def task_file(tmp_path: Path) -> Path:
    path = tmp_path / "tasks.yaml"
    path.write_text(TASKS)
    return path


class TestScheduleCommand:
    """Test the schedule CLI command."""

    def test_prints_assignments(self, task_file: Path) -> None:
        result = runner.invoke(app, ["schedule", str(task_file), "--week-of", "2025-03-03"])

        assert result.exit_code == 0
        assert "report\t2025-03-03" in result.stdout
        assert "review\t2025-03-04" in result.stdout
        assert "call-bob\t2025-03-05" in result.stdout
        assert "Scheduled 3 tasks across 1 week" in result.stdout

    def test_does_not_write_by_default(self, task_file: Path) -> None:
        runner.invoke(app, ["schedule", str(task_file), "--week-of", "2025-03-03"])
        assert task_file.read_text() == TASKS

    def test_write(self, task_file: Path) -> None:
        result = runner.invoke(
            app, ["schedule", str(task_file), "--week-of", "2025-03-03", "--write"]
        )

        assert result.exit_code == 0
        task_list = load_task_file(task_file)
        assert task_list.inbox == []
        dates = {t.id: t.scheduled_date for t in task_list.tasks}
        assert str(dates["report"]) == "2025-03-03"
        assert str(dates["call-bob"]) == "2025-03-05"
        assert dates["archived-thing"] is None

    def test_max_weeks_with_room_places_everything(self, task_file: Path) -> None:
        result = runner.invoke(
            app,
            [
                "schedule",
                str(task_file),
                "--week-of",
                "2025-03-03",
                "--capacity",
                "1",
                "--max-weeks",
                "1",
            ],
        )
        assert result.exit_code == 0
        assert "Could not place" not in result.output

    def test_invalid_capacity_blocks_run(self, task_file: Path) -> None:
        result = runner.invoke(app, ["schedule", str(task_file), "--capacity", "0"])

        assert result.exit_code == 1
        assert "Tasks per day limit must be greater than 0" in result.output

    def test_force_runs_anyway(self, task_file: Path) -> None:
        result = runner.invoke(
            app,
            ["schedule", str(task_file), "--capacity", "0", "--force", "--week-of", "2025-03-03"],
        )

        assert result.exit_code == 0
        assert "Scheduled 0 tasks across 1 week" in result.stdout
        assert "Could not place" in result.output
        assert "call-bob" in result.output

    def test_capacity_from_config(self, task_file: Path, tmp_path: Path) -> None:
        (tmp_path / "weekplan_config.yaml").write_text("scheduling:\n  daily_capacity: 30\n")
        result = runner.invoke(app, ["schedule", str(task_file)])

        assert result.exit_code == 1
        assert "seems too high" in result.output

    def test_global_config_option(self, task_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "custom.yaml"
        config.write_text("scheduling:\n  daily_capacity: 0\n")
        result = runner.invoke(app, ["-c", str(config), "schedule", str(task_file)])

        assert result.exit_code == 1
        assert "must be greater than 0" in result.output

    def test_invalid_date(self, task_file: Path) -> None:
        result = runner.invoke(app, ["schedule", str(task_file), "--week-of", "03/03/2025"])

        assert result.exit_code == 1
        assert "Invalid date format" in result.output

    def test_unknown_section_leaves_file_untouched(self, tmp_path: Path) -> None:
        content = TASKS + "notes:\n  keep: me\n"
        path = tmp_path / "tasks.yaml"
        path.write_text(content)

        result = runner.invoke(
            app, ["schedule", str(path), "--week-of", "2025-03-03", "--write"]
        )

        assert result.exit_code == 1
        assert "Error: Invalid task file" in result.output
        assert path.read_text() == content

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["schedule", str(tmp_path / "nope.yaml")])

        assert result.exit_code == 1
        assert "Error: File not found" in result.output

    def test_verbose_logs_placements(self, task_file: Path) -> None:
        result = runner.invoke(
            app, ["-v", "1", "schedule", str(task_file), "--week-of", "2025-03-03"]
        )

        assert result.exit_code == 0


class TestPlaceCommand:
    """Test the place CLI command."""

    def test_place(self, task_file: Path) -> None:
        result = runner.invoke(app, ["place", str(task_file), "review", "--week-of", "2025-03-03"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "2025-03-03"

    def test_place_write(self, task_file: Path) -> None:
        result = runner.invoke(
            app, ["place", str(task_file), "review", "--week-of", "2025-03-03", "--write"]
        )

        assert result.exit_code == 0
        review = load_task_file(task_file).get_task_by_id("review")
        assert review is not None
        assert str(review.scheduled_date) == "2025-03-03"

    def test_no_free_day(self, tmp_path: Path) -> None:
        lines = ["tasks:", "  target: {}"]
        lines += [f"  busy{i}:\n    scheduled_date: 2025-03-{3 + i:02d}" for i in range(7)]
        path = tmp_path / "tasks.yaml"
        path.write_text("\n".join(lines) + "\n")
        (tmp_path / "weekplan_config.yaml").write_text(
            "scheduling:\n  daily_capacity: 1\n  smart_schedule_weeks: 1\n"
        )

        result = runner.invoke(app, ["place", str(path), "target", "--week-of", "2025-03-03"])

        assert result.exit_code == 1
        assert "No free day for target" in result.output

    def test_unknown_task(self, task_file: Path) -> None:
        result = runner.invoke(app, ["place", str(task_file), "nope"])

        assert result.exit_code == 1
        assert "Unknown task: nope" in result.output


class TestDependCommand:
    """Test the depend CLI command."""

    def test_add(self, task_file: Path) -> None:
        result = runner.invoke(app, ["depend", str(task_file), "report", "archived-thing"])

        assert result.exit_code == 0
        assert "report now depends on archived-thing" in result.stdout

    def test_cycle_rejected(self, task_file: Path) -> None:
        result = runner.invoke(app, ["depend", str(task_file), "report", "review", "--write"])

        assert result.exit_code == 1
        assert "circular dependency chain" in result.output
        assert task_file.read_text() == TASKS

    def test_self_dependency_rejected(self, task_file: Path) -> None:
        result = runner.invoke(app, ["depend", str(task_file), "report", "report"])

        assert result.exit_code == 1
        assert "circular dependency chain" in result.output

    def test_write(self, task_file: Path) -> None:
        result = runner.invoke(
            app, ["depend", str(task_file), "report", "archived-thing", "--write"]
        )

        assert result.exit_code == 0
        report = load_task_file(task_file).get_task_by_id("report")
        assert report is not None
        assert report.dependencies == frozenset({"archived-thing"})

    def test_unknown_dependency(self, task_file: Path) -> None:
        result = runner.invoke(app, ["depend", str(task_file), "report", "ghost"])

        assert result.exit_code == 1
        assert "Unknown task: ghost" in result.output

    def test_remove(self, task_file: Path) -> None:
        result = runner.invoke(
            app, ["depend", str(task_file), "review", "report", "--remove", "--write"]
        )

        assert result.exit_code == 0
        assert "review no longer depends on report" in result.stdout
        review = load_task_file(task_file).get_task_by_id("review")
        assert review is not None
        assert review.dependencies == frozenset()

    def test_remove_missing_edge(self, task_file: Path) -> None:
        result = runner.invoke(app, ["depend", str(task_file), "report", "review", "--remove"])

        assert result.exit_code == 1
        assert "report does not depend on review" in result.output


class TestCheckCommand:
    """Test the check CLI command."""

    def test_ok_and_blocked(self, task_file: Path) -> None:
        result = runner.invoke(app, ["check", str(task_file)])

        assert result.exit_code == 0
        assert "review: Blocked by 1 task" in result.stdout
        assert "OK" in result.stdout

    def test_cycle_in_file(self, tmp_path: Path) -> None:
        path = tmp_path / "tasks.yaml"
        path.write_text("tasks:\n  a:\n    dependencies: [a]\n")

        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 1
        assert "Circular dependency detected: a -> a" in result.output

    def test_empty_backlog(self, tmp_path: Path) -> None:
        path = tmp_path / "tasks.yaml"
        path.write_text("tasks:\n  a:\n    status: done\n")

        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 1
        assert "No tasks to schedule" in result.output


class TestExampleFile:
    """Run commands against the bundled example."""

    def test_check_example(self) -> None:
        result = runner.invoke(app, ["check", "examples/tasks.yaml"])

        assert result.exit_code == 0
        assert "write-report: Blocked by 1 task" in result.stdout
        assert "review-slides: Blocked by 1 task" in result.stdout

    def test_schedule_example(self) -> None:
        result = runner.invoke(
            app, ["schedule", "examples/tasks.yaml", "--week-of", "2025-03-03"]
        )

        assert result.exit_code == 0
        assert "Scheduled 6 tasks across 1 week" in result.stdout
        assert "renew-passport" not in result.stdout
