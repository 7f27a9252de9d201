"""Tests for day window generation and sizing."""

from datetime import date, datetime, timedelta, timezone

import pytest

from weekplan.scheduler.days import generate_day_window, is_weekend, to_day, weeks_needed
from tests.conftest import MONDAY, SATURDAY, SUNDAY


class TestGenerateDayWindow:
    """Test the day window generator."""

    def test_one_week(self) -> None:
        days = generate_day_window(MONDAY, 1)

        assert len(days) == 7
        assert days[0] == MONDAY
        assert days[-1] == SUNDAY

    def test_multiple_weeks_are_consecutive(self) -> None:
        """Every day follows the previous one with no gaps or repeats."""
        days = generate_day_window(MONDAY, 3)

        assert len(days) == 21
        assert len(set(days)) == 21
        for earlier, later in zip(days, days[1:]):
            assert later - earlier == timedelta(days=1)

    def test_crosses_month_and_year_boundaries(self) -> None:
        days = generate_day_window(date(2024, 12, 30), 1)

        assert [d.isoformat() for d in days] == [
            "2024-12-30",
            "2024-12-31",
            "2025-01-01",
            "2025-01-02",
            "2025-01-03",
            "2025-01-04",
            "2025-01-05",
        ]

    def test_leap_day_included(self) -> None:
        days = generate_day_window(date(2024, 2, 26), 1)
        assert date(2024, 2, 29) in days
        assert days[-1] == date(2024, 3, 3)

    def test_datetime_anchor_uses_calendar_day(self) -> None:
        """A time of day is dropped; the window starts at that day's midnight."""
        days = generate_day_window(datetime(2025, 3, 3, 23, 59), 1)
        assert days[0] == MONDAY

    def test_zero_weeks_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one week"):
            generate_day_window(MONDAY, 0)


class TestToDay:
    """Test anchor normalisation."""

    def test_date_unchanged(self) -> None:
        assert to_day(MONDAY) == MONDAY

    def test_aware_datetime_converted_to_local(self) -> None:
        anchor = datetime(2025, 3, 3, 12, 0, tzinfo=timezone.utc)
        assert to_day(anchor) == anchor.astimezone().date()


class TestWeeksNeeded:
    """Test window sizing."""

    @pytest.mark.parametrize(
        ("total", "capacity", "expected"),
        [
            (12, 5, 1),
            (35, 5, 1),
            (36, 5, 2),
            (40, 5, 2),
            (8, 1, 2),
            (0, 5, 1),
            (100, 6, 3),
        ],
    )
    def test_ceiling_of_backlog_over_weekly_capacity(
        self, total: int, capacity: int, expected: int
    ) -> None:
        assert weeks_needed(total, capacity) == expected

    def test_non_positive_capacity_gives_one_week(self) -> None:
        assert weeks_needed(10, 0) == 1
        assert weeks_needed(10, -3) == 1


class TestIsWeekend:
    def test_weekend_days(self) -> None:
        assert is_weekend(SATURDAY)
        assert is_weekend(SUNDAY)

    def test_weekdays(self) -> None:
        for offset in range(5):
            assert not is_weekend(MONDAY + timedelta(days=offset))
