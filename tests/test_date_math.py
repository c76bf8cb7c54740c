"""
Unit tests for the date primitives.

The Weekday enum uses 1=Sunday ... 7=Saturday, which differs from both
date.weekday() and date.isoweekday(). These tests pin the conversions.
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402
from vecka.core.date_math import (
    Weekday,
    add_days,
    components,
    same_day,
    to_calendar_date,
    weekday,
)


class TestWeekdayNumbering:
    """Weekday is 1=Sunday ... 7=Saturday, not ISO."""

    def test_sunday_is_one_and_saturday_is_seven(self):
        assert Weekday.SUNDAY == 1
        assert Weekday.SATURDAY == 7

    def test_weekday_of_known_saturday(self):
        """2025-03-15 is a Saturday."""
        assert weekday(datetime.date(2025, 3, 15)) is Weekday.SATURDAY

    def test_weekday_of_known_sunday(self):
        assert weekday(datetime.date(2025, 3, 16)) is Weekday.SUNDAY

    def test_weekday_of_known_monday(self):
        """ISO Monday (1) maps to Weekday.MONDAY (2)."""
        monday = datetime.date(2025, 3, 17)
        assert monday.isoweekday() == 1
        assert weekday(monday) is Weekday.MONDAY
        assert weekday(monday).value == 2

    def test_iso_round_trip_for_all_days(self):
        """from_iso and to_iso are inverses over 1..7."""
        for iso_day in range(1, 8):
            assert Weekday.from_iso(iso_day).to_iso() == iso_day

    def test_matches_isoweekday_over_a_full_week(self):
        start = datetime.date(2025, 1, 1)
        for offset in range(7):
            day = start + datetime.timedelta(days=offset)
            assert weekday(day).to_iso() == day.isoweekday()


class TestAddDays:
    """Calendar-aware day addition."""

    def test_leap_day_is_reached_in_leap_year(self):
        assert add_days(datetime.date(2024, 2, 28), 1) == datetime.date(2024, 2, 29)

    def test_february_rolls_to_march_in_common_year(self):
        assert add_days(datetime.date(2023, 2, 28), 1) == datetime.date(2023, 3, 1)

    def test_year_rolls_over(self):
        assert add_days(datetime.date(2024, 12, 31), 1) == datetime.date(2025, 1, 1)

    def test_negative_offset(self):
        """Good Friday 2025 is two days before Easter Sunday (April 20)."""
        assert add_days(datetime.date(2025, 4, 20), -2) == datetime.date(2025, 4, 18)

    def test_1900_is_not_a_leap_year(self):
        assert add_days(datetime.date(1900, 2, 28), 1) == datetime.date(1900, 3, 1)

    def test_2000_is_a_leap_year(self):
        assert add_days(datetime.date(2000, 2, 28), 1) == datetime.date(2000, 2, 29)


class TestComparisonAndNormalization:
    """same_day, components and to_calendar_date."""

    def test_components(self):
        assert components(datetime.date(2025, 6, 21)) == (2025, 6, 21)

    def test_same_day_ignores_time_of_day(self):
        assert same_day(
            datetime.datetime(2025, 12, 25, 23, 59),
            datetime.date(2025, 12, 25),
        )

    def test_different_days_are_not_same(self):
        assert not same_day(datetime.date(2025, 12, 25), datetime.date(2024, 12, 25))

    def test_timezone_aware_datetime_keeps_its_wall_clock_day(self):
        """00:30 in UTC+1 is still January 1, not December 31 in UTC."""
        moment = datetime.datetime(2025, 1, 1, 0, 30, tzinfo=datetime.timezone(datetime.timedelta(hours=1)))
        assert to_calendar_date(moment) == datetime.date(2025, 1, 1)

    def test_plain_date_is_returned_unchanged(self):
        day = datetime.date(2025, 1, 1)
        assert to_calendar_date(day) is day
