# vecka/core/weeks.py
"""
ISO 8601 week calculations for week pickers and week views.

All functions use ISO weekday numbering (1=Monday ... 7=Sunday) through
date.isoweekday()/isocalendar(). This is NOT the Weekday enum from
date_math, which numbers 1=Sunday ... 7=Saturday.
"""

import datetime
import logging
from functools import lru_cache

from vecka.core.constants import (
    DAYS_PER_WEEK,
    ISO_MONDAY,
    ISO_THURSDAY,
    MAX_ISO_WEEK,
    MONTH_ABBREVIATIONS,
    WEEKDAY_NAMES,
)
from vecka.core.date_math import add_days, to_calendar_date
from vecka.core.holidays import holiday_name
from vecka.core.models import DayEntry, WeekDetail, WeekInfo

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60


def weeks_in_year(year: int) -> int:
    """
    Number of ISO weeks in `year`, 52 or 53.

    Builds the Thursday of ISO week 53 and checks that it resolves back to
    (year, 53). If the date cannot be built, or it normalizes into week 1 of
    the following year, the year has 52 weeks.
    """
    try:
        candidate = datetime.date.fromisocalendar(year, MAX_ISO_WEEK, ISO_THURSDAY)
    except (ValueError, OverflowError):
        return 52

    iso_year, iso_week, _ = candidate.isocalendar()
    return 53 if (iso_year, iso_week) == (year, MAX_ISO_WEEK) else 52


def week_number(date: datetime.date) -> int:
    return to_calendar_date(date).isocalendar()[1]


def week_year(date: datetime.date) -> int:
    """ISO week-numbering year. Differs from date.year around new year."""
    return to_calendar_date(date).isocalendar()[0]


def start_of_week(date: datetime.date) -> datetime.date:
    date = to_calendar_date(date)
    return add_days(date, ISO_MONDAY - date.isoweekday())


def end_of_week(date: datetime.date) -> datetime.date:
    return add_days(start_of_week(date), DAYS_PER_WEEK - 1)


def dates_in_week(week: int, year: int) -> list[datetime.date]:
    """Monday..Sunday of ISO week `week` in `year`, or [] if the week does not exist."""
    try:
        monday = datetime.date.fromisocalendar(year, week, ISO_MONDAY)
    except (ValueError, OverflowError):
        logger.debug("ISO week does not exist year=%s week=%s", year, week)
        return []
    return [add_days(monday, offset) for offset in range(DAYS_PER_WEEK)]


def _short_date(date: datetime.date) -> str:
    return f"{MONTH_ABBREVIATIONS[date.month - 1]} {date.day}"


def format_date_range(start: datetime.date, end: datetime.date) -> str:
    """'Jan 6 – Jan 12, 2025', or with both years when the week spans new year."""
    if start.year == end.year:
        return f"{_short_date(start)} – {_short_date(end)}, {start.year}"
    return f"{_short_date(start)}, {start.year} – {_short_date(end)}, {end.year}"


@lru_cache(maxsize=256)
def _week_info_cached(iso_year: int, iso_week: int, today: datetime.date) -> WeekInfo:
    start = datetime.date.fromisocalendar(iso_year, iso_week, ISO_MONDAY)
    end = add_days(start, DAYS_PER_WEEK - 1)

    today_year, today_week, today_weekday = today.isocalendar()
    is_current = (today_year, today_week) == (iso_year, iso_week)

    return WeekInfo(
        week_number=iso_week,
        year=iso_year,
        start_date=start,
        end_date=end,
        date_range=format_date_range(start, end),
        days_remaining=DAYS_PER_WEEK - today_weekday if is_current else 0,
        is_current_week=is_current,
    )


def week_info(date: datetime.date, today: datetime.date | None = None) -> WeekInfo:
    """
    Week information for the ISO week containing `date`.

    `today` decides is_current_week and days_remaining and defaults to the
    local date. Results are cached per (ISO year, ISO week, today).
    """
    date = to_calendar_date(date)
    today = to_calendar_date(today) if today is not None else datetime.date.today()
    iso_year, iso_week, _ = date.isocalendar()
    return _week_info_cached(iso_year, iso_week, today)


def week_detail(week: int, year: int, today: datetime.date | None = None) -> WeekDetail | None:
    """WeekInfo for ISO week `week` of `year` with each day's holiday, or None if the week does not exist."""
    days = dates_in_week(week, year)
    if not days:
        return None

    info = week_info(days[0], today=today)
    return WeekDetail(
        **info.model_dump(),
        days=[
            DayEntry(
                date=day,
                weekday_name=WEEKDAY_NAMES[day.weekday()],
                holiday=holiday_name(day),
            )
            for day in days
        ],
    )


def week_progress(moment: datetime.datetime) -> float:
    """Fraction of the ISO week elapsed at `moment`, in [0, 1)."""
    day_index = moment.isoweekday() - 1
    minutes_elapsed = day_index * MINUTES_PER_DAY + moment.hour * 60 + moment.minute
    return minutes_elapsed / (DAYS_PER_WEEK * MINUTES_PER_DAY)


def clear_week_cache() -> None:
    """Clears cached WeekInfo objects, e.g. between tests."""
    _week_info_cached.cache_clear()
