# vecka/core/holidays.py
"""
Svenska helgdagar (röda dagar) för ett givet datum.

Regeluppsättningen är sluten och utvärderas i fast prioritetsordning:
fasta datum, sedan påskrelaterade, sedan midsommardagen och sist alla
helgons dag. Första matchande regel vinner.

Alla funktioner är rena och saknar delat tillstånd, förutom cachen för
påskdagen som är nycklad på år.
"""

import datetime
import logging
from functools import lru_cache
from typing import NamedTuple, Union

from vecka.core.config import ALL_SAINTS_WINDOW, MIDSUMMER_WINDOW
from vecka.core.constants import (
    ALLA_HELGONS_DAG,
    ANNANDAG_JUL,
    ANNANDAG_PASK,
    FORSTA_MAJ,
    JULDAGEN,
    KRISTI_HIMMELSFARDSDAG,
    LANGFREDAGEN,
    MIDSOMMARDAGEN,
    NATIONALDAGEN,
    NYARSDAGEN,
    PASKDAGEN,
    PINGSTDAGEN,
    TRETTONDEDAG_JUL,
)
from vecka.core.date_math import Weekday, add_days, same_day, to_calendar_date, weekday
from vecka.core.models import HolidayEntry

logger = logging.getLogger(__name__)


class FixedDate(NamedTuple):
    """Helgdag på samma månad och dag varje år."""
    month: int
    day: int
    name: str


class EasterOffset(NamedTuple):
    """Helgdag ett fast antal dagar från påskdagen."""
    offset_days: int
    name: str


class WeekdayWindow(NamedTuple):
    """Första veckodagen `weekday` i fönstret start..slut (inklusive)."""
    weekday: Weekday
    start_month: int
    start_day: int
    end_month: int
    end_day: int
    name: str


HolidayRule = Union[FixedDate, EasterOffset, WeekdayWindow]


FIXED_DATE_RULES: tuple[FixedDate, ...] = (
    FixedDate(1, 1, NYARSDAGEN),
    FixedDate(1, 6, TRETTONDEDAG_JUL),
    FixedDate(5, 1, FORSTA_MAJ),
    FixedDate(6, 6, NATIONALDAGEN),
    FixedDate(12, 25, JULDAGEN),
    FixedDate(12, 26, ANNANDAG_JUL),
)

EASTER_OFFSET_RULES: tuple[EasterOffset, ...] = (
    EasterOffset(-2, LANGFREDAGEN),
    EasterOffset(0, PASKDAGEN),
    EasterOffset(1, ANNANDAG_PASK),
    EasterOffset(39, KRISTI_HIMMELSFARDSDAG),
    EasterOffset(49, PINGSTDAGEN),
)

WEEKDAY_WINDOW_RULES: tuple[WeekdayWindow, ...] = (
    WeekdayWindow(Weekday.SATURDAY, *MIDSUMMER_WINDOW[0], *MIDSUMMER_WINDOW[1], MIDSOMMARDAGEN),
    WeekdayWindow(Weekday.SATURDAY, *ALL_SAINTS_WINDOW[0], *ALL_SAINTS_WINDOW[1], ALLA_HELGONS_DAG),
)

#: Alla regler i prioritetsordning.
HOLIDAY_RULES: tuple[HolidayRule, ...] = FIXED_DATE_RULES + EASTER_OFFSET_RULES + WEEKDAY_WINDOW_RULES


@lru_cache(maxsize=512)
def easter_sunday(year: int) -> datetime.date:
    """
    Påskdagen enligt den anonyma gregorianska algoritmen (Meeus/Jones/Butcher).

    Gäller för alla år som datetime.date kan representera. Före 1583 är
    resultatet matematiskt definierat men saknar historisk mening.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return datetime.date(year, month, day)


def first_weekday(
    target: Weekday,
    start: datetime.date,
    end: datetime.date,
) -> datetime.date | None:
    """
    Första datum i [start, end] vars veckodag är `target`.

    Stegar en kalenderdag i taget så att fönster över månadsgränser
    (31 okt - 6 nov) fungerar. Returnerar None om fönstret tar slut utan
    träff, även när start > end.
    """
    if start > end:
        logger.debug("Empty weekday window start=%s end=%s", start, end)
        return None

    cursor = start
    while cursor <= end:
        if weekday(cursor) == target:
            return cursor
        cursor = add_days(cursor, 1)
    return None


def _window_bounds(rule: WeekdayWindow, year: int) -> tuple[datetime.date, datetime.date]:
    start = datetime.date(year, rule.start_month, rule.start_day)
    # Fönster som slutar på en tidigare månad än det börjar rullar över till nästa år
    end_year = year + 1 if (rule.end_month, rule.end_day) < (rule.start_month, rule.start_day) else year
    end = datetime.date(end_year, rule.end_month, rule.end_day)
    return start, end


def resolve_rule(rule: HolidayRule, year: int) -> datetime.date | None:
    """Datumet som regeln pekar ut för ett år, eller None om det saknas."""
    if isinstance(rule, FixedDate):
        return datetime.date(year, rule.month, rule.day)
    if isinstance(rule, EasterOffset):
        return add_days(easter_sunday(year), rule.offset_days)
    start, end = _window_bounds(rule, year)
    return first_weekday(rule.weekday, start, end)


def _matches(rule: HolidayRule, date: datetime.date) -> bool:
    if isinstance(rule, FixedDate):
        # Fasta datum matchar enbart på (månad, dag)
        return (date.month, date.day) == (rule.month, rule.day)
    resolved = resolve_rule(rule, date.year)
    return resolved is not None and same_day(resolved, date)


def holiday_name(date: datetime.date) -> str | None:
    """
    Namnet på helgdagen som infaller på `date`, eller None.

    Fasta datum -> påskrelaterade -> midsommardagen -> alla helgons dag.
    Första matchande regel vinner.
    """
    date = to_calendar_date(date)
    for rule in HOLIDAY_RULES:
        if _matches(rule, date):
            return rule.name
    return None


def is_holiday(date: datetime.date) -> bool:
    return holiday_name(date) is not None


def holidays_for_year(year: int) -> list[HolidayEntry]:
    """
    Alla helgdagar för ett år, sorterade på datum.

    Om två regler pekar ut samma datum (till exempel Kristi himmelsfärdsdag
    på första maj 2008) behålls bara regeln med högst prioritet, så att
    varje post stämmer med holiday_name().
    """
    by_date: dict[datetime.date, str] = {}
    for rule in HOLIDAY_RULES:
        resolved = resolve_rule(rule, year)
        if resolved is None or resolved in by_date:
            continue
        by_date[resolved] = rule.name

    return [HolidayEntry(date=d, name=name) for d, name in sorted(by_date.items())]


def holidays_between(start: datetime.date, end: datetime.date) -> list[HolidayEntry]:
    """Helgdagar i det inklusiva intervallet [start, end]. Tom lista om start > end."""
    start = to_calendar_date(start)
    end = to_calendar_date(end)
    if start > end:
        return []

    entries: list[HolidayEntry] = []
    for year in range(start.year, end.year + 1):
        entries.extend(e for e in holidays_for_year(year) if start <= e.date <= end)
    return entries


def midsommardagen(year: int) -> datetime.date | None:
    """Midsommardagen: lördagen mellan 20 och 26 juni."""
    return resolve_rule(WEEKDAY_WINDOW_RULES[0], year)


def alla_helgons_dag(year: int) -> datetime.date | None:
    """Alla helgons dag: lördagen mellan 31 oktober och 6 november."""
    return resolve_rule(WEEKDAY_WINDOW_RULES[1], year)
