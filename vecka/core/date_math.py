# vecka/core/date_math.py
"""
Datumprimitiver för kalenderkärnan.

Ett kalenderdatum representeras av datetime.date (proleptisk gregoriansk
kalender, ingen tid på dygnet, ingen tidszon).

OBS: Weekday numreras 1=söndag ... 7=lördag. Det är INTE ISO-numreringen
(1=måndag) som isoweekday() och veckoberäkningarna i weeks.py använder,
och inte heller Pythons weekday() (0=måndag). Konvertera alltid via
Weekday.from_date() eller Weekday.from_iso().
"""

import datetime
import enum


class Weekday(enum.IntEnum):
    """Veckodag, numrerad 1=söndag ... 7=lördag."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @classmethod
    def from_iso(cls, iso_weekday: int) -> "Weekday":
        """Konverterar ISO-veckodag (1=måndag ... 7=söndag)."""
        return cls(iso_weekday % 7 + 1)

    @classmethod
    def from_date(cls, date: datetime.date) -> "Weekday":
        return cls.from_iso(date.isoweekday())

    def to_iso(self) -> int:
        """Returnerar ISO-veckodag (1=måndag ... 7=söndag)."""
        return (self.value - 2) % 7 + 1


def add_days(date: datetime.date, n: int) -> datetime.date:
    """Lägger till n dagar, med korrekt övergång mellan månader, år och skottdagar."""
    return date + datetime.timedelta(days=n)


def weekday(date: datetime.date) -> Weekday:
    return Weekday.from_date(date)


def same_day(a: datetime.date, b: datetime.date) -> bool:
    """Jämför två värden på kalenderdag, även om något av dem är en datetime."""
    return components(a) == components(b)


def components(date: datetime.date) -> tuple[int, int, int]:
    """Returnerar (år, månad, dag)."""
    return date.year, date.month, date.day


def to_calendar_date(value: datetime.date | datetime.datetime) -> datetime.date:
    """
    Normaliserar ett datum eller en tidpunkt till ett rent kalenderdatum.

    En datetime behåller sin egen väggklockedag: 2025-01-01 00:30+01:00 blir
    2025-01-01, inte 2024-12-31. Ingen konvertering till UTC görs.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    return value
