"""Generering av iCal-filer med svenska helgdagar."""

import datetime
import unicodedata

from icalendar import Calendar, Event

from vecka.core.holidays import holidays_between
from vecka.core.models import HolidayEntry


def _slug(name: str) -> str:
    """Gör om ett helgdagsnamn till en ASCII-slug, t.ex. "Första maj" -> "forsta-maj"."""
    ascii_name = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    return "-".join(ascii_name.lower().split())


def generate_holiday_ical(start_year: int, end_year: int) -> str:
    """
    Genererar en iCal-fil med alla helgdagar från start_year till och med end_year.

    Args:
        start_year: Första år
        end_year: Sista år

    Returns:
        iCal-formaterad sträng
    """
    cal = Calendar()
    cal.add("prodid", "-//Vecka Holidays//vecka.app//")
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", "Svenska helgdagar")
    cal.add("x-wr-timezone", "Europe/Stockholm")

    if start_year <= end_year:
        entries = holidays_between(datetime.date(start_year, 1, 1), datetime.date(end_year, 12, 31))
        for entry in entries:
            cal.add_component(_create_holiday_event(entry))

    return cal.to_ical().decode("utf-8")


def _create_holiday_event(entry: HolidayEntry) -> Event:
    """
    Skapar ett heldags-VEVENT för en helgdag.

    Args:
        entry: Helgdagen

    Returns:
        icalendar Event-objekt
    """
    event = Event()
    event.add("summary", entry.name)

    # Stabil UID så att prenumererande kalendrar inte får dubbletter
    event.add("uid", f"{entry.date.isoformat()}_{_slug(entry.name)}@vecka")

    event.add("dtstart", entry.date)
    event.add("dtend", entry.date + datetime.timedelta(days=1))
    event.add("transp", "TRANSPARENT")
    event.add("categories", ["Helgdag"])

    event.add("dtstamp", datetime.datetime.now(datetime.timezone.utc))

    return event


def generate_holiday_ical_for_year(year: int) -> str:
    """Genererar iCal för ett helt år."""
    return generate_holiday_ical(year, year)
