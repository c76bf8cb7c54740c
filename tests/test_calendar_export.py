import datetime

from icalendar import Calendar

from vecka.core.calendar_export import _slug, generate_holiday_ical, generate_holiday_ical_for_year


class TestCalendarExport:
    def test_generate_ical_is_valid(self):
        """Generated iCal parses and contains one VEVENT per holiday."""
        cal = Calendar.from_ical(generate_holiday_ical_for_year(2025))

        assert cal.name == "VCALENDAR"
        events = cal.walk("VEVENT")
        assert len(events) == 13

    def test_events_are_all_day(self):
        cal = Calendar.from_ical(generate_holiday_ical_for_year(2025))
        midsummer = [e for e in cal.walk("VEVENT") if str(e.get("summary")) == "Midsommardagen"]

        assert len(midsummer) == 1
        event = midsummer[0]
        assert event.get("dtstart").dt == datetime.date(2025, 6, 21)
        assert event.get("dtend").dt == datetime.date(2025, 6, 22)

    def test_uid_is_stable(self):
        """Same holiday gives the same UID on every export."""
        first = Calendar.from_ical(generate_holiday_ical_for_year(2025))
        second = Calendar.from_ical(generate_holiday_ical_for_year(2025))

        assert [str(e.get("uid")) for e in first.walk("VEVENT")] == [
            str(e.get("uid")) for e in second.walk("VEVENT")
        ]
        assert "2025-04-18_langfredagen@vecka" in {str(e.get("uid")) for e in first.walk("VEVENT")}

    def test_range_export_spans_years(self):
        cal = Calendar.from_ical(generate_holiday_ical(2025, 2026))
        assert len(cal.walk("VEVENT")) == 26

    def test_reversed_range_has_no_events(self):
        cal = Calendar.from_ical(generate_holiday_ical(2026, 2025))
        assert cal.walk("VEVENT") == []

    def test_slug_strips_swedish_characters(self):
        assert _slug("Första maj") == "forsta-maj"
        assert _slug("Kristi himmelsfärdsdag") == "kristi-himmelsfardsdag"
