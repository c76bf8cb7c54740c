import datetime

from pydantic import BaseModel, ConfigDict


class HolidayEntry(BaseModel):
    """A holiday resolved to a concrete date."""
    date: datetime.date
    name: str


class HolidayLookup(BaseModel):
    """Classification result for a single date."""
    date: datetime.date
    name: str | None = None
    is_holiday: bool = False


class DayEntry(BaseModel):
    """One day in a week view, with its holiday name if any."""
    date: datetime.date
    weekday_name: str
    holiday: str | None = None


class WeekInfo(BaseModel):
    """ISO 8601 week with display strings for week pickers."""
    model_config = ConfigDict(frozen=True)

    week_number: int
    year: int
    start_date: datetime.date
    end_date: datetime.date
    date_range: str
    days_remaining: int = 0
    is_current_week: bool = False

    @property
    def week_string(self) -> str:
        return f"Week {self.week_number}"

    @property
    def short_week_string(self) -> str:
        return f"W{self.week_number}"

    @property
    def full_description(self) -> str:
        return f"Week {self.week_number} of {self.year}"

    def contains(self, date: datetime.date) -> bool:
        return self.start_date <= date <= self.end_date


class WeekDetail(WeekInfo):
    """WeekInfo including the seven days of the week."""
    days: list[DayEntry] = []


class YearWeeks(BaseModel):
    """Number of ISO weeks in a year (52 or 53)."""
    year: int
    weeks: int
