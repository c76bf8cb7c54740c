# vecka/routes/calendar_api.py
"""
Read-only JSON/iCal endpoints for calendar cells and week pickers.
"""

from fastapi import APIRouter, HTTPException, Query, Response, status

from vecka.core.calendar_export import generate_holiday_ical, generate_holiday_ical_for_year
from vecka.core.holidays import holiday_name, holidays_for_year
from vecka.core.logging_config import get_logger
from vecka.core.models import HolidayEntry, HolidayLookup, WeekDetail, WeekInfo, YearWeeks
from vecka.core.validators import validate_date, validate_year, validate_year_span
from vecka.core.weeks import week_detail, week_info, weeks_in_year

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["calendar"])

ICAL_MEDIA_TYPE = "text/calendar; charset=utf-8"


def _ical_response(body: str, filename: str) -> Response:
    return Response(
        content=body,
        media_type=ICAL_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# Must be registered before /holidays/{year}, which would otherwise match "2025.ics"
@router.get("/holidays/{year}.ics")
async def export_holidays_for_year(year: int):
    """iCal-fil med helgdagarna för ett år."""
    year = validate_year(year)
    return _ical_response(generate_holiday_ical_for_year(year), f"helgdagar_{year}.ics")


@router.get("/export/holidays.ics")
async def export_holidays(
    start_year: int = Query(...),
    end_year: int = Query(...),
):
    """iCal-fil med helgdagarna för ett årsintervall (inklusive)."""
    start_year, end_year = validate_year_span(start_year, end_year)
    logger.info(f"Exporting holidays {start_year}-{end_year}")
    return _ical_response(
        generate_holiday_ical(start_year, end_year),
        f"helgdagar_{start_year}_{end_year}.ics",
    )


@router.get("/holidays/{year}", response_model=list[HolidayEntry])
async def get_holidays_for_year(year: int):
    """Alla helgdagar för ett år, sorterade på datum."""
    year = validate_year(year)
    return holidays_for_year(year)


@router.get("/holidays/{year}/{month}/{day}", response_model=HolidayLookup)
async def get_holiday_for_date(year: int, month: int, day: int):
    date = validate_date(year, month, day)
    name = holiday_name(date)
    return HolidayLookup(date=date, name=name, is_holiday=name is not None)


@router.get("/weeks/{year}", response_model=YearWeeks)
async def get_weeks_in_year(year: int):
    """Antal ISO-veckor (52 eller 53). Används för att begränsa veckoväljaren."""
    year = validate_year(year)
    return YearWeeks(year=year, weeks=weeks_in_year(year))


@router.get("/weeks/{year}/{week}", response_model=WeekDetail)
async def get_week(year: int, week: int):
    year = validate_year(year)
    detail = week_detail(week, year)
    if detail is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Week {week} does not exist in {year}",
        )
    return detail


@router.get("/date/{year}/{month}/{day}/week", response_model=WeekInfo)
async def get_week_for_date(year: int, month: int, day: int):
    """Veckan som ett datum ligger i."""
    date = validate_date(year, month, day)
    return week_info(date)
