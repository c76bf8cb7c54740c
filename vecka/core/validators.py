import datetime

from fastapi import HTTPException, status

from vecka.core.config import MAX_EXPORT_YEARS, MAX_SUPPORTED_YEAR, MIN_SUPPORTED_YEAR


def validate_year(year: int) -> int:
    """
    Säkerställ att året ligger inom det intervall som API:t stöder.

    Kärnan räknar på alla år, men år före 1583 saknar historisk mening och
    avvisas därför här med HTTP 400.
    """
    if not MIN_SUPPORTED_YEAR <= year <= MAX_SUPPORTED_YEAR:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Year must be between {MIN_SUPPORTED_YEAR} and {MAX_SUPPORTED_YEAR}",
        )
    return year


def validate_year_span(start_year: int, end_year: int) -> tuple[int, int]:
    """Validerar ett årsintervall för export. start_year får inte vara efter end_year."""
    validate_year(start_year)
    validate_year(end_year)
    if start_year > end_year or end_year - start_year + 1 > MAX_EXPORT_YEARS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Year span must be 1 to {MAX_EXPORT_YEARS} years",
        )
    return start_year, end_year


def validate_date(year: int, month: int, day: int) -> datetime.date:
    """
    Bygger ett giltigt datum eller kastar HTTP 400.

    Ogiltiga datum (t.ex. 30 februari) når aldrig kärnan.
    """
    validate_year(year)
    try:
        return datetime.date(year, month, day)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid date",
        )
