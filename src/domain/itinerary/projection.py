# Calendar dates for itinerary days
from datetime import date, timedelta
from typing import Optional

from domain.itinerary.date_labels import (
    MONTH_ABBREVIATIONS,
    WEEKDAY_ABBREVIATIONS,
    month_number,
)


def project_date(
    month: Optional[str],
    day: Optional[str],
    year: Optional[int],
    day_offset: int
) -> Optional[date]:
    """
    Calendar date of itinerary day ``day_offset`` (1-based) for a trip that
    starts on ``day`` ``month`` ``year``.

    Returns None instead of raising when the selection is incomplete or does
    not form a real date.
    """
    if not month or not day or year is None:
        return None
    if day_offset is None or day_offset < 1:
        return None

    number = month_number(month)
    if number is None:
        return None

    try:
        start = date(int(year), number, int(day))
    except (ValueError, TypeError):
        return None

    return start + timedelta(days=day_offset - 1)


def format_itinerary_date(value: Optional[date]) -> str:
    """Format as "Fri, 26 Sep"; empty string when there is no date."""
    if value is None:
        return ""
    weekday = WEEKDAY_ABBREVIATIONS[value.weekday()]
    month = MONTH_ABBREVIATIONS[value.month - 1]
    return f"{weekday}, {value.day} {month}"
