# Date-range label parsing
import logging
import re
from datetime import date
from typing import Optional

from schemas.itinerary import StartDate

logger = logging.getLogger(__name__)


RANGE_SEPARATOR = " - "

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
]

MONTH_ABBREVIATIONS = [name[:3] for name in MONTH_NAMES]

WEEKDAY_ABBREVIATIONS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# Lower-cased month token -> month number; accepts "sep", "sept" and "september"
MONTH_LOOKUP = {}
for _number, _name in enumerate(MONTH_NAMES, start=1):
    MONTH_LOOKUP[_name.lower()] = _number
    MONTH_LOOKUP[_name[:3].lower()] = _number
MONTH_LOOKUP["sept"] = 9

_START_PATTERN = re.compile(r'^\s*([A-Za-z]+)\.?\s+([0-9]{1,2})(?:\s*,\s*[0-9]{4})?\s*$')
_YEAR_PATTERN = re.compile(r',\s*([0-9]{4})\s*$')


def month_number(month: Optional[str]) -> Optional[int]:
    """Map a month name or abbreviation to 1..12, None when unknown."""
    if not month:
        return None
    return MONTH_LOOKUP.get(month.strip().lower())


def stated_year(label: str) -> Optional[int]:
    """Year written after the last comma of a label ("..., 2025")."""
    if not label:
        return None
    match = _YEAR_PATTERN.search(label)
    if not match:
        return None
    return int(match.group(1))


def start_segment(label: str) -> str:
    """Text before the first range separator."""
    return label.split(RANGE_SEPARATOR, 1)[0]


def parse_start(label: str, year: Optional[int] = None) -> Optional[StartDate]:
    """
    Parse the start half of a date-range label.

    Only the text before the first " - " is read. The year comes from the
    ``year`` argument when given, otherwise from the year stated at the end of
    the label. Returns None for anything that does not form a real calendar
    date; malformed editorial content never raises.
    """
    if not label or not isinstance(label, str):
        return None

    match = _START_PATTERN.match(start_segment(label))
    if not match:
        logger.debug("Dropping date label %r: start segment not understood", label)
        return None

    month_token, day_token = match.group(1), match.group(2)
    number = month_number(month_token)
    if number is None:
        logger.debug("Dropping date label %r: unknown month %r", label, month_token)
        return None

    effective_year = year if year is not None else stated_year(label)
    if effective_year is None:
        logger.debug("Dropping date label %r: no year available", label)
        return None

    try:
        start = date(effective_year, number, int(day_token))
    except ValueError:
        logger.debug("Dropping date label %r: not a calendar date", label)
        return None

    return StartDate(
        label=label,
        month=MONTH_NAMES[number - 1],
        day=day_token,
        date=start
    )
