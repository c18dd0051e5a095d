from .date_labels import parse_start, month_number, stated_year, MONTH_NAMES
from .availability import build_availability, packages_for_city
from .resolver import resolve_package, matching_date_label
from .projection import project_date, format_itinerary_date

__all__ = [
    "parse_start",
    "month_number",
    "stated_year",
    "MONTH_NAMES",
    "build_availability",
    "packages_for_city",
    "resolve_package",
    "matching_date_label",
    "project_date",
    "format_itinerary_date"
]
