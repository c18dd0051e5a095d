# Availability index for the destination page selectors
import logging
from typing import Dict, Iterable, List, Optional

from domain.itinerary.date_labels import MONTH_NAMES, parse_start
from schemas.destination import TravelPackage
from schemas.itinerary import AvailabilityIndex

logger = logging.getLogger(__name__)


def packages_for_city(packages: Iterable[TravelPackage], city: Optional[str]) -> List[TravelPackage]:
    """Packages departing from ``city``, in list order."""
    if not city:
        return []
    return [p for p in packages if p.departure_city == city]


def unique_date_labels(packages: Iterable[TravelPackage]) -> List[str]:
    """Flatten available_dates, keeping the first occurrence of each label."""
    seen = set()
    labels = []
    for package in packages:
        for label in package.available_dates:
            if label in seen:
                continue
            seen.add(label)
            labels.append(label)
    return labels


def build_availability(
    packages: Iterable[TravelPackage],
    city: Optional[str],
    year: Optional[int] = None
) -> AvailabilityIndex:
    """
    Build the month/day index offered for a departure city.

    Months come out in calendar order (January..December, only those
    present). Day labels are the day numbers as written in the labels, kept in
    the order first encountered. Labels that do not parse are left out.
    """
    labels = unique_date_labels(packages_for_city(packages, city))

    days_by_month: Dict[str, List[str]] = {}
    dropped = 0
    for label in labels:
        start = parse_start(label, year)
        if start is None:
            dropped += 1
            continue
        days = days_by_month.setdefault(start.month, [])
        if start.day not in days:
            days.append(start.day)

    if dropped:
        logger.debug("Skipped %d unparseable date label(s) for %s", dropped, city)

    months = [name for name in MONTH_NAMES if name in days_by_month]
    return AvailabilityIndex(
        months=months,
        days_by_month={month: days_by_month[month] for month in months}
    )
