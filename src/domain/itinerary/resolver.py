# Package resolution for a city / month / day choice
from typing import Iterable, Optional

from domain.itinerary.date_labels import parse_start
from schemas.destination import TravelPackage


def matching_date_label(
    package: TravelPackage,
    month: Optional[str],
    day: Optional[str],
    year: Optional[int] = None
) -> Optional[str]:
    """First available_dates label of ``package`` starting on ``month`` / ``day``."""
    if not month or not day:
        return None

    for label in package.available_dates:
        start = parse_start(label, year)
        if start and start.month == month and start.day == day:
            return label
    return None


def resolve_package(
    packages: Iterable[TravelPackage],
    city: Optional[str],
    month: Optional[str],
    day: Optional[str],
    year: Optional[int] = None
) -> Optional[TravelPackage]:
    """
    Find the package offered from ``city`` that starts on ``month`` / ``day``.

    When several packages qualify the first one in list order wins. Returns
    None when nothing matches; the caller shows the selection as incomplete.
    """
    if not city or not month or not day:
        return None

    for package in packages:
        if package.departure_city != city:
            continue
        if matching_date_label(package, month, day, year) is not None:
            return package
    return None
