# Destination page selection state (city -> month -> day -> package)
import logging
from typing import List, Optional

from domain.itinerary.availability import build_availability
from domain.itinerary.date_labels import stated_year
from domain.itinerary.projection import format_itinerary_date, project_date
from domain.itinerary.resolver import matching_date_label, resolve_package
from schemas.destination import Destination, TravelPackage
from schemas.itinerary import AvailabilityIndex, ProjectedDay, SelectionStage

logger = logging.getLogger(__name__)


class SelectionCoordinator:
    """
    Owns the city / month / day choice for one destination page view.

    Changing a selection clears everything below it (a new city clears month
    and day, a new month clears day) and re-resolves the package. Nothing
    here raises on incomplete or inconsistent content; unresolved selections
    simply leave ``resolved_package`` as None.
    """

    def __init__(
        self,
        destination: Destination,
        year: Optional[int] = None,
        auto_select: bool = True
    ):
        self.destination = destination
        self.year = year
        self.city: Optional[str] = None
        self.month: Optional[str] = None
        self.day: Optional[str] = None
        self.availability = AvailabilityIndex()
        self.resolved_package: Optional[TravelPackage] = None

        if auto_select:
            self._select_defaults()

    # ============================================================
    # DERIVED VIEWS
    # ============================================================

    @property
    def departure_cities(self) -> List[str]:
        """Summary city names, falling back to the cities packages depart from."""
        names = [summary.name for summary in self.destination.departure_cities]
        if names:
            return names
        for package in self.destination.packages:
            if package.departure_city not in names:
                names.append(package.departure_city)
        return names

    @property
    def months(self) -> List[str]:
        return list(self.availability.months)

    @property
    def days(self) -> List[str]:
        return self.availability.days_for(self.month)

    @property
    def stage(self) -> SelectionStage:
        if self.city is None:
            return "NoCitySelected"
        if self.month is None:
            return "CitySelected"
        if self.day is None:
            return "MonthSelected"
        return "DaySelected"

    @property
    def selected_date_label(self) -> Optional[str]:
        """The available_dates label of the resolved package that matched."""
        if self.resolved_package is None:
            return None
        return matching_date_label(self.resolved_package, self.month, self.day, self.year)

    @property
    def trip_year(self) -> Optional[int]:
        """Explicit year if one was given, else the year of the matched label."""
        if self.year is not None:
            return self.year
        label = self.selected_date_label
        return stated_year(label) if label else None

    # ============================================================
    # TRANSITIONS
    # ============================================================

    def select_city(self, city: Optional[str]) -> SelectionStage:
        self.city = city
        self.month = None
        self.day = None
        self.availability = build_availability(self.destination.packages, city, self.year)
        self._resolve()
        return self.stage

    def select_month(self, month: Optional[str]) -> SelectionStage:
        if self.city is None:
            logger.warning("Ignoring month %r for %s: no city selected", month, self.destination.id)
            return self.stage
        self.month = month
        self.day = None
        self._resolve()
        return self.stage

    def select_day(self, day: Optional[str]) -> SelectionStage:
        if self.month is None:
            logger.warning("Ignoring day %r for %s: no month selected", day, self.destination.id)
            return self.stage
        self.day = day
        self._resolve()
        return self.stage

    def reset(self) -> SelectionStage:
        self.city = None
        self.month = None
        self.day = None
        self.availability = AvailabilityIndex()
        self.resolved_package = None
        return self.stage

    # ============================================================
    # ITINERARY
    # ============================================================

    def itinerary_dates(self) -> List[ProjectedDay]:
        """Resolved package itinerary with a calendar date for each day."""
        if self.resolved_package is None:
            return []

        year = self.trip_year
        projected = []
        for entry in self.resolved_package.itinerary:
            value = project_date(self.month, self.day, year, entry.day)
            if value is None:
                return []
            projected.append(ProjectedDay(day=entry, date=value, display=format_itinerary_date(value)))
        return projected

    # ============================================================
    # INTERNALS
    # ============================================================

    def _resolve(self) -> None:
        self.resolved_package = resolve_package(
            self.destination.packages, self.city, self.month, self.day, self.year
        )

    def _select_defaults(self) -> None:
        cities = self.departure_cities
        if not cities:
            return
        self.select_city(cities[0])
        if self.availability.months:
            self.select_month(self.availability.months[0])
            days = self.days
            if days:
                self.select_day(days[0])
