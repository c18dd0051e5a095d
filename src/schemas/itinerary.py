from datetime import date
from typing import Dict, List, Literal, Optional
from pydantic import BaseModel

from schemas.destination import ItineraryDay


# =========================
# DATE LABELS
# =========================

class StartDate(BaseModel):
    """Start half of a date-range label such as "Sep 26 - Oct 3, 2025"."""

    label: str
    month: str          # full month name, e.g. "September"
    day: str            # day number exactly as written in the label
    date: date


# =========================
# AVAILABILITY
# =========================

class AvailabilityIndex(BaseModel):
    months: List[str] = []
    days_by_month: Dict[str, List[str]] = {}

    def days_for(self, month: Optional[str]) -> List[str]:
        if not month:
            return []
        return list(self.days_by_month.get(month, []))


# =========================
# SELECTION
# =========================

SelectionStage = Literal[
    "NoCitySelected",
    "CitySelected",
    "MonthSelected",
    "DaySelected"
]


class ProjectedDay(BaseModel):
    day: ItineraryDay
    date: date
    display: str
