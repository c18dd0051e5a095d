from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# =========================
# ENUMERATIONS
# =========================

Category = Literal[
    "Mountain",
    "Beach",
    "Historical",
    "City",
    "Trekking",
    "Adventure"
]

Difficulty = Literal["Easy", "Moderate", "Hard"]

DepartureCity = Literal[
    "Ahmedabad",
    "Kochi",
    "Mumbai",
    "Baroda/Surat"
]

DEPARTURE_CITIES: List[str] = ["Ahmedabad", "Kochi", "Mumbai", "Baroda/Surat"]


class DocumentModel(BaseModel):
    """Stored documents use camelCase keys; Python code uses snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True
    )


# =========================
# PACKAGES
# =========================

class ItineraryDay(DocumentModel):
    day: int = Field(..., ge=1)
    title: str
    description: str = ""
    image: Optional[str] = None


class TravelPackage(DocumentModel):
    id: str
    destination_id: Optional[str] = None
    name: str
    price: int = Field(..., ge=0)
    duration: str = ""
    departure_city: DepartureCity
    available_dates: List[str] = []
    itinerary: List[ItineraryDay] = []

    @field_validator("itinerary")
    @classmethod
    def _days_are_contiguous(cls, days: List[ItineraryDay]) -> List[ItineraryDay]:
        for expected, entry in enumerate(days, start=1):
            if entry.day != expected:
                raise ValueError(
                    f"itinerary day numbers must run 1..{len(days)} in order, "
                    f"found day {entry.day} at position {expected}"
                )
        return days


# =========================
# DESTINATION
# =========================

class KeyStats(DocumentModel):
    duration: str = ""
    difficulty: Difficulty = "Easy"
    age_group: str = ""
    max_altitude: str = ""


class Attraction(DocumentModel):
    name: str
    image: Optional[str] = None


class DepartureCitySummary(DocumentModel):
    name: DepartureCity
    image: Optional[str] = None
    price: Optional[int] = None
    duration: str = ""


class Destination(DocumentModel):
    id: str
    name: str
    subtitle: str = ""
    category: Category
    base_price: int = Field(0, ge=0)
    key_stats: KeyStats = Field(default_factory=KeyStats)
    long_description: str = ""
    hero_image: Optional[str] = None
    inclusions: List[str] = []
    exclusions: List[str] = []
    attractions: List[Attraction] = []
    departure_cities: List[DepartureCitySummary] = []
    packages: List[TravelPackage] = []

    def get_package(self, package_id: str) -> Optional[TravelPackage]:
        for package in self.packages:
            if package.id == package_id:
                return package
        return None
