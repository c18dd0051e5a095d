# FastAPI entry point

import logging
from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Request, status
from fastapi.responses import JSONResponse

from .settings import Settings
from domain.catalog import filter_destinations, list_categories
from domain.destinations.loader import DestinationSource
from domain.itinerary.availability import build_availability
from schemas.booking import BookingRecord, BookingRequest, BookingResult, PendingBooking
from schemas.destination import Destination
from state.bookings import BookingError, BookingRepository
from state.selection import SelectionCoordinator
from state.store import StateStore

logger = logging.getLogger(__name__)

settings = Settings()
logging.basicConfig(
    level=settings.effective_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(title=settings.app_name, debug=settings.debug)


# =========================
# DEPENDENCIES
# =========================

def get_settings() -> Settings:
    return settings


@lru_cache
def get_destination_source() -> DestinationSource:
    return DestinationSource()


@lru_cache
def get_booking_repository() -> BookingRepository:
    return BookingRepository(
        StateStore(),
        get_destination_source(),
        max_participants=settings.max_participants
    )


def current_user_id(x_user_id: Optional[str] = Header(default=None)) -> Optional[str]:
    """Identity handed over by the auth provider; None for anonymous visitors."""
    return x_user_id or None


def _require_destination(source: DestinationSource, destination_id: str) -> Destination:
    destination = source.get(destination_id)
    if destination is None:
        raise HTTPException(status_code=404, detail=f"Destination '{destination_id}' not found")
    return destination


@app.exception_handler(BookingError)
async def booking_error_handler(request: Request, exc: BookingError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


# =========================
# CATALOG
# =========================

@app.get("/")
def root():
    return {"message": f"{settings.app_name} API"}


@app.get("/destinations")
def list_destinations(
    category: str = "All",
    search: str = "",
    source: DestinationSource = Depends(get_destination_source)
):
    destinations = source.all()
    results = filter_destinations(destinations, category=category, search=search)
    return {
        "categories": list_categories(destinations),
        "destinations": [
            {
                "id": d.id,
                "name": d.name,
                "subtitle": d.subtitle,
                "category": d.category,
                "basePrice": d.base_price,
                "heroImage": d.hero_image
            }
            for d in results
        ]
    }


@app.get("/destinations/{destination_id}", response_model=Destination, response_model_by_alias=True)
def read_destination(
    destination_id: str,
    source: DestinationSource = Depends(get_destination_source)
):
    return _require_destination(source, destination_id)


@app.get("/destinations/{destination_id}/availability")
def read_availability(
    destination_id: str,
    city: str,
    year: Optional[int] = None,
    source: DestinationSource = Depends(get_destination_source),
    config: Settings = Depends(get_settings)
):
    destination = _require_destination(source, destination_id)
    index = build_availability(destination.packages, city, year if year is not None else config.default_year)
    return {"city": city, "months": index.months, "daysByMonth": index.days_by_month}


@app.get("/destinations/{destination_id}/itinerary")
def read_itinerary(
    destination_id: str,
    city: Optional[str] = None,
    month: Optional[str] = None,
    day: Optional[str] = None,
    year: Optional[int] = None,
    source: DestinationSource = Depends(get_destination_source),
    config: Settings = Depends(get_settings)
):
    """
    Resolve the package for a city / month / day choice and date its itinerary.

    With no selection at all the page defaults (first city, month and day)
    apply when auto-selection is enabled. A month without a city, or a day
    without a month, is ignored and the answer stays unresolved.
    """
    destination = _require_destination(source, destination_id)
    nothing_selected = city is None and month is None and day is None
    selection = SelectionCoordinator(
        destination,
        year=year if year is not None else config.default_year,
        auto_select=config.auto_select_defaults and nothing_selected
    )
    if city is not None:
        selection.select_city(city)
    if month is not None:
        selection.select_month(month)
    if day is not None:
        selection.select_day(day)

    package = selection.resolved_package
    response = {
        "stage": selection.stage,
        "city": selection.city,
        "month": selection.month,
        "day": selection.day,
        "cities": selection.departure_cities,
        "months": selection.months,
        "days": selection.days,
        "resolved": package is not None
    }
    if package is None:
        response["message"] = "Please complete your selection to see the itinerary."
        return response

    response["package"] = {
        "id": package.id,
        "name": package.name,
        "price": package.price,
        "duration": package.duration,
        "selectedDate": selection.selected_date_label
    }
    response["itinerary"] = [
        {
            "day": projected.day.day,
            "title": projected.day.title,
            "description": projected.day.description,
            "image": projected.day.image,
            "date": projected.date.isoformat(),
            "displayDate": projected.display
        }
        for projected in selection.itinerary_dates()
    ]
    return response


# =========================
# BOOKINGS
# =========================

@app.post("/bookings", response_model=BookingResult)
def create_booking(
    payload: BookingRequest,
    x_session_id: Optional[str] = Header(default=None),
    user_id: Optional[str] = Depends(current_user_id),
    repository: BookingRepository = Depends(get_booking_repository)
):
    result = repository.register(payload, user_id, session_id=x_session_id)
    if result.status == "PENDING_AUTH":
        logger.info("Deferred booking for %s until sign-in", payload.destination_id)
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=result.model_dump(mode="json", by_alias=True)
        )
    return result


@app.get("/bookings/pending", response_model=Optional[PendingBooking])
def read_pending_booking(
    x_session_id: Optional[str] = Header(default=None),
    repository: BookingRepository = Depends(get_booking_repository)
):
    if not x_session_id:
        return None
    return repository.get_pending(x_session_id)


@app.get("/admin/bookings", response_model=List[BookingRecord])
def list_bookings(
    destination_id: Optional[str] = None,
    repository: BookingRepository = Depends(get_booking_repository)
):
    return repository.list(destination_id=destination_id)
