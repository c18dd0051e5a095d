# Booking submission and pending booking intents
import logging
from datetime import datetime, timezone
from typing import List, Optional

from domain.destinations.loader import DestinationSource
from schemas.booking import BookingRecord, BookingRequest, BookingResult, PendingBooking
from state.store import StateStore
from utils.ids import generate_booking_id

logger = logging.getLogger(__name__)


DEFAULT_MAX_PARTICIPANTS = 10


class BookingError(ValueError):
    """A registration that cannot be stored; the message is shown to the user."""


class BookingRepository:
    """Writes booking records and remembers booking intents per session."""

    def __init__(
        self,
        store: StateStore,
        destinations: DestinationSource,
        max_participants: int = DEFAULT_MAX_PARTICIPANTS
    ):
        self.store = store
        self.destinations = destinations
        self.max_participants = max_participants

    # ============================================================
    # SUBMISSION
    # ============================================================

    def validate(self, request: BookingRequest) -> None:
        """Raise BookingError describing the first problem with ``request``."""
        if not request.agreed_to_terms:
            raise BookingError("Please accept the terms and conditions to proceed.")

        destination = self.destinations.get(request.destination_id)
        if destination is None:
            raise BookingError(f"Unknown destination '{request.destination_id}'.")

        package = destination.get_package(request.package_id)
        if package is None:
            raise BookingError(
                f"Package '{request.package_id}' is not offered for {destination.name}."
            )

        if request.selected_date not in package.available_dates:
            raise BookingError(
                f"'{request.selected_date}' is not an available date for {package.name}."
            )

        if not 1 <= request.participant_count <= self.max_participants:
            raise BookingError(
                f"Participant count must be between 1 and {self.max_participants}."
            )

        if len(request.participants) != request.participant_count:
            raise BookingError(
                f"Expected details for {request.participant_count} participant(s), "
                f"got {len(request.participants)}."
            )

    def submit(self, request: BookingRequest, user_id: Optional[str]) -> BookingRecord:
        """Validate and store a booking for ``user_id``."""
        if not user_id:
            raise BookingError("Your session has expired. Please sign in again.")

        self.validate(request)

        record = BookingRecord(
            id=generate_booking_id(),
            user_id=user_id,
            destination_id=request.destination_id,
            package_id=request.package_id,
            selected_date=request.selected_date,
            participant_count=request.participant_count,
            participants=request.participants,
            created_at=datetime.now(timezone.utc)
        )
        self.store.set(f"booking:{record.id}", record.model_dump(mode="json"))
        logger.info(
            "Stored booking %s: %s/%s on %s for %d participant(s)",
            record.id, record.destination_id, record.package_id,
            record.selected_date, record.participant_count
        )
        return record

    def register(
        self,
        request: BookingRequest,
        user_id: Optional[str],
        session_id: Optional[str] = None
    ) -> BookingResult:
        """
        Submit for a signed-in user, or keep the intent for later.

        Without a user the request is not validated beyond its shape; it is
        remembered for ``session_id`` and picked up after sign-in.
        """
        if not user_id:
            pending = PendingBooking(
                destination_id=request.destination_id,
                package_id=request.package_id,
                date=request.selected_date
            )
            if session_id:
                self.set_pending(session_id, pending)
            return BookingResult(status="PENDING_AUTH", pending=pending)

        record = self.submit(request, user_id)
        if session_id:
            self.clear_pending(session_id)
        return BookingResult(status="CONFIRMED", booking=record)

    # ============================================================
    # READ SIDE (admin console)
    # ============================================================

    def get(self, booking_id: str) -> Optional[BookingRecord]:
        data = self.store.get(f"booking:{booking_id}")
        return BookingRecord.model_validate(data) if data else None

    def list(self, destination_id: Optional[str] = None) -> List[BookingRecord]:
        """All bookings, newest first."""
        records = [
            BookingRecord.model_validate(self.store.get(key))
            for key in self.store.keys("booking:")
        ]
        if destination_id:
            records = [r for r in records if r.destination_id == destination_id]
        records.sort(key=lambda r: r.created_at or datetime.min.replace(tzinfo=timezone.utc), reverse=True)
        return records

    # ============================================================
    # PENDING INTENTS
    # ============================================================

    def set_pending(self, session_id: str, pending: PendingBooking) -> None:
        self.store.set(f"pending:{session_id}", pending.model_dump())

    def get_pending(self, session_id: str) -> Optional[PendingBooking]:
        data = self.store.get(f"pending:{session_id}")
        return PendingBooking.model_validate(data) if data else None

    def clear_pending(self, session_id: str) -> None:
        self.store.delete(f"pending:{session_id}")
