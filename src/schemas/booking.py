from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from schemas.destination import DocumentModel


Gender = Literal["Male", "Female", "Other"]


class Participant(DocumentModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = ""
    mobile: str = Field(..., pattern=r"^\+?\d{10,13}$")
    birth_date: Optional[str] = None
    gender: Optional[Gender] = None


class BookingRequest(DocumentModel):
    """Registration form payload, before the identity is attached."""

    destination_id: str
    package_id: str
    selected_date: str
    participant_count: int = Field(..., ge=1)
    participants: List[Participant]
    agreed_to_terms: bool = False


class BookingRecord(DocumentModel):
    id: Optional[str] = None
    user_id: str
    destination_id: str
    package_id: str
    selected_date: str
    participant_count: int
    participants: List[Participant]
    created_at: Optional[datetime] = None


class PendingBooking(DocumentModel):
    """Booking intent kept for a visitor who has not signed in yet."""

    destination_id: str
    package_id: str
    date: str


class BookingResult(BaseModel):
    status: Literal["CONFIRMED", "PENDING_AUTH"]
    booking: Optional[BookingRecord] = None
    pending: Optional[PendingBooking] = None
