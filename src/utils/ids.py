import uuid


def generate_booking_id() -> str:
    """Generate a unique booking ID."""
    return f"bk_{uuid.uuid4().hex[:12]}"
