"""Domain models for bookings."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

DEFAULT_BOOKING_STATUS = "pending"
BOOKING_STATUSES = ("pending", "confirmed", "completed")


@dataclass(frozen=True)
class Booking:
    """Calendar booking owned by a single artist."""

    id: UUID
    artist_id: UUID
    title: str
    start: datetime
    end: datetime
    status: str = DEFAULT_BOOKING_STATUS
    created_at: datetime | None = None
