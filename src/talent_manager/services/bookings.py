"""Booking CRUD scoped to a single artist."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from talent_manager.domain.bookings import DEFAULT_BOOKING_STATUS, Booking
from talent_manager.domain.errors import NotFoundError


class BookingRepository(Protocol):
    """Persistence interface for bookings."""

    def list_bookings(self, artist_id: UUID) -> list[Booking]:
        """Return an artist's bookings ordered by start."""

    def create_booking(self, artist_id: UUID, payload: dict[str, object]) -> Booking:
        """Insert a booking and return it."""

    def update_booking(
        self, artist_id: UUID, booking_id: UUID, payload: dict[str, object]
    ) -> Booking | None:
        """Update a booking owned by the artist, or return None."""

    def delete_booking(self, artist_id: UUID, booking_id: UUID) -> bool:
        """Delete a booking owned by the artist; return whether one matched."""


@dataclass
class BookingService:
    """Application service for artist bookings.

    No ordering, overlap or status-transition checks are applied.
    """

    repository: BookingRepository

    def list_bookings(self, artist_id: UUID) -> list[Booking]:
        """Return all bookings for an artist."""
        return self.repository.list_bookings(artist_id)

    def create_booking(
        self,
        artist_id: UUID,
        title: str,
        start: datetime,
        end: datetime,
        status: str | None = None,
    ) -> Booking:
        """Persist a booking as given."""
        return self.repository.create_booking(
            artist_id,
            {
                "title": title,
                "starts_at": start.isoformat(),
                "ends_at": end.isoformat(),
                "status": status or DEFAULT_BOOKING_STATUS,
            },
        )

    def update_booking(  # noqa: PLR0913
        self,
        artist_id: UUID,
        booking_id: UUID,
        title: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        status: str | None = None,
    ) -> Booking:
        """Update the supplied fields of an artist's booking."""
        payload: dict[str, object] = {}
        if title is not None:
            payload["title"] = title
        if start is not None:
            payload["starts_at"] = start.isoformat()
        if end is not None:
            payload["ends_at"] = end.isoformat()
        if status is not None:
            payload["status"] = status
        booking = self.repository.update_booking(artist_id, booking_id, payload)
        if booking is None:
            raise NotFoundError("Booking not found")
        return booking

    def delete_booking(self, artist_id: UUID, booking_id: UUID) -> None:
        """Delete an artist's booking."""
        if not self.repository.delete_booking(artist_id, booking_id):
            raise NotFoundError("Booking not found")
