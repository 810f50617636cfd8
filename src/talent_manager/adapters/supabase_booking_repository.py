"""Supabase-backed booking repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from talent_manager.domain.bookings import DEFAULT_BOOKING_STATUS, Booking
from talent_manager.domain.errors import RecordInsertError, StoreError
from talent_manager.services.bookings import BookingRepository


@dataclass
class SupabaseBookingRepository(BookingRepository):
    """Supabase implementation for booking persistence."""

    client: Client

    def list_bookings(self, artist_id: UUID) -> list[Booking]:
        """Return an artist's bookings ordered by start."""
        try:
            response = (
                self.client.table("bookings")
                .select("*")
                .eq("artist_id", str(artist_id))
                .order("starts_at")
                .execute()
            )
        except Exception as exc:
            raise StoreError(str(exc)) from exc
        return [_parse_booking(row) for row in response.data or []]

    def create_booking(self, artist_id: UUID, payload: dict[str, object]) -> Booking:
        """Insert a booking and return it."""
        try:
            response = (
                self.client.table("bookings")
                .insert({"artist_id": str(artist_id), **payload})
                .execute()
            )
        except Exception as exc:
            raise RecordInsertError(str(exc)) from exc
        if not response.data:
            raise RecordInsertError("Failed to create booking")
        return _parse_booking(response.data[0])

    def update_booking(
        self, artist_id: UUID, booking_id: UUID, payload: dict[str, object]
    ) -> Booking | None:
        """Update a booking owned by the artist, or return None."""
        try:
            if payload:
                query = self.client.table("bookings").update(payload)
            else:
                query = self.client.table("bookings").select("*")
            response = (
                query.eq("id", str(booking_id))
                .eq("artist_id", str(artist_id))
                .execute()
            )
        except Exception as exc:
            raise StoreError(str(exc)) from exc
        if not response.data:
            return None
        return _parse_booking(response.data[0])

    def delete_booking(self, artist_id: UUID, booking_id: UUID) -> bool:
        """Delete a booking owned by the artist; return whether one matched."""
        try:
            response = (
                self.client.table("bookings")
                .delete()
                .eq("id", str(booking_id))
                .eq("artist_id", str(artist_id))
                .execute()
            )
        except Exception as exc:
            raise StoreError(str(exc)) from exc
        return bool(response.data)


def _parse_booking(row: dict[str, object]) -> Booking:
    """Parse a booking row into a domain model."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return Booking(
        id=UUID(str(row["id"])),
        artist_id=UUID(str(row["artist_id"])),
        title=str(row.get("title") or ""),
        start=datetime.fromisoformat(str(row["starts_at"])),
        end=datetime.fromisoformat(str(row["ends_at"])),
        status=str(row.get("status") or DEFAULT_BOOKING_STATUS),
        created_at=created_at,
    )
