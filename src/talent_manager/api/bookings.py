"""Booking endpoints scoped to one artist."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from talent_manager.api.auth import require_session
from talent_manager.api.schemas import BookingCreate, BookingUpdate
from talent_manager.domain.bookings import Booking
from talent_manager.domain.errors import ValidationError

if TYPE_CHECKING:
    from talent_manager.containers import AppContainer

router = APIRouter(
    prefix="/bookings", tags=["bookings"], dependencies=[Depends(require_session)]
)


@router.get("/{artist_id}")
async def list_bookings(artist_id: UUID, request: Request) -> list[dict[str, object]]:
    """List an artist's bookings."""
    container: AppContainer = request.app.state.container
    bookings = container.booking_service.list_bookings(artist_id)
    return [serialize_booking(booking) for booking in bookings]


@router.post("/{artist_id}", status_code=status.HTTP_201_CREATED)
async def create_booking(
    artist_id: UUID, payload: BookingCreate, request: Request
) -> dict[str, object]:
    """Create a booking for an artist."""
    container: AppContainer = request.app.state.container
    booking = container.booking_service.create_booking(
        artist_id,
        title=payload.title,
        start=payload.start,
        end=payload.end,
        status=payload.status,
    )
    return serialize_booking(booking)


@router.put("/{artist_id}")
async def update_booking(
    artist_id: UUID, payload: BookingUpdate, request: Request
) -> dict[str, object]:
    """Update an artist's booking identified by the body id."""
    if payload.id is None:
        raise ValidationError("Booking ID is required")
    container: AppContainer = request.app.state.container
    booking = container.booking_service.update_booking(
        artist_id,
        payload.id,
        title=payload.title,
        start=payload.start,
        end=payload.end,
        status=payload.status,
    )
    return serialize_booking(booking)


@router.delete("/{artist_id}")
async def delete_booking(
    artist_id: UUID,
    request: Request,
    booking_id: UUID | None = Query(default=None, alias="id"),
) -> dict[str, str]:
    """Delete an artist's booking given as the id query parameter."""
    if booking_id is None:
        raise ValidationError("Booking ID is required")
    container: AppContainer = request.app.state.container
    container.booking_service.delete_booking(artist_id, booking_id)
    return {"message": "Booking deleted successfully"}


def serialize_booking(booking: Booking) -> dict[str, object]:
    """Serialize a booking for JSON responses."""
    return {
        "id": str(booking.id),
        "artist_id": str(booking.artist_id),
        "title": booking.title,
        "start": booking.start.isoformat(),
        "end": booking.end.isoformat(),
        "status": booking.status,
        "created_at": booking.created_at.isoformat() if booking.created_at else None,
    }
