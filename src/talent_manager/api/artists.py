"""Artist endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from talent_manager.api.auth import require_session
from talent_manager.api.schemas import ArtistIntakeForm, ArtistUpdate
from talent_manager.domain.artists import Artist, ArtistIntake, PictureUpload
from talent_manager.domain.errors import ValidationError

if TYPE_CHECKING:
    from talent_manager.containers import AppContainer

router = APIRouter(tags=["artists"], dependencies=[Depends(require_session)])

_FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


@router.get("/artists")
async def list_artists(
    request: Request, manager_id: UUID | None = Query(default=None, alias="managerId")
) -> list[dict[str, object]]:
    """List artists ordered by last name, optionally for one manager."""
    container: AppContainer = request.app.state.container
    artists = container.artist_service.list_artists(manager_id)
    return [serialize_artist(artist) for artist in artists]


@router.post("/artists", status_code=status.HTTP_201_CREATED)
async def create_artist(request: Request) -> dict[str, object]:
    """Provision an artist from a multipart form or a JSON body."""
    container: AppContainer = request.app.state.container
    picture: PictureUpload | None = None
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_CONTENT_TYPES):
        form = await request.form()
        fields = {key: value for key, value in form.items() if isinstance(value, str)}
        upload = form.get("profile_picture")
        if upload is not None and not isinstance(upload, str) and upload.filename:
            picture = PictureUpload(
                filename=upload.filename,
                content=await upload.read(),
                content_type=upload.content_type,
            )
    else:
        try:
            fields = await request.json()
        except ValueError as exc:
            raise ValidationError("Request body must be JSON or form data") from exc
        if not isinstance(fields, dict):
            raise ValidationError("Request body must be an object")

    form_data = ArtistIntakeForm.model_validate(fields)
    intake = ArtistIntake(**form_data.model_dump())
    artist = await container.artist_service.provision_artist(intake, picture)
    return serialize_artist(artist)


@router.get("/artists/{artist_id}")
async def get_artist(artist_id: UUID, request: Request) -> dict[str, object]:
    """Return a full artist record."""
    container: AppContainer = request.app.state.container
    return serialize_artist(container.artist_service.get_artist(artist_id))


@router.put("/artists/{artist_id}")
async def update_artist(
    artist_id: UUID, payload: ArtistUpdate, request: Request
) -> dict[str, object]:
    """Update the supplied artist fields."""
    container: AppContainer = request.app.state.container
    artist = container.artist_service.update_artist(
        artist_id, payload.model_dump(exclude_unset=True)
    )
    return serialize_artist(artist)


@router.delete("/artists/{artist_id}")
async def delete_artist(artist_id: UUID, request: Request) -> dict[str, str]:
    """Delete an artist and its user account."""
    container: AppContainer = request.app.state.container
    container.artist_service.delete_artist(artist_id)
    return {"message": "Artist and associated user deleted successfully"}


@router.get("/artiste/{artist_id}")
async def get_artist_profile(artist_id: UUID, request: Request) -> dict[str, object]:
    """Return the public profile subset of an artist."""
    container: AppContainer = request.app.state.container
    artist = container.artist_service.get_artist(artist_id)
    return {
        "id": str(artist.id),
        "first_name": artist.first_name,
        "last_name": artist.last_name,
        "email": artist.email,
        "phone_number": artist.phone_number,
        "bio": artist.bio,
        "profile_picture": artist.profile_picture,
    }


def serialize_artist(artist: Artist) -> dict[str, object]:
    """Serialize an artist for JSON responses."""
    data: dict[str, object] = {
        "id": str(artist.id),
        "user_id": str(artist.user_id) if artist.user_id else None,
        "first_name": artist.first_name,
        "last_name": artist.last_name,
        "email": artist.email,
        "phone_number": artist.phone_number,
        "social": artist.social,
        "website": artist.website,
        "bio": artist.bio,
        "address": artist.address,
        "profile_picture": artist.profile_picture,
        "manager_id": str(artist.manager_id) if artist.manager_id else None,
        "created_at": artist.created_at.isoformat() if artist.created_at else None,
    }
    if artist.user is not None:
        data["user"] = artist.user
    if artist.manager is not None:
        data["manager"] = artist.manager
    return data
