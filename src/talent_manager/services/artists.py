"""Artist provisioning and lifecycle business logic."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import PurePosixPath
from typing import Protocol
from uuid import UUID, uuid4

from talent_manager.domain.artists import (
    EDITABLE_FIELDS,
    MIRRORED_FIELDS,
    Artist,
    ArtistIntake,
    PictureUpload,
)
from talent_manager.domain.errors import (
    NotFoundError,
    ObjectStoreError,
    RecordInsertError,
    ValidationError,
)
from talent_manager.domain.users import Role
from talent_manager.services.auth import IdentityProvider
from talent_manager.services.notifications import NotificationService

logger = logging.getLogger(__name__)


class ArtistRepository(Protocol):
    """Persistence interface for artist rows."""

    def list_artists(self, manager_id: UUID | None) -> list[Artist]:
        """Return artists ordered by last name, optionally for one manager."""

    def get_artist(self, artist_id: UUID) -> Artist | None:
        """Return an artist by id, if present."""

    def create_artist(self, payload: dict[str, object]) -> Artist:
        """Insert an artist row and return it."""

    def update_artist(
        self, artist_id: UUID, payload: dict[str, object]
    ) -> Artist | None:
        """Update an artist row and return it, or None when no row matched."""

    def delete_artist(self, artist_id: UUID) -> None:
        """Delete an artist row."""


class PictureStore(Protocol):
    """Object storage for profile pictures."""

    def upload(self, key: str, content: bytes, content_type: str | None) -> str:
        """Upload a file and return its public URL."""


@dataclass
class ArtistService:
    """Application service for the artist lifecycle."""

    repository: ArtistRepository
    identity_provider: IdentityProvider
    picture_store: PictureStore
    notification_service: NotificationService
    compensate_failed_provisioning: bool = False

    async def provision_artist(
        self, intake: ArtistIntake, picture: PictureUpload | None = None
    ) -> Artist:
        """Create a user and a linked artist, then email the credentials.

        The steps are committed independently. A failed insert leaves the new
        user behind unless compensation is enabled.
        """
        temporary_password = str(uuid4())
        user = self.identity_provider.create_user(
            intake.email,
            temporary_password,
            _intake_metadata(intake),
        )
        logger.info("Created artist user", extra={"user_id": str(user.id)})

        profile_picture = ""
        if picture is not None:
            profile_picture = self._upload_picture(picture)

        try:
            artist = self.repository.create_artist(
                {
                    "user_id": str(user.id),
                    "first_name": intake.first_name,
                    "last_name": intake.last_name,
                    "email": intake.email,
                    "phone_number": intake.phone_number,
                    "social": intake.social,
                    "profile_picture": profile_picture,
                    "manager_id": str(intake.manager_id) if intake.manager_id else None,
                }
            )
        except RecordInsertError:
            logger.exception(
                "Failed to insert artist row", extra={"user_id": str(user.id)}
            )
            if self.compensate_failed_provisioning:
                self._compensate_user(user.id)
            raise

        self.notification_service.send_welcome(intake.email, temporary_password)
        return artist

    def list_artists(self, manager_id: UUID | None = None) -> list[Artist]:
        """Return artists, optionally only those of one manager."""
        return self.repository.list_artists(manager_id)

    def get_artist(self, artist_id: UUID) -> Artist:
        """Return an artist or raise NotFoundError."""
        artist = self.repository.get_artist(artist_id)
        if artist is None:
            raise NotFoundError("Artist not found")
        return artist

    def update_artist(self, artist_id: UUID, changes: dict[str, object]) -> Artist:
        """Update editable fields and mirror name/email onto the user."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            names = ", ".join(sorted(unknown))
            raise ValidationError(f"Unknown artist fields: {names}")
        if not changes:
            return self.get_artist(artist_id)

        artist = self.repository.update_artist(artist_id, changes)
        if artist is None:
            raise NotFoundError("Artist not found")

        if artist.user_id is not None and MIRRORED_FIELDS & set(changes):
            try:
                self.identity_provider.update_user(
                    artist.user_id,
                    artist.email,
                    {"first_name": artist.first_name, "last_name": artist.last_name},
                )
            except Exception:
                logger.exception(
                    "Failed to update user metadata",
                    extra={"user_id": str(artist.user_id)},
                )
        return artist

    def delete_artist(self, artist_id: UUID) -> None:
        """Delete the artist row and then its user."""
        artist = self.get_artist(artist_id)
        self.repository.delete_artist(artist_id)
        if artist.user_id is not None:
            self.identity_provider.delete_user(artist.user_id)
        logger.info("Deleted artist", extra={"artist_id": str(artist_id)})

    def _upload_picture(self, picture: PictureUpload) -> str:
        key = _picture_key(picture.filename)
        try:
            return self.picture_store.upload(key, picture.content, picture.content_type)
        except ObjectStoreError:
            logger.exception("Profile picture upload failed", extra={"key": key})
            return ""

    def _compensate_user(self, user_id: UUID) -> None:
        try:
            self.identity_provider.delete_user(user_id)
        except Exception:
            logger.exception(
                "Failed to remove user after artist insert failure",
                extra={"user_id": str(user_id)},
            )
            return
        logger.info("Removed orphaned user", extra={"user_id": str(user_id)})


def _intake_metadata(intake: ArtistIntake) -> dict[str, object]:
    return {
        "role": Role.ARTIST.value,
        "first_name": intake.first_name,
        "last_name": intake.last_name,
        "phone_number": intake.phone_number,
        "social": intake.social,
        "manager_id": str(intake.manager_id) if intake.manager_id else None,
    }


def _picture_key(filename: str) -> str:
    """Build a collision-resistant storage key from the upload name."""
    millis = int(datetime.now(tz=UTC).timestamp() * 1000)
    name = PurePosixPath(filename.replace("\\", "/")).name or "upload"
    return f"{millis}_{name}"
