"""Domain models for artists."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

EDITABLE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone_number",
    "social",
    "website",
    "bio",
    "address",
    "profile_picture",
)
MIRRORED_FIELDS = frozenset({"first_name", "last_name", "email"})


@dataclass(frozen=True)
class Artist:
    """Artist row linked to exactly one identity user."""

    id: UUID
    user_id: UUID | None
    first_name: str
    last_name: str
    email: str | None
    phone_number: str | None = None
    social: str | None = None
    website: str | None = None
    bio: str | None = None
    address: str | None = None
    profile_picture: str = ""
    manager_id: UUID | None = None
    created_at: datetime | None = None
    user: dict[str, object] | None = None
    manager: dict[str, object] | None = None


@dataclass(frozen=True)
class ArtistIntake:
    """Manager-submitted data for provisioning a new artist."""

    first_name: str
    last_name: str
    email: str
    phone_number: str | None = None
    social: str | None = None
    manager_id: UUID | None = None


@dataclass(frozen=True)
class PictureUpload:
    """Profile picture file submitted with an intake form."""

    filename: str
    content: bytes
    content_type: str | None = None
