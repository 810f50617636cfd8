"""Identity domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID


class Role(str, Enum):
    """Roles stored in user metadata."""

    ARTIST = "artist"
    MANAGER = "manager"


@dataclass(frozen=True)
class IdentityUser:
    """User record owned by the identity provider."""

    id: UUID
    email: str | None
    user_metadata: dict[str, object] = field(default_factory=dict)
    created_at: datetime | None = None

    @property
    def role(self) -> str | None:
        """Return the role stored in metadata, if any."""
        role = self.user_metadata.get("role")
        return str(role) if role is not None else None


@dataclass(frozen=True)
class AuthSession:
    """Tokens issued on sign-in."""

    access_token: str
    refresh_token: str | None
    expires_at: int | None
    user: IdentityUser
