"""Authentication and identity provider access."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from talent_manager.domain.errors import AuthenticationError
from talent_manager.domain.users import AuthSession, IdentityUser, Role


class IdentityProvider(Protocol):
    """Interface to the hosted identity provider."""

    def create_user(
        self, email: str, password: str, metadata: dict[str, object]
    ) -> IdentityUser:
        """Create a pre-confirmed user and return it."""

    def update_user(
        self, user_id: UUID, email: str | None, metadata: dict[str, object]
    ) -> None:
        """Update a user's email and merge metadata."""

    def delete_user(self, user_id: UUID) -> None:
        """Delete a user."""

    def sign_up(
        self, email: str, password: str, metadata: dict[str, object]
    ) -> tuple[IdentityUser, AuthSession | None]:
        """Register a user through the public sign-up flow."""

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Exchange credentials for a session."""

    def get_user(self, access_token: str) -> IdentityUser | None:
        """Return the user owning a token, or None when it is not valid."""

    def sign_out(self, access_token: str) -> None:
        """Revoke a session."""


@dataclass
class AuthService:
    """Application service for sign-up, sign-in and session lookup."""

    identity_provider: IdentityProvider

    def sign_up(  # noqa: PLR0913
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        phone_number: str | None,
        role: Role,
    ) -> tuple[IdentityUser, AuthSession | None]:
        """Register a user with profile metadata."""
        metadata: dict[str, object] = {
            "first_name": first_name,
            "last_name": last_name,
            "phone_number": phone_number,
            "role": role.value,
        }
        return self.identity_provider.sign_up(email, password, metadata)

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Sign a user in and return the issued session."""
        return self.identity_provider.sign_in(email, password)

    def sign_out(self, access_token: str) -> None:
        """Revoke the given session."""
        self.identity_provider.sign_out(access_token)

    def require_user(self, access_token: str | None) -> IdentityUser:
        """Resolve the session owner or raise AuthenticationError."""
        if not access_token:
            raise AuthenticationError("Not authenticated")
        user = self.identity_provider.get_user(access_token)
        if user is None:
            raise AuthenticationError("Invalid or expired session")
        return user
