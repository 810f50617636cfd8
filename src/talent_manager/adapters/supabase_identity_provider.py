"""Supabase Auth implementation of the identity provider."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from talent_manager.domain.errors import (
    AuthenticationError,
    IdentityCreationError,
    IdentityProviderError,
)
from talent_manager.domain.users import AuthSession, IdentityUser
from talent_manager.services.auth import IdentityProvider

logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Identity provider backed by Supabase Auth.

    Admin calls go through the service-role client. Sign-in and sign-up use a
    fresh, non-refreshing client per call so user tokens never replace the
    service role on a shared client. Token lookups are stateless and share
    ``lookup_client``.
    """

    client: Client
    session_client_factory: Callable[[], Client]
    lookup_client: Client

    def create_user(
        self, email: str, password: str, metadata: dict[str, object]
    ) -> IdentityUser:
        """Create a pre-confirmed user through the admin API."""
        try:
            response = self.client.auth.admin.create_user(
                {
                    "email": email,
                    "password": password,
                    "email_confirm": True,
                    "user_metadata": metadata,
                }
            )
        except Exception as exc:
            raise IdentityCreationError(str(exc)) from exc
        if response is None or response.user is None:
            raise IdentityCreationError("Failed to create user")
        return _parse_user(response.user)

    def update_user(
        self, user_id: UUID, email: str | None, metadata: dict[str, object]
    ) -> None:
        """Update email and metadata through the admin API."""
        attributes: dict[str, object] = {"user_metadata": metadata}
        if email:
            attributes["email"] = email
        try:
            self.client.auth.admin.update_user_by_id(str(user_id), attributes)
        except Exception as exc:
            raise IdentityProviderError(str(exc)) from exc

    def delete_user(self, user_id: UUID) -> None:
        """Delete a user through the admin API."""
        try:
            self.client.auth.admin.delete_user(str(user_id))
        except Exception as exc:
            raise IdentityProviderError(str(exc)) from exc

    def sign_up(
        self, email: str, password: str, metadata: dict[str, object]
    ) -> tuple[IdentityUser, AuthSession | None]:
        """Register through the public sign-up flow."""
        try:
            response = self.session_client_factory().auth.sign_up(
                {"email": email, "password": password, "options": {"data": metadata}}
            )
        except Exception as exc:
            raise IdentityCreationError(str(exc)) from exc
        if response.user is None:
            raise IdentityCreationError("Sign-up did not return a user")
        user = _parse_user(response.user)
        session = _parse_session(response.session, user)
        return user, session

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Exchange email and password for a session."""
        try:
            response = self.session_client_factory().auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except Exception as exc:
            logger.info("Sign-in rejected", extra={"email": email})
            raise AuthenticationError(str(exc)) from exc
        if response.user is None:
            raise AuthenticationError("Invalid login credentials")
        session = _parse_session(response.session, _parse_user(response.user))
        if session is None:
            raise AuthenticationError("Invalid login credentials")
        return session

    def get_user(self, access_token: str) -> IdentityUser | None:
        """Return the user owning a token, or None when it is rejected."""
        try:
            response = self.lookup_client.auth.get_user(access_token)
        except Exception as exc:
            logger.info("Rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return _parse_user(response.user)

    def sign_out(self, access_token: str) -> None:
        """Revoke the session behind a token."""
        try:
            self.client.auth.admin.sign_out(access_token)
        except Exception as exc:
            raise IdentityProviderError(str(exc)) from exc


def _parse_user(user) -> IdentityUser:  # type: ignore[no-untyped-def]
    """Parse a Supabase user object into a domain model."""
    created_at = user.created_at
    if isinstance(created_at, str):
        created_at = datetime.fromisoformat(created_at) if created_at else None
    return IdentityUser(
        id=UUID(str(user.id)),
        email=user.email,
        user_metadata=dict(user.user_metadata or {}),
        created_at=created_at,
    )


def _parse_session(  # type: ignore[no-untyped-def]
    session, user: IdentityUser
) -> AuthSession | None:
    if session is None or not session.access_token:
        return None
    return AuthSession(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_at=session.expires_at,
        user=user,
    )
