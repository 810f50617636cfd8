"""Authentication endpoints and the session dependency."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, Request, Response, status

from talent_manager.api.schemas import SignInRequest, SignUpRequest
from talent_manager.domain.errors import IdentityProviderError
from talent_manager.domain.users import AuthSession, IdentityUser

if TYPE_CHECKING:
    from talent_manager.containers import AppContainer

logger = logging.getLogger(__name__)

SESSION_COOKIE = "access_token"

router = APIRouter(prefix="/auth", tags=["auth"])


def get_access_token(
    request: Request, authorization: str | None = Header(default=None)
) -> str | None:
    """Read the bearer token, falling back to the session cookie."""
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()
    return request.cookies.get(SESSION_COOKIE)


async def require_session(
    request: Request, access_token: str | None = Depends(get_access_token)
) -> IdentityUser:
    """Ensure the request carries a valid session and return its user."""
    container: AppContainer = request.app.state.container
    return container.auth_service.require_user(access_token)


@router.post("/sign-up", status_code=status.HTTP_201_CREATED)
async def sign_up(payload: SignUpRequest, request: Request) -> dict[str, object]:
    """Register a new artist or manager account."""
    container: AppContainer = request.app.state.container
    user, session = container.auth_service.sign_up(
        email=payload.email,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
        phone_number=payload.phone_number,
        role=payload.role,
    )
    return {
        "user": serialize_user(user),
        "session": _serialize_session(session) if session else None,
    }


@router.post("/sign-in")
async def sign_in(
    payload: SignInRequest, request: Request, response: Response
) -> dict[str, object]:
    """Sign in and set the session cookie."""
    container: AppContainer = request.app.state.container
    session = container.auth_service.sign_in(payload.email, payload.password)
    response.set_cookie(
        SESSION_COOKIE,
        session.access_token,
        httponly=True,
        samesite="lax",
        secure=container.settings.session_cookie_secure,
    )
    return _serialize_session(session)


@router.post("/sign-out")
async def sign_out(
    request: Request,
    response: Response,
    access_token: str | None = Depends(get_access_token),
) -> dict[str, str]:
    """Revoke the current session and clear the cookie."""
    container: AppContainer = request.app.state.container
    if access_token:
        try:
            container.auth_service.sign_out(access_token)
        except IdentityProviderError:
            logger.warning("Failed to revoke session", exc_info=True)
    response.delete_cookie(SESSION_COOKIE)
    return {"status": "ok"}


@router.get("/me")
async def me(user: IdentityUser = Depends(require_session)) -> dict[str, object]:
    """Return the signed-in user."""
    return serialize_user(user)


def serialize_user(user: IdentityUser) -> dict[str, object]:
    """Serialize an identity user for JSON responses."""
    return {
        "id": str(user.id),
        "email": user.email,
        "user_metadata": user.user_metadata,
        "created_at": user.created_at.isoformat() if user.created_at else None,
    }


def _serialize_session(session: AuthSession) -> dict[str, object]:
    return {
        "access_token": session.access_token,
        "refresh_token": session.refresh_token,
        "expires_at": session.expires_at,
        "user": serialize_user(session.user),
    }
