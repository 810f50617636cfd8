"""Tests for container wiring."""

import asyncio
import threading
import time
from uuid import uuid4

import httpx
from supabase import SupabaseAuthClient

from talent_manager.adapters.smtp_mailer import SmtpMailer
from talent_manager.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.artist_service.compensate_failed_provisioning is False
    assert isinstance(container.notification_service.mailer, SmtpMailer)
    assert container.artist_service.notification_service is (
        container.notification_service
    )
    asyncio.run(container.close_resources())


def test_build_container_enables_compensation(settings) -> None:
    settings.compensate_failed_provisioning = True

    container = build_container(settings)

    assert container.artist_service.compensate_failed_provisioning is True


def _token_response(method: str, path: str) -> httpx.Response:
    payload = {
        "access_token": "user-jwt",
        "refresh_token": "user-refresh",
        "token_type": "bearer",
        "expires_in": 3600,
        "expires_at": int(time.time()) + 3600,
        "user": {
            "id": str(uuid4()),
            "aud": "authenticated",
            "email": "artist@example.com",
            "app_metadata": {},
            "user_metadata": {"role": "artist"},
            "created_at": "2024-05-01T10:00:00+00:00",
        },
    }
    request = httpx.Request(method, f"https://example.supabase.co/auth/v1/{path}")
    return httpx.Response(200, json=payload, request=request)


def _refresh_timers() -> list[threading.Thread]:
    return [
        thread
        for thread in threading.enumerate()
        if isinstance(thread, threading.Timer) and thread.is_alive()
    ]


def test_sign_in_leaves_no_refresh_timer(settings, monkeypatch) -> None:
    def fake_request(self, method, path, **kwargs):  # type: ignore[no-untyped-def]
        return _token_response(method, path)

    monkeypatch.setattr(SupabaseAuthClient, "_request", fake_request)
    container = build_container(settings)
    timers_before = len(_refresh_timers())

    sessions = [
        container.auth_service.sign_in("artist@example.com", "secret-pass")
        for _ in range(3)
    ]

    assert all(session.refresh_token == "user-refresh" for session in sessions)
    assert len(_refresh_timers()) == timers_before
