"""Welcome notifications delivered outside the request lifecycle."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)

WELCOME_SUBJECT = "Welcome to Our Team"


class Mailer(Protocol):
    """Interface for outbound email delivery."""

    async def send_message(self, to: str, subject: str, body: str) -> None:
        """Deliver a plain-text email."""


@dataclass
class NotificationService:
    """Dispatch emails as detached tasks whose failures are only logged."""

    mailer: Mailer
    _pending: set[asyncio.Task[None]] = field(default_factory=set, init=False)

    def send_welcome(self, email: str, temporary_password: str) -> asyncio.Task[None]:
        """Schedule the credentials email without waiting for delivery.

        Must be called from a running event loop. The returned task never
        raises; callers are not expected to await it.
        """
        body = _welcome_body(email, temporary_password)
        task = asyncio.create_task(self._deliver(email, WELCOME_SUBJECT, body))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def drain(self) -> None:
        """Wait for in-flight notifications, used on shutdown."""
        if self._pending:
            await asyncio.gather(*list(self._pending))

    @property
    def pending_count(self) -> int:
        """Number of notifications still in flight."""
        return len(self._pending)

    async def _deliver(self, to: str, subject: str, body: str) -> None:
        try:
            await self.mailer.send_message(to=to, subject=subject, body=body)
        except Exception:
            logger.exception("Failed to send email", extra={"to": to})
            return
        logger.info("Sent welcome email", extra={"to": to})


def _welcome_body(email: str, temporary_password: str) -> str:
    return (
        "Welcome to our team! Your account has been created.\n"
        f"Your email: {email}\n"
        f"Your temporary password: {temporary_password}\n"
        "Please log in and change your password as soon as possible."
    )
