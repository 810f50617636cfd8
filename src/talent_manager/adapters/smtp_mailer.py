"""SMTP relay mailer adapter."""

import logging
from dataclasses import dataclass
from email.message import EmailMessage

import aiosmtplib

from talent_manager.config import Settings
from talent_manager.domain.errors import NotificationError
from talent_manager.services.notifications import Mailer

logger = logging.getLogger(__name__)


@dataclass
class SmtpMailer(Mailer):
    """Mailer implemented with aiosmtplib.

    When no relay host is configured, messages are logged and skipped.
    """

    host: str | None
    port: int
    sender: str | None
    username: str | None = None
    password: str | None = None
    use_tls: bool = False
    timeout: float = 10

    @classmethod
    def from_settings(cls, settings: Settings) -> "SmtpMailer":
        """Create a mailer from the SMTP settings."""
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            sender=settings.email_from or settings.smtp_user,
            username=settings.smtp_user,
            password=settings.smtp_password,
            use_tls=settings.smtp_secure,
        )

    async def send_message(self, to: str, subject: str, body: str) -> None:
        """Send a plain-text message through the relay."""
        if not self.host:
            logger.info("SMTP not configured, skipping email", extra={"to": to})
            return
        message = EmailMessage()
        if self.sender:
            message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content(body)
        try:
            await aiosmtplib.send(
                message,
                hostname=self.host,
                port=self.port,
                username=self.username,
                password=self.password,
                use_tls=self.use_tls,
                timeout=self.timeout,
            )
        except aiosmtplib.SMTPException as exc:
            raise NotificationError(str(exc)) from exc
