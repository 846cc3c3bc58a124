"""SMTP email delivery.

Used for password recovery codes. Delivery is fire-and-report: a failure is
raised to the caller and nothing is retried.
"""

import asyncio
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage

import logfire

from scribe.adapter.error import EmailDeliveryError
from scribe.config import EmailSettings


class EmailSender:
    """Sends HTML email.

    Provides type distinction for dependency injection.
    """

    async def send(self, to: str, subject: str, html: str) -> None:
        """Deliver one message.

        Raises:
            EmailDeliveryError: If the relay refuses or cannot be reached
        """
        raise NotImplementedError


class SmtpEmailSender(EmailSender):
    """Delivers mail through an SMTP relay with STARTTLS."""

    def __init__(self, settings: EmailSettings) -> None:
        self.settings = settings

    def _build_message(self, to: str, subject: str, html: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.settings.sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content("This message requires an HTML-capable mail client.")
        message.add_alternative(html, subtype="html")
        return message

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(
            self.settings.smtp_host, self.settings.smtp_port, timeout=30
        ) as smtp:
            if self.settings.use_tls:
                smtp.starttls()
            if self.settings.username and self.settings.password:
                smtp.login(self.settings.username, self.settings.password)
            smtp.send_message(message)

    async def send(self, to: str, subject: str, html: str) -> None:
        with logfire.span("smtp.send", to=to, subject=subject):
            message = self._build_message(to, subject, html)
            try:
                await asyncio.to_thread(self._deliver, message)
            except (smtplib.SMTPException, OSError) as e:
                logfire.error("Email delivery failed", to=to, error=str(e))
                raise EmailDeliveryError(
                    "Failed to send email", cause=type(e).__name__
                )
            logfire.info("Email sent", to=to)


@dataclass
class SentEmail:
    """Message captured by MockEmailSender."""

    to: str
    subject: str
    html: str


class MockEmailSender(EmailSender):
    """Records messages instead of sending them."""

    def __init__(self) -> None:
        self.sent: list[SentEmail] = []

    async def send(self, to: str, subject: str, html: str) -> None:
        self.sent.append(SentEmail(to=to, subject=subject, html=html))
