"""Outbound email."""

from .smtp import EmailSender, MockEmailSender, SentEmail, SmtpEmailSender

__all__ = ["EmailSender", "MockEmailSender", "SentEmail", "SmtpEmailSender"]
