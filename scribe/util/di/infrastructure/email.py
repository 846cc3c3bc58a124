"""Email infrastructure providers."""

from dishka import Scope, provide

from scribe.adapter.email import EmailSender, SmtpEmailSender
from scribe.config import EmailSettings
from scribe.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider using SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, settings: EmailSettings) -> EmailSender:
        """Provide SMTP email sender.

        Raises:
            ValueError: If SMTP credentials are only partly configured
        """
        if bool(settings.username) != bool(settings.password):
            raise ValueError("SMTP username and password must be set together")
        return SmtpEmailSender(settings)
