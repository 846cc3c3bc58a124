"""Request password recovery use case."""

import logfire
from pydantic import BaseModel

from scribe.adapter.email import EmailSender
from scribe.application.usecase.base import BaseUseCase
from scribe.config import AuthSettings
from scribe.domain.error import ValidationError
from scribe.domain.service import UserService
from scribe.domain.value import Email

RECOVERY_SUBJECT = "Your password recovery code"


def render_recovery_email(username: str, code: str, ttl_minutes: int) -> str:
    return (
        f"<p>Hi {username},</p>"
        f"<p>Your password recovery code is <strong>{code}</strong>.</p>"
        f"<p>It expires in {ttl_minutes} minutes. If you did not ask for it, "
        "you can ignore this email.</p>"
    )


class RequestRecoveryRequest(BaseModel):
    """Request recovery request."""

    email: str


class RequestRecoveryResponse(BaseModel):
    """Request recovery response.

    Identical whether or not the email belongs to an account.
    """

    status: str = "accepted"


class RequestRecoveryUseCase(BaseUseCase):
    """Use case for emailing a password recovery code."""

    def __init__(
        self,
        user_service: UserService,
        email_sender: EmailSender,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize request recovery use case.

        Args:
            user_service: User domain service
            email_sender: Outbound email adapter
            auth_settings: Authentication settings (code lifetime)
        """
        self.user_service = user_service
        self.email_sender = email_sender
        self.auth_settings = auth_settings

    async def execute(
        self, request: RequestRecoveryRequest
    ) -> RequestRecoveryResponse:
        """Issue a recovery code and email it.

        Raises:
            ValidationError: If the email is malformed
            EmailDeliveryError: If the code could not be sent
        """
        try:
            email = Email(request.email)
        except ValueError:
            raise ValidationError("Invalid email address")

        with logfire.span("request_recovery.execute", email=email.root):
            issued = await self.user_service.issue_recovery_code(email)
            if issued is None:
                return RequestRecoveryResponse()

            user, code = issued
            await self.email_sender.send(
                to=user.email.root,
                subject=RECOVERY_SUBJECT,
                html=render_recovery_email(
                    user.username.root,
                    code,
                    self.auth_settings.recovery_code_ttl_minutes,
                ),
            )
            logfire.info("Recovery code emailed", user_id=str(user.id))
            return RequestRecoveryResponse()
