"""Reset password use case."""

from pydantic import BaseModel, Field

from scribe.application.usecase.base import BaseUseCase
from scribe.domain.error import ValidationError
from scribe.domain.service import UserService
from scribe.domain.value import Email


class ResetPasswordRequest(BaseModel):
    """Reset password request."""

    email: str
    code: str = Field(min_length=6, max_length=6)
    new_password: str = Field(min_length=6, max_length=72)


class ResetPasswordResponse(BaseModel):
    """Reset password response."""

    status: str = "ok"


class ResetPasswordUseCase(BaseUseCase):
    """Use case for setting a new password with a recovery code."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ResetPasswordRequest) -> ResetPasswordResponse:
        """Check the code and replace the password.

        Raises:
            ValidationError: If the email is malformed, or the code is wrong
                or expired
        """
        try:
            email = Email(request.email)
        except ValueError:
            raise ValidationError("Invalid email address")

        await self.user_service.reset_password(
            email, request.code, request.new_password
        )
        return ResetPasswordResponse()
