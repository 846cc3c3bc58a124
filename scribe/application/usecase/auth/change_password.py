"""Change password use case."""

from pydantic import BaseModel, Field

from scribe.application.usecase.base import BaseUseCase
from scribe.domain.service import UserService
from scribe.domain.value import UserId, parse_identifier


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: str  # User ID from authenticated user
    current_password: str
    new_password: str = Field(min_length=6, max_length=72)


class ChangePasswordResponse(BaseModel):
    """Change password response."""

    status: str = "ok"


class ChangePasswordUseCase(BaseUseCase):
    """Use case for an authenticated password change."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ChangePasswordRequest) -> ChangePasswordResponse:
        """Replace the caller's password.

        Raises:
            NotFoundError: If the user no longer exists
            ValidationError: If the current password is wrong
        """
        await self.user_service.change_password(
            UserId(parse_identifier(request.user_id)),
            request.current_password,
            request.new_password,
        )
        return ChangePasswordResponse()
