"""Get user use cases."""

from pydantic import BaseModel

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.views import ProfileView, UserView
from scribe.domain.service import UserService
from scribe.domain.value import UserId, parse_identifier


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: str  # UUID string


class GetUserUseCase(BaseUseCase):
    """Use case for reading a user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserView:
        """Load a public profile.

        Raises:
            InvalidIdentifierError: If the id is not a UUID
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(
            UserId(parse_identifier(request.user_id))
        )
        return UserView.from_domain(user)


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for reading the authenticated user's own profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> ProfileView:
        """Load the caller's profile, email included.

        Raises:
            NotFoundError: If the token's user no longer exists
        """
        user = await self.user_service.get_by_id(
            UserId(parse_identifier(request.user_id))
        )
        return ProfileView.from_domain(user)
