"""Create user use case."""

import logfire
from pydantic import BaseModel, Field

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.views import ProfileView
from scribe.domain.error import ValidationError
from scribe.domain.service import UserService
from scribe.domain.value import Email, Username


class CreateUserRequest(BaseModel):
    """Create user request."""

    username: str
    email: str
    password: str = Field(min_length=6, max_length=72)


class CreateUserUseCase(BaseUseCase):
    """Use case for registering a new account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> ProfileView:
        """Execute registration.

        Args:
            request: Create user request

        Returns:
            Profile of the new user

        Raises:
            ValidationError: If the username or email is malformed
            AlreadyExistsError: If the username or email is taken
        """
        try:
            username = Username(request.username)
            email = Email(request.email)
        except ValueError as e:
            raise ValidationError(str(e))

        with logfire.span("create_user.execute", username=username.root):
            user = await self.user_service.register(username, email, request.password)
            return ProfileView.from_domain(user)
