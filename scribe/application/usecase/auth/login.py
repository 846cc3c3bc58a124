"""Login use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.views import ProfileView
from scribe.domain.error import AuthenticationError, CredentialFailure
from scribe.domain.service import JWTService, UserService
from scribe.domain.value import Email


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: ProfileView


class LoginUseCase(BaseUseCase):
    """Use case for email/password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Check the email and password against the stored account
        2. Issue a token whose subject is the user's id

        Args:
            request: Login request

        Returns:
            Token, its expiry and the user's profile

        Raises:
            AuthenticationError: If the credentials do not match
        """
        with logfire.span("login.execute"):
            try:
                email = Email(request.email)
            except ValueError:
                # A malformed address cannot belong to any account
                raise AuthenticationError(
                    CredentialFailure.INVALID, "Invalid email or password"
                )

            user = await self.user_service.authenticate(email, request.password)
            token, expires_at = self.jwt_service.create_token(user.id)

            return LoginResponse(
                token=token,
                expires_at=expires_at,
                user=ProfileView.from_domain(user),
            )
