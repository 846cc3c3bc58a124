"""JWT token domain service."""

from datetime import datetime
from uuid import UUID

import logfire

from scribe.config import AuthSettings
from scribe.domain.error import AuthenticationError, CredentialFailure
from scribe.domain.value import Identity, UserId
from scribe.util.jwt import JWTError, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: UserId, now: datetime | None = None
    ) -> tuple[str, datetime]:
        """Create JWT token for user.

        Args:
            user_id: User ID the token asserts
            now: Issuance instant (defaults to the current time)

        Returns:
            JWT token string and its expiry
        """
        with logfire.span("jwt_service.create_token", user_id=str(user_id)):
            token, expires_at = create_token(str(user_id), self.auth_settings, now)
            logfire.info("JWT token created", user_id=str(user_id))
            return token, expires_at

    def identify(self, token: str) -> Identity:
        """Verify a token and build the caller's identity.

        Args:
            token: JWT token string

        Returns:
            Identity of the token's subject

        Raises:
            AuthenticationError: If the token is invalid, expired, or its
                subject is not a user id
        """
        with logfire.span("jwt_service.identify"):
            try:
                payload = verify_token(token, self.auth_settings)
                user_id = UserId(UUID(payload.sub))
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise AuthenticationError(CredentialFailure.INVALID, str(e))
            except ValueError:
                logfire.warn("JWT token has a malformed subject")
                raise AuthenticationError(
                    CredentialFailure.INVALID, "Token subject is not a user id"
                )

            logfire.info("JWT token verified", user_id=str(user_id))
            return Identity(user_id=user_id, expires_at=payload.exp)
