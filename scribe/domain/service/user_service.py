"""User domain service."""

import secrets
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from scribe.config import AuthSettings
from scribe.domain.error import (
    AlreadyExistsError,
    AuthenticationError,
    CredentialFailure,
    NotFoundError,
    ValidationError,
)
from scribe.domain.model import User
from scribe.domain.repository import UserRepository
from scribe.domain.value import Email, UserId, Username

from .base import Service
from .password_service import PasswordService


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_service: Password hashing service
            auth_settings: Authentication settings (recovery code lifetime)
        """
        self.user_repository = user_repository
        self.password_service = password_service
        self.auth_settings = auth_settings

    async def register(self, username: Username, email: Email, password: str) -> User:
        """Create a new account.

        Args:
            username: Requested username
            email: Account email
            password: Plaintext password

        Returns:
            The created user

        Raises:
            AlreadyExistsError: If the username or email is taken
        """
        with logfire.span(
            "user_service.register", username=username.root, email=email.root
        ):
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username already taken", username=username.root)
                raise AlreadyExistsError("User", "username", username.root)
            if await self.user_repository.find_by_email(email):
                logfire.warn("Email already registered", email=email.root)
                raise AlreadyExistsError("User", "email", email.root)

            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=self.password_service.hash(password),
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info(
                "User found", user_id=str(user_id), username=user.username.root
            )
            return user

    async def list_users(self, limit: int = 50, offset: int = 0) -> list[User]:
        with logfire.span("user_service.list_users", limit=limit, offset=offset):
            return await self.user_repository.find_all(limit=limit, offset=offset)

    async def authenticate(self, email: Email, password: str) -> User:
        """Check a login attempt.

        Unknown emails and wrong passwords fail the same way.

        Raises:
            AuthenticationError: If the credentials do not match an account
        """
        with logfire.span("user_service.authenticate", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if user is None or not self.password_service.verify(
                user.password_hash, password
            ):
                logfire.warn("Login rejected", email=email.root)
                raise AuthenticationError(
                    CredentialFailure.INVALID, "Invalid email or password"
                )
            logfire.info("Login accepted", user_id=str(user.id))
            return user

    async def change_password(
        self, user_id: UserId, current_password: str, new_password: str
    ) -> None:
        """Replace a password after checking the current one.

        Raises:
            NotFoundError: If user not found
            ValidationError: If the current password is wrong
        """
        with logfire.span("user_service.change_password", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            if not self.password_service.verify(user.password_hash, current_password):
                logfire.warn("Password change rejected", user_id=str(user_id))
                raise ValidationError("Current password is incorrect")

            await self.user_repository.update_fields(
                user_id, {"password_hash": self.password_service.hash(new_password)}
            )
            logfire.info("Password changed", user_id=str(user_id))

    async def issue_recovery_code(
        self, email: Email, now: datetime | None = None
    ) -> tuple[User, str] | None:
        """Generate and store a 6-digit recovery code.

        Any previously issued code is replaced.

        Returns:
            The user and the new code, or None if no account uses the email
        """
        with logfire.span("user_service.issue_recovery_code", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if user is None:
                logfire.info("Recovery requested for unknown email", email=email.root)
                return None

            code = f"{secrets.randbelow(1_000_000):06d}"
            updated = await self.user_repository.update_fields(
                user.id,
                {
                    "recovery_code": code,
                    "recovery_code_issued_at": now or datetime.now(timezone.utc),
                },
            )
            if updated is None:
                raise NotFoundError("User", str(user.id))

            logfire.info("Recovery code issued", user_id=str(user.id))
            return updated, code

    async def reset_password(
        self,
        email: Email,
        code: str,
        new_password: str,
        now: datetime | None = None,
    ) -> User:
        """Set a new password using an emailed recovery code.

        The code must match and be younger than the configured lifetime.
        It is cleared once used.

        Raises:
            ValidationError: If the code is wrong, expired or absent
        """
        with logfire.span("user_service.reset_password", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if (
                user is None
                or user.recovery_code is None
                or user.recovery_code_issued_at is None
                or not secrets.compare_digest(user.recovery_code, code)
            ):
                logfire.warn("Recovery code rejected", email=email.root)
                raise ValidationError("Invalid or expired recovery code")

            ttl = timedelta(minutes=self.auth_settings.recovery_code_ttl_minutes)
            if (now or datetime.now(timezone.utc)) - user.recovery_code_issued_at > ttl:
                logfire.warn("Recovery code expired", user_id=str(user.id))
                raise ValidationError("Invalid or expired recovery code")

            updated = await self.user_repository.update_fields(
                user.id,
                {
                    "password_hash": self.password_service.hash(new_password),
                    "recovery_code": None,
                    "recovery_code_issued_at": None,
                },
            )
            if updated is None:
                raise NotFoundError("User", str(user.id))

            logfire.info("Password reset with recovery code", user_id=str(user.id))
            return updated

    async def set_avatar_url(self, user_id: UserId, avatar_url: str) -> User:
        """Record the public URL of a user's avatar.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.set_avatar_url", user_id=str(user_id)):
            updated = await self.user_repository.update_fields(
                user_id, {"avatar_url": avatar_url}
            )
            if updated is None:
                raise NotFoundError("User", str(user_id))
            logfire.info("Avatar updated", user_id=str(user_id))
            return updated
