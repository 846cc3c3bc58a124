"""Unit tests for UserService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from scribe.domain.error import (
    AlreadyExistsError,
    AuthenticationError,
    CredentialFailure,
    NotFoundError,
    ValidationError,
)
from scribe.domain.repository import UserRepository
from scribe.domain.service import UserService
from scribe.domain.value import Email, UserId, Username
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def register_alice(user_service: UserService):
    return await user_service.register(
        Username("alice"), Email("alice@example.com"), "secret"
    )


class TestRegister:
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_stores_hashed_password(self, unit_env):
        """Registering should persist the user with a bcrypt digest."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await register_alice(user_service)

        # Assert
        saved = await user_repo.find_by_id(user.id)
        assert saved.username.root == "alice"
        assert saved.password_hash != "secret"
        assert saved.password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, unit_env):
        """Usernames are unique."""
        # Arrange
        user_service = await unit_env.get(UserService)
        await register_alice(user_service)

        # Act & Assert
        with pytest.raises(AlreadyExistsError, match="username"):
            await user_service.register(
                Username("alice"), Email("other@example.com"), "secret"
            )

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected_case_insensitively(self, unit_env):
        """Emails are unique after lowercasing."""
        # Arrange
        user_service = await unit_env.get(UserService)
        await register_alice(user_service)

        # Act & Assert
        with pytest.raises(AlreadyExistsError, match="email"):
            await user_service.register(
                Username("alice2"), Email("Alice@Example.com"), "secret"
            )


class TestAuthenticate:
    """Tests for authenticate."""

    @pytest.mark.asyncio
    async def test_correct_password_accepted(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await register_alice(user_service)

        authenticated = await user_service.authenticate(
            Email("alice@example.com"), "secret"
        )

        assert authenticated.id == user.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_fail_alike(self, unit_env):
        """Both failures are invalid_credential with the same message."""
        # Arrange
        user_service = await unit_env.get(UserService)
        await register_alice(user_service)

        # Act
        with pytest.raises(AuthenticationError) as wrong_password:
            await user_service.authenticate(Email("alice@example.com"), "nope")
        with pytest.raises(AuthenticationError) as unknown_email:
            await user_service.authenticate(Email("bob@example.com"), "secret")

        # Assert
        assert wrong_password.value.kind == CredentialFailure.INVALID
        assert unknown_email.value.kind == CredentialFailure.INVALID
        assert str(wrong_password.value) == str(unknown_email.value)


class TestGetById:
    """Tests for get_by_id."""

    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)
        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))


class TestChangePassword:
    """Tests for change_password."""

    @pytest.mark.asyncio
    async def test_change_password(self, unit_env):
        """The new password works and the old one stops working."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user = await register_alice(user_service)

        # Act
        await user_service.change_password(user.id, "secret", "better-secret")

        # Assert
        await user_service.authenticate(Email("alice@example.com"), "better-secret")
        with pytest.raises(AuthenticationError):
            await user_service.authenticate(Email("alice@example.com"), "secret")

    @pytest.mark.asyncio
    async def test_wrong_current_password_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await register_alice(user_service)

        with pytest.raises(ValidationError, match="Current password"):
            await user_service.change_password(user.id, "wrong", "better-secret")


class TestPasswordRecovery:
    """Tests for issue_recovery_code and reset_password."""

    @pytest.mark.asyncio
    async def test_code_is_six_digits_and_stored(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await register_alice(user_service)

        # Act
        user, code = await user_service.issue_recovery_code(Email("alice@example.com"))

        # Assert
        assert len(code) == 6 and code.isdigit()
        saved = await user_repo.find_by_id(user.id)
        assert saved.recovery_code == code
        assert saved.recovery_code_issued_at is not None

    @pytest.mark.asyncio
    async def test_unknown_email_gets_no_code(self, unit_env):
        user_service = await unit_env.get(UserService)
        assert await user_service.issue_recovery_code(Email("bob@example.com")) is None

    @pytest.mark.asyncio
    async def test_reset_with_valid_code(self, unit_env):
        """A fresh code resets the password and is cleared on use."""
        # Arrange
        user_service = await unit_env.get(UserService)
        await register_alice(user_service)
        email = Email("alice@example.com")
        _, code = await user_service.issue_recovery_code(email)

        # Act
        user = await user_service.reset_password(email, code, "new-secret")

        # Assert
        assert user.recovery_code is None
        assert user.recovery_code_issued_at is None
        await user_service.authenticate(email, "new-secret")
        with pytest.raises(ValidationError):
            await user_service.reset_password(email, code, "third-secret")

    @pytest.mark.asyncio
    async def test_wrong_code_rejected(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        await register_alice(user_service)
        email = Email("alice@example.com")
        _, code = await user_service.issue_recovery_code(email)
        wrong = "000000" if code != "000000" else "111111"

        # Act & Assert
        with pytest.raises(ValidationError, match="recovery code"):
            await user_service.reset_password(email, wrong, "new-secret")

    @pytest.mark.asyncio
    async def test_expired_code_rejected(self, unit_env):
        """Codes older than recovery_code_ttl_minutes are refused."""
        # Arrange
        user_service = await unit_env.get(UserService)
        await register_alice(user_service)
        email = Email("alice@example.com")
        issued = datetime.now(timezone.utc) - timedelta(hours=2)
        _, code = await user_service.issue_recovery_code(email, now=issued)

        # Act & Assert
        with pytest.raises(ValidationError, match="expired"):
            await user_service.reset_password(email, code, "new-secret")
