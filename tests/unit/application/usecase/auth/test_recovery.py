"""Unit tests for the password recovery use cases."""

import pytest

from scribe.adapter.email import EmailSender
from scribe.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RequestRecoveryRequest,
    RequestRecoveryUseCase,
    ResetPasswordRequest,
    ResetPasswordUseCase,
)
from scribe.application.usecase.auth.request_recovery import RECOVERY_SUBJECT
from scribe.domain.error import ValidationError
from scribe.domain.repository import UserRepository
from scribe.domain.service import UserService
from scribe.domain.value import Email, Username
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRequestRecovery:
    """Tests for RequestRecoveryUseCase."""

    @pytest.mark.asyncio
    async def test_code_is_emailed(self, unit_env):
        """The stored code is the one in the email."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user = await user_service.register(
            Username("alice"), Email("alice@example.com"), "secret"
        )
        request_recovery = await unit_env.get(RequestRecoveryUseCase)
        sender = await unit_env.get(EmailSender)
        user_repo = await unit_env.get(UserRepository)

        # Act
        response = await request_recovery.execute(
            RequestRecoveryRequest(email="alice@example.com")
        )

        # Assert
        assert response.status == "accepted"
        assert len(sender.sent) == 1
        email = sender.sent[0]
        assert email.to == "alice@example.com"
        assert email.subject == RECOVERY_SUBJECT
        saved = await user_repo.find_by_id(user.id)
        assert saved.recovery_code in email.html

    @pytest.mark.asyncio
    async def test_unknown_email_answers_the_same_and_sends_nothing(self, unit_env):
        request_recovery = await unit_env.get(RequestRecoveryUseCase)
        sender = await unit_env.get(EmailSender)

        response = await request_recovery.execute(
            RequestRecoveryRequest(email="nobody@example.com")
        )

        assert response.status == "accepted"
        assert sender.sent == []

    @pytest.mark.asyncio
    async def test_malformed_email_rejected(self, unit_env):
        request_recovery = await unit_env.get(RequestRecoveryUseCase)
        with pytest.raises(ValidationError):
            await request_recovery.execute(RequestRecoveryRequest(email="nope"))


class TestResetPassword:
    """Tests for ResetPasswordUseCase."""

    @pytest.mark.asyncio
    async def test_reset_then_login_with_new_password(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.register(
            Username("alice"), Email("alice@example.com"), "secret"
        )
        _, code = await user_service.issue_recovery_code(Email("alice@example.com"))
        reset_password = await unit_env.get(ResetPasswordUseCase)
        login = await unit_env.get(LoginUseCase)

        # Act
        response = await reset_password.execute(
            ResetPasswordRequest(
                email="alice@example.com", code=code, new_password="new-secret"
            )
        )

        # Assert
        assert response.status == "ok"
        result = await login.execute(
            LoginRequest(email="alice@example.com", password="new-secret")
        )
        assert result.user.username == "alice"
