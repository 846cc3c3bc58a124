"""Unit tests for LoginUseCase."""

import pytest

from scribe.application.usecase.auth import LoginRequest, LoginUseCase
from scribe.application.usecase.user import CreateUserRequest, CreateUserUseCase
from scribe.domain.error import AuthenticationError, CredentialFailure
from scribe.domain.service import JWTService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def sign_up(unit_env) -> str:
    create_user = await unit_env.get(CreateUserUseCase)
    profile = await create_user.execute(
        CreateUserRequest(username="alice", email="alice@example.com", password="secret")
    )
    return profile.user_id


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_token_for_user(self, unit_env):
        """The token's subject is the user's id."""
        # Arrange
        user_id = await sign_up(unit_env)
        login = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await login.execute(
            LoginRequest(email="alice@example.com", password="secret")
        )

        # Assert
        assert response.token_type == "bearer"
        assert response.user.user_id == user_id
        assert response.user.email == "alice@example.com"
        identity = jwt_service.identify(response.token)
        assert str(identity.user_id) == user_id

    @pytest.mark.asyncio
    async def test_email_is_case_insensitive(self, unit_env):
        user_id = await sign_up(unit_env)
        login = await unit_env.get(LoginUseCase)

        response = await login.execute(
            LoginRequest(email="ALICE@example.com", password="secret")
        )

        assert response.user.user_id == user_id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password",
        [
            ("alice@example.com", "wrong"),
            ("nobody@example.com", "secret"),
            ("not-an-email", "secret"),
        ],
    )
    async def test_bad_credentials_are_invalid_credential(
        self, unit_env, email, password
    ):
        """Unknown, wrong and malformed credentials all fail the same way."""
        # Arrange
        await sign_up(unit_env)
        login = await unit_env.get(LoginUseCase)

        # Act
        with pytest.raises(AuthenticationError) as exc_info:
            await login.execute(LoginRequest(email=email, password=password))

        # Assert
        assert exc_info.value.kind == CredentialFailure.INVALID
