"""Unit tests for the email and password auth use cases."""

import pytest

from penpixel.application.usecase.auth import (
    ChangePasswordRequest,
    ChangePasswordUseCase,
    SigninRequest,
    SigninUseCase,
    SignupRequest,
    SignupUseCase,
)
from penpixel.domain.error import AuthenticationError, ConflictError
from penpixel.domain.service import JWTService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

SIGNUP = SignupRequest(fullname="Grace Hopper", email="grace@example.com", password="Cobol1959")


class TestSignupUseCase:
    """Tests for SignupUseCase."""

    @pytest.mark.asyncio
    async def test_signup_issues_token_for_new_user(self, unit_env):
        # Arrange
        signup = await unit_env.get(SignupUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await signup.execute(SIGNUP)

        # Assert
        assert response.username == "grace"
        assert response.fullname == "Grace Hopper"
        assert response.profile_img is None
        payload = jwt_service.verify_token(response.access_token)
        assert payload.user_id == response.user_id
        assert payload.username == "grace"

    @pytest.mark.asyncio
    async def test_signup_twice_conflicts(self, unit_env):
        # Arrange
        signup = await unit_env.get(SignupUseCase)
        await signup.execute(SIGNUP)

        # Act & Assert
        with pytest.raises(ConflictError):
            await signup.execute(SIGNUP)


class TestSigninUseCase:
    """Tests for SigninUseCase and ChangePasswordUseCase."""

    @pytest.mark.asyncio
    async def test_signin_returns_same_user(self, unit_env):
        # Arrange
        signup = await unit_env.get(SignupUseCase)
        signin = await unit_env.get(SigninUseCase)
        registered = await signup.execute(SIGNUP)

        # Act
        response = await signin.execute(
            SigninRequest(email="grace@example.com", password="Cobol1959")
        )

        # Assert
        assert response.user_id == registered.user_id
        assert response.access_token

    @pytest.mark.asyncio
    async def test_signin_with_wrong_password(self, unit_env):
        # Arrange
        signup = await unit_env.get(SignupUseCase)
        signin = await unit_env.get(SigninUseCase)
        await signup.execute(SIGNUP)

        # Act & Assert
        with pytest.raises(AuthenticationError):
            await signin.execute(SigninRequest(email="grace@example.com", password="Wrong1234"))

    @pytest.mark.asyncio
    async def test_change_password_then_signin(self, unit_env):
        # Arrange
        signup = await unit_env.get(SignupUseCase)
        signin = await unit_env.get(SigninUseCase)
        change_password = await unit_env.get(ChangePasswordUseCase)
        registered = await signup.execute(SIGNUP)

        # Act
        await change_password.execute(
            ChangePasswordRequest(
                user_id=registered.user_id,
                current_password="Cobol1959",
                new_password="Fortran57",
            )
        )

        # Assert
        response = await signin.execute(
            SigninRequest(email="grace@example.com", password="Fortran57")
        )
        assert response.user_id == registered.user_id
