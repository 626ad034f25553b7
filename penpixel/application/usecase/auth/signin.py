"""Signin use case."""

import logfire
from pydantic import BaseModel

from penpixel.domain.service import JWTService, UserService

from .signup import AuthResponse


class SigninRequest(BaseModel):
    """Signin request."""

    email: str
    password: str


class SigninUseCase:
    """Use case for signing in with email and password."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize signin use case.

        Args:
            user_service: User domain service
            jwt_service: JWT service for issuing the access token
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: SigninRequest) -> AuthResponse:
        """Check credentials and issue an access token.

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        with logfire.span("signin.execute", email=request.email):
            user = await self.user_service.authenticate(request.email, request.password)
            return AuthResponse.issue(user, self.jwt_service)
