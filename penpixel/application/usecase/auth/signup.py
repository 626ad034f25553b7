"""Signup use case."""

import logfire
from pydantic import BaseModel, Field

from penpixel.domain.model import User
from penpixel.domain.service import JWTService, UserService


class SignupRequest(BaseModel):
    """Signup request."""

    fullname: str
    email: str = Field(max_length=254)
    password: str


class AuthResponse(BaseModel):
    """Session returned after signup or signin."""

    access_token: str
    user_id: str
    username: str
    fullname: str
    profile_img: str | None

    @classmethod
    def issue(cls, user: User, jwt_service: JWTService) -> "AuthResponse":
        return cls(
            access_token=jwt_service.create_token(str(user.id), user.username.root),
            user_id=str(user.id),
            username=user.username.root,
            fullname=user.fullname,
            profile_img=user.profile_img,
        )


class SignupUseCase:
    """Use case for creating an account with email and password."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize signup use case.

        Args:
            user_service: User domain service
            jwt_service: JWT service for issuing the access token
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignupRequest) -> AuthResponse:
        """Execute signup flow.

        Steps:
        1. Validate fields and register the user (via UserService)
        2. Issue an access token

        Raises:
            ValidationError: If a field is invalid
            ConflictError: If the email is already registered
        """
        with logfire.span("signup.execute", email=request.email):
            user = await self.user_service.register(
                fullname=request.fullname,
                email=request.email,
                password=request.password,
            )
            return AuthResponse.issue(user, self.jwt_service)
