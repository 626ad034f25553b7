"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel

from penpixel.application.usecase.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ChangePasswordResponse,
    ChangePasswordUseCase,
    SigninRequest,
    SigninUseCase,
    SignupRequest,
    SignupUseCase,
)
from penpixel.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from penpixel.domain.service import JWTService
from penpixel.interface.api.security import require_user_id

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing the password."""

    current_password: str
    new_password: str


@router.post(
    "/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: SignupRequest,
    signup_use_case: FromDishka[SignupUseCase],
) -> AuthResponse:
    """Create an account with email and password.

    Returns:
        Access token and profile summary of the new user

    Raises:
        HTTPException: 400 on invalid input, 409 if the email is registered
    """
    try:
        return await signup_use_case.execute(request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ConflictError as e:
        logfire.warn("Signup failed - duplicate email", error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/signin", response_model=AuthResponse)
async def signin(
    request: SigninRequest,
    signin_use_case: FromDishka[SigninUseCase],
) -> AuthResponse:
    """Sign in with email and password.

    Raises:
        HTTPException: 401 if the email is unknown or the password is wrong
    """
    try:
        return await signin_use_case.execute(request)
    except AuthenticationError as e:
        logfire.warn("Signin failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


@router.post("/change-password", response_model=ChangePasswordResponse)
async def change_password(
    request: ChangePasswordAPIRequest,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ChangePasswordResponse:
    """Change the authenticated user's password.

    Raises:
        HTTPException: 401 if not authenticated or the current password is
            wrong, 400 if a password does not meet the rules
    """
    user_id = require_user_id(jwt_service, authorization, "change password")

    try:
        return await change_password_use_case.execute(
            ChangePasswordRequest(
                user_id=user_id,
                current_password=request.current_password,
                new_password=request.new_password,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
