"""User profile routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, Field

from penpixel.application.usecase.user import (
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
    UpdateProfileImgRequest,
    UpdateProfileImgResponse,
    UpdateProfileImgUseCase,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from penpixel.domain.error import ConflictError, NotFoundError, ValidationError
from penpixel.domain.service import JWTService
from penpixel.interface.api.security import require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the profile."""

    username: str
    bio: str = ""
    social_links: dict[str, str] = Field(default_factory=dict)
    fullname: str | None = None


class UpdateProfileImgAPIRequest(BaseModel):
    """API request for changing the profile image."""

    url: str = Field(min_length=1)


@router.get("/search", response_model=SearchUsersResponse)
async def search_users(
    query: str,
    search_users_use_case: FromDishka[SearchUsersUseCase],
) -> SearchUsersResponse:
    """Search users by username (case insensitive)."""
    return await search_users_use_case.execute(SearchUsersRequest(query=query))


@router.patch("/me", response_model=UpdateProfileResponse)
async def update_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateProfileResponse:
    """Update the authenticated user's profile.

    Raises:
        HTTPException: 401 if not authenticated, 400 on invalid fields,
            409 if the username is taken
    """
    user_id = require_user_id(jwt_service, authorization, "update profile")

    try:
        return await update_profile_use_case.execute(
            UpdateProfileRequest(
                user_id=user_id,
                username=request.username,
                bio=request.bio,
                social_links=request.social_links,
                fullname=request.fullname,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ConflictError as e:
        logfire.warn("Profile update failed - username taken", error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/me/profile-img", response_model=UpdateProfileImgResponse)
async def update_profile_img(
    request: UpdateProfileImgAPIRequest,
    update_profile_img_use_case: FromDishka[UpdateProfileImgUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateProfileImgResponse:
    """Point the authenticated user's avatar at an uploaded image."""
    user_id = require_user_id(jwt_service, authorization, "update profile image")

    try:
        return await update_profile_img_use_case.execute(
            UpdateProfileImgRequest(user_id=user_id, url=request.url)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{username}", response_model=ProfileResponse)
async def get_profile(
    username: str,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ProfileResponse:
    """Get a user's public profile by username.

    Raises:
        HTTPException: 404 if the user does not exist
    """
    try:
        return await get_profile_use_case.execute(GetProfileRequest(username=username))
    except NotFoundError as e:
        logfire.warn("Profile not found", username=username)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
