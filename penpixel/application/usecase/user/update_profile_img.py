"""Update profile image use case."""

from pydantic import BaseModel

from penpixel.application.usecase.base import parse_uuid
from penpixel.domain.service import UserService
from penpixel.domain.value import UserId


class UpdateProfileImgRequest(BaseModel):
    """Update profile image request."""

    user_id: str  # From authenticated user
    url: str


class UpdateProfileImgResponse(BaseModel):
    """Update profile image response."""

    profile_img: str


class UpdateProfileImgUseCase:
    """Use case for pointing a user's avatar at an uploaded image."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateProfileImgRequest) -> UpdateProfileImgResponse:
        user = await self.user_service.update_profile_img(
            UserId(parse_uuid(request.user_id, "User")), request.url
        )
        return UpdateProfileImgResponse(profile_img=user.profile_img or request.url)
