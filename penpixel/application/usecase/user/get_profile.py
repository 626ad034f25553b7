"""Get user profile use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from penpixel.domain.error import NotFoundError
from penpixel.domain.service import UserService


class GetProfileRequest(BaseModel):
    """Get profile request."""

    username: str


class ProfileResponse(BaseModel):
    """Public profile of a user (never includes the password hash)."""

    user_id: str
    fullname: str
    username: str
    bio: str
    profile_img: str | None
    social_links: dict[str, str]
    total_posts: int
    total_reads: int
    joined_at: datetime


class GetProfileUseCase:
    """Use case for reading a user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        """Look up a profile by username.

        Raises:
            NotFoundError: If no user has this username
        """
        with logfire.span("get_profile.execute", username=request.username):
            user = await self.user_service.get_by_username(request.username)
            if not user:
                raise NotFoundError("User", request.username)

            return ProfileResponse(
                user_id=str(user.id),
                fullname=user.fullname,
                username=user.username.root,
                bio=user.bio,
                profile_img=user.profile_img,
                social_links=user.social_links,
                total_posts=user.account_info.total_posts,
                total_reads=user.account_info.total_reads,
                joined_at=user.created_at,
            )
