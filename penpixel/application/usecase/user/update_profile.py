"""Update user profile use case."""

from pydantic import BaseModel, Field

from penpixel.application.usecase.base import parse_uuid
from penpixel.domain.service import UserService
from penpixel.domain.value import UserId


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    user_id: str  # From authenticated user
    username: str
    bio: str = ""
    social_links: dict[str, str] = Field(default_factory=dict)
    fullname: str | None = None


class UpdateProfileResponse(BaseModel):
    """Update profile response."""

    username: str


class UpdateProfileUseCase:
    """Use case for updating a user's profile.

    Users can change their username, bio, fullname and social links.
    Email and counters cannot be changed through this endpoint.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute update profile flow.

        Raises:
            ValidationError: If a field is invalid
            ConflictError: If the username is taken
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.update_profile(
            UserId(parse_uuid(request.user_id, "User")),
            username=request.username,
            bio=request.bio,
            social_links=request.social_links,
            fullname=request.fullname,
        )
        return UpdateProfileResponse(username=user.username.root)
