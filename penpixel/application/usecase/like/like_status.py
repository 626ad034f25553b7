"""Like status use case."""

from pydantic import BaseModel

from penpixel.application.usecase.base import parse_uuid
from penpixel.application.usecase.blog.get_blog import parse_slug
from penpixel.domain.error import NotFoundError
from penpixel.domain.service import BlogService, NotificationService
from penpixel.domain.value import UserId


class LikeStatusRequest(BaseModel):
    """Like status request."""

    blog_id: str  # Public slug
    user_id: str  # From authenticated user


class LikeStatusResponse(BaseModel):
    """Like status response."""

    liked_by_user: bool


class LikeStatusUseCase:
    """Use case for checking whether the user likes a blog."""

    def __init__(
        self, blog_service: BlogService, notification_service: NotificationService
    ) -> None:
        self.blog_service = blog_service
        self.notification_service = notification_service

    async def execute(self, request: LikeStatusRequest) -> LikeStatusResponse:
        blog = await self.blog_service.get_blog_by_slug(parse_slug(request.blog_id))
        if not blog:
            raise NotFoundError("Blog", request.blog_id)

        liked = await self.notification_service.is_liked(
            UserId(parse_uuid(request.user_id, "User")), blog.id
        )
        return LikeStatusResponse(liked_by_user=liked)
