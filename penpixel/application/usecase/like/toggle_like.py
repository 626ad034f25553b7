"""Toggle like use case."""

import logfire
from pydantic import BaseModel

from penpixel.application.usecase.base import parse_uuid
from penpixel.application.usecase.blog.get_blog import parse_slug
from penpixel.domain.error import NotFoundError, ValidationError
from penpixel.domain.service import BlogService, NotificationService
from penpixel.domain.value import UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    blog_id: str  # Public slug
    user_id: str  # From authenticated user


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    liked_by_user: bool


class ToggleLikeUseCase:
    """Use case for liking or unliking a blog.

    The current state is decided by storage, never by the client.
    """

    def __init__(
        self, blog_service: BlogService, notification_service: NotificationService
    ) -> None:
        """Initialize toggle like use case.

        Args:
            blog_service: Blog domain service
            notification_service: Notification service that records likes
        """
        self.blog_service = blog_service
        self.notification_service = notification_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Raises:
            NotFoundError: If the blog does not exist
            ValidationError: If the blog is a draft
        """
        with logfire.span("toggle_like.execute", blog_id=request.blog_id):
            blog = await self.blog_service.get_blog_by_slug(parse_slug(request.blog_id))
            if not blog:
                raise NotFoundError("Blog", request.blog_id)
            if blog.draft:
                raise ValidationError("You can't like a draft")

            liked = await self.notification_service.record_like(
                blog.id,
                blog_author_id=blog.author_id,
                liker_id=UserId(parse_uuid(request.user_id, "User")),
            )
            return ToggleLikeResponse(liked_by_user=liked)
