"""Get blog use case."""

from datetime import datetime
from typing import Any, Literal

import logfire
from pydantic import BaseModel, ValidationError as PydanticValidationError

from penpixel.application.usecase.base import parse_uuid
from penpixel.application.usecase.common import ActivityItem, AuthorSummary
from penpixel.domain.error import NotFoundError
from penpixel.domain.service import BlogService, UserService
from penpixel.domain.value import Slug, UserId


def parse_slug(value: str) -> Slug:
    """Parse a blog id from the URL.

    Raises:
        NotFoundError: If value cannot be a slug
    """
    try:
        return Slug(value)
    except PydanticValidationError:
        raise NotFoundError("Blog", value)


class GetBlogRequest(BaseModel):
    """Get blog request."""

    blog_id: str  # Public slug
    viewer_id: str | None = None  # Authenticated viewer, if any
    draft: bool = False
    mode: Literal["read", "edit"] = "read"


class BlogDetail(BaseModel):
    """Full blog with content and author."""

    blog_id: str
    title: str
    description: str
    banner: str
    content: dict[str, Any]
    tags: list[str]
    draft: bool
    activity: ActivityItem
    published_at: datetime
    author: AuthorSummary | None


class GetBlogResponse(BaseModel):
    """Get blog response."""

    blog: BlogDetail


class GetBlogUseCase:
    """Use case for opening a blog in the reader or in the editor."""

    def __init__(self, blog_service: BlogService, user_service: UserService) -> None:
        """Initialize get blog use case.

        Args:
            blog_service: Blog domain service
            user_service: User domain service for the author summary
        """
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: GetBlogRequest) -> GetBlogResponse:
        """Execute get blog flow.

        Reading counts a view; opening in the editor does not.

        Raises:
            NotFoundError: If the blog does not exist
            NotAuthorizedError: If a draft is requested by someone other
                than its author
        """
        with logfire.span("get_blog.execute", blog_id=request.blog_id, mode=request.mode):
            viewer_id = (
                UserId(parse_uuid(request.viewer_id, "User")) if request.viewer_id else None
            )
            blog = await self.blog_service.get_blog(
                parse_slug(request.blog_id),
                viewer_id=viewer_id,
                draft=request.draft,
                count_read=request.mode != "edit",
            )

            try:
                author = AuthorSummary.from_user(
                    await self.user_service.get_by_id(blog.author_id)
                )
            except NotFoundError:
                author = None

            return GetBlogResponse(
                blog=BlogDetail(
                    blog_id=str(blog.slug),
                    title=blog.title,
                    description=blog.description,
                    banner=blog.banner,
                    content=blog.content,
                    tags=blog.tags,
                    draft=blog.draft,
                    activity=ActivityItem(**blog.activity.model_dump()),
                    published_at=blog.published_at,
                    author=author,
                )
            )
