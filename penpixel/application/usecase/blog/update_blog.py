"""Update blog use case."""

from typing import Any

from pydantic import BaseModel, Field

from penpixel.application.usecase.base import parse_uuid
from penpixel.application.usecase.blog.get_blog import parse_slug
from penpixel.domain.service import BlogService
from penpixel.domain.value import UserId


class UpdateBlogRequest(BaseModel):
    """Update blog request."""

    blog_id: str  # Public slug
    user_id: str  # From authenticated user
    title: str
    description: str = ""
    banner: str = ""
    content: dict[str, Any] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    draft: bool = False


class UpdateBlogResponse(BaseModel):
    """Update blog response."""

    blog_id: str


class UpdateBlogUseCase:
    """Use case for editing a blog. Only the author may edit."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: UpdateBlogRequest) -> UpdateBlogResponse:
        """Execute update blog flow.

        Raises:
            NotFoundError: If the blog does not exist
            NotAuthorizedError: If the user is not the author
            ValidationError: If the blog is incomplete
        """
        blog = await self.blog_service.update_blog(
            parse_slug(request.blog_id),
            requester_id=UserId(parse_uuid(request.user_id, "User")),
            title=request.title,
            description=request.description,
            banner=request.banner,
            content=request.content,
            tags=request.tags,
            draft=request.draft,
        )
        return UpdateBlogResponse(blog_id=str(blog.slug))
