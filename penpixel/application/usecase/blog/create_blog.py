"""Create blog use case."""

from typing import Any

from pydantic import BaseModel, Field

from penpixel.application.usecase.base import parse_uuid
from penpixel.domain.service import BlogService
from penpixel.domain.value import UserId


class CreateBlogRequest(BaseModel):
    """Create blog request."""

    author_id: str  # From authenticated user
    title: str
    description: str = ""
    banner: str = ""
    content: dict[str, Any] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    draft: bool = False


class CreateBlogResponse(BaseModel):
    """Create blog response."""

    blog_id: str  # Public slug


class CreateBlogUseCase:
    """Use case for publishing a blog or saving a draft."""

    def __init__(self, blog_service: BlogService) -> None:
        """Initialize create blog use case.

        Args:
            blog_service: Blog domain service
        """
        self.blog_service = blog_service

    async def execute(self, request: CreateBlogRequest) -> CreateBlogResponse:
        """Execute create blog flow.

        Raises:
            ValidationError: If the blog is incomplete
        """
        blog = await self.blog_service.create_blog(
            author_id=UserId(parse_uuid(request.author_id, "User")),
            title=request.title,
            description=request.description,
            banner=request.banner,
            content=request.content,
            tags=request.tags,
            draft=request.draft,
        )
        return CreateBlogResponse(blog_id=str(blog.slug))
