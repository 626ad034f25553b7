"""Delete blog use case."""

from pydantic import BaseModel

from penpixel.application.usecase.base import BaseUseCase, parse_uuid
from penpixel.application.usecase.blog.get_blog import parse_slug
from penpixel.domain.service import BlogService
from penpixel.domain.value import UserId


class DeleteBlogRequest(BaseModel):
    """Delete blog request."""

    blog_id: str  # Public slug
    user_id: str  # From authenticated user


class DeleteBlogResponse(BaseModel):
    """Delete blog response."""

    status: str


class DeleteBlogUseCase(BaseUseCase):
    """Use case for deleting a blog with its comments and notifications."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: DeleteBlogRequest) -> DeleteBlogResponse:
        """Execute delete blog flow.

        Raises:
            NotFoundError: If the blog does not exist
            NotAuthorizedError: If the user is not the author
        """
        await self.blog_service.delete_blog(
            parse_slug(request.blog_id), UserId(parse_uuid(request.user_id, "User"))
        )
        return DeleteBlogResponse(status="Done")
