"""Author dashboard blogs use case."""

from pydantic import BaseModel, Field

from penpixel.application.usecase.base import parse_uuid
from penpixel.application.usecase.common import AuthorSummary, BlogSummary
from penpixel.config import PaginationSettings
from penpixel.domain.error import NotFoundError
from penpixel.domain.service import BlogService, UserService
from penpixel.domain.value import UserId


class UserBlogsRequest(BaseModel):
    """Author dashboard request."""

    user_id: str  # From authenticated user
    draft: bool = False
    query: str = ""
    page: int = Field(default=1, ge=1)
    deleted_count: int = Field(default=0, ge=0)


class UserBlogsResponse(BaseModel):
    """Author dashboard response."""

    blogs: list[BlogSummary]
    total_docs: int


class UserBlogsUseCase:
    """Use case for listing the authenticated user's published blogs or drafts."""

    def __init__(
        self,
        blog_service: BlogService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize user blogs use case.

        Args:
            blog_service: Blog domain service
            user_service: User domain service
            pagination: Page size settings
        """
        self.blog_service = blog_service
        self.user_service = user_service
        self.pagination = pagination

    async def execute(self, request: UserBlogsRequest) -> UserBlogsResponse:
        """Execute user blogs flow.

        deleted_count is the number of blogs the client removed from the
        pages it already shows.
        """
        author_id = UserId(parse_uuid(request.user_id, "User"))
        try:
            author: AuthorSummary | None = AuthorSummary.from_user(
                await self.user_service.get_by_id(author_id)
            )
        except NotFoundError:
            author = None

        blogs = await self.blog_service.list_by_author(
            author_id,
            draft=request.draft,
            title_query=request.query,
            page=request.page,
            limit=self.pagination.blogs_page_size,
            deleted_count=request.deleted_count,
        )
        total = await self.blog_service.count_by_author(
            author_id, draft=request.draft, title_query=request.query
        )
        return UserBlogsResponse(
            blogs=[BlogSummary.from_blog(b, author) for b in blogs], total_docs=total
        )
