"""List published blogs use case."""

import logfire
from pydantic import BaseModel, Field

from penpixel.application.usecase.base import parse_uuid
from penpixel.application.usecase.common import (
    BlogSummary,
    CountResponse,
    load_authors,
)
from penpixel.config import PaginationSettings
from penpixel.domain.repository import BlogQuery
from penpixel.domain.service import BlogService, UserService
from penpixel.domain.value import BlogSortOrder, Slug, UserId


class ListBlogsRequest(BaseModel):
    """List blogs request.

    At most one of tag, query or author_id filters the listing.
    """

    sort: BlogSortOrder = BlogSortOrder.LATEST
    page: int = Field(default=1, ge=1)
    tag: str | None = None
    query: str | None = None  # Case-insensitive title search
    author_id: str | None = None
    exclude_slug: str | None = None  # Only applies to tag searches
    limit: int | None = Field(default=None, ge=1, le=100)


class ListBlogsResponse(BaseModel):
    """List blogs response."""

    blogs: list[BlogSummary]


def build_query(request: ListBlogsRequest) -> BlogQuery | None:
    """Translate request filters into a repository query."""
    if not (request.tag or request.query or request.author_id):
        return None

    author_id = (
        UserId(parse_uuid(request.author_id, "User")) if request.author_id else None
    )
    exclude_slug = None
    if request.exclude_slug:
        try:
            exclude_slug = Slug(request.exclude_slug)
        except ValueError:
            exclude_slug = None
    return BlogQuery(
        tag=request.tag,
        title_query=request.query,
        author_id=author_id,
        exclude_slug=exclude_slug,
    )


class ListBlogsUseCase:
    """Use case for the home feed, trending list and blog search."""

    def __init__(
        self,
        blog_service: BlogService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list blogs use case.

        Args:
            blog_service: Blog domain service
            user_service: User domain service for author summaries
            pagination: Page size settings
        """
        self.blog_service = blog_service
        self.user_service = user_service
        self.pagination = pagination

    async def execute(self, request: ListBlogsRequest) -> ListBlogsResponse:
        """Execute list blogs flow.

        Trending is a single short list; latest and searches are paginated.
        """
        with logfire.span("list_blogs.execute", sort=request.sort.value, page=request.page):
            if request.sort == BlogSortOrder.TRENDING:
                limit = request.limit or self.pagination.trending_size
                page = 1
            else:
                limit = request.limit or self.pagination.blogs_page_size
                page = request.page

            blogs = await self.blog_service.list_published(
                build_query(request), sort=request.sort, page=page, limit=limit
            )
            authors = await load_authors(self.user_service, [b.author_id for b in blogs])

            return ListBlogsResponse(
                blogs=[BlogSummary.from_blog(b, authors.get(b.author_id)) for b in blogs]
            )


class CountBlogsUseCase:
    """Use case for the total behind a published blog listing."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: ListBlogsRequest) -> CountResponse:
        total = await self.blog_service.count_published(build_query(request))
        return CountResponse(total_docs=total)
