"""Get comments use cases."""

from pydantic import BaseModel, Field

from penpixel.application.usecase.base import parse_uuid
from penpixel.application.usecase.blog.get_blog import parse_slug
from penpixel.application.usecase.comment.common import CommentItem
from penpixel.application.usecase.common import load_authors
from penpixel.config import PaginationSettings
from penpixel.domain.error import NotFoundError
from penpixel.domain.model import Comment
from penpixel.domain.service import BlogService, CommentService, UserService
from penpixel.domain.value import CommentId


class GetCommentsRequest(BaseModel):
    """Get blog comments request."""

    blog_id: str  # Public slug
    skip: int = Field(default=0, ge=0)


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: str
    skip: int = Field(default=0, ge=0)


class GetCommentsResponse(BaseModel):
    """Page of comments, newest first."""

    comments: list[CommentItem]


class GetCommentsUseCase:
    """Use case for loading a blog's root comments and a comment's replies.

    Pages are addressed by skip so that clients can keep comments they
    added locally without shifting the next page.
    """

    def __init__(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            blog_service: Blog domain service
            user_service: User domain service for commenter summaries
            pagination: Page size settings
        """
        self.comment_service = comment_service
        self.blog_service = blog_service
        self.user_service = user_service
        self.pagination = pagination

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Get a page of root comments of a blog.

        Raises:
            NotFoundError: If the blog does not exist
        """
        blog = await self.blog_service.get_blog_by_slug(parse_slug(request.blog_id))
        if not blog:
            raise NotFoundError("Blog", request.blog_id)

        comments = await self.comment_service.list_blog_comments(
            blog.id, skip=request.skip, limit=self.pagination.comments_page_size
        )
        return await self._respond(comments, str(blog.slug))

    async def replies(self, request: GetRepliesRequest) -> GetCommentsResponse:
        """Get a page of replies to a comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "Comment"))
        replies = await self.comment_service.list_replies(
            comment_id, skip=request.skip, limit=self.pagination.comments_page_size
        )
        if not replies:
            return GetCommentsResponse(comments=[])

        blog = await self.blog_service.get_blog_by_id(replies[0].blog_id)
        return await self._respond(replies, str(blog.slug) if blog else "")

    async def _respond(self, comments: list[Comment], blog_slug: str) -> GetCommentsResponse:
        authors = await load_authors(self.user_service, [c.author_id for c in comments])
        return GetCommentsResponse(
            comments=[
                CommentItem.from_comment(c, blog_slug, authors.get(c.author_id))
                for c in comments
            ]
        )
