"""Add comment use case."""

import logfire
from pydantic import BaseModel

from penpixel.application.usecase.base import parse_uuid
from penpixel.application.usecase.blog.get_blog import parse_slug
from penpixel.application.usecase.comment.common import CommentItem
from penpixel.application.usecase.common import AuthorSummary
from penpixel.domain.error import NotFoundError, ValidationError
from penpixel.domain.service import BlogService, CommentService, UserService
from penpixel.domain.value import CommentId, NotificationId, UserId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    blog_id: str  # Public slug
    user_id: str  # From authenticated user
    comment: str
    replying_to: str | None = None  # Parent comment ID for replies
    notification_id: str | None = None  # Notification the reply answers


class AddCommentResponse(BaseModel):
    """Add comment response."""

    comment: CommentItem


class AddCommentUseCase:
    """Use case for commenting on a blog or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        user_service: UserService,
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            blog_service: Blog domain service
            user_service: User domain service for the commenter summary
        """
        self.comment_service = comment_service
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Steps:
        1. Resolve the blog, which gives the notification recipient
        2. Create the comment via comment service (validates the parent)

        Raises:
            NotFoundError: If the blog or the parent comment does not exist
            ValidationError: If the comment is empty or targets a draft
        """
        with logfire.span("add_comment.execute", blog_id=request.blog_id):
            blog = await self.blog_service.get_blog_by_slug(parse_slug(request.blog_id))
            if not blog:
                raise NotFoundError("Blog", request.blog_id)
            if blog.draft:
                raise ValidationError("You can't comment on a draft")

            author_id = UserId(parse_uuid(request.user_id, "User"))
            parent_id = (
                CommentId(parse_uuid(request.replying_to, "Comment"))
                if request.replying_to
                else None
            )
            notification_id = (
                NotificationId(parse_uuid(request.notification_id, "Notification"))
                if request.notification_id
                else None
            )

            comment = await self.comment_service.add_comment(
                blog_id=blog.id,
                blog_author_id=blog.author_id,
                author_id=author_id,
                text=request.comment,
                parent_id=parent_id,
                notification_id=notification_id,
            )

            try:
                author = AuthorSummary.from_user(await self.user_service.get_by_id(author_id))
            except NotFoundError:
                author = None

            return AddCommentResponse(
                comment=CommentItem.from_comment(comment, str(blog.slug), author)
            )
