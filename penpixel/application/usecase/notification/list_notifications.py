"""List notifications use cases."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from penpixel.application.usecase.base import parse_uuid
from penpixel.application.usecase.common import AuthorSummary, CountResponse, load_authors
from penpixel.config import PaginationSettings
from penpixel.domain.model import Comment, Notification
from penpixel.domain.service import BlogService, CommentService, NotificationService, UserService
from penpixel.domain.value import CommentId, NotificationFilter, NotificationType, UserId


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # From authenticated user
    filter: NotificationFilter = NotificationFilter.ALL
    page: int = Field(default=1, ge=1)
    deleted_count: int = Field(default=0, ge=0)


class NotificationBlog(BaseModel):
    """Blog a notification is about."""

    blog_id: str  # Public slug
    title: str


class NotificationComment(BaseModel):
    """Comment referenced by a notification."""

    comment_id: str
    text: str


class NotificationItem(BaseModel):
    """Entry of the notification feed."""

    notification_id: str
    type: NotificationType
    seen: bool
    created_at: datetime
    user: AuthorSummary | None  # Who did it
    blog: NotificationBlog | None
    comment: NotificationComment | None
    replied_on_comment: NotificationComment | None
    reply: NotificationComment | None


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationItem]


class ListNotificationsUseCase:
    """Use case for a page of the notification feed.

    Loading a page marks its notifications seen; the page itself still
    reports whether each one was new.
    """

    def __init__(
        self,
        notification_service: NotificationService,
        user_service: UserService,
        blog_service: BlogService,
        comment_service: CommentService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification service
            user_service: User domain service for actor summaries
            blog_service: Blog domain service for blog titles
            comment_service: Comment domain service for comment texts
            pagination: Page size settings
        """
        self.notification_service = notification_service
        self.user_service = user_service
        self.blog_service = blog_service
        self.comment_service = comment_service
        self.pagination = pagination

    async def execute(self, request: ListNotificationsRequest) -> ListNotificationsResponse:
        """Execute list notifications flow."""
        with logfire.span(
            "list_notifications.execute", filter=request.filter.value, page=request.page
        ):
            notifications = await self.notification_service.list_page(
                UserId(parse_uuid(request.user_id, "User")),
                request.filter,
                page=request.page,
                page_size=self.pagination.notifications_page_size,
                deleted_count=request.deleted_count,
            )
            actors = await load_authors(
                self.user_service, [n.user_id for n in notifications]
            )

            items = []
            for notification in notifications:
                items.append(
                    await self._to_item(notification, actors.get(notification.user_id))
                )
            return ListNotificationsResponse(notifications=items)

    async def _to_item(
        self, notification: Notification, actor: AuthorSummary | None
    ) -> NotificationItem:
        blog = None
        if notification.blog_id:
            found = await self.blog_service.get_blog_by_id(notification.blog_id)
            if found:
                blog = NotificationBlog(blog_id=str(found.slug), title=found.title)

        return NotificationItem(
            notification_id=str(notification.id),
            type=notification.type,
            seen=notification.seen,
            created_at=notification.created_at,
            user=actor,
            blog=blog,
            comment=await self._comment(notification.comment_id),
            replied_on_comment=await self._comment(notification.replied_on_comment_id),
            reply=await self._comment(notification.reply_id),
        )

    async def _comment(self, comment_id: CommentId | None) -> NotificationComment | None:
        if not comment_id:
            return None
        comment: Comment | None = await self.comment_service.get_comment_by_id(comment_id)
        if not comment:
            return None
        return NotificationComment(comment_id=str(comment.id), text=comment.text)


class CountNotificationsRequest(BaseModel):
    """Count notifications request."""

    user_id: str  # From authenticated user
    filter: NotificationFilter = NotificationFilter.ALL


class CountNotificationsUseCase:
    """Use case for the total behind the notification feed."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: CountNotificationsRequest) -> CountResponse:
        total = await self.notification_service.count(
            UserId(parse_uuid(request.user_id, "User")), request.filter
        )
        return CountResponse(total_docs=total)
