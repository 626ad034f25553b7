"""Notification domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from penpixel.domain.error import NotFoundError, ValidationError
from penpixel.domain.model.notification import Notification
from penpixel.domain.repository import CommentRepository, NotificationRepository
from penpixel.domain.value import (
    BlogId,
    CommentId,
    NotificationFilter,
    NotificationId,
    NotificationType,
    UserId,
)

from .base import Service
from .counter_service import CounterService


class NotificationService(Service):
    """Owns the notification lifecycle: likes, comments, replies and the feed."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        comment_repository: CommentRepository,
        counter_service: CounterService,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            comment_repository: Comment repository (parent author lookups)
            counter_service: Counter service for like counters
        """
        self.notification_repository = notification_repository
        self.comment_repository = comment_repository
        self.counter_service = counter_service

    async def record_like(
        self, blog_id: BlogId, blog_author_id: UserId, liker_id: UserId
    ) -> bool:
        """Toggle a user's like on a blog.

        The toggle is a single storage primitive; the like counter follows
        it best-effort.

        Args:
            blog_id: Blog ID
            blog_author_id: Recipient of the like notification
            liker_id: User toggling the like

        Returns:
            True if the blog is now liked by the user, False if unliked
        """
        with logfire.span(
            "notification_service.record_like",
            blog_id=str(blog_id),
            liker_id=str(liker_id),
        ):
            like = Notification(
                id=NotificationId(uuid4()),
                type=NotificationType.LIKE,
                notification_for=blog_author_id,
                user_id=liker_id,
                blog_id=blog_id,
                created_at=datetime.now(),
            )
            liked = await self.notification_repository.toggle_like(like)

            await self.best_effort(
                "adjust_likes",
                blog_id,
                self.counter_service.adjust_likes(blog_id, 1 if liked else -1),
            )

            logfire.info(
                "Like toggled",
                blog_id=str(blog_id),
                liker_id=str(liker_id),
                liked=liked,
            )
            return liked

    async def is_liked(self, user_id: UserId, blog_id: BlogId) -> bool:
        """Check whether a user currently likes a blog."""
        with logfire.span(
            "notification_service.is_liked", user_id=str(user_id), blog_id=str(blog_id)
        ):
            return await self.notification_repository.like_exists(user_id, blog_id)

    async def record_comment_or_reply(
        self,
        comment_id: CommentId,
        blog_id: BlogId,
        recipient_id: UserId,
        actor_id: UserId,
        is_reply: bool,
        parent_comment_id: CommentId | None = None,
        pending_notification_id: NotificationId | None = None,
    ) -> Notification:
        """Record a comment or reply notification.

        For replies the recipient is the author of the parent comment,
        whatever default was passed in. When pending_notification_id is
        given, that notification's reply reference is pointed at the new
        comment.

        Args:
            comment_id: The new comment
            blog_id: Blog the comment belongs to
            recipient_id: Default recipient (the blog author)
            actor_id: Author of the new comment
            is_reply: Whether the new comment is a reply
            parent_comment_id: Comment being replied to
            pending_notification_id: Notification about the parent comment

        Returns:
            The created notification

        Raises:
            ValidationError: If a reply has no parent comment
            NotFoundError: If the parent comment does not exist
        """
        with logfire.span(
            "notification_service.record_comment_or_reply",
            comment_id=str(comment_id),
            blog_id=str(blog_id),
            is_reply=is_reply,
        ):
            replied_on = None
            if is_reply:
                if parent_comment_id is None:
                    raise ValidationError("Reply notification requires a parent comment")
                parent = await self.comment_repository.find_by_id(parent_comment_id)
                if parent is None:
                    raise NotFoundError("Comment", str(parent_comment_id))
                recipient_id = parent.author_id
                replied_on = parent_comment_id

            notification = await self.notification_repository.save(
                Notification(
                    id=NotificationId(uuid4()),
                    type=NotificationType.REPLY if is_reply else NotificationType.COMMENT,
                    notification_for=recipient_id,
                    user_id=actor_id,
                    blog_id=blog_id,
                    comment_id=comment_id,
                    replied_on_comment_id=replied_on,
                    created_at=datetime.now(),
                )
            )

            if is_reply and pending_notification_id is not None:
                linked = await self.notification_repository.set_reply(
                    pending_notification_id, comment_id
                )
                if not linked:
                    logfire.warn(
                        "Pending notification not found for reply link",
                        notification_id=str(pending_notification_id),
                        reply_id=str(comment_id),
                    )

            logfire.info(
                "Comment notification recorded",
                notification_id=str(notification.id),
                type=notification.type.value,
                recipient_id=str(recipient_id),
            )
            return notification

    async def delete_by_comment(self, comment_id: CommentId) -> None:
        """Remove notifications about a deleted comment.

        Notifications about the comment are deleted; notifications that
        merely link to it as a reply keep existing with the link cleared.
        """
        with logfire.span(
            "notification_service.delete_by_comment", comment_id=str(comment_id)
        ):
            deleted = await self.notification_repository.delete_by_comment(comment_id)
            cleared = await self.notification_repository.clear_reply(comment_id)
            logfire.info(
                "Comment notifications removed",
                comment_id=str(comment_id),
                deleted=deleted,
                cleared=cleared,
            )

    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every notification of a blog."""
        with logfire.span(
            "notification_service.delete_by_blog", blog_id=str(blog_id)
        ):
            deleted = await self.notification_repository.delete_by_blog(blog_id)
            logfire.info("Blog notifications deleted", blog_id=str(blog_id), count=deleted)
            return deleted

    async def has_unseen(self, user_id: UserId) -> bool:
        """Whether the user has unseen notifications caused by someone else."""
        with logfire.span("notification_service.has_unseen", user_id=str(user_id)):
            return await self.notification_repository.has_unseen(user_id)

    async def list_page(
        self,
        user_id: UserId,
        notification_filter: NotificationFilter,
        page: int,
        page_size: int,
        deleted_count: int = 0,
    ) -> list[Notification]:
        """Fetch a page of the user's feed, newest first.

        deleted_count compensates for notifications the client removed since
        it loaded the previous pages. The fetched notifications are marked
        seen best-effort; the returned objects keep their previous state.

        Args:
            user_id: Recipient
            notification_filter: "all" or a single type
            page: 1-based page number
            page_size: Notifications per page
            deleted_count: Items removed since the last page load

        Returns:
            Notifications on the page
        """
        with logfire.span(
            "notification_service.list_page",
            user_id=str(user_id),
            filter=notification_filter.value,
            page=page,
        ):
            offset = max(0, (page - 1) * page_size - deleted_count)
            notifications = await self.notification_repository.find_for_user(
                user_id,
                notification_type=notification_filter.notification_type,
                limit=page_size,
                offset=offset,
            )

            unseen = [n.id for n in notifications if not n.seen]
            if unseen:
                await self.best_effort(
                    "mark_seen", user_id, self.notification_repository.mark_seen(unseen)
                )

            logfire.info(
                "Notifications listed",
                user_id=str(user_id),
                count=len(notifications),
                offset=offset,
            )
            return notifications

    async def count(
        self, user_id: UserId, notification_filter: NotificationFilter
    ) -> int:
        """Count the user's feed entries for a filter."""
        with logfire.span(
            "notification_service.count",
            user_id=str(user_id),
            filter=notification_filter.value,
        ):
            return await self.notification_repository.count_for_user(
                user_id, notification_filter.notification_type
            )
