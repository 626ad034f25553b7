"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from penpixel.domain.model.notification import Notification
from penpixel.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Like notifications are unique per (user, blog); implementations must
    enforce it in storage, not only in application code.
    """

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Raises:
            IntegrityError: If it is a duplicate like notification
        """
        pass

    @abstractmethod
    async def toggle_like(self, like: Notification) -> bool:
        """Insert the like notification if absent, otherwise delete the existing one.

        Keyed on (like.user_id, like.blog_id, type=like). A single storage
        primitive so concurrent toggles never produce duplicate likes.

        Args:
            like: Like notification to insert when none exists

        Returns:
            True if the like was inserted, False if an existing one was removed
        """
        pass

    @abstractmethod
    async def like_exists(self, user_id: UserId, blog_id: BlogId) -> bool:
        """Check whether the user currently likes the blog."""
        pass

    @abstractmethod
    async def set_reply(
        self, notification_id: NotificationId, reply_id: CommentId
    ) -> bool:
        """Point a notification's reply reference at a comment.

        Returns:
            True if the notification existed
        """
        pass

    @abstractmethod
    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete notifications about a comment.

        Returns:
            Number of notifications deleted
        """
        pass

    @abstractmethod
    async def clear_reply(self, reply_id: CommentId) -> int:
        """Unset the reply reference on notifications pointing at a comment.

        The notifications themselves are kept.

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every notification of a blog.

        Returns:
            Number of notifications deleted
        """
        pass

    @abstractmethod
    async def has_unseen(self, user_id: UserId) -> bool:
        """Whether the user has unseen notifications caused by someone else."""
        pass

    @abstractmethod
    async def find_for_user(
        self,
        user_id: UserId,
        notification_type: Optional[NotificationType] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a user's notifications, newest first, excluding their own actions.

        Args:
            user_id: Recipient
            notification_type: Only this type (None for all types)
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip

        Returns:
            Notifications for the user
        """
        pass

    @abstractmethod
    async def count_for_user(
        self, user_id: UserId, notification_type: Optional[NotificationType] = None
    ) -> int:
        """Count a user's notifications, excluding their own actions."""
        pass

    @abstractmethod
    async def mark_seen(self, notification_ids: Sequence[NotificationId]) -> int:
        """Mark notifications as seen.

        Returns:
            Number of notifications updated
        """
        pass
