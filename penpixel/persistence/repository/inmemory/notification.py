"""In-memory notification repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from penpixel.domain.model.notification import Notification
from penpixel.domain.repository.notification import NotificationRepository
from penpixel.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    def _find_like(self, user_id: UserId, blog_id: BlogId | None) -> Optional[Notification]:
        for n in self._notifications.values():
            if (
                n.type == NotificationType.LIKE
                and n.user_id == user_id
                and n.blog_id == blog_id
            ):
                return n
        return None

    def _feed(
        self, user_id: UserId, notification_type: Optional[NotificationType]
    ) -> list[Notification]:
        order = {nid: i for i, nid in enumerate(self._notifications)}
        feed = [
            n
            for n in self._notifications.values()
            if n.notification_for == user_id
            and n.user_id != user_id
            and (notification_type is None or n.type == notification_type)
        ]
        return sorted(feed, key=lambda n: (n.created_at, order[n.id]), reverse=True)

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Raises:
            IntegrityError: If it is a duplicate like notification
        """
        if notification.type == NotificationType.LIKE and self._find_like(
            notification.user_id, notification.blog_id
        ):
            raise IntegrityError("Duplicate like", None, Exception())

        self._notifications[notification.id] = notification
        return notification

    async def toggle_like(self, like: Notification) -> bool:
        """Insert the like if absent, otherwise delete the existing one."""
        existing = self._find_like(like.user_id, like.blog_id)
        if existing:
            del self._notifications[existing.id]
            return False
        self._notifications[like.id] = like
        return True

    async def like_exists(self, user_id: UserId, blog_id: BlogId) -> bool:
        """Check whether the user currently likes the blog."""
        return self._find_like(user_id, blog_id) is not None

    async def set_reply(
        self, notification_id: NotificationId, reply_id: CommentId
    ) -> bool:
        """Point a notification's reply reference at a comment."""
        notification = self._notifications.get(notification_id)
        if not notification:
            return False
        self._notifications[notification_id] = notification.model_copy(
            update={"reply_id": reply_id}
        )
        return True

    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete notifications about a comment."""
        doomed = [
            nid for nid, n in self._notifications.items() if n.comment_id == comment_id
        ]
        for nid in doomed:
            del self._notifications[nid]
        return len(doomed)

    async def clear_reply(self, reply_id: CommentId) -> int:
        """Unset the reply reference on notifications pointing at a comment."""
        cleared = 0
        for nid, n in list(self._notifications.items()):
            if n.reply_id == reply_id:
                self._notifications[nid] = n.model_copy(update={"reply_id": None})
                cleared += 1
        return cleared

    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every notification of a blog."""
        doomed = [nid for nid, n in self._notifications.items() if n.blog_id == blog_id]
        for nid in doomed:
            del self._notifications[nid]
        return len(doomed)

    async def has_unseen(self, user_id: UserId) -> bool:
        """Whether the user has unseen notifications caused by someone else."""
        return any(not n.seen for n in self._feed(user_id, None))

    async def find_for_user(
        self,
        user_id: UserId,
        notification_type: Optional[NotificationType] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a user's notifications, newest first."""
        return self._feed(user_id, notification_type)[offset : offset + limit]

    async def count_for_user(
        self, user_id: UserId, notification_type: Optional[NotificationType] = None
    ) -> int:
        """Count a user's notifications."""
        return len(self._feed(user_id, notification_type))

    async def mark_seen(self, notification_ids: Sequence[NotificationId]) -> int:
        """Mark notifications as seen."""
        updated = 0
        for nid in notification_ids:
            notification = self._notifications.get(nid)
            if notification:
                self._notifications[nid] = notification.model_copy(update={"seen": True})
                updated += 1
        return updated
