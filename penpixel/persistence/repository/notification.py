"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import and_, delete, desc, exists, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from penpixel.domain.model import Notification
from penpixel.domain.repository import NotificationRepository
from penpixel.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)
from penpixel.persistence.mappers import notification_to_dict, row_to_notification
from penpixel.persistence.tables import notifications_table

LIKE = NotificationType.LIKE.value


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository.

    Like uniqueness is backed by the partial unique index
    ``idx_notifications_unique_like``.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _feed_filter(self, user_id: UserId, notification_type: Optional[NotificationType]):
        """Recipient's notifications caused by someone else."""
        clause = and_(
            notifications_table.c.notification_for == user_id,
            notifications_table.c.user_id != user_id,
        )
        if notification_type:
            clause = and_(clause, notifications_table.c.type == notification_type.value)
        return clause

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        async with self.session.begin_nested():
            stmt = insert(notifications_table).values(
                **notification_to_dict(notification)
            )
            await self.session.execute(stmt)
        return notification

    async def toggle_like(self, like: Notification) -> bool:
        """Insert the like if absent, otherwise delete the existing one.

        INSERT ... ON CONFLICT DO NOTHING against the unique like index decides
        which branch runs, so two concurrent toggles cannot both insert.
        """
        with logfire.span(
            "notification_repository.toggle_like",
            user_id=str(like.user_id),
            blog_id=str(like.blog_id),
        ):
            async with self.session.begin_nested():
                stmt = (
                    insert(notifications_table)
                    .values(**notification_to_dict(like))
                    .on_conflict_do_nothing(
                        index_elements=[
                            notifications_table.c.user_id,
                            notifications_table.c.blog_id,
                        ],
                        index_where=notifications_table.c.type == LIKE,
                    )
                    .returning(notifications_table.c.id)
                )
                result = await self.session.execute(stmt)
                if result.fetchone() is not None:
                    return True

                stmt = delete(notifications_table).where(
                    notifications_table.c.type == LIKE,
                    notifications_table.c.user_id == like.user_id,
                    notifications_table.c.blog_id == like.blog_id,
                )
                await self.session.execute(stmt)
            return False

    async def like_exists(self, user_id: UserId, blog_id: BlogId) -> bool:
        """Check whether the user currently likes the blog."""
        stmt = select(
            exists().where(
                notifications_table.c.type == LIKE,
                notifications_table.c.user_id == user_id,
                notifications_table.c.blog_id == blog_id,
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def set_reply(
        self, notification_id: NotificationId, reply_id: CommentId
    ) -> bool:
        """Point a notification's reply reference at a comment."""
        async with self.session.begin_nested():
            stmt = (
                update(notifications_table)
                .where(notifications_table.c.id == notification_id)
                .values(reply_id=reply_id)
            )
            result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete notifications about a comment."""
        async with self.session.begin_nested():
            stmt = delete(notifications_table).where(
                notifications_table.c.comment_id == comment_id
            )
            result = await self.session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]

    async def clear_reply(self, reply_id: CommentId) -> int:
        """Unset the reply reference on notifications pointing at a comment."""
        async with self.session.begin_nested():
            stmt = (
                update(notifications_table)
                .where(notifications_table.c.reply_id == reply_id)
                .values(reply_id=None)
            )
            result = await self.session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]

    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every notification of a blog."""
        async with self.session.begin_nested():
            stmt = delete(notifications_table).where(
                notifications_table.c.blog_id == blog_id
            )
            result = await self.session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]

    async def has_unseen(self, user_id: UserId) -> bool:
        """Whether the user has unseen notifications caused by someone else."""
        stmt = select(
            exists().where(
                self._feed_filter(user_id, None),
                notifications_table.c.seen.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def find_for_user(
        self,
        user_id: UserId,
        notification_type: Optional[NotificationType] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a user's notifications, newest first."""
        with logfire.span(
            "notification_repository.find_for_user",
            user_id=str(user_id),
            type=notification_type.value if notification_type else None,
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(notifications_table)
                .where(self._feed_filter(user_id, notification_type))
                .order_by(desc(notifications_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_for_user(
        self, user_id: UserId, notification_type: Optional[NotificationType] = None
    ) -> int:
        """Count a user's notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(self._feed_filter(user_id, notification_type))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def mark_seen(self, notification_ids: Sequence[NotificationId]) -> int:
        """Mark notifications as seen."""
        if not notification_ids:
            return 0

        async with self.session.begin_nested():
            stmt = (
                update(notifications_table)
                .where(notifications_table.c.id.in_(notification_ids))
                .values(seen=True)
            )
            result = await self.session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]
