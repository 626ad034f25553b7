"""Unit tests for NotificationService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from penpixel.domain.model import Notification
from penpixel.domain.repository import (
    BlogRepository,
    NotificationRepository,
    UserRepository,
)
from penpixel.domain.service import NotificationService
from penpixel.domain.value import (
    BlogId,
    CommentId,
    NotificationFilter,
    NotificationId,
    NotificationType,
)
from tests.conftest import make_blog, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRecordLike:
    """Tests for the like toggle."""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env):
        """Toggling twice leaves no like and a zero counter."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        blog = await make_blog(blog_repo, author.id)

        # Act
        liked = await notification_service.record_like(blog.id, author.id, reader.id)
        liked_after_like = await notification_service.is_liked(reader.id, blog.id)
        likes_after_like = (await blog_repo.find_by_id(blog.id)).activity.total_likes
        unliked = await notification_service.record_like(blog.id, author.id, reader.id)

        # Assert
        assert liked is True
        assert liked_after_like is True
        assert likes_after_like == 1
        assert unliked is False
        assert await notification_service.is_liked(reader.id, blog.id) is False
        assert (await blog_repo.find_by_id(blog.id)).activity.total_likes == 0

    @pytest.mark.asyncio
    async def test_like_notifies_blog_author(self, unit_env):
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        blog = await make_blog(blog_repo, author.id)

        # Act
        await notification_service.record_like(blog.id, author.id, reader.id)

        # Assert
        assert await notification_service.has_unseen(author.id)
        assert await notification_service.count(author.id, NotificationFilter.LIKE) == 1
        assert await notification_service.count(author.id, NotificationFilter.REPLY) == 0

    @pytest.mark.asyncio
    async def test_like_on_missing_blog_still_toggles(self, unit_env):
        """The like counter is best-effort; the toggle itself stands."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        blog_id = BlogId(uuid4())

        # Act
        liked = await notification_service.record_like(blog_id, author.id, reader.id)

        # Assert
        assert liked is True
        assert await notification_service.is_liked(reader.id, blog_id)


class TestFeed:
    """Tests for listing and counting the feed."""

    async def _seed(self, unit_env, count: int):
        """Give the author `count` comment notifications, one minute apart."""
        notification_repo = await unit_env.get(NotificationRepository)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        blog = await make_blog(blog_repo, author.id)
        now = datetime.now()
        saved = []
        for i in range(count):
            saved.append(
                await notification_repo.save(
                    Notification(
                        id=NotificationId(uuid4()),
                        type=NotificationType.COMMENT,
                        notification_for=author.id,
                        user_id=reader.id,
                        blog_id=blog.id,
                        comment_id=CommentId(uuid4()),
                        created_at=now - timedelta(minutes=count - i),
                    )
                )
            )
        return author, reader, saved

    @pytest.mark.asyncio
    async def test_page_is_newest_first_and_marked_seen(self, unit_env):
        """A fetched page comes back unseen and is seen afterwards."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        author, _, saved = await self._seed(unit_env, 3)

        # Act
        page = await notification_service.list_page(
            author.id, NotificationFilter.ALL, page=1, page_size=2
        )

        # Assert
        assert [n.id for n in page] == [saved[2].id, saved[1].id]
        assert all(not n.seen for n in page)
        assert (await notification_repo.find_by_id(saved[2].id)).seen
        assert not (await notification_repo.find_by_id(saved[0].id)).seen
        assert await notification_service.has_unseen(author.id)

    @pytest.mark.asyncio
    async def test_deleted_count_shifts_the_window(self, unit_env):
        """Items removed since the last load are not skipped over."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        author, _, saved = await self._seed(unit_env, 5)
        await notification_repo.delete_by_comment(saved[4].comment_id)

        # Act
        page = await notification_service.list_page(
            author.id, NotificationFilter.ALL, page=2, page_size=2, deleted_count=1
        )

        # Assert
        assert [n.id for n in page] == [saved[2].id, saved[1].id]

    @pytest.mark.asyncio
    async def test_deleted_count_larger_than_skipped_items_starts_at_newest(
        self, unit_env
    ):
        """The window never starts before the newest notification."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        author, _, saved = await self._seed(unit_env, 4)

        # Act
        page = await notification_service.list_page(
            author.id, NotificationFilter.ALL, page=1, page_size=2, deleted_count=5
        )

        # Assert
        assert [n.id for n in page] == [saved[3].id, saved[2].id]

    @pytest.mark.asyncio
    async def test_own_actions_are_excluded(self, unit_env):
        """A user is never notified about their own actions."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await make_user(user_repo, "author")
        blog = await make_blog(blog_repo, author.id)

        # Act
        await notification_service.record_like(blog.id, author.id, author.id)

        # Assert
        assert await notification_service.count(author.id, NotificationFilter.ALL) == 0
        assert not await notification_service.has_unseen(author.id)

    @pytest.mark.asyncio
    async def test_mark_seen_failure_still_returns_page(self, unit_env, monkeypatch):
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        author, _, saved = await self._seed(unit_env, 1)

        async def broken(*args, **kwargs):
            raise RuntimeError("write failed")

        monkeypatch.setattr(notification_repo, "mark_seen", broken)

        # Act
        page = await notification_service.list_page(
            author.id, NotificationFilter.ALL, page=1, page_size=10
        )

        # Assert
        assert [n.id for n in page] == [saved[0].id]


class TestCleanup:
    """Tests for blog-level cleanup."""

    @pytest.mark.asyncio
    async def test_delete_by_blog_removes_only_that_blog(self, unit_env):
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        doomed = await make_blog(blog_repo, author.id)
        kept = await make_blog(blog_repo, author.id, title="Kept")
        await notification_service.record_like(doomed.id, author.id, reader.id)
        await notification_service.record_like(kept.id, author.id, reader.id)

        # Act
        deleted = await notification_service.delete_by_blog(doomed.id)

        # Assert
        assert deleted == 1
        assert not await notification_service.is_liked(reader.id, doomed.id)
        assert await notification_service.is_liked(reader.id, kept.id)
