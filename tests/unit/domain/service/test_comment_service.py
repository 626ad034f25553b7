"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from penpixel.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from penpixel.domain.repository import (
    BlogRepository,
    CommentRepository,
    NotificationRepository,
    UserRepository,
)
from penpixel.domain.service import CommentService
from penpixel.domain.value import CommentId, NotificationType, UserId
from tests.conftest import make_blog, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _setup(unit_env):
    """Create a blog by its author plus two other users."""
    user_repo = await unit_env.get(UserRepository)
    blog_repo = await unit_env.get(BlogRepository)
    author = await make_user(user_repo, "author")
    u1 = await make_user(user_repo, "first")
    u2 = await make_user(user_repo, "second")
    blog = await make_blog(blog_repo, author.id)
    return blog, author, u1, u2


class TestAddComment:
    """Tests for add_comment method."""

    @pytest.mark.asyncio
    async def test_root_comment_updates_counters_and_notifies_blog_author(
        self, unit_env
    ):
        """A root comment counts as a comment and a parent comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        blog_repo = await unit_env.get(BlogRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        blog, author, u1, _ = await _setup(unit_env)

        # Act
        comment = await comment_service.add_comment(
            blog_id=blog.id,
            blog_author_id=author.id,
            author_id=u1.id,
            text="Lovely post",
        )

        # Assert
        assert comment.is_root
        assert comment.children == []

        stored_blog = await blog_repo.find_by_id(blog.id)
        assert stored_blog.activity.total_comments == 1
        assert stored_blog.activity.total_parent_comments == 1

        feed = await notification_repo.find_for_user(author.id)
        assert len(feed) == 1
        assert feed[0].type == NotificationType.COMMENT
        assert feed[0].comment_id == comment.id
        assert feed[0].user_id == u1.id

    @pytest.mark.asyncio
    async def test_reply_links_into_parent_and_notifies_parent_author(self, unit_env):
        """A reply is appended to its parent's children and notifies the commenter."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        blog_repo = await unit_env.get(BlogRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        blog, author, u1, u2 = await _setup(unit_env)
        parent = await comment_service.add_comment(blog.id, author.id, u1.id, "First")

        # Act
        reply = await comment_service.add_comment(
            blog.id, author.id, u2.id, "Reply", parent_id=parent.id
        )

        # Assert
        stored_parent = await comment_repo.find_by_id(parent.id)
        assert stored_parent.children == [reply.id]
        assert reply.parent_id == parent.id

        stored_blog = await blog_repo.find_by_id(blog.id)
        assert stored_blog.activity.total_comments == 2
        assert stored_blog.activity.total_parent_comments == 1

        replies_feed = await notification_repo.find_for_user(
            u1.id, notification_type=NotificationType.REPLY
        )
        assert len(replies_feed) == 1
        assert replies_feed[0].replied_on_comment_id == parent.id

    @pytest.mark.asyncio
    async def test_children_keep_insertion_order(self, unit_env):
        """Replies are listed in the parent in the order they were added."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        blog, author, u1, u2 = await _setup(unit_env)
        parent = await comment_service.add_comment(blog.id, author.id, u1.id, "First")

        # Act
        r1 = await comment_service.add_comment(blog.id, author.id, u2.id, "a", parent.id)
        r2 = await comment_service.add_comment(blog.id, author.id, u1.id, "b", parent.id)

        # Assert
        stored_parent = await comment_repo.find_by_id(parent.id)
        assert stored_parent.children == [r1.id, r2.id]

    @pytest.mark.asyncio
    async def test_reply_links_pending_notification(self, unit_env):
        """Replying from a notification points that notification at the reply."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        blog, author, u1, _ = await _setup(unit_env)
        parent = await comment_service.add_comment(blog.id, author.id, u1.id, "Hi")
        [pending] = await notification_repo.find_for_user(author.id)

        # Act
        reply = await comment_service.add_comment(
            blog.id, author.id, author.id, "Thanks", parent.id, notification_id=pending.id
        )

        # Assert
        linked = await notification_repo.find_by_id(pending.id)
        assert linked.reply_id == reply.id

    @pytest.mark.asyncio
    async def test_empty_text_is_rejected(self, unit_env):
        """Blank comments are not stored."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        blog, author, u1, _ = await _setup(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError):
            await comment_service.add_comment(blog.id, author.id, u1.id, "   ")
        assert await comment_repo.count_by_blog(blog.id) == 0

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        """Replying to a comment that does not exist fails."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        blog, author, u1, _ = await _setup(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.add_comment(
                blog.id, author.id, u1.id, "Reply", parent_id=CommentId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_parent_from_other_blog_is_rejected(self, unit_env):
        """A reply must stay on the blog of its parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        blog_repo = await unit_env.get(BlogRepository)
        blog, author, u1, _ = await _setup(unit_env)
        other_blog = await make_blog(blog_repo, author.id, title="Other")
        parent = await comment_service.add_comment(other_blog.id, author.id, u1.id, "x")

        # Act & Assert
        with pytest.raises(ValidationError):
            await comment_service.add_comment(
                blog.id, author.id, u1.id, "Reply", parent_id=parent.id
            )

    @pytest.mark.asyncio
    async def test_counter_failure_does_not_fail_the_comment(self, unit_env, monkeypatch):
        """Counters are best-effort; the comment still exists."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        blog, author, u1, _ = await _setup(unit_env)

        async def broken(*args, **kwargs):
            raise RuntimeError("counter store down")

        monkeypatch.setattr(comment_service.counter_service, "increment_comments", broken)

        # Act
        comment = await comment_service.add_comment(blog.id, author.id, u1.id, "Still here")

        # Assert
        assert await comment_repo.find_by_id(comment.id) is not None


class TestDeleteComment:
    """Tests for the cascading delete_comment method."""

    @pytest.mark.asyncio
    async def test_deleting_root_removes_reply_and_adjusts_counters(self, unit_env):
        """C1 by U1, C2 reply by U2; U1 deletes C1 and both go away."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        blog_repo = await unit_env.get(BlogRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        blog, author, u1, u2 = await _setup(unit_env)
        c1 = await comment_service.add_comment(blog.id, author.id, u1.id, "C1")
        c2 = await comment_service.add_comment(blog.id, author.id, u2.id, "C2", c1.id)
        before = (await blog_repo.find_by_id(blog.id)).activity

        # Act
        result = await comment_service.delete_comment(c1.id, u1.id)

        # Assert
        assert result.complete
        assert result.deleted == [c1.id, c2.id]
        assert await comment_repo.find_by_id(c1.id) is None
        assert await comment_repo.find_by_id(c2.id) is None

        after = (await blog_repo.find_by_id(blog.id)).activity
        assert after.total_comments == before.total_comments - 2
        assert after.total_parent_comments == before.total_parent_comments - 1

        assert await notification_repo.count_for_user(author.id) == 0
        assert await notification_repo.count_for_user(u1.id) == 0

    @pytest.mark.asyncio
    async def test_deep_cascade_visits_every_descendant(self, unit_env):
        """Deleting a root removes the whole subtree, depth first."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        blog_repo = await unit_env.get(BlogRepository)
        blog, author, u1, u2 = await _setup(unit_env)
        root = await comment_service.add_comment(blog.id, author.id, u1.id, "root")
        a = await comment_service.add_comment(blog.id, author.id, u2.id, "a", root.id)
        a1 = await comment_service.add_comment(blog.id, author.id, u1.id, "a1", a.id)
        a2 = await comment_service.add_comment(blog.id, author.id, u2.id, "a2", a1.id)
        b = await comment_service.add_comment(blog.id, author.id, u1.id, "b", root.id)
        survivor = await comment_service.add_comment(blog.id, author.id, u2.id, "other")

        # Act
        result = await comment_service.delete_comment(root.id, u1.id)

        # Assert
        assert result.deleted == [root.id, a.id, a1.id, a2.id, b.id]
        assert await comment_repo.count_by_blog(blog.id) == 1
        assert await comment_repo.find_by_id(survivor.id) is not None

        activity = (await blog_repo.find_by_id(blog.id)).activity
        assert activity.total_comments == 1
        assert activity.total_parent_comments == 1

    @pytest.mark.asyncio
    async def test_deleting_reply_detaches_it_from_parent(self, unit_env):
        """The parent no longer lists a deleted reply."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        blog_repo = await unit_env.get(BlogRepository)
        blog, author, u1, u2 = await _setup(unit_env)
        parent = await comment_service.add_comment(blog.id, author.id, u1.id, "P")
        reply = await comment_service.add_comment(blog.id, author.id, u2.id, "R", parent.id)

        # Act
        await comment_service.delete_comment(reply.id, u2.id)

        # Assert
        stored_parent = await comment_repo.find_by_id(parent.id)
        assert stored_parent.children == []
        activity = (await blog_repo.find_by_id(blog.id)).activity
        assert activity.total_comments == 1
        assert activity.total_parent_comments == 1

    @pytest.mark.asyncio
    async def test_deleting_reply_clears_reply_link_on_notification(self, unit_env):
        """A notification that linked to the reply keeps existing without the link."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        blog, author, u1, _ = await _setup(unit_env)
        parent = await comment_service.add_comment(blog.id, author.id, u1.id, "Hi")
        [pending] = await notification_repo.find_for_user(author.id)
        reply = await comment_service.add_comment(
            blog.id, author.id, author.id, "Thanks", parent.id, notification_id=pending.id
        )

        # Act
        await comment_service.delete_comment(reply.id, author.id)

        # Assert
        kept = await notification_repo.find_by_id(pending.id)
        assert kept is not None
        assert kept.reply_id is None

    @pytest.mark.asyncio
    async def test_blog_author_may_delete_any_comment(self, unit_env):
        """The blog author moderates comments on their blog."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        blog, author, u1, _ = await _setup(unit_env)
        comment = await comment_service.add_comment(blog.id, author.id, u1.id, "Spam")

        # Act
        result = await comment_service.delete_comment(comment.id, author.id)

        # Assert
        assert result.deleted == [comment.id]

    @pytest.mark.asyncio
    async def test_other_users_cannot_delete(self, unit_env):
        """Only the commenter and the blog author may delete."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        blog, author, u1, u2 = await _setup(unit_env)
        comment = await comment_service.add_comment(blog.id, author.id, u1.id, "Mine")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(comment.id, u2.id)
        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        """Deleting an unknown comment fails."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(CommentId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_cascade_continues_past_failed_steps(self, unit_env, monkeypatch):
        """A failing cleanup step is collected and the cascade keeps going."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        blog, author, u1, u2 = await _setup(unit_env)
        root = await comment_service.add_comment(blog.id, author.id, u1.id, "root")
        reply = await comment_service.add_comment(blog.id, author.id, u2.id, "r", root.id)

        async def broken(*args, **kwargs):
            raise RuntimeError("notification store down")

        monkeypatch.setattr(comment_service.notification_service, "delete_by_comment", broken)

        # Act
        result = await comment_service.delete_comment(root.id, u1.id)

        # Assert
        assert not result.complete
        assert result.deleted == [root.id, reply.id]
        assert {f.effect for f in result.failures} == {"delete_comment_notifications"}
        assert len(result.failures) == 2
        assert await comment_repo.count_by_blog(blog.id) == 0

    @pytest.mark.asyncio
    async def test_failed_descendant_delete_is_collected(self, unit_env, monkeypatch):
        """A reply that cannot be deleted is reported, the rest still goes."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        blog, author, u1, u2 = await _setup(unit_env)
        root = await comment_service.add_comment(blog.id, author.id, u1.id, "root")
        stuck = await comment_service.add_comment(blog.id, author.id, u2.id, "s", root.id)
        gone = await comment_service.add_comment(blog.id, author.id, u2.id, "g", root.id)

        original_delete = comment_repo.delete

        async def flaky_delete(comment_id):
            if comment_id == stuck.id:
                raise RuntimeError("row locked")
            return await original_delete(comment_id)

        monkeypatch.setattr(comment_repo, "delete", flaky_delete)

        # Act
        result = await comment_service.delete_comment(root.id, u1.id)

        # Assert
        assert result.deleted == [root.id, gone.id]
        assert [f.effect for f in result.failures] == ["delete_reply"]
        assert result.failures[0].subject_id == str(stuck.id)


class TestListComments:
    """Tests for comment listings."""

    @pytest.mark.asyncio
    async def test_root_comments_newest_first_with_skip(self, unit_env):
        """Root comments page by skip, newest first, replies excluded."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        blog, author, u1, _ = await _setup(unit_env)
        first = await comment_service.add_comment(blog.id, author.id, u1.id, "1")
        second = await comment_service.add_comment(blog.id, author.id, u1.id, "2")
        await comment_service.add_comment(blog.id, author.id, u1.id, "reply", first.id)

        # Act
        page = await comment_service.list_blog_comments(blog.id, skip=0, limit=5)
        rest = await comment_service.list_blog_comments(blog.id, skip=1, limit=5)

        # Assert
        assert [c.id for c in page] == [second.id, first.id]
        assert [c.id for c in rest] == [first.id]

    @pytest.mark.asyncio
    async def test_replies_of_missing_comment_raise_not_found(self, unit_env):
        """Listing replies of an unknown comment fails."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.list_replies(CommentId(uuid4()))
