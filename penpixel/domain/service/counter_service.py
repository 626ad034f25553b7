"""Denormalized counter maintenance."""

import logfire

from penpixel.domain.error import NotFoundError
from penpixel.domain.repository import BlogRepository, UserRepository
from penpixel.domain.value import BlogId, UserId

from .base import Service


class CounterService(Service):
    """Applies atomic deltas to blog activity and user account counters.

    Holds no state of its own. Every method issues a single atomic increment
    per entity, so concurrent callers never lose updates.
    """

    def __init__(
        self, blog_repository: BlogRepository, user_repository: UserRepository
    ) -> None:
        """Initialize counter service.

        Args:
            blog_repository: Blog repository
            user_repository: User repository
        """
        self.blog_repository = blog_repository
        self.user_repository = user_repository

    async def increment_comments(self, blog_id: BlogId, is_root: bool) -> None:
        """Count a new comment on a blog.

        Args:
            blog_id: Blog ID
            is_root: Whether the comment is a root comment

        Raises:
            NotFoundError: If the blog does not exist
        """
        await self._adjust_comments(blog_id, 1, is_root)

    async def decrement_comments(self, blog_id: BlogId, is_root: bool) -> None:
        """Uncount a deleted comment.

        Args:
            blog_id: Blog ID
            is_root: Whether the comment was a root comment

        Raises:
            NotFoundError: If the blog does not exist
        """
        await self._adjust_comments(blog_id, -1, is_root)

    async def _adjust_comments(self, blog_id: BlogId, delta: int, is_root: bool) -> None:
        with logfire.span(
            "counter_service.adjust_comments",
            blog_id=str(blog_id),
            delta=delta,
            is_root=is_root,
        ):
            blog = await self.blog_repository.adjust_activity(
                blog_id,
                total_comments=delta,
                total_parent_comments=delta if is_root else 0,
            )
            if blog is None:
                raise NotFoundError("Blog", str(blog_id))
            logfire.info(
                "Comment counters adjusted",
                blog_id=str(blog_id),
                total_comments=blog.activity.total_comments,
                total_parent_comments=blog.activity.total_parent_comments,
            )

    async def adjust_likes(self, blog_id: BlogId, delta: int) -> None:
        """Add delta to a blog's like counter.

        Raises:
            NotFoundError: If the blog does not exist
        """
        with logfire.span(
            "counter_service.adjust_likes", blog_id=str(blog_id), delta=delta
        ):
            blog = await self.blog_repository.adjust_activity(
                blog_id, total_likes=delta
            )
            if blog is None:
                raise NotFoundError("Blog", str(blog_id))
            logfire.info(
                "Like counter adjusted",
                blog_id=str(blog_id),
                total_likes=blog.activity.total_likes,
            )

    async def adjust_reads(self, blog_id: BlogId, delta: int) -> None:
        """Add delta to a blog's reads and to its author's reads.

        The author is taken from the blog row returned by the same update.

        Raises:
            NotFoundError: If the blog or its author does not exist
        """
        with logfire.span(
            "counter_service.adjust_reads", blog_id=str(blog_id), delta=delta
        ):
            blog = await self.blog_repository.adjust_activity(
                blog_id, total_reads=delta
            )
            if blog is None:
                raise NotFoundError("Blog", str(blog_id))
            if not await self.user_repository.adjust_account_info(
                blog.author_id, total_reads=delta
            ):
                raise NotFoundError("User", str(blog.author_id))
            logfire.info(
                "Read counters adjusted",
                blog_id=str(blog_id),
                author_id=str(blog.author_id),
                total_reads=blog.activity.total_reads,
            )

    async def adjust_post_count(self, user_id: UserId, delta: int) -> None:
        """Add delta to a user's published post counter.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span(
            "counter_service.adjust_post_count", user_id=str(user_id), delta=delta
        ):
            if not await self.user_repository.adjust_account_info(
                user_id, total_posts=delta
            ):
                raise NotFoundError("User", str(user_id))
            logfire.info("Post counter adjusted", user_id=str(user_id), delta=delta)
