"""Comment domain service."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

import logfire

from penpixel.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    SecondaryEffectError,
    ValidationError,
)
from penpixel.domain.model.comment import Comment
from penpixel.domain.repository import CommentRepository
from penpixel.domain.value import BlogId, CommentId, NotificationId, UserId

from .base import Service
from .counter_service import CounterService
from .notification_service import NotificationService


@dataclass
class CommentDeletion:
    """Outcome of a cascading comment deletion.

    The root comment is always in ``deleted``; failed cascade steps are
    listed in ``failures`` and were logged, not raised.
    """

    root_id: CommentId
    deleted: list[CommentId] = field(default_factory=list)
    failures: list[SecondaryEffectError] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        """Whether every cascade step succeeded."""
        return not self.failures


class CommentService(Service):
    """Domain service for the comment tree of a blog."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        notification_service: NotificationService,
        counter_service: CounterService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            notification_service: Notification service
            counter_service: Counter service
        """
        self.comment_repository = comment_repository
        self.notification_service = notification_service
        self.counter_service = counter_service

    async def add_comment(
        self,
        blog_id: BlogId,
        blog_author_id: UserId,
        author_id: UserId,
        text: str,
        parent_id: CommentId | None = None,
        notification_id: NotificationId | None = None,
    ) -> Comment:
        """Create a comment on a blog or a reply to another comment.

        Inserting the comment and linking it into its parent's children is
        the operation of record. Counters and the notification follow
        best-effort.

        Args:
            blog_id: Blog ID
            blog_author_id: Author of the blog (default notification recipient)
            author_id: Author of the comment
            text: Comment text
            parent_id: Comment being replied to (None for a root comment)
            notification_id: Notification about the parent comment to link
                the reply to

        Returns:
            Created comment

        Raises:
            ValidationError: If text is empty or parent belongs to another blog
            NotFoundError: If parent comment does not exist
        """
        with logfire.span(
            "comment_service.add_comment",
            blog_id=str(blog_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if not text or not text.strip():
                raise ValidationError("Please write something to comment")

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        blog_id=str(blog_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.blog_id != blog_id:
                    logfire.warn(
                        "Parent comment does not belong to blog",
                        parent_id=str(parent_id),
                        parent_blog_id=str(parent.blog_id),
                        target_blog_id=str(blog_id),
                    )
                    raise ValidationError("Parent comment does not belong to this blog")

            comment = await self.comment_repository.save(
                Comment(
                    id=CommentId(uuid4()),
                    blog_id=blog_id,
                    blog_author_id=blog_author_id,
                    author_id=author_id,
                    text=text,
                    parent_id=parent_id,
                    children=[],
                    created_at=datetime.now(),
                )
            )
            if parent_id and not await self.comment_repository.add_child(
                parent_id, comment.id
            ):
                raise NotFoundError("Comment", str(parent_id))

            await self.best_effort(
                "increment_comments",
                blog_id,
                self.counter_service.increment_comments(blog_id, is_root=comment.is_root),
            )
            await self.best_effort(
                "record_comment_notification",
                comment.id,
                self.notification_service.record_comment_or_reply(
                    comment_id=comment.id,
                    blog_id=blog_id,
                    recipient_id=blog_author_id,
                    actor_id=author_id,
                    is_reply=comment.is_reply,
                    parent_comment_id=parent_id,
                    pending_notification_id=notification_id,
                ),
            )

            logfire.info(
                "Comment created",
                comment_id=str(comment.id),
                blog_id=str(blog_id),
                is_reply=comment.is_reply,
            )
            return comment

    async def delete_comment(
        self, comment_id: CommentId, requester_id: UserId
    ) -> CommentDeletion:
        """Delete a comment and, transitively, all of its replies.

        Allowed for the comment's author and the blog's author. For every
        comment in the subtree, depth first: delete it, pull it from its
        parent's children, drop its notifications, decrement the blog's
        counters, then continue with its children as they were at deletion.

        Only the root deletion is the operation of record. Any later failure
        is logged, collected in the result and the cascade moves on to the
        remaining comments.

        Args:
            comment_id: Comment to delete
            requester_id: User asking for the deletion

        Returns:
            Deleted ids and collected failures

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If requester is neither comment nor blog author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", str(comment_id))
            if requester_id not in (comment.author_id, comment.blog_author_id):
                logfire.warn(
                    "Unauthorized comment deletion attempt",
                    comment_id=str(comment_id),
                    requester_id=str(requester_id),
                )
                raise NotAuthorizedError(
                    "delete", "comment", str(comment_id), str(requester_id)
                )

            result = CommentDeletion(root_id=comment_id)

            root = await self.comment_repository.delete(comment_id)
            if root is None:
                # Removed concurrently between the lookup and the delete
                raise NotFoundError("Comment", str(comment_id))
            await self._detach(root, result)
            pending = list(reversed(root.children))

            while pending:
                reply_id = pending.pop()
                try:
                    reply = await self.comment_repository.delete(reply_id)
                except Exception as e:
                    result.failures.append(self._log_failure("delete_reply", reply_id, e))
                    continue
                if reply is None:
                    result.failures.append(
                        self._log_failure(
                            "delete_reply", reply_id, NotFoundError("Comment", str(reply_id))
                        )
                    )
                    continue
                await self._detach(reply, result)
                pending.extend(reversed(reply.children))

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                deleted=len(result.deleted),
                failures=len(result.failures),
            )
            return result

    async def _detach(self, comment: Comment, result: CommentDeletion) -> None:
        """Run the per-comment cleanup after the comment row is gone."""
        result.deleted.append(comment.id)

        effects = []
        if comment.parent_id:
            effects.append(
                (
                    "remove_from_parent",
                    self.comment_repository.remove_child(comment.parent_id, comment.id),
                )
            )
        effects.append(
            (
                "delete_comment_notifications",
                self.notification_service.delete_by_comment(comment.id),
            )
        )
        effects.append(
            (
                "decrement_comments",
                self.counter_service.decrement_comments(
                    comment.blog_id, is_root=comment.is_root
                ),
            )
        )

        for effect, operation in effects:
            failure = await self.best_effort(effect, comment.id, operation)
            if failure:
                result.failures.append(failure)

    def _log_failure(
        self, effect: str, subject_id: CommentId, error: Exception
    ) -> SecondaryEffectError:
        logfire.error(
            "Cascade step failed",
            effect=effect,
            subject_id=str(subject_id),
            error=str(error),
        )
        return SecondaryEffectError(effect, str(subject_id), error)

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def list_blog_comments(
        self, blog_id: BlogId, skip: int = 0, limit: int = 5
    ) -> list[Comment]:
        """Get a page of a blog's root comments, newest first."""
        with logfire.span(
            "comment_service.list_blog_comments", blog_id=str(blog_id), skip=skip
        ):
            comments = await self.comment_repository.find_roots_by_blog(
                blog_id, limit=limit, offset=skip
            )
            logfire.info(
                "Comments retrieved for blog", blog_id=str(blog_id), count=len(comments)
            )
            return comments

    async def list_replies(
        self, comment_id: CommentId, skip: int = 0, limit: int = 5
    ) -> list[Comment]:
        """Get a page of replies to a comment, newest first.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.list_replies", comment_id=str(comment_id), skip=skip
        ):
            if not await self.comment_repository.find_by_id(comment_id):
                raise NotFoundError("Comment", str(comment_id))
            return await self.comment_repository.find_replies(
                comment_id, limit=limit, offset=skip
            )

    async def delete_blog_comments(self, blog_id: BlogId) -> int:
        """Delete every comment of a blog in one statement.

        Used when the blog itself goes away, so no counters are touched.
        """
        with logfire.span(
            "comment_service.delete_blog_comments", blog_id=str(blog_id)
        ):
            deleted = await self.comment_repository.delete_by_blog(blog_id)
            logfire.info("Blog comments deleted", blog_id=str(blog_id), count=deleted)
            return deleted
