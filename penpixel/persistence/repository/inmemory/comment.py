"""In-memory comment repository for testing."""

from typing import Optional

from penpixel.domain.model.comment import Comment
from penpixel.domain.repository.comment import CommentRepository
from penpixel.domain.value import BlogId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _newest_first(self, comments: list[Comment]) -> list[Comment]:
        # Ties on created_at fall back to insertion order, latest first
        order = {cid: i for i, cid in enumerate(self._comments)}
        return sorted(
            comments, key=lambda c: (c.created_at, order[c.id]), reverse=True
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_roots_by_blog(
        self, blog_id: BlogId, limit: int = 5, offset: int = 0
    ) -> list[Comment]:
        """Find root comments of a blog, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.blog_id == blog_id and c.parent_id is None
        ]
        return self._newest_first(comments)[offset : offset + limit]

    async def find_replies(
        self, parent_id: CommentId, limit: int = 5, offset: int = 0
    ) -> list[Comment]:
        """Find replies to a comment, newest first."""
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]
        return self._newest_first(comments)[offset : offset + limit]

    async def count_by_blog(self, blog_id: BlogId) -> int:
        """Count all comments of a blog.

        Test helper, not part of CommentRepository.
        """
        return sum(1 for c in self._comments.values() if c.blog_id == blog_id)

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._comments[comment.id] = comment
        return comment

    async def add_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Append a reply id to a comment's children."""
        parent = self._comments.get(parent_id)
        if not parent:
            return False
        self._comments[parent_id] = parent.model_copy(
            update={"children": [*parent.children, child_id]}
        )
        return True

    async def remove_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Remove a reply id from a comment's children."""
        parent = self._comments.get(parent_id)
        if not parent:
            return False
        self._comments[parent_id] = parent.model_copy(
            update={"children": [c for c in parent.children if c != child_id]}
        )
        return True

    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a comment and return it."""
        return self._comments.pop(comment_id, None)

    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every comment of a blog."""
        doomed = [cid for cid, c in self._comments.items() if c.blog_id == blog_id]
        for cid in doomed:
            del self._comments[cid]
        return len(doomed)
