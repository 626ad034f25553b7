"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from penpixel.domain.model.comment import Comment
from penpixel.domain.value import BlogId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_roots_by_blog(
        self, blog_id: BlogId, limit: int = 5, offset: int = 0
    ) -> List[Comment]:
        """Find root comments of a blog, newest first.

        Args:
            blog_id: The blog ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Root comments of the blog
        """
        pass

    @abstractmethod
    async def find_replies(
        self, parent_id: CommentId, limit: int = 5, offset: int = 0
    ) -> List[Comment]:
        """Find replies to a comment, newest first.

        Args:
            parent_id: The parent comment ID
            limit: Maximum number of replies to return
            offset: Number of replies to skip

        Returns:
            Replies of the comment
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def add_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Atomically append a reply id to a comment's children.

        Returns:
            True if the parent existed and was updated
        """
        pass

    @abstractmethod
    async def remove_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Atomically remove a reply id from a comment's children.

        Returns:
            True if the parent existed and was updated
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a comment and return it as it was before deletion.

        The returned snapshot carries the children list the cascade
        continues with.

        Args:
            comment_id: The comment ID to delete

        Returns:
            The deleted comment, None if it did not exist
        """
        pass

    @abstractmethod
    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every comment of a blog.

        Returns:
            Number of comments deleted
        """
        pass
