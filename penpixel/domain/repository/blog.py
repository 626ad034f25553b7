"""Blog repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel

from penpixel.domain.model.blog import Blog
from penpixel.domain.value import BlogId, BlogSortOrder, Slug, UserId


class BlogQuery(BaseModel):
    """Filters for published blog listings.

    At most one of tag, title_query or author_id is used, in that order of
    precedence. exclude_slug only applies to tag searches.
    """

    tag: Optional[str] = None
    title_query: Optional[str] = None
    author_id: Optional[UserId] = None
    exclude_slug: Optional[Slug] = None


class BlogRepository(ABC):
    """Repository for Blog aggregate.

    Counter adjustments are atomic storage increments, never read-modify-write.
    """

    @abstractmethod
    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Blog]:
        """Find a blog by slug."""
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is taken."""
        pass

    @abstractmethod
    async def find_published(
        self,
        query: BlogQuery | None = None,
        sort: BlogSortOrder = BlogSortOrder.LATEST,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Blog]:
        """Find published (non-draft) blogs.

        Args:
            query: Optional filters
            sort: Sort order
            limit: Maximum number of blogs to return
            offset: Number of blogs to skip

        Returns:
            Published blogs matching the filters
        """
        pass

    @abstractmethod
    async def count_published(self, query: BlogQuery | None = None) -> int:
        """Count published blogs matching the filters."""
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        draft: bool,
        title_query: str = "",
        limit: int = 5,
        offset: int = 0,
    ) -> List[Blog]:
        """Find an author's blogs (drafts or published), newest first."""
        pass

    @abstractmethod
    async def count_by_author(
        self, author_id: UserId, draft: bool, title_query: str = ""
    ) -> int:
        """Count an author's blogs (drafts or published)."""
        pass

    @abstractmethod
    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update).

        Activity counters are not overwritten on update.
        """
        pass

    @abstractmethod
    async def delete(self, blog_id: BlogId) -> Optional[Blog]:
        """Delete a blog.

        Returns:
            The deleted blog, None if it did not exist
        """
        pass

    @abstractmethod
    async def adjust_activity(
        self,
        blog_id: BlogId,
        total_likes: int = 0,
        total_comments: int = 0,
        total_parent_comments: int = 0,
        total_reads: int = 0,
    ) -> Optional[Blog]:
        """Atomically add deltas to a blog's activity counters.

        Counters never go below zero.

        Returns:
            The updated blog, None if it does not exist
        """
        pass
