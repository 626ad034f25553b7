"""In-memory blog repository for testing."""

from typing import Optional

from penpixel.domain.model.blog import Blog, BlogActivity
from penpixel.domain.repository.blog import BlogQuery, BlogRepository
from penpixel.domain.value import BlogId, BlogSortOrder, Slug, UserId


class InMemoryBlogRepository(BlogRepository):
    """In-memory implementation of BlogRepository for testing."""

    def __init__(self) -> None:
        self._blogs: dict[BlogId, Blog] = {}

    @staticmethod
    def _matches(blog: Blog, query: BlogQuery | None, apply_exclude: bool = True) -> bool:
        if blog.draft:
            return False
        if query is None:
            return True
        if query.tag:
            if query.tag.lower() not in blog.tags:
                return False
            return not (
                apply_exclude and query.exclude_slug and blog.slug == query.exclude_slug
            )
        if query.title_query:
            return query.title_query.lower() in blog.title.lower()
        if query.author_id:
            return blog.author_id == query.author_id
        return True

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        return self._blogs.get(blog_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Blog]:
        """Find a blog by slug."""
        for blog in self._blogs.values():
            if blog.slug == slug:
                return blog
        return None

    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is taken."""
        return await self.find_by_slug(slug) is not None

    async def find_published(
        self,
        query: BlogQuery | None = None,
        sort: BlogSortOrder = BlogSortOrder.LATEST,
        limit: int = 5,
        offset: int = 0,
    ) -> list[Blog]:
        """Find published blogs with filtering and pagination."""
        blogs = [b for b in self._blogs.values() if self._matches(b, query)]

        if sort == BlogSortOrder.TRENDING:
            blogs.sort(
                key=lambda b: (
                    b.activity.total_reads,
                    b.activity.total_likes,
                    b.published_at,
                ),
                reverse=True,
            )
        else:
            blogs.sort(key=lambda b: b.published_at, reverse=True)

        return blogs[offset : offset + limit]

    async def count_published(self, query: BlogQuery | None = None) -> int:
        """Count published blogs matching the filters."""
        return sum(
            1 for b in self._blogs.values() if self._matches(b, query, apply_exclude=False)
        )

    def _by_author(self, author_id: UserId, draft: bool, title_query: str) -> list[Blog]:
        return [
            b
            for b in self._blogs.values()
            if b.author_id == author_id
            and b.draft == draft
            and title_query.lower() in b.title.lower()
        ]

    async def find_by_author(
        self,
        author_id: UserId,
        draft: bool,
        title_query: str = "",
        limit: int = 5,
        offset: int = 0,
    ) -> list[Blog]:
        """Find an author's blogs, newest first."""
        blogs = self._by_author(author_id, draft, title_query)
        blogs.sort(key=lambda b: b.published_at, reverse=True)
        return blogs[offset : offset + limit]

    async def count_by_author(
        self, author_id: UserId, draft: bool, title_query: str = ""
    ) -> int:
        """Count an author's blogs."""
        return len(self._by_author(author_id, draft, title_query))

    async def save(self, blog: Blog) -> Blog:
        """Save a blog, keeping stored counters on update."""
        existing = self._blogs.get(blog.id)
        if existing:
            blog = blog.model_copy(update={"activity": existing.activity})
        self._blogs[blog.id] = blog
        return blog

    async def delete(self, blog_id: BlogId) -> Optional[Blog]:
        """Delete a blog and return it."""
        return self._blogs.pop(blog_id, None)

    async def adjust_activity(
        self,
        blog_id: BlogId,
        total_likes: int = 0,
        total_comments: int = 0,
        total_parent_comments: int = 0,
        total_reads: int = 0,
    ) -> Optional[Blog]:
        """Add deltas to a blog's activity counters, clamped at zero."""
        blog = self._blogs.get(blog_id)
        if not blog:
            return None

        activity = blog.activity
        updated = blog.model_copy(
            update={
                "activity": BlogActivity(
                    total_likes=max(activity.total_likes + total_likes, 0),
                    total_comments=max(activity.total_comments + total_comments, 0),
                    total_parent_comments=max(
                        activity.total_parent_comments + total_parent_comments, 0
                    ),
                    total_reads=max(activity.total_reads + total_reads, 0),
                )
            }
        )
        self._blogs[blog_id] = updated
        return updated
