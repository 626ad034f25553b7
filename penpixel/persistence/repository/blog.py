"""PostgreSQL implementation of Blog repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from penpixel.domain.model import Blog
from penpixel.domain.repository import BlogQuery, BlogRepository
from penpixel.domain.value import BlogId, BlogSortOrder, Slug, UserId
from penpixel.persistence.mappers import blog_to_dict, row_to_blog
from penpixel.persistence.tables import blogs_table

# Maintained through adjust_activity only
COUNTER_COLUMNS = {
    "total_likes",
    "total_comments",
    "total_parent_comments",
    "total_reads",
}


class PostgresBlogRepository(BlogRepository):
    """PostgreSQL implementation of BlogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _apply_query(stmt, query: BlogQuery | None):
        """Restrict a statement to published blogs matching the filters."""
        stmt = stmt.where(blogs_table.c.draft.is_(False))
        if query is None:
            return stmt

        if query.tag:
            stmt = stmt.where(blogs_table.c.tags.any(query.tag.lower()))
            if query.exclude_slug:
                stmt = stmt.where(blogs_table.c.slug != str(query.exclude_slug))
        elif query.title_query:
            stmt = stmt.where(
                blogs_table.c.title.icontains(query.title_query, autoescape=True)
            )
        elif query.author_id:
            stmt = stmt.where(blogs_table.c.author_id == query.author_id)
        return stmt

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        stmt = select(blogs_table).where(blogs_table.c.id == blog_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_blog(row._asdict()) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Blog]:
        """Find a blog by slug."""
        with logfire.span("blog_repository.find_by_slug", slug=str(slug)):
            stmt = select(blogs_table).where(blogs_table.c.slug == str(slug))
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Blog not found by slug", slug=str(slug))
                return None

            return row_to_blog(row._asdict())

    async def slug_exists(self, slug: Slug) -> bool:
        """Check if a slug is taken."""
        stmt = (
            select(func.count())
            .select_from(blogs_table)
            .where(blogs_table.c.slug == str(slug))
        )
        result = await self.session.execute(stmt)
        count = result.scalar()
        return (count or 0) > 0

    async def find_published(
        self,
        query: BlogQuery | None = None,
        sort: BlogSortOrder = BlogSortOrder.LATEST,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Blog]:
        """Find published blogs with filtering and pagination."""
        with logfire.span(
            "blog_repository.find_published",
            sort=sort.value,
            tag=query.tag if query else None,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_query(select(blogs_table), query)

            if sort == BlogSortOrder.TRENDING:
                stmt = stmt.order_by(
                    desc(blogs_table.c.total_reads),
                    desc(blogs_table.c.total_likes),
                    desc(blogs_table.c.published_at),
                )
            else:
                stmt = stmt.order_by(desc(blogs_table.c.published_at))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            blogs = [row_to_blog(row._asdict()) for row in result.fetchall()]
            logfire.info("Found blogs", count=len(blogs))
            return blogs

    async def count_published(self, query: BlogQuery | None = None) -> int:
        """Count published blogs matching the filters."""
        # exclude_slug never narrows the count
        if query is not None and query.exclude_slug:
            query = query.model_copy(update={"exclude_slug": None})
        stmt = self._apply_query(select(func.count()).select_from(blogs_table), query)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(
        self,
        author_id: UserId,
        draft: bool,
        title_query: str = "",
        limit: int = 5,
        offset: int = 0,
    ) -> List[Blog]:
        """Find an author's blogs, newest first."""
        stmt = (
            select(blogs_table)
            .where(blogs_table.c.author_id == author_id)
            .where(blogs_table.c.draft.is_(draft))
        )
        if title_query:
            stmt = stmt.where(blogs_table.c.title.icontains(title_query, autoescape=True))

        stmt = stmt.order_by(desc(blogs_table.c.published_at)).limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_blog(row._asdict()) for row in result.fetchall()]

    async def count_by_author(
        self, author_id: UserId, draft: bool, title_query: str = ""
    ) -> int:
        """Count an author's blogs."""
        stmt = (
            select(func.count())
            .select_from(blogs_table)
            .where(blogs_table.c.author_id == author_id)
            .where(blogs_table.c.draft.is_(draft))
        )
        if title_query:
            stmt = stmt.where(blogs_table.c.title.icontains(title_query, autoescape=True))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update)."""
        with logfire.span("blog_repository.save", blog_id=str(blog.id)):
            existing = await self.find_by_id(blog.id)
            blog_dict = blog_to_dict(blog)

            async with self.session.begin_nested():
                if existing:
                    logfire.info("Updating existing blog", blog_id=str(blog.id))
                    stmt = (
                        update(blogs_table)
                        .where(blogs_table.c.id == blog.id)
                        .values(
                            **{
                                k: v
                                for k, v in blog_dict.items()
                                if k not in COUNTER_COLUMNS and k != "id"
                            }
                        )
                        .returning(blogs_table)
                    )
                else:
                    logfire.info(
                        "Inserting new blog", blog_id=str(blog.id), slug=str(blog.slug)
                    )
                    stmt = insert(blogs_table).values(**blog_dict).returning(blogs_table)
                result = await self.session.execute(stmt)
                row = result.fetchone()

            return row_to_blog(row._asdict()) if row else blog

    async def delete(self, blog_id: BlogId) -> Optional[Blog]:
        """Delete a blog and return the row as it was."""
        async with self.session.begin_nested():
            stmt = (
                delete(blogs_table)
                .where(blogs_table.c.id == blog_id)
                .returning(blogs_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_blog(row._asdict()) if row else None

    async def adjust_activity(
        self,
        blog_id: BlogId,
        total_likes: int = 0,
        total_comments: int = 0,
        total_parent_comments: int = 0,
        total_reads: int = 0,
    ) -> Optional[Blog]:
        """Atomically add deltas to a blog's activity counters.

        Single UPDATE ... SET c = GREATEST(c + delta, 0) RETURNING.
        """
        deltas = {
            "total_likes": total_likes,
            "total_comments": total_comments,
            "total_parent_comments": total_parent_comments,
            "total_reads": total_reads,
        }
        values = {
            column: func.greatest(blogs_table.c[column] + delta, 0)
            for column, delta in deltas.items()
            if delta
        }
        if not values:
            return await self.find_by_id(blog_id)

        async with self.session.begin_nested():
            stmt = (
                update(blogs_table)
                .where(blogs_table.c.id == blog_id)
                .values(**values)
                .returning(blogs_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_blog(row._asdict()) if row else None
