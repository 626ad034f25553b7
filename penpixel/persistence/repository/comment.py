"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from penpixel.domain.model import Comment
from penpixel.domain.repository import CommentRepository
from penpixel.domain.value import BlogId, CommentId
from penpixel.persistence.mappers import comment_to_dict, row_to_comment
from penpixel.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Every write runs in its own SAVEPOINT so a failed statement leaves the
    request transaction usable for the remaining steps.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_roots_by_blog(
        self, blog_id: BlogId, limit: int = 5, offset: int = 0
    ) -> List[Comment]:
        """Find root comments of a blog, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.blog_id == blog_id)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies(
        self, parent_id: CommentId, limit: int = 5, offset: int = 0
    ) -> List[Comment]:
        """Find replies to a comment, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        async with self.session.begin_nested():
            stmt = insert(comments_table).values(**comment_to_dict(comment))
            await self.session.execute(stmt)
        return comment

    async def add_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Atomically append a reply id to a comment's children."""
        async with self.session.begin_nested():
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == parent_id)
                .values(children=func.array_append(comments_table.c.children, child_id))
            )
            result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def remove_child(self, parent_id: CommentId, child_id: CommentId) -> bool:
        """Atomically remove a reply id from a comment's children."""
        async with self.session.begin_nested():
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == parent_id)
                .values(children=func.array_remove(comments_table.c.children, child_id))
            )
            result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a comment and return the row as it was."""
        async with self.session.begin_nested():
            stmt = (
                delete(comments_table)
                .where(comments_table.c.id == comment_id)
                .returning(comments_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every comment of a blog."""
        async with self.session.begin_nested():
            stmt = delete(comments_table).where(comments_table.c.blog_id == blog_id)
            result = await self.session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]
