"""PostgreSQL implementation of User repository."""

from typing import List, Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from penpixel.domain.model import User
from penpixel.domain.repository import UserRepository
from penpixel.domain.value import UserId, Username
from penpixel.persistence.mappers import row_to_user, user_to_dict
from penpixel.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def search_by_username(self, query: str, limit: int = 50) -> List[User]:
        """Find users whose username contains the query."""
        stmt = (
            select(users_table)
            .where(users_table.c.username.icontains(query, autoescape=True))
            .order_by(users_table.c.username)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            IntegrityError: If email or username is already taken
        """
        existing = await self.find_by_id(user.id)
        user_dict = user_to_dict(user)

        async with self.session.begin_nested():
            if existing:
                # Counters are only changed by adjust_account_info
                stmt = (
                    update(users_table)
                    .where(users_table.c.id == user.id)
                    .values(
                        **{
                            k: v
                            for k, v in user_dict.items()
                            if k not in ("id", "total_posts", "total_reads", "created_at")
                        }
                    )
                    .returning(users_table)
                )
            else:
                stmt = insert(users_table).values(**user_dict).returning(users_table)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

        return row_to_user(dict(row)) if row else user

    async def adjust_account_info(
        self, user_id: UserId, total_posts: int = 0, total_reads: int = 0
    ) -> bool:
        """Atomically add deltas to a user's account counters."""
        values = {}
        if total_posts:
            values["total_posts"] = func.greatest(users_table.c.total_posts + total_posts, 0)
        if total_reads:
            values["total_reads"] = func.greatest(users_table.c.total_reads + total_reads, 0)
        if not values:
            return await self.find_by_id(user_id) is not None

        async with self.session.begin_nested():
            stmt = update(users_table).where(users_table.c.id == user_id).values(**values)
            result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]
