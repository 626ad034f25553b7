"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from penpixel.domain.model.user import AccountInfo, User
from penpixel.domain.repository.user import UserRepository
from penpixel.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def search_by_username(self, query: str, limit: int = 50) -> list[User]:
        """Find users whose username contains the query."""
        matches = [
            u for u in self._users.values() if query.lower() in u.username.root.lower()
        ]
        matches.sort(key=lambda u: u.username.root)
        return matches[:limit]

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If email or username belongs to another user
        """
        for other in self._users.values():
            if other.id != user.id and (
                other.email == user.email or other.username == user.username
            ):
                raise IntegrityError("Duplicate user", None, Exception())

        existing = self._users.get(user.id)
        if existing:
            user = user.model_copy(update={"account_info": existing.account_info})
        self._users[user.id] = user
        return user

    async def adjust_account_info(
        self, user_id: UserId, total_posts: int = 0, total_reads: int = 0
    ) -> bool:
        """Add deltas to a user's account counters, clamped at zero."""
        user = self._users.get(user_id)
        if not user:
            return False

        info = user.account_info
        self._users[user_id] = user.model_copy(
            update={
                "account_info": AccountInfo(
                    total_posts=max(info.total_posts + total_posts, 0),
                    total_reads=max(info.total_reads + total_reads, 0),
                )
            }
        )
        return True
