"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from penpixel.domain.model.user import User
from penpixel.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        pass

    @abstractmethod
    async def search_by_username(self, query: str, limit: int = 50) -> List[User]:
        """Find users whose username contains the query (case insensitive)."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Account counters are not overwritten on update.

        Raises:
            IntegrityError: If email or username is already taken
        """
        pass

    @abstractmethod
    async def adjust_account_info(
        self, user_id: UserId, total_posts: int = 0, total_reads: int = 0
    ) -> bool:
        """Atomically add deltas to a user's account counters.

        Counters never go below zero.

        Returns:
            True if the user exists
        """
        pass
