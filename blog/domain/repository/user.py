"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from blog.domain.model.user import User
from blog.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity.

    Users are managed by the account service; this engine only reads them.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find users by their ids (batch query).

        Args:
            user_ids: User IDs to look up

        Returns:
            List of users found (may be fewer than user_ids)
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
