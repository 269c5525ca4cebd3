"""In-memory user repository for testing."""

from typing import Optional, Sequence

from blog.domain.model.user import User
from blog.domain.repository.user import UserRepository
from blog.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find users by their ids."""
        return [self._store.users[u] for u in user_ids if u in self._store.users]

    async def save(self, user: User) -> User:
        """Save a user."""
        self._store.users[user.id] = user
        return user
