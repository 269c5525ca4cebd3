"""In-memory like repository for testing."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from blog.domain.model.like import Like
from blog.domain.repository.like import LikeRepository
from blog.domain.value import LikeTargetType, UserId

from .store import InMemoryStore


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    @property
    def _likes(self) -> list[Like]:
        return list(self._store.likes.values())

    def _find(
        self, user_id: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> Optional[Like]:
        # Plays the role of the unique constraint, independent of the lookups
        for like in self._likes:
            if (
                like.user_id == user_id
                and like.target_type == target_type
                and like.target_id == target_id
            ):
                return like
        return None

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> Optional[Like]:
        """Find a like by user and target."""
        return self._find(user_id, target_type, target_id)

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_ids: Sequence[UUID],
    ) -> list[Like]:
        """Find a user's likes on multiple targets."""
        wanted = set(target_ids)
        return [
            like
            for like in self._likes
            if like.user_id == user_id
            and like.target_type == target_type
            and like.target_id in wanted
        ]

    async def find_by_target(
        self,
        target_type: LikeTargetType,
        target_id: UUID,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None,
    ) -> list[Like]:
        """Find likes on a target within an optional creation time range."""
        return [
            like
            for like in self._likes
            if like.target_type == target_type
            and like.target_id == target_id
            and (created_from is None or like.created_at >= created_from)
            and (created_to is None or like.created_at <= created_to)
        ]

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes the target (duplicate)
        """
        existing = self._find(like.user_id, like.target_type, like.target_id)
        if existing:
            raise IntegrityError("Duplicate like", None, Exception())

        self._store.likes[like.id] = like
        return like

    async def delete(
        self, user_id: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> bool:
        """Delete a user's like on a target."""
        like = self._find(user_id, target_type, target_id)
        if not like:
            return False
        del self._store.likes[like.id]
        return True

    async def delete_by_targets(
        self, target_type: LikeTargetType, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every like on the given targets."""
        wanted = set(target_ids)
        doomed = [
            like.id
            for like in self._likes
            if like.target_type == target_type and like.target_id in wanted
        ]
        for like_id in doomed:
            del self._store.likes[like_id]
        return len(doomed)

    async def count_by_target(self, target_type: LikeTargetType, target_id: UUID) -> int:
        """Count likes on a target."""
        return len(await self.find_by_target(target_type, target_id))
