"""Like repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from blog.domain.model.like import Like
from blog.domain.value import LikeTargetType, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    Defines the contract for like persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> Optional[Like]:
        """Find a user's like on a specific target.

        Args:
            user_id: The user's ID
            target_type: Type of target (post or comment)
            target_id: ID of the target

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_ids: Sequence[UUID],
    ) -> List[Like]:
        """Find a user's likes on multiple targets (batch query).

        Args:
            user_id: The user's ID
            target_type: Type of the targets
            target_ids: IDs of the targets

        Returns:
            List of likes found (may be fewer than target_ids)
        """
        pass

    @abstractmethod
    async def find_by_target(
        self,
        target_type: LikeTargetType,
        target_id: UUID,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None,
    ) -> List[Like]:
        """Find likes on a target, optionally within a creation time range.

        Args:
            target_type: Type of target
            target_id: ID of the target
            created_from: Inclusive lower bound on created_at
            created_to: Inclusive upper bound on created_at

        Returns:
            List of likes on the target
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Raises:
            IntegrityError: If the user already likes the target
        """
        pass

    @abstractmethod
    async def delete(
        self, user_id: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> bool:
        """Delete a user's like on a target.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_targets(
        self, target_type: LikeTargetType, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every like on the given targets.

        Returns:
            Number of deleted likes
        """
        pass

    @abstractmethod
    async def count_by_target(self, target_type: LikeTargetType, target_id: UUID) -> int:
        """Count likes on a target."""
        pass
