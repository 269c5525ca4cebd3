"""PostgreSQL implementation of Like repository."""

from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Like
from blog.domain.repository import LikeRepository
from blog.domain.value import LikeTargetType, UserId
from blog.persistence.mappers import like_to_dict, row_to_like
from blog.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> Optional[Like]:
        """Find a user's like on a specific target."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_ids: Sequence[UUID],
    ) -> List[Like]:
        """Find a user's likes on multiple targets (batch query)."""
        if not target_ids:
            return []

        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def find_by_target(
        self,
        target_type: LikeTargetType,
        target_id: UUID,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None,
    ) -> List[Like]:
        """Find likes on a target within an optional creation time range."""
        stmt = select(likes_table).where(
            likes_table.c.target_type == target_type.value,
            likes_table.c.target_id == target_id,
        )
        if created_from:
            stmt = stmt.where(likes_table.c.created_at >= created_from)
        if created_to:
            stmt = stmt.where(likes_table.c.created_at <= created_to)
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def save(self, like: Like) -> Like:
        """Save a like (create).

        The insert runs in a savepoint so a unique-constraint violation
        leaves the surrounding session usable.
        """
        stmt = insert(likes_table).values(**like_to_dict(like))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return like

    async def delete(
        self, user_id: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> bool:
        """Delete a user's like on a target."""
        stmt = delete(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_targets(
        self, target_type: LikeTargetType, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every like on the given targets."""
        if not target_ids:
            return 0
        stmt = delete(likes_table).where(
            likes_table.c.target_type == target_type.value,
            likes_table.c.target_id.in_(target_ids),
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count_by_target(self, target_type: LikeTargetType, target_id: UUID) -> int:
        """Count likes on a target."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
