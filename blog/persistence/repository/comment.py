"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import case, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, CommentSortOrder, PostId, UserId
from blog.persistence.mappers import comment_to_dict, row_to_comment
from blog.persistence.tables import comments_table

_ROOT_ORDERING = {
    CommentSortOrder.NEWEST: (comments_table.c.created_at.desc(),),
    CommentSortOrder.OLDEST: (comments_table.c.created_at.asc(),),
    CommentSortOrder.POPULAR: (
        comments_table.c.likes.desc(),
        comments_table.c.created_at.desc(),
    ),
}


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_one(self, stmt) -> Optional[Comment]:
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def _fetch_all(self, stmt) -> List[Comment]:
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def _count(self, *conditions) -> int:
        stmt = select(func.count()).select_from(comments_table).where(*conditions)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        return await self._fetch_one(stmt)

    def _root_conditions(self, post_id: PostId, include_deleted: bool) -> list:
        conditions = [comments_table.c.post_id == post_id, comments_table.c.depth == 0]
        if not include_deleted:
            conditions.append(comments_table.c.is_deleted.is_(False))
        return conditions

    async def find_roots(
        self,
        post_id: PostId,
        sort: CommentSortOrder = CommentSortOrder.NEWEST,
        include_deleted: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find top-level comments of a post."""
        stmt = (
            select(comments_table)
            .where(*self._root_conditions(post_id, include_deleted))
            .order_by(*_ROOT_ORDERING[sort])
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt)

    async def count_roots(self, post_id: PostId, include_deleted: bool = False) -> int:
        """Count top-level comments of a post."""
        return await self._count(*self._root_conditions(post_id, include_deleted))

    async def find_children(
        self,
        parent_id: CommentId,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find direct replies of a comment, oldest first."""
        stmt = select(comments_table).where(comments_table.c.parent_id == parent_id)
        if not include_deleted:
            stmt = stmt.where(comments_table.c.is_deleted.is_(False))
        stmt = stmt.order_by(comments_table.c.created_at.asc())
        return await self._fetch_all(stmt)

    async def find_ids_by_post(self, post_id: PostId) -> List[CommentId]:
        """Find the ids of every comment of a post."""
        stmt = select(comments_table.c.id).where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        return [CommentId(row_id) for row_id in result.scalars().all()]

    async def find_child_ids(self, parent_id: CommentId) -> List[CommentId]:
        """Find the ids of every direct reply of a comment."""
        stmt = select(comments_table.c.id).where(
            comments_table.c.parent_id == parent_id
        )
        result = await self.session.execute(stmt)
        return [CommentId(row_id) for row_id in result.scalars().all()]

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find non-deleted comments by an author, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.author_id == author_id)
            .where(comments_table.c.is_deleted.is_(False))
            .order_by(comments_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt)

    async def count_by_author(self, author_id: UserId) -> int:
        """Count non-deleted comments by an author."""
        return await self._count(
            comments_table.c.author_id == author_id,
            comments_table.c.is_deleted.is_(False),
        )

    async def find_reported(self, limit: int = 20, offset: int = 0) -> List[Comment]:
        """Find reported comments, most reported first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.reports > 0)
            .where(comments_table.c.is_deleted.is_(False))
            .order_by(
                comments_table.c.reports.desc(), comments_table.c.created_at.desc()
            )
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt)

    async def count_reported(self) -> int:
        """Count reported comments."""
        return await self._count(
            comments_table.c.reports > 0, comments_table.c.is_deleted.is_(False)
        )

    async def count_by_post(self, post_id: PostId, include_deleted: bool = False) -> int:
        """Count comments of a post."""
        conditions = [comments_table.c.post_id == post_id]
        if not include_deleted:
            conditions.append(comments_table.c.is_deleted.is_(False))
        return await self._count(*conditions)

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, text: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the text of a live comment and flag it as edited."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_deleted.is_(False))
            .values(
                content=text,
                is_edited=True,
                edited_at=edited_at,
                updated_at=edited_at,
            )
            .returning(comments_table)
        )
        updated = await self._fetch_one(stmt)
        await self.session.flush()
        return updated

    async def mark_deleted(
        self, comment_id: CommentId, placeholder: str, deleted_at: datetime
    ) -> Optional[Comment]:
        """Tombstone a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_deleted.is_(False))
            .values(
                content=placeholder,
                is_deleted=True,
                deleted_at=deleted_at,
                likes=0,
                updated_at=deleted_at,
            )
            .returning(comments_table)
        )
        deleted = await self._fetch_one(stmt)
        await self.session.flush()
        return deleted

    async def delete_by_post(self, post_id: PostId) -> int:
        """Hard-delete every comment of a post."""
        stmt = delete(comments_table).where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def increment_likes(self, comment_id: CommentId) -> int:
        """Atomically increment likes by 1 and return the new count."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(likes=comments_table.c.likes + 1)
            .returning(comments_table.c.likes)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none() or 0

    async def decrement_likes(self, comment_id: CommentId) -> int:
        """Atomically decrement likes by 1 (minimum 0) and return the new count."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(likes=func.greatest(comments_table.c.likes - 1, 0))
            .returning(comments_table.c.likes)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none() or 0

    async def increment_reports(
        self, comment_id: CommentId, hide_threshold: int
    ) -> Optional[Comment]:
        """Atomically add a report, hiding the comment at the threshold."""
        new_reports = comments_table.c.reports + 1
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                reports=new_reports,
                is_visible=case(
                    (new_reports >= hide_threshold, False),
                    else_=comments_table.c.is_visible,
                ),
            )
            .returning(comments_table)
        )
        reported = await self._fetch_one(stmt)
        await self.session.flush()
        return reported

    async def reset_reports(self, comment_id: CommentId) -> Optional[Comment]:
        """Clear reports and make the comment visible again."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(reports=0, is_visible=True)
            .returning(comments_table)
        )
        reset = await self._fetch_one(stmt)
        await self.session.flush()
        return reset

    async def reset_likes(self, comment_ids: Sequence[CommentId]) -> None:
        """Set the like count of the given comments to zero."""
        if not comment_ids:
            return
        stmt = (
            update(comments_table)
            .where(comments_table.c.id.in_(comment_ids))
            .values(likes=0)
        )
        await self.session.execute(stmt)
        await self.session.flush()
