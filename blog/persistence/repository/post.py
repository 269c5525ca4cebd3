"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId
from blog.persistence.mappers import post_to_dict, row_to_post
from blog.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        existing = await self.find_by_id(post.id)
        post_dict = post_to_dict(post)

        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete)."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment comment count by 1."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(comments_count=posts_table.c.comments_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_comment_count(self, post_id: PostId) -> None:
        """Atomically decrement comment count by 1 (minimum 0)."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(comments_count=func.greatest(posts_table.c.comments_count - 1, 0))
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_likes(self, post_id: PostId) -> int:
        """Atomically increment likes by 1 and return the new count."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(likes_count=posts_table.c.likes_count + 1)
            .returning(posts_table.c.likes_count)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none() or 0

    async def decrement_likes(self, post_id: PostId) -> int:
        """Atomically decrement likes by 1 (minimum 0) and return the new count."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(likes_count=func.greatest(posts_table.c.likes_count - 1, 0))
            .returning(posts_table.c.likes_count)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none() or 0
