"""Unit tests for the in-memory unit of work."""

import pytest

from blog.domain.repository import CommentRepository, PostRepository, UnitOfWork
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


class TestInMemoryUnitOfWork:
    """Tests for snapshot/restore transactions."""

    @pytest.mark.asyncio
    async def test_successful_block_keeps_writes(self, unit_env):
        # Arrange
        unit_of_work = await unit_env.get(UnitOfWork)
        post_repo = await unit_env.get(PostRepository)
        post = make_post()

        # Act
        async with unit_of_work.transaction():
            await post_repo.save(post)

        # Assert
        assert await post_repo.find_by_id(post.id) is not None

    @pytest.mark.asyncio
    async def test_failed_block_discards_every_write(self, unit_env):
        # Arrange
        unit_of_work = await unit_env.get(UnitOfWork)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        kept = await post_repo.save(make_post())
        post = make_post()
        comment = make_comment(post.id)

        # Act
        with pytest.raises(ValueError):
            async with unit_of_work.transaction():
                await post_repo.save(post)
                await comment_repo.save(comment)
                await post_repo.delete(kept.id)
                raise ValueError("abort")

        # Assert
        assert await post_repo.find_by_id(post.id) is None
        assert await comment_repo.find_by_id(comment.id) is None
        assert await post_repo.find_by_id(kept.id) is not None
