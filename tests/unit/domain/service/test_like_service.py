"""Unit tests for LikeService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from blog.domain.error import AlreadyLikedError, NotFoundError, NotLikedError
from blog.domain.model import Like
from blog.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from blog.domain.service import LikeService
from blog.domain.value import (
    LikeId,
    LikerFilters,
    LikerSortBy,
    LikeTargetType,
    SortDirection,
)
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


class TestLike:
    """Tests for like and unlike."""

    @pytest.mark.asyncio
    async def test_like_post_increments_counter(self, unit_env):
        """Liking creates a record and bumps the post's counter."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        like_repo = await unit_env.get(LikeRepository)
        post = await post_repo.save(make_post())
        user = make_user()

        # Act
        status = await like_service.like(user.id, LikeTargetType.POST, post.id)

        # Assert
        assert status.liked is True
        assert status.likes_count == 1
        assert await like_repo.count_by_target(LikeTargetType.POST, post.id) == 1
        updated = await post_repo.find_by_id(post.id)
        assert updated.metadata.likes == 1

    @pytest.mark.asyncio
    async def test_like_comment_increments_counter(self, unit_env):
        """Comment likes land on the comment's counter."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(make_post().id)
        await comment_repo.save(comment)

        # Act
        first = await like_service.like(make_user().id, LikeTargetType.COMMENT, comment.id)
        second = await like_service.like(
            make_user().id, LikeTargetType.COMMENT, comment.id
        )

        # Assert
        assert first.likes_count == 1
        assert second.likes_count == 2
        updated = await comment_repo.find_by_id(comment.id)
        assert updated.likes == 2

    @pytest.mark.asyncio
    async def test_double_like_is_rejected(self, unit_env):
        """A second like by the same user fails and leaves the counter alone."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        user = make_user()
        await like_service.like(user.id, LikeTargetType.POST, post.id)

        # Act & Assert
        with pytest.raises(AlreadyLikedError, match="Post already liked"):
            await like_service.like(user.id, LikeTargetType.POST, post.id)

        updated = await post_repo.find_by_id(post.id)
        assert updated.metadata.likes == 1

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_caught_by_unique_constraint(
        self, unit_env, monkeypatch
    ):
        """A like racing past the existence check still fails once."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        like_repo = await unit_env.get(LikeRepository)
        post = await post_repo.save(make_post())
        user = make_user()
        await like_service.like(user.id, LikeTargetType.POST, post.id)

        async def stale_lookup(*args, **kwargs):
            return None

        # Simulate the second request reading before the first one committed
        monkeypatch.setattr(like_repo, "find_by_user_and_target", stale_lookup)

        # Act & Assert
        with pytest.raises(AlreadyLikedError):
            await like_service.like(user.id, LikeTargetType.POST, post.id)

        assert await like_repo.count_by_target(LikeTargetType.POST, post.id) == 1
        updated = await post_repo.find_by_id(post.id)
        assert updated.metadata.likes == 1

    @pytest.mark.asyncio
    async def test_like_missing_target_raises_not_found(self, unit_env):
        """Liking something that doesn't exist should fail."""
        # Arrange
        like_service = await unit_env.get(LikeService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Comment not found"):
            await like_service.like(make_user().id, LikeTargetType.COMMENT, uuid4())

    @pytest.mark.asyncio
    async def test_unlike_decrements_counter(self, unit_env):
        """Unliking removes the record and lowers the counter."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        user = make_user()
        await like_service.like(user.id, LikeTargetType.POST, post.id)

        # Act
        status = await like_service.unlike(user.id, LikeTargetType.POST, post.id)

        # Assert
        assert status.liked is False
        assert status.likes_count == 0
        assert await like_service.is_liked(user.id, LikeTargetType.POST, post.id) is False

    @pytest.mark.asyncio
    async def test_unlike_without_like_is_rejected(self, unit_env):
        """Unliking something never liked should fail."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act & Assert
        with pytest.raises(NotLikedError, match="Post not liked"):
            await like_service.unlike(make_user().id, LikeTargetType.POST, post.id)

    @pytest.mark.asyncio
    async def test_counter_never_goes_negative(self, unit_env):
        """A drifted counter is floored at zero on unlike."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        like_repo = await unit_env.get(LikeRepository)
        post = await post_repo.save(make_post())
        user = make_user()
        # Record exists but the counter was never incremented
        await like_repo.save(
            Like(
                id=LikeId(uuid4()),
                user_id=user.id,
                target_type=LikeTargetType.POST,
                target_id=post.id,
                created_at=datetime.now(),
            )
        )

        # Act
        status = await like_service.unlike(user.id, LikeTargetType.POST, post.id)

        # Assert
        assert status.likes_count == 0


class TestLikeStatus:
    """Tests for get_like_status and get_liked_target_ids."""

    @pytest.mark.asyncio
    async def test_anonymous_user_never_likes(self, unit_env):
        """Without a user the status is unliked but still carries the count."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        await like_service.like(make_user().id, LikeTargetType.POST, post.id)

        # Act
        status = await like_service.get_like_status(None, LikeTargetType.POST, post.id)

        # Assert
        assert status.liked is False
        assert status.likes_count == 1

    @pytest.mark.asyncio
    async def test_liked_target_ids_is_a_batch_lookup(self, unit_env):
        """Only the liked comments among the given ids are returned."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post()
        liked = make_comment(post.id)
        not_liked = make_comment(post.id)
        await comment_repo.save(liked)
        await comment_repo.save(not_liked)
        user = make_user()
        await like_service.like(user.id, LikeTargetType.COMMENT, liked.id)

        # Act
        result = await like_service.get_liked_target_ids(
            user.id, LikeTargetType.COMMENT, [liked.id, not_liked.id]
        )

        # Assert
        assert result == {liked.id}


class TestListLikers:
    """Tests for list_likers."""

    async def _seed(self, unit_env):
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        like_repo = await unit_env.get(LikeRepository)
        user_repo = await unit_env.get(UserRepository)
        post = await post_repo.save(make_post())

        alice = await user_repo.save(make_user("alice", email_verified=True))
        bob = await user_repo.save(make_user("bob"))
        carol = await user_repo.save(make_user("carol", email_verified=True))
        now = datetime.now()
        for days_ago, user in ((3, alice), (2, bob), (1, carol)):
            await like_repo.save(
                Like(
                    id=LikeId(uuid4()),
                    user_id=user.id,
                    target_type=LikeTargetType.POST,
                    target_id=post.id,
                    created_at=now - timedelta(days=days_ago),
                )
            )
        return like_service, post, now

    @pytest.mark.asyncio
    async def test_newest_likers_first_by_default(self, unit_env):
        """Default order is most recent like first."""
        # Arrange
        like_service, post, _ = await self._seed(unit_env)

        # Act
        likers, meta = await like_service.list_likers(LikeTargetType.POST, post.id)

        # Assert
        assert [liker.user.username for liker in likers] == ["carol", "bob", "alice"]
        assert meta.total == 3

    @pytest.mark.asyncio
    async def test_filters_apply_before_counting(self, unit_env):
        """Verified filter narrows the results and the total."""
        # Arrange
        like_service, post, _ = await self._seed(unit_env)
        filters = LikerFilters(
            verified_only=True,
            sort_by=LikerSortBy.USERNAME,
            sort_direction=SortDirection.ASC,
        )

        # Act
        likers, meta = await like_service.list_likers(
            LikeTargetType.POST, post.id, filters=filters
        )

        # Assert
        assert [liker.user.username for liker in likers] == ["alice", "carol"]
        assert meta.total == 2

    @pytest.mark.asyncio
    async def test_date_and_username_filters(self, unit_env):
        """Date range and username substring combine."""
        # Arrange
        like_service, post, now = await self._seed(unit_env)
        filters = LikerFilters(
            created_from=now - timedelta(days=2, hours=12),
            username_contains="O",
        )

        # Act
        likers, meta = await like_service.list_likers(
            LikeTargetType.POST, post.id, filters=filters
        )

        # Assert
        assert [liker.user.username for liker in likers] == ["carol", "bob"]
        assert meta.total == 2

    @pytest.mark.asyncio
    async def test_pagination(self, unit_env):
        """Pages slice the filtered likers."""
        # Arrange
        like_service, post, _ = await self._seed(unit_env)

        # Act
        likers, meta = await like_service.list_likers(
            LikeTargetType.POST, post.id, page=2, limit=2
        )

        # Assert
        assert [liker.user.username for liker in likers] == ["alice"]
        assert meta.total_pages == 2
        assert meta.has_prev is True
