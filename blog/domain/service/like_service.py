"""Like domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from blog.domain.error import AlreadyLikedError, NotLikedError
from blog.domain.model.like import Like, Liker
from blog.domain.repository import LikeRepository, UserRepository
from blog.domain.value import (
    CommentId,
    LikeId,
    LikerFilters,
    LikerSortBy,
    LikeStatus,
    LikeTargetType,
    PageMeta,
    PostId,
    SortDirection,
    UserId,
)

from .base import Service
from .comment_service import CommentService
from .post_service import PostService


class LikeService(Service):
    """Domain service for like operations."""

    def __init__(
        self,
        like_repository: LikeRepository,
        user_repository: UserRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            user_repository: User repository (for listing likers)
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.like_repository = like_repository
        self.user_repository = user_repository
        self.post_service = post_service
        self.comment_service = comment_service

    async def _current_likes(self, target_type: LikeTargetType, target_id: UUID) -> int:
        """Load the target and return its like counter.

        Raises:
            NotFoundError: If the target doesn't exist
        """
        if target_type == LikeTargetType.POST:
            post = await self.post_service.get_post(PostId(target_id))
            return post.metadata.likes
        comment = await self.comment_service.get_comment(CommentId(target_id))
        return comment.likes

    async def _increment(self, target_type: LikeTargetType, target_id: UUID) -> int:
        if target_type == LikeTargetType.POST:
            return await self.post_service.increment_likes(PostId(target_id))
        return await self.comment_service.increment_likes(CommentId(target_id))

    async def _decrement(self, target_type: LikeTargetType, target_id: UUID) -> int:
        if target_type == LikeTargetType.POST:
            return await self.post_service.decrement_likes(PostId(target_id))
        return await self.comment_service.decrement_likes(CommentId(target_id))

    async def like(
        self, user_id: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> LikeStatus:
        """Like a post or comment.

        Creates the like record, then atomically increments the target's
        like counter.

        Args:
            user_id: User ID
            target_type: Type of target
            target_id: Target ID

        Returns:
            Like status with the counter after the increment

        Raises:
            NotFoundError: If the target doesn't exist
            AlreadyLikedError: If the user already likes the target
        """
        with logfire.span(
            "like_service.like",
            user_id=str(user_id),
            target_type=target_type.value,
            target_id=str(target_id),
        ):
            await self._current_likes(target_type, target_id)

            existing = await self.like_repository.find_by_user_and_target(
                user_id, target_type, target_id
            )
            if existing:
                raise AlreadyLikedError(target_type.label)

            like = Like(
                id=LikeId(uuid4()),
                user_id=user_id,
                target_type=target_type,
                target_id=target_id,
                created_at=datetime.now(),
            )

            # The unique constraint catches a concurrent like that slipped past the check
            try:
                await self.like_repository.save(like)
            except IntegrityError:
                logfire.warn(
                    "Duplicate like attempt",
                    user_id=str(user_id),
                    target_type=target_type.value,
                    target_id=str(target_id),
                )
                raise AlreadyLikedError(target_type.label)

            likes = await self._increment(target_type, target_id)
            logfire.info(
                "Target liked",
                target_type=target_type.value,
                target_id=str(target_id),
                likes=likes,
            )
            return LikeStatus(liked=True, likes_count=likes)

    async def unlike(
        self, user_id: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> LikeStatus:
        """Remove a like from a post or comment.

        Deletes the like record, then atomically decrements the target's
        like counter (minimum 0).

        Raises:
            NotFoundError: If the target doesn't exist
            NotLikedError: If the user doesn't like the target
        """
        with logfire.span(
            "like_service.unlike",
            user_id=str(user_id),
            target_type=target_type.value,
            target_id=str(target_id),
        ):
            await self._current_likes(target_type, target_id)

            existing = await self.like_repository.find_by_user_and_target(
                user_id, target_type, target_id
            )
            if not existing:
                raise NotLikedError(target_type.label)

            deleted = await self.like_repository.delete(user_id, target_type, target_id)
            if not deleted:
                # A concurrent unlike removed it first
                raise NotLikedError(target_type.label)

            likes = await self._decrement(target_type, target_id)
            logfire.info(
                "Target unliked",
                target_type=target_type.value,
                target_id=str(target_id),
                likes=likes,
            )
            return LikeStatus(liked=False, likes_count=likes)

    async def get_like_status(
        self, user_id: UserId | None, target_type: LikeTargetType, target_id: UUID
    ) -> LikeStatus:
        """Get whether a user likes a target, with the target's like count.

        Anonymous users never like anything.

        Raises:
            NotFoundError: If the target doesn't exist
        """
        likes = await self._current_likes(target_type, target_id)
        liked = False
        if user_id:
            liked = await self.is_liked(user_id, target_type, target_id)
        return LikeStatus(liked=liked, likes_count=likes)

    async def is_liked(
        self, user_id: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> bool:
        """Check whether a user likes a target."""
        like = await self.like_repository.find_by_user_and_target(
            user_id, target_type, target_id
        )
        return like is not None

    async def get_liked_target_ids(
        self, user_id: UserId, target_type: LikeTargetType, target_ids: list[UUID]
    ) -> set[UUID]:
        """Get which of the given targets a user likes (single batch query)."""
        if not target_ids:
            return set()
        likes = await self.like_repository.find_by_user_and_targets(
            user_id, target_type, target_ids
        )
        return {like.target_id for like in likes}

    async def list_likers(
        self,
        target_type: LikeTargetType,
        target_id: UUID,
        filters: LikerFilters | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> tuple[list[Liker], PageMeta]:
        """List the users who liked a target.

        Likes are filtered by date in the repository; user filters apply
        after joining the users, and the total counts only likes that pass
        every filter.

        Args:
            target_type: Type of target
            target_id: Target ID
            filters: Date, username and verification filters plus sort order
            page: 1-based page number
            limit: Likers per page

        Returns:
            Tuple of (likers on the page, pagination metadata)

        Raises:
            NotFoundError: If the target doesn't exist
        """
        filters = filters or LikerFilters()
        with logfire.span(
            "like_service.list_likers",
            target_type=target_type.value,
            target_id=str(target_id),
            page=page,
            limit=limit,
        ):
            await self._current_likes(target_type, target_id)

            likes = await self.like_repository.find_by_target(
                target_type,
                target_id,
                created_from=filters.created_from,
                created_to=filters.created_to,
            )
            users = await self.user_repository.find_by_ids(
                list({like.user_id for like in likes})
            )
            users_by_id = {user.id: user for user in users}

            needle = (filters.username_contains or "").lower()
            likers = []
            for like in likes:
                user = users_by_id.get(like.user_id)
                if user is None:
                    continue
                if needle and needle not in user.username.lower():
                    continue
                if filters.verified_only and not user.email_verified:
                    continue
                likers.append(Liker(user=user, liked_at=like.created_at))

            reverse = filters.sort_direction == SortDirection.DESC
            if filters.sort_by == LikerSortBy.USERNAME:
                likers.sort(key=lambda liker: liker.user.username.lower(), reverse=reverse)
            else:
                likers.sort(key=lambda liker: liker.liked_at, reverse=reverse)

            total = len(likers)
            offset = (page - 1) * limit
            logfire.info(
                "Likers listed",
                target_type=target_type.value,
                target_id=str(target_id),
                total=total,
            )
            return likers[offset : offset + limit], PageMeta.build(
                page=page, limit=limit, total=total
            )
