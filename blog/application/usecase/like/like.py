"""Like and unlike use cases."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import LikeService
from blog.domain.value import LikeTargetType, UserId


class LikeRequest(BaseModel):
    """Like or unlike request."""

    target_type: LikeTargetType
    target_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class LikeResponse(BaseModel):
    """Like state of a target after the operation."""

    liked: bool
    likes_count: int


class LikeUseCase:
    """Use case for liking a post or comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikeRequest) -> LikeResponse:
        """Execute like flow.

        Args:
            request: Like request

        Returns:
            Like state with the updated counter

        Raises:
            NotFoundError: If the target doesn't exist
            AlreadyLikedError: If the user already likes the target
        """
        status = await self.like_service.like(
            UserId(UUID(request.user_id)),
            request.target_type,
            UUID(request.target_id),
        )
        return LikeResponse(liked=status.liked, likes_count=status.likes_count)


class UnlikeUseCase:
    """Use case for removing a like from a post or comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize unlike use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikeRequest) -> LikeResponse:
        """Execute unlike flow.

        Raises:
            NotFoundError: If the target doesn't exist
            NotLikedError: If the user doesn't like the target
        """
        status = await self.like_service.unlike(
            UserId(UUID(request.user_id)),
            request.target_type,
            UUID(request.target_id),
        )
        return LikeResponse(liked=status.liked, likes_count=status.likes_count)
