"""Likers listing and like status use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.pagination import resolve_limit
from blog.config import PaginationSettings
from blog.domain.service import JWTService, LikeService
from blog.domain.value import (
    LikerFilters,
    LikerSortBy,
    LikeTargetType,
    PageMeta,
    SortDirection,
)

from .like import LikeResponse


class ListLikersRequest(BaseModel):
    """List likers request."""

    target_type: LikeTargetType
    target_id: str  # UUID string
    created_from: datetime | None = None
    created_to: datetime | None = None
    username_contains: str | None = None
    verified_only: bool = False
    sort_by: LikerSortBy = LikerSortBy.CREATED_AT
    sort_direction: SortDirection = SortDirection.DESC
    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)


class LikerItem(BaseModel):
    """A user who liked the target."""

    user_id: str
    username: str
    display_name: str | None
    avatar_url: str | None
    email_verified: bool
    liked_at: datetime


class ListLikersResponse(BaseModel):
    """List likers response."""

    likers: list[LikerItem]
    meta: PageMeta


class LikeStatusRequest(BaseModel):
    """Like status request."""

    target_type: LikeTargetType
    target_id: str  # UUID string
    auth_token: str | None = None  # Anonymous requests never like anything


class ListLikersUseCase:
    """Use case for listing who liked a post or comment."""

    def __init__(
        self, like_service: LikeService, pagination: PaginationSettings
    ) -> None:
        """Initialize list likers use case.

        Args:
            like_service: Like domain service
            pagination: Page size limits
        """
        self.like_service = like_service
        self.pagination = pagination

    async def execute(self, request: ListLikersRequest) -> ListLikersResponse:
        """Execute list likers flow.

        Raises:
            NotFoundError: If the target doesn't exist
        """
        filters = LikerFilters(
            created_from=request.created_from,
            created_to=request.created_to,
            username_contains=request.username_contains,
            verified_only=request.verified_only,
            sort_by=request.sort_by,
            sort_direction=request.sort_direction,
        )
        likers, meta = await self.like_service.list_likers(
            request.target_type,
            UUID(request.target_id),
            filters=filters,
            page=request.page,
            limit=resolve_limit(request.limit, self.pagination),
        )
        return ListLikersResponse(
            likers=[
                LikerItem(
                    user_id=str(liker.user.id),
                    username=liker.user.username,
                    display_name=liker.user.display_name,
                    avatar_url=liker.user.avatar_url,
                    email_verified=liker.user.email_verified,
                    liked_at=liker.liked_at,
                )
                for liker in likers
            ],
            meta=meta,
        )


class GetLikeStatusUseCase:
    """Use case for checking whether the requester likes a target."""

    def __init__(self, like_service: LikeService, jwt_service: JWTService) -> None:
        self.like_service = like_service
        self.jwt_service = jwt_service

    async def execute(self, request: LikeStatusRequest) -> LikeResponse:
        """Execute like status flow.

        Raises:
            NotFoundError: If the target doesn't exist
        """
        user_id = self.jwt_service.get_user_id_from_token(request.auth_token)
        status = await self.like_service.get_like_status(
            user_id, request.target_type, UUID(request.target_id)
        )
        return LikeResponse(liked=status.liked, likes_count=status.likes_count)
