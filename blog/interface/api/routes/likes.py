"""Like routes for posts and comments."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Depends, Query

from blog.application.usecase.like import (
    GetLikeStatusUseCase,
    LikeRequest,
    LikeResponse,
    LikeStatusRequest,
    LikeUseCase,
    ListLikersRequest,
    ListLikersResponse,
    ListLikersUseCase,
    UnlikeUseCase,
)
from blog.domain.service import JWTService
from blog.domain.value import LikerSortBy, LikeTargetType, SortDirection
from blog.interface.api.auth import require_user_id

router = APIRouter(tags=["likes"], route_class=DishkaRoute)


class LikerQuery:
    """Query parameters for listing likers."""

    def __init__(
        self,
        page: int = Query(default=1, ge=1),
        limit: int | None = Query(default=None, ge=1),
        created_from: datetime | None = None,
        created_to: datetime | None = None,
        username: str | None = Query(default=None, max_length=50),
        verified_only: bool = False,
        sort_by: LikerSortBy = LikerSortBy.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
    ) -> None:
        self.page = page
        self.limit = limit
        self.created_from = created_from
        self.created_to = created_to
        self.username = username
        self.verified_only = verified_only
        self.sort_by = sort_by
        self.sort_direction = sort_direction

    def to_request(self, target_type: LikeTargetType, target_id: UUID) -> ListLikersRequest:
        """Build the use case request for a target."""
        return ListLikersRequest(
            target_type=target_type,
            target_id=str(target_id),
            created_from=self.created_from,
            created_to=self.created_to,
            username_contains=self.username,
            verified_only=self.verified_only,
            sort_by=self.sort_by,
            sort_direction=self.sort_direction,
            page=self.page,
            limit=self.limit,
        )


# Posts


@router.post("/posts/{post_id}/like", response_model=LikeResponse)
async def like_post(
    post_id: UUID,
    like_use_case: FromDishka[LikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeResponse:
    """Like a post.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token, "like")
    return await like_use_case.execute(
        LikeRequest(
            target_type=LikeTargetType.POST,
            target_id=str(post_id),
            user_id=str(user_id),
        )
    )


@router.delete("/posts/{post_id}/like", response_model=LikeResponse)
async def unlike_post(
    post_id: UUID,
    unlike_use_case: FromDishka[UnlikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeResponse:
    """Remove a like from a post.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token, "unlike")
    return await unlike_use_case.execute(
        LikeRequest(
            target_type=LikeTargetType.POST,
            target_id=str(post_id),
            user_id=str(user_id),
        )
    )


@router.get("/posts/{post_id}/likes", response_model=ListLikersResponse)
async def get_post_likers(
    post_id: UUID,
    list_likers_use_case: FromDishka[ListLikersUseCase],
    query: LikerQuery = Depends(),
) -> ListLikersResponse:
    """List the users who liked a post."""
    return await list_likers_use_case.execute(
        query.to_request(LikeTargetType.POST, post_id)
    )


@router.get("/posts/{post_id}/like-status", response_model=LikeResponse)
async def get_post_like_status(
    post_id: UUID,
    like_status_use_case: FromDishka[GetLikeStatusUseCase],
    auth_token: str | None = Cookie(default=None),
) -> LikeResponse:
    """Whether the requester likes a post, with its like count."""
    return await like_status_use_case.execute(
        LikeStatusRequest(
            target_type=LikeTargetType.POST,
            target_id=str(post_id),
            auth_token=auth_token,
        )
    )


# Comments


@router.post("/comments/{comment_id}/like", response_model=LikeResponse)
async def like_comment(
    comment_id: UUID,
    like_use_case: FromDishka[LikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeResponse:
    """Like a comment.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token, "like")
    return await like_use_case.execute(
        LikeRequest(
            target_type=LikeTargetType.COMMENT,
            target_id=str(comment_id),
            user_id=str(user_id),
        )
    )


@router.delete("/comments/{comment_id}/like", response_model=LikeResponse)
async def unlike_comment(
    comment_id: UUID,
    unlike_use_case: FromDishka[UnlikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeResponse:
    """Remove a like from a comment.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token, "unlike")
    return await unlike_use_case.execute(
        LikeRequest(
            target_type=LikeTargetType.COMMENT,
            target_id=str(comment_id),
            user_id=str(user_id),
        )
    )


@router.get("/comments/{comment_id}/likes", response_model=ListLikersResponse)
async def get_comment_likers(
    comment_id: UUID,
    list_likers_use_case: FromDishka[ListLikersUseCase],
    query: LikerQuery = Depends(),
) -> ListLikersResponse:
    """List the users who liked a comment."""
    return await list_likers_use_case.execute(
        query.to_request(LikeTargetType.COMMENT, comment_id)
    )


@router.get("/comments/{comment_id}/like-status", response_model=LikeResponse)
async def get_comment_like_status(
    comment_id: UUID,
    like_status_use_case: FromDishka[GetLikeStatusUseCase],
    auth_token: str | None = Cookie(default=None),
) -> LikeResponse:
    """Whether the requester likes a comment, with its like count."""
    return await like_status_use_case.execute(
        LikeStatusRequest(
            target_type=LikeTargetType.COMMENT,
            target_id=str(comment_id),
            auth_token=auth_token,
        )
    )
