"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from blog.application.usecase.comment import (
    CommentTreeItem,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentUseCase,
    ListCommentsResponse,
    ListUserCommentsRequest,
    ListUserCommentsUseCase,
    ReportCommentRequest,
    ReportCommentUseCase,
    ReportStateResponse,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from blog.domain.service import JWTService
from blog.domain.value import CommentSortOrder
from blog.interface.api.auth import require_user_id

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    # Length is enforced after sanitization, markup included here
    content: str = Field(min_length=1, max_length=5000)
    parent_id: UUID | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1, max_length=5000)


class ReportCommentAPIRequest(BaseModel):
    """API request for reporting a comment."""

    reason: str | None = Field(default=None, max_length=500)


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment details
    """
    user_id = require_user_id(jwt_service, auth_token, "create comments")
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=str(post_id),
            content=request.content,
            author_id=str(user_id),
            parent_id=str(request.parent_id) if request.parent_id else None,
        )
    )


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    sort: CommentSortOrder = CommentSortOrder.NEWEST,
    include_deleted: bool = False,
    auth_token: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """Get a page of a post's comment thread.

    Top-level comments are paginated; replies are nested under them.
    Authentication is optional and only used to flag liked comments.
    """
    return await get_comments_use_case.execute(
        GetCommentsRequest(
            post_id=str(post_id),
            page=page,
            limit=limit,
            sort=sort,
            include_deleted=include_deleted,
            auth_token=auth_token,
        )
    )


@router.get("/comments/{comment_id}", response_model=CommentTreeItem)
async def get_comment(
    comment_id: UUID,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CommentTreeItem:
    """Get a comment with its replies."""
    return await get_comment_use_case.execute(
        GetCommentRequest(comment_id=str(comment_id), auth_token=auth_token)
    )


@router.patch("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Edit a comment's content.

    Only the comment author can edit.
    """
    user_id = require_user_id(jwt_service, auth_token, "edit comments")
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=str(comment_id),
            user_id=str(user_id),
            content=request.content,
        )
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Soft delete a comment.

    Only the comment author can delete. Replies stay in the thread.
    """
    user_id = require_user_id(jwt_service, auth_token, "delete comments")
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=str(comment_id), user_id=str(user_id))
    )


@router.post("/comments/{comment_id}/report", response_model=ReportStateResponse)
async def report_comment(
    comment_id: UUID,
    request: ReportCommentAPIRequest,
    report_comment_use_case: FromDishka[ReportCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReportStateResponse:
    """Report a comment for moderation.

    Requires authentication.
    """
    require_user_id(jwt_service, auth_token, "report comments")
    return await report_comment_use_case.execute(
        ReportCommentRequest(comment_id=str(comment_id), reason=request.reason)
    )


@router.get("/users/{user_id}/comments", response_model=ListCommentsResponse)
async def get_user_comments(
    user_id: UUID,
    list_user_comments_use_case: FromDishka[ListUserCommentsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
) -> ListCommentsResponse:
    """Get a user's comments, newest first."""
    return await list_user_comments_use_case.execute(
        ListUserCommentsRequest(user_id=str(user_id), page=page, limit=limit)
    )
