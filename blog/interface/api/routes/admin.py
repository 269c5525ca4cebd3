"""Moderation routes (admin only)."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from blog.application.usecase.comment import (
    DeleteCommentResponse,
    DismissReportRequest,
    DismissReportUseCase,
    ListCommentsResponse,
    ListReportedCommentsRequest,
    ListReportedCommentsUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
    ReportStateResponse,
)
from blog.domain.service import JWTService
from blog.interface.api.auth import require_admin

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def remove_comment(
    comment_id: UUID,
    remove_comment_use_case: FromDishka[RemoveCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Remove any comment as a moderator."""
    require_admin(jwt_service, auth_token)
    return await remove_comment_use_case.execute(
        RemoveCommentRequest(comment_id=str(comment_id))
    )


@router.post(
    "/comments/{comment_id}/dismiss-report", response_model=ReportStateResponse
)
async def dismiss_report(
    comment_id: UUID,
    dismiss_report_use_case: FromDishka[DismissReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReportStateResponse:
    """Clear a comment's reports and make it visible again."""
    require_admin(jwt_service, auth_token)
    return await dismiss_report_use_case.execute(
        DismissReportRequest(comment_id=str(comment_id))
    )


@router.get("/comments/reported", response_model=ListCommentsResponse)
async def get_reported_comments(
    list_reported_comments_use_case: FromDishka[ListReportedCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> ListCommentsResponse:
    """Get the moderation queue, most reported first."""
    require_admin(jwt_service, auth_token)
    return await list_reported_comments_use_case.execute(
        ListReportedCommentsRequest(page=page, limit=limit)
    )
