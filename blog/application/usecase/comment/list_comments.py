"""Flat comment listings: by author and the moderation queue."""

from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.pagination import resolve_limit
from blog.config import PaginationSettings
from blog.domain.service import CommentService
from blog.domain.value import PageMeta, UserId

from .schemas import CommentItem


class ListUserCommentsRequest(BaseModel):
    """List a user's comments request."""

    user_id: str  # UUID string
    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)


class ListReportedCommentsRequest(BaseModel):
    """List reported comments request."""

    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)


class ListCommentsResponse(BaseModel):
    """Paginated flat list of comments."""

    comments: list[CommentItem]
    meta: PageMeta


class ListUserCommentsUseCase:
    """Use case for listing a user's comments, newest first."""

    def __init__(
        self, comment_service: CommentService, pagination: PaginationSettings
    ) -> None:
        self.comment_service = comment_service
        self.pagination = pagination

    async def execute(self, request: ListUserCommentsRequest) -> ListCommentsResponse:
        """Execute list user comments flow."""
        comments, meta = await self.comment_service.get_comments_by_author(
            UserId(UUID(request.user_id)),
            page=request.page,
            limit=resolve_limit(request.limit, self.pagination),
        )
        return ListCommentsResponse(
            comments=[CommentItem.from_domain(c) for c in comments], meta=meta
        )


class ListReportedCommentsUseCase:
    """Use case for the moderation queue, most reported first."""

    def __init__(
        self, comment_service: CommentService, pagination: PaginationSettings
    ) -> None:
        self.comment_service = comment_service
        self.pagination = pagination

    async def execute(
        self, request: ListReportedCommentsRequest
    ) -> ListCommentsResponse:
        """Execute list reported comments flow."""
        comments, meta = await self.comment_service.get_reported_comments(
            page=request.page,
            limit=resolve_limit(request.limit, self.pagination),
        )
        return ListCommentsResponse(
            comments=[CommentItem.from_domain(c) for c in comments], meta=meta
        )
