"""Report and dismiss-report use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from blog.domain.service import CommentService
from blog.domain.value import CommentId


class ReportCommentRequest(BaseModel):
    """Report comment request."""

    comment_id: str  # UUID string
    reason: str | None = Field(default=None, max_length=500)


class DismissReportRequest(BaseModel):
    """Dismiss report request."""

    comment_id: str  # UUID string


class ReportStateResponse(BaseModel):
    """Moderation state of a comment after a report change."""

    comment_id: str
    reports: int
    is_visible: bool


class ReportCommentUseCase:
    """Use case for reporting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ReportCommentRequest) -> ReportStateResponse:
        """Execute report flow.

        Raises:
            NotFoundError: If comment not found
        """
        comment = await self.comment_service.report_comment(
            CommentId(UUID(request.comment_id)), reason=request.reason
        )
        return ReportStateResponse(
            comment_id=str(comment.id),
            reports=comment.reports,
            is_visible=comment.is_visible,
        )


class DismissReportUseCase:
    """Use case for a moderator clearing a comment's reports."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DismissReportRequest) -> ReportStateResponse:
        """Execute dismiss flow.

        Raises:
            NotFoundError: If comment not found
        """
        comment = await self.comment_service.dismiss_report(
            CommentId(UUID(request.comment_id))
        )
        return ReportStateResponse(
            comment_id=str(comment.id),
            reports=comment.reports,
            is_visible=comment.is_visible,
        )
