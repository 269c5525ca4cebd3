"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId

from .schemas import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    content: str


class UpdateCommentResponse(CommentItem):
    """Update comment response."""


class UpdateCommentUseCase:
    """Use case for editing a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            The edited comment

        Raises:
            NotFoundError: If comment not found
            ContentDeletedError: If comment is deleted
            NotAuthorizedError: If user is not the author
            ValidationError: If the new content is empty or too long
        """
        comment = await self.comment_service.update_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            user_id=UserId(UUID(request.user_id)),
            content=request.content,
        )
        return UpdateCommentResponse.from_domain(comment)
