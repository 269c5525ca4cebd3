"""Delete comment use cases (author and moderator)."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class RemoveCommentRequest(BaseModel):
    """Moderator removal request."""

    comment_id: str  # UUID string


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    message: str


class DeleteCommentUseCase:
    """Use case for an author soft deleting their own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If comment not found
            ContentDeletedError: If comment is already deleted
            NotAuthorizedError: If user is not the author
        """
        await self.comment_service.delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            user_id=UserId(UUID(request.user_id)),
        )
        return DeleteCommentResponse(
            comment_id=request.comment_id, message="Comment deleted successfully"
        )


class RemoveCommentUseCase:
    """Use case for a moderator removing any comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: RemoveCommentRequest) -> DeleteCommentResponse:
        """Execute moderator removal flow.

        Raises:
            NotFoundError: If comment not found
            ContentDeletedError: If comment is already deleted
        """
        await self.comment_service.remove_as_admin(CommentId(UUID(request.comment_id)))
        return DeleteCommentResponse(
            comment_id=request.comment_id,
            message="Comment deleted by admin successfully",
        )
