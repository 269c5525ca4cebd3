"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId, UserId

from .schemas import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(CommentItem):
    """Create comment response."""


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        The comment service verifies the post and parent, sanitizes the
        content and updates the post's comment count.

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details

        Raises:
            NotFoundError: If post or parent comment not found
            BusinessRuleViolationError: If the reply is invalid
            ValidationError: If the content is empty or too long
        """
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None
        comment = await self.comment_service.create_comment(
            post_id=PostId(UUID(request.post_id)),
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
            parent_id=parent_id,
        )
        return CreateCommentResponse.from_domain(comment)
