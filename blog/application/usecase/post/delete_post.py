"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CascadeService
from blog.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    message: str
    post_likes_deleted: int
    comments_deleted: int
    comment_likes_deleted: int


class DeletePostUseCase:
    """Use case for deleting a post with its comments and likes."""

    def __init__(self, cascade_service: CascadeService) -> None:
        """Initialize delete post use case.

        Args:
            cascade_service: Cascade domain service
        """
        self.cascade_service = cascade_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Args:
            request: Delete post request

        Returns:
            Summary of the removed records

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If user is not the post's author
        """
        summary = await self.cascade_service.delete_post(
            PostId(UUID(request.post_id)), UserId(UUID(request.user_id))
        )
        return DeletePostResponse(
            post_id=str(summary.post_id),
            message="Post deleted successfully",
            post_likes_deleted=summary.post_likes_deleted,
            comments_deleted=summary.comments_deleted,
            comment_likes_deleted=summary.comment_likes_deleted,
        )
