"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.pagination import resolve_limit
from blog.config import PaginationSettings
from blog.domain.model import CommentNode
from blog.domain.service import CommentService, JWTService, LikeService
from blog.domain.value import (
    CommentId,
    CommentSortOrder,
    LikeTargetType,
    PageMeta,
    PostId,
    UserId,
)

from .schemas import CommentTreeItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)
    sort: CommentSortOrder = CommentSortOrder.NEWEST
    include_deleted: bool = False
    auth_token: str | None = None  # JWT token for authentication (optional)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentTreeItem]
    meta: PageMeta


class GetCommentRequest(BaseModel):
    """Get single comment request."""

    comment_id: str  # UUID string
    auth_token: str | None = None


async def _liked_comment_ids(
    like_service: LikeService, user_id: UserId | None, nodes: list[CommentNode]
) -> set[str]:
    """Ids of every comment in the trees that the user likes."""
    if not user_id:
        return set()
    comment_ids = [comment.id for node in nodes for comment in node.walk()]
    liked = await like_service.get_liked_target_ids(
        user_id, LikeTargetType.COMMENT, comment_ids
    )
    return {str(target_id) for target_id in liked}


class GetCommentsUseCase:
    """Use case for getting a page of a post's comment thread."""

    def __init__(
        self,
        comment_service: CommentService,
        like_service: LikeService,
        jwt_service: JWTService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            like_service: Like service for checking the requester's likes
            jwt_service: JWT service for decoding auth tokens
            pagination: Page size limits
        """
        self.comment_service = comment_service
        self.like_service = like_service
        self.jwt_service = jwt_service
        self.pagination = pagination

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Top-level comments are paginated; each carries its full reply tree.
        Every comment is flagged with whether the requester likes it.

        Args:
            request: Get comments request with post ID and optional auth token

        Returns:
            Comment trees with pagination metadata
        """
        limit = resolve_limit(request.limit, self.pagination)
        nodes, meta = await self.comment_service.get_thread(
            post_id=PostId(UUID(request.post_id)),
            page=request.page,
            limit=limit,
            sort=request.sort,
            include_deleted=request.include_deleted,
        )

        user_id = self.jwt_service.get_user_id_from_token(request.auth_token)
        liked_ids = await _liked_comment_ids(self.like_service, user_id, nodes)

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=[CommentTreeItem.from_node(node, liked_ids) for node in nodes],
            meta=meta,
        )


class GetCommentUseCase:
    """Use case for getting one comment with its replies."""

    def __init__(
        self,
        comment_service: CommentService,
        like_service: LikeService,
        jwt_service: JWTService,
    ) -> None:
        self.comment_service = comment_service
        self.like_service = like_service
        self.jwt_service = jwt_service

    async def execute(self, request: GetCommentRequest) -> CommentTreeItem:
        """Execute get comment flow.

        Raises:
            NotFoundError: If comment not found
        """
        node = await self.comment_service.get_comment_tree(
            CommentId(UUID(request.comment_id))
        )
        user_id = self.jwt_service.get_user_id_from_token(request.auth_token)
        liked_ids = await _liked_comment_ids(self.like_service, user_id, [node])
        return CommentTreeItem.from_node(node, liked_ids)
