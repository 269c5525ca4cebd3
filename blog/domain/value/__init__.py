"""Domain value objects for the blog engagement engine."""

from blog.domain.value.identifiers import (
    CommentId,
    LikeId,
    PostId,
    UserId,
)
from blog.domain.value.types import (
    CommentPath,
    CommentSortOrder,
    LikerFilters,
    LikerSortBy,
    LikeStatus,
    LikeTargetType,
    PageMeta,
    SortDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "LikeId",
    # Types
    "CommentPath",
    "CommentSortOrder",
    "LikeTargetType",
    "LikeStatus",
    "LikerFilters",
    "LikerSortBy",
    "PageMeta",
    "SortDirection",
]
