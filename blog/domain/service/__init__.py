"""Domain services."""

from .base import Service
from .cascade_service import CascadeService, PostDeletionSummary
from .comment_service import CommentService
from .jwt_service import JWTService
from .like_service import LikeService
from .post_service import PostService
from .sanitizer import ContentSanitizer

__all__ = [
    "CascadeService",
    "CommentService",
    "ContentSanitizer",
    "JWTService",
    "LikeService",
    "PostDeletionSummary",
    "PostService",
    "Service",
]
