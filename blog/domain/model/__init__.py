"""Domain model entities for the blog engagement engine."""

from blog.domain.model.comment import (
    ActiveBody,
    Comment,
    CommentNode,
    DeletedBody,
)
from blog.domain.model.like import Like, Liker
from blog.domain.model.post import Post, PostMetadata
from blog.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "PostMetadata",
    "Comment",
    "CommentNode",
    "ActiveBody",
    "DeletedBody",
    "Like",
    "Liker",
]
