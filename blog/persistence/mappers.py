"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from blog.domain.model import (
    ActiveBody,
    Comment,
    DeletedBody,
    Like,
    Post,
    PostMetadata,
    User,
)
from blog.domain.value import (
    CommentId,
    CommentPath,
    LikeId,
    LikeTargetType,
    PostId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        display_name=row.get("display_name"),
        avatar_url=row.get("avatar_url"),
        email_verified=row["email_verified"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        metadata=PostMetadata(
            likes=row["likes_count"],
            comments=row["comments_count"],
            views=row["views_count"],
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict (flattening the counters)."""
    return {
        "id": post.id,
        "author_id": post.author_id,
        "title": post.title,
        "likes_count": post.metadata.likes,
        "comments_count": post.metadata.comments,
        "views_count": post.metadata.views,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The deletion flags select which body variant is built.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    if row["is_deleted"]:
        body: ActiveBody | DeletedBody = DeletedBody(
            placeholder=row["content"],
            deleted_at=row["deleted_at"] or row["updated_at"],
        )
    else:
        body = ActiveBody(text=row["content"])

    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        body=body,
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        path=CommentPath(row["path"]),
        depth=row["depth"],
        likes=row["likes"],
        reports=row["reports"],
        is_visible=row["is_visible"],
        is_edited=row["is_edited"],
        edited_at=row.get("edited_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "author_id": comment.author_id,
        "parent_id": comment.parent_id,
        "content": comment.content,
        "path": str(comment.path),
        "depth": comment.depth,
        "likes": comment.likes,
        "reports": comment.reports,
        "is_visible": comment.is_visible,
        "is_edited": comment.is_edited,
        "edited_at": comment.edited_at,
        "is_deleted": comment.is_deleted,
        "deleted_at": comment.deleted_at,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        target_type=LikeTargetType(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return {
        "id": like.id,
        "user_id": like.user_id,
        "target_type": like.target_type.value,
        "target_id": like.target_id,
        "created_at": like.created_at,
    }
