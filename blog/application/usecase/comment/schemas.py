"""Response models shared by comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model import Comment, CommentNode


class CommentItem(BaseModel):
    """A single comment, without replies."""

    comment_id: str
    post_id: str
    author_id: str
    content: str
    parent_id: str | None
    path: str
    depth: int
    likes: int
    reports: int
    is_visible: bool
    is_edited: bool
    edited_at: datetime | None
    is_deleted: bool
    deleted_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        """Convert a domain comment to a response item."""
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            path=str(comment.path),
            depth=comment.depth,
            likes=comment.likes,
            reports=comment.reports,
            is_visible=comment.is_visible,
            is_edited=comment.is_edited,
            edited_at=comment.edited_at,
            is_deleted=comment.is_deleted,
            deleted_at=comment.deleted_at,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentTreeItem(CommentItem):
    """A comment with its replies attached recursively."""

    is_liked: bool = False
    replies_count: int = 0
    replies: list["CommentTreeItem"] = []

    @classmethod
    def from_node(
        cls, node: CommentNode, liked_ids: set[str] | None = None
    ) -> "CommentTreeItem":
        """Convert a comment node and its replies.

        Args:
            node: Comment node with replies attached
            liked_ids: Ids of the comments the requester likes
        """
        liked_ids = liked_ids or set()
        item = cls.from_domain(node.comment)
        item.is_liked = item.comment_id in liked_ids
        item.replies = [cls.from_node(reply, liked_ids) for reply in node.replies]
        item.replies_count = node.replies_count
        return item
