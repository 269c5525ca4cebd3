"""Comment entity.

Comments are threaded discussions on posts, nested at most three levels
deep below a top-level comment. They use a materialized path so a whole
subtree can be addressed by prefix.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import Field, model_validator

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, CommentPath, PostId, UserId

MAX_COMMENT_DEPTH = 3
MAX_COMMENT_LENGTH = 1000
REPORT_VISIBILITY_THRESHOLD = 5

DELETED_PLACEHOLDER = "[This comment has been deleted]"
REMOVED_BY_ADMIN_PLACEHOLDER = "[This comment has been deleted by admin]"


class ActiveBody(DomainModel):
    """Body of a live comment."""

    kind: Literal["active"] = "active"
    text: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)


class DeletedBody(DomainModel):
    """Body of a tombstoned comment. The original text is gone."""

    kind: Literal["deleted"] = "deleted"
    placeholder: str = DELETED_PLACEHOLDER
    deleted_at: datetime = Field(default_factory=datetime.now)


CommentBody = Annotated[Union[ActiveBody, DeletedBody], Field(discriminator="kind")]


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, at most MAX_COMMENT_DEPTH)
    - path: Ancestor ids followed by the comment's own id

    path and depth are fixed at creation and never change afterwards.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    body: CommentBody
    parent_id: Optional[CommentId] = None
    path: CommentPath
    depth: int = Field(default=0, ge=0, le=MAX_COMMENT_DEPTH)
    likes: int = Field(default=0, ge=0)
    reports: int = Field(default=0, ge=0)
    is_visible: bool = True
    is_edited: bool = False
    edited_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_threading(self) -> "Comment":
        """Validate that path, depth and parent agree with each other."""
        if self.path.leaf != str(self.id):
            raise ValueError("Comment path must end with the comment's own id")
        if self.path.depth != self.depth:
            raise ValueError("Comment depth must match the length of its path")
        if (self.parent_id is None) != (self.depth == 0):
            raise ValueError("Only top-level comments may omit a parent")
        if self.parent_id is not None and self.path.segments[-2] != str(
            self.parent_id
        ):
            raise ValueError("Comment path must pass through its parent")
        return self

    @property
    def is_deleted(self) -> bool:
        """Whether the comment has been tombstoned."""
        return isinstance(self.body, DeletedBody)

    @property
    def content(self) -> str:
        """Displayable content: the text, or the placeholder once deleted."""
        if isinstance(self.body, DeletedBody):
            return self.body.placeholder
        return self.body.text

    @property
    def deleted_at(self) -> Optional[datetime]:
        """When the comment was deleted, if it was."""
        if isinstance(self.body, DeletedBody):
            return self.body.deleted_at
        return None

    def tombstone(
        self, placeholder: str = DELETED_PLACEHOLDER, at: datetime | None = None
    ) -> "Comment":
        """Return a copy of this comment with its text replaced by a placeholder."""
        deleted_at = at or datetime.now()
        return self.model_copy(
            update={
                "body": DeletedBody(placeholder=placeholder, deleted_at=deleted_at),
                "updated_at": deleted_at,
            }
        )


@dataclass
class CommentNode:
    """A comment with its replies attached, for rendering threads."""

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)
    is_liked: bool | None = None

    @property
    def replies_count(self) -> int:
        """Number of direct replies attached to this node."""
        return len(self.replies)

    def walk(self):
        """Yield this node's comment and every descendant comment, depth first."""
        yield self.comment
        for reply in self.replies:
            yield from reply.walk()
