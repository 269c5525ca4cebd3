"""Domain value objects for the blog engagement engine.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import math
from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import Field, field_validator

from blog.domain.value.common import RootValueObject, ValueObject

PATH_SEPARATOR = "/"


class LikeTargetType(str, Enum):
    """Type of entity that can be liked."""

    POST = "post"
    COMMENT = "comment"

    @property
    def label(self) -> str:
        """Human-readable resource name used in error messages."""
        return self.value.capitalize()


class CommentSortOrder(str, Enum):
    """Sort order for root comments of a thread."""

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    POPULAR = "popular"  # likes DESC, then created_at DESC


class LikerSortBy(str, Enum):
    """Sort key for the list of users who liked a target."""

    CREATED_AT = "created_at"
    USERNAME = "username"


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class CommentPath(RootValueObject[str]):
    """Materialized path of a comment.

    Slash-joined ids of every ancestor followed by the comment's own id.
    A root comment's path is just its own id.
    Examples: '3f2a...', '3f2a.../9c41...'
    """

    @field_validator("root")
    @classmethod
    def validate_segments(cls, v: str) -> str:
        """Validate the path has no empty segments."""
        if not v or any(not segment for segment in v.split(PATH_SEPARATOR)):
            raise ValueError("Comment path must be a non-empty list of ids")
        return v

    @classmethod
    def for_root(cls, comment_id: UUID) -> "CommentPath":
        """Build the path of a top-level comment."""
        return cls(str(comment_id))

    def child(self, comment_id: UUID) -> "CommentPath":
        """Build the path of a direct reply to the comment owning this path."""
        return CommentPath(f"{self.root}{PATH_SEPARATOR}{comment_id}")

    @property
    def segments(self) -> list[str]:
        """Ancestor ids in order, ending with the comment's own id."""
        return self.root.split(PATH_SEPARATOR)

    @property
    def leaf(self) -> str:
        """Id of the comment owning this path."""
        return self.segments[-1]

    @property
    def depth(self) -> int:
        """Nesting level encoded by the path (0 for top-level)."""
        return len(self.segments) - 1


class PageMeta(ValueObject):
    """Pagination metadata for a listing."""

    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    total: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PageMeta":
        """Compute pagination metadata from page, page size and total count."""
        total_pages = math.ceil(total / limit) if total else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )


class LikeStatus(ValueObject):
    """Result of a like or unlike operation."""

    liked: bool
    likes_count: int = Field(ge=0)


class LikerFilters(ValueObject):
    """Filters for listing the users who liked a target."""

    created_from: datetime | None = None
    created_to: datetime | None = None
    username_contains: str | None = None
    verified_only: bool = False
    sort_by: LikerSortBy = LikerSortBy.CREATED_AT
    sort_direction: SortDirection = SortDirection.DESC
