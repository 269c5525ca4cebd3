"""Like entity.

A like is a deduplicated relation between a user and a post or comment.
Each user can like a given target at most once.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.model.user import User
from blog.domain.value import LikeId, LikeTargetType, UserId


class Like(DomainModel):
    """Like entity.

    Business rules:
    - One like per (user, target, target type) (enforced by a unique constraint)
    - Polymorphic reference to the target (post or comment)
    """

    id: LikeId
    user_id: UserId
    target_type: LikeTargetType
    target_id: UUID  # PostId or CommentId (both are UUIDs)
    created_at: datetime = Field(default_factory=datetime.now)


class Liker(DomainModel):
    """A user who liked a target, with the time of the like."""

    user: User
    liked_at: datetime
