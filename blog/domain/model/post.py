"""Post aggregate root.

Posts are authored and edited elsewhere; this engine only reads them and
maintains their denormalized engagement counters.
"""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import PostId, UserId


class PostMetadata(DomainModel):
    """Denormalized engagement counters of a post.

    - likes: number of Like records targeting the post
    - comments: number of non-deleted comments on the post
    """

    likes: int = Field(default=0, ge=0)
    comments: int = Field(default=0, ge=0)
    views: int = Field(default=0, ge=0)


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=200)
    metadata: PostMetadata = Field(default_factory=PostMetadata)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
