"""User entity (read-only in this engine)."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import UserId


class User(DomainModel):
    """User entity.

    Accounts are managed elsewhere; the engine only needs enough of the
    profile to list and filter the users who liked something.
    """

    id: UserId
    username: str = Field(min_length=1, max_length=50)
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    email_verified: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
