"""Shared state for the in-memory repositories."""

from dataclasses import dataclass, field
from uuid import UUID

from blog.domain.model import Comment, Like, Post, User


@dataclass
class InMemoryStore:
    """Tables of the in-memory database, keyed by id.

    The repositories of one container share a store so a unit of work can
    snapshot and restore all of them at once.
    """

    users: dict[UUID, User] = field(default_factory=dict)
    posts: dict[UUID, Post] = field(default_factory=dict)
    comments: dict[UUID, Comment] = field(default_factory=dict)
    likes: dict[UUID, Like] = field(default_factory=dict)

    def snapshot(self) -> "InMemoryStore":
        """Copy the tables. Models are immutable, so shallow copies suffice."""
        return InMemoryStore(
            users=dict(self.users),
            posts=dict(self.posts),
            comments=dict(self.comments),
            likes=dict(self.likes),
        )

    def restore(self, snapshot: "InMemoryStore") -> None:
        """Replace every table with the contents of a snapshot."""
        self.users = snapshot.users
        self.posts = snapshot.posts
        self.comments = snapshot.comments
        self.likes = snapshot.likes
