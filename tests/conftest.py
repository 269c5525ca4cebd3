"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from blog.domain.model import ActiveBody, Comment, Post, User
from blog.domain.value import CommentId, CommentPath, PostId, UserId

# Routes and services emit spans; keep them local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    username: str = "reader", email_verified: bool = False, **overrides
) -> User:
    """Build a user with sensible defaults."""
    return User(
        id=overrides.pop("id", UserId(uuid4())),
        username=username,
        email_verified=email_verified,
        **overrides,
    )


def make_post(author_id: UserId | None = None, **overrides) -> Post:
    """Build a post with sensible defaults."""
    return Post(
        id=overrides.pop("id", PostId(uuid4())),
        author_id=author_id or UserId(uuid4()),
        title=overrides.pop("title", "Test Post"),
        **overrides,
    )


def make_comment(
    post_id: PostId,
    parent: Comment | None = None,
    text: str = "Test comment",
    author_id: UserId | None = None,
    minutes_ago: int = 0,
    **overrides,
) -> Comment:
    """Build a comment, threading it under parent when given.

    Args:
        post_id: Post the comment belongs to
        parent: Parent comment for replies
        text: Comment text
        author_id: Author (random if omitted)
        minutes_ago: Backdate created_at, to control ordering
    """
    comment_id = CommentId(uuid4())
    created_at = datetime.now() - timedelta(minutes=minutes_ago)
    if parent:
        path = parent.path.child(comment_id)
        depth = parent.depth + 1
    else:
        path = CommentPath.for_root(comment_id)
        depth = 0
    return Comment(
        id=comment_id,
        post_id=post_id,
        author_id=author_id or UserId(uuid4()),
        body=ActiveBody(text=text),
        parent_id=parent.id if parent else None,
        path=path,
        depth=depth,
        created_at=created_at,
        updated_at=created_at,
        **overrides,
    )
