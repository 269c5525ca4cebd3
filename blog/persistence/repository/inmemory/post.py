"""In-memory post repository for testing."""

from typing import Optional

from blog.domain.model.post import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._store.posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._store.posts.pop(post_id, None)

    def _adjust(self, post_id: PostId, field: str, delta: int) -> int:
        post = self._store.posts.get(post_id)
        if not post:
            return 0
        value = max(getattr(post.metadata, field) + delta, 0)
        metadata = post.metadata.model_copy(update={field: value})
        self._store.posts[post_id] = post.model_copy(update={"metadata": metadata})
        return value

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Increment comment count."""
        self._adjust(post_id, "comments", 1)

    async def decrement_comment_count(self, post_id: PostId) -> None:
        """Decrement comment count (minimum 0)."""
        self._adjust(post_id, "comments", -1)

    async def increment_likes(self, post_id: PostId) -> int:
        """Increment likes."""
        return self._adjust(post_id, "likes", 1)

    async def decrement_likes(self, post_id: PostId) -> int:
        """Decrement likes (minimum 0)."""
        return self._adjust(post_id, "likes", -1)
