"""Post domain service."""

import logfire

from blog.domain.error import NotFoundError
from blog.domain.model.post import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post lookups and engagement counters."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID, failing if it doesn't exist.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        return post

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment a post's comment count.

        Args:
            post_id: Post ID
        """
        with logfire.span("post_service.increment_comment_count", post_id=str(post_id)):
            await self.post_repository.increment_comment_count(post_id)
            logfire.info("Post comment count incremented", post_id=str(post_id))

    async def decrement_comment_count(self, post_id: PostId) -> None:
        """Atomically decrement a post's comment count (minimum 0).

        Args:
            post_id: Post ID
        """
        with logfire.span("post_service.decrement_comment_count", post_id=str(post_id)):
            await self.post_repository.decrement_comment_count(post_id)
            logfire.info("Post comment count decremented", post_id=str(post_id))

    async def increment_likes(self, post_id: PostId) -> int:
        """Atomically increment post likes.

        Uses SQL-level increment to avoid race conditions.

        Args:
            post_id: Post ID

        Returns:
            Like count after the increment
        """
        with logfire.span("post_service.increment_likes", post_id=str(post_id)):
            likes = await self.post_repository.increment_likes(post_id)
            logfire.info("Post likes incremented", post_id=str(post_id), likes=likes)
            return likes

    async def decrement_likes(self, post_id: PostId) -> int:
        """Atomically decrement post likes (minimum 0).

        Uses SQL-level decrement to avoid race conditions.

        Args:
            post_id: Post ID

        Returns:
            Like count after the decrement
        """
        with logfire.span("post_service.decrement_likes", post_id=str(post_id)):
            likes = await self.post_repository.decrement_likes(post_id)
            logfire.info("Post likes decremented", post_id=str(post_id), likes=likes)
            return likes
