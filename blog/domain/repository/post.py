"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.post import Post
from blog.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post.

        Args:
            post_id: The post's unique identifier
        """
        pass

    @abstractmethod
    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment the post's comment count.

        Args:
            post_id: The post's unique identifier
        """
        pass

    @abstractmethod
    async def decrement_comment_count(self, post_id: PostId) -> None:
        """Atomically decrement the post's comment count (minimum 0).

        Args:
            post_id: The post's unique identifier
        """
        pass

    @abstractmethod
    async def increment_likes(self, post_id: PostId) -> int:
        """Atomically increment the post's like count.

        Args:
            post_id: The post's unique identifier

        Returns:
            The like count after the increment
        """
        pass

    @abstractmethod
    async def decrement_likes(self, post_id: PostId) -> int:
        """Atomically decrement the post's like count (minimum 0).

        Args:
            post_id: The post's unique identifier

        Returns:
            The like count after the decrement
        """
        pass
