"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from blog.domain.model.comment import Comment
from blog.domain.value import CommentId, CommentSortOrder, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_roots(
        self,
        post_id: PostId,
        sort: CommentSortOrder = CommentSortOrder.NEWEST,
        include_deleted: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find top-level comments of a post.

        Args:
            post_id: The post ID
            sort: Sort order of the roots
            include_deleted: Whether to include soft-deleted comments
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of top-level comments in the requested order
        """
        pass

    @abstractmethod
    async def count_roots(self, post_id: PostId, include_deleted: bool = False) -> int:
        """Count top-level comments of a post."""
        pass

    @abstractmethod
    async def find_children(
        self,
        parent_id: CommentId,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find direct replies of a comment, oldest first.

        Args:
            parent_id: The parent comment ID
            include_deleted: Whether to include soft-deleted comments

        Returns:
            List of direct replies ordered by creation time
        """
        pass

    @abstractmethod
    async def find_ids_by_post(self, post_id: PostId) -> List[CommentId]:
        """Find the ids of every comment of a post, deleted ones included."""
        pass

    @abstractmethod
    async def find_child_ids(self, parent_id: CommentId) -> List[CommentId]:
        """Find the ids of every direct reply of a comment, deleted ones included."""
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find non-deleted comments by an author, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments by the author
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count non-deleted comments by an author."""
        pass

    @abstractmethod
    async def find_reported(self, limit: int = 20, offset: int = 0) -> List[Comment]:
        """Find non-deleted comments with at least one report, most reported first."""
        pass

    @abstractmethod
    async def count_reported(self) -> int:
        """Count non-deleted comments with at least one report."""
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId, include_deleted: bool = False) -> int:
        """Count comments of a post."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, text: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the text of a live comment and flag it as edited.

        Args:
            comment_id: The comment ID
            text: New sanitized text
            edited_at: Time of the edit

        Returns:
            The updated comment, or None if it doesn't exist or is deleted
        """
        pass

    @abstractmethod
    async def mark_deleted(
        self, comment_id: CommentId, placeholder: str, deleted_at: datetime
    ) -> Optional[Comment]:
        """Tombstone a comment, replacing its text with a placeholder.

        The comment loses its likes along with its text, so its like count
        is reset to zero.

        Args:
            comment_id: The comment ID
            placeholder: Text shown in place of the original content
            deleted_at: Time of the deletion

        Returns:
            The tombstoned comment, or None if it doesn't exist or is
            already deleted
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Hard-delete every comment of a post.

        Returns:
            Number of deleted comments
        """
        pass

    @abstractmethod
    async def increment_likes(self, comment_id: CommentId) -> int:
        """Atomically increment the like count and return the new value."""
        pass

    @abstractmethod
    async def decrement_likes(self, comment_id: CommentId) -> int:
        """Atomically decrement the like count (minimum 0) and return the new value."""
        pass

    @abstractmethod
    async def increment_reports(
        self, comment_id: CommentId, hide_threshold: int
    ) -> Optional[Comment]:
        """Atomically add a report, hiding the comment at the threshold.

        Args:
            comment_id: The comment ID
            hide_threshold: Report count at which the comment becomes invisible

        Returns:
            The updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def reset_reports(self, comment_id: CommentId) -> Optional[Comment]:
        """Clear reports and make the comment visible again."""
        pass

    @abstractmethod
    async def reset_likes(self, comment_ids: Sequence[CommentId]) -> None:
        """Set the like count of the given comments to zero.

        Used after their Like records have been removed in bulk.
        """
        pass
