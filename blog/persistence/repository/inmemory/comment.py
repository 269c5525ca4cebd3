"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import CommentId, CommentSortOrder, PostId, UserId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    @property
    def _comments(self) -> list[Comment]:
        return list(self._store.comments.values())

    def _replace(self, comment_id: CommentId, **changes) -> Optional[Comment]:
        comment = self._store.comments.get(comment_id)
        if not comment:
            return None
        updated = comment.model_copy(update=changes)
        self._store.comments[comment_id] = updated
        return updated

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    def _roots(self, post_id: PostId, include_deleted: bool) -> list[Comment]:
        return [
            c
            for c in self._comments
            if c.post_id == post_id
            and c.depth == 0
            and (include_deleted or not c.is_deleted)
        ]

    async def find_roots(
        self,
        post_id: PostId,
        sort: CommentSortOrder = CommentSortOrder.NEWEST,
        include_deleted: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find top-level comments of a post."""
        roots = self._roots(post_id, include_deleted)
        if sort == CommentSortOrder.OLDEST:
            roots.sort(key=lambda c: c.created_at)
        elif sort == CommentSortOrder.POPULAR:
            roots.sort(key=lambda c: (c.likes, c.created_at), reverse=True)
        else:
            roots.sort(key=lambda c: c.created_at, reverse=True)
        return roots[offset : offset + limit]

    async def count_roots(self, post_id: PostId, include_deleted: bool = False) -> int:
        """Count top-level comments of a post."""
        return len(self._roots(post_id, include_deleted))

    async def find_children(
        self,
        parent_id: CommentId,
        include_deleted: bool = False,
    ) -> list[Comment]:
        """Find direct replies of a comment, oldest first."""
        children = [
            c
            for c in self._comments
            if c.parent_id == parent_id and (include_deleted or not c.is_deleted)
        ]
        return sorted(children, key=lambda c: c.created_at)

    async def find_ids_by_post(self, post_id: PostId) -> list[CommentId]:
        """Find the ids of every comment of a post."""
        return [c.id for c in self._comments if c.post_id == post_id]

    async def find_child_ids(self, parent_id: CommentId) -> list[CommentId]:
        """Find the ids of every direct reply of a comment."""
        return [c.id for c in self._comments if c.parent_id == parent_id]

    def _by_author(self, author_id: UserId) -> list[Comment]:
        return [
            c for c in self._comments if c.author_id == author_id and not c.is_deleted
        ]

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find non-deleted comments by an author, newest first."""
        comments = sorted(
            self._by_author(author_id), key=lambda c: c.created_at, reverse=True
        )
        return comments[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count non-deleted comments by an author."""
        return len(self._by_author(author_id))

    def _reported(self) -> list[Comment]:
        return [c for c in self._comments if c.reports > 0 and not c.is_deleted]

    async def find_reported(self, limit: int = 20, offset: int = 0) -> list[Comment]:
        """Find reported comments, most reported first."""
        comments = sorted(
            self._reported(), key=lambda c: (c.reports, c.created_at), reverse=True
        )
        return comments[offset : offset + limit]

    async def count_reported(self) -> int:
        """Count reported comments."""
        return len(self._reported())

    async def count_by_post(self, post_id: PostId, include_deleted: bool = False) -> int:
        """Count comments of a post."""
        return len(
            [
                c
                for c in self._comments
                if c.post_id == post_id and (include_deleted or not c.is_deleted)
            ]
        )

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._store.comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, text: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the text of a live comment."""
        comment = self._store.comments.get(comment_id)
        if not comment or comment.is_deleted:
            return None
        return self._replace(
            comment_id,
            body=comment.body.model_copy(update={"text": text}),
            is_edited=True,
            edited_at=edited_at,
            updated_at=edited_at,
        )

    async def mark_deleted(
        self, comment_id: CommentId, placeholder: str, deleted_at: datetime
    ) -> Optional[Comment]:
        """Tombstone a comment."""
        comment = self._store.comments.get(comment_id)
        if not comment or comment.is_deleted:
            return None
        deleted = comment.tombstone(placeholder, at=deleted_at).model_copy(
            update={"likes": 0}
        )
        self._store.comments[comment_id] = deleted
        return deleted

    async def delete_by_post(self, post_id: PostId) -> int:
        """Hard-delete every comment of a post."""
        ids = await self.find_ids_by_post(post_id)
        for comment_id in ids:
            del self._store.comments[comment_id]
        return len(ids)

    async def increment_likes(self, comment_id: CommentId) -> int:
        """Increment likes."""
        comment = self._store.comments.get(comment_id)
        if not comment:
            return 0
        return self._replace(comment_id, likes=comment.likes + 1).likes

    async def decrement_likes(self, comment_id: CommentId) -> int:
        """Decrement likes (minimum 0)."""
        comment = self._store.comments.get(comment_id)
        if not comment:
            return 0
        return self._replace(comment_id, likes=max(comment.likes - 1, 0)).likes

    async def increment_reports(
        self, comment_id: CommentId, hide_threshold: int
    ) -> Optional[Comment]:
        """Add a report, hiding the comment at the threshold."""
        comment = self._store.comments.get(comment_id)
        if not comment:
            return None
        reports = comment.reports + 1
        return self._replace(
            comment_id,
            reports=reports,
            is_visible=comment.is_visible and reports < hide_threshold,
        )

    async def reset_reports(self, comment_id: CommentId) -> Optional[Comment]:
        """Clear reports and make the comment visible again."""
        return self._replace(comment_id, reports=0, is_visible=True)

    async def reset_likes(self, comment_ids: Sequence[CommentId]) -> None:
        """Set the like count of the given comments to zero."""
        for comment_id in comment_ids:
            self._replace(comment_id, likes=0)
