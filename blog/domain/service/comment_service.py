"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from blog.domain.error import (
    ContentDeletedError,
    MaxDepthExceededError,
    NotAuthorizedError,
    NotFoundError,
    ParentPostMismatchError,
    ValidationError,
)
from blog.domain.model.comment import (
    DELETED_PLACEHOLDER,
    MAX_COMMENT_DEPTH,
    MAX_COMMENT_LENGTH,
    REMOVED_BY_ADMIN_PLACEHOLDER,
    REPORT_VISIBILITY_THRESHOLD,
    ActiveBody,
    Comment,
    CommentNode,
)
from blog.domain.repository import CommentRepository, LikeRepository, UnitOfWork
from blog.domain.value import (
    CommentId,
    CommentPath,
    CommentSortOrder,
    LikeTargetType,
    PageMeta,
    PostId,
    UserId,
)

from .base import Service
from .post_service import PostService
from .sanitizer import ContentSanitizer


class CommentService(Service):
    """Domain service for comment threads."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        post_service: PostService,
        unit_of_work: UnitOfWork,
        sanitizer: ContentSanitizer,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            like_repository: Like repository (for cleanup on delete)
            post_service: Post domain service
            unit_of_work: Transaction boundary for multi-step deletes
            sanitizer: HTML sanitizer applied to comment content
        """
        self.comment_repository = comment_repository
        self.like_repository = like_repository
        self.post_service = post_service
        self.unit_of_work = unit_of_work
        self.sanitizer = sanitizer

    def _clean_content(self, content: str) -> str:
        """Sanitize content and enforce the length rules."""
        text = self.sanitizer.sanitize(content)
        if not text:
            raise ValidationError("Comment content cannot be empty")
        if len(text) > MAX_COMMENT_LENGTH:
            raise ValidationError(
                f"Comment content cannot exceed {MAX_COMMENT_LENGTH} characters"
            )
        return text

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        The post's comment count is incremented after the insert succeeds.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment content (HTML, sanitized here)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post or parent comment doesn't exist
            ValidationError: If the sanitized content is empty or too long
            ParentPostMismatchError: If the parent belongs to another post
            MaxDepthExceededError: If the reply would nest too deep
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            await self.post_service.get_post(post_id)
            text = self._clean_content(content)

            comment_id = CommentId(uuid4())
            path = CommentPath.for_root(comment_id)
            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ParentPostMismatchError()
                if parent.depth >= MAX_COMMENT_DEPTH:
                    logfire.warn(
                        "Reply exceeds maximum nesting level",
                        parent_id=str(parent_id),
                        parent_depth=parent.depth,
                    )
                    raise MaxDepthExceededError(MAX_COMMENT_DEPTH)
                depth = parent.depth + 1
                path = parent.path.child(comment_id)

            now = datetime.now()
            comment = Comment(
                id=comment_id,
                post_id=post_id,
                author_id=author_id,
                body=ActiveBody(text=text),
                parent_id=parent_id,
                path=path,
                depth=depth,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            await self.post_service.increment_comment_count(post_id)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID, failing if it doesn't exist.

        Raises:
            NotFoundError: If comment not found
        """
        comment = await self.get_comment_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_thread(
        self,
        post_id: PostId,
        page: int = 1,
        limit: int = 20,
        sort: CommentSortOrder = CommentSortOrder.NEWEST,
        include_deleted: bool = False,
    ) -> tuple[list[CommentNode], PageMeta]:
        """Get one page of a post's comment thread.

        Pagination applies to top-level comments only. Every returned
        comment carries all of its replies, oldest first.

        Args:
            post_id: Post ID
            page: 1-based page number
            limit: Top-level comments per page
            sort: Order of the top-level comments
            include_deleted: Whether to include soft-deleted comments

        Returns:
            Tuple of (top-level comment nodes, pagination metadata)
        """
        with logfire.span(
            "comment_service.get_thread",
            post_id=str(post_id),
            page=page,
            limit=limit,
            sort=sort.value,
            include_deleted=include_deleted,
        ):
            roots = await self.comment_repository.find_roots(
                post_id=post_id,
                sort=sort,
                include_deleted=include_deleted,
                limit=limit,
                offset=(page - 1) * limit,
            )
            total = await self.comment_repository.count_roots(
                post_id, include_deleted=include_deleted
            )
            nodes = [await self._attach_replies(root, include_deleted) for root in roots]
            logfire.info(
                "Comment thread retrieved",
                post_id=str(post_id),
                roots=len(nodes),
                total=total,
            )
            return nodes, PageMeta.build(page=page, limit=limit, total=total)

    async def get_comment_tree(self, comment_id: CommentId) -> CommentNode:
        """Get a comment with its non-deleted replies attached.

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span(
            "comment_service.get_comment_tree", comment_id=str(comment_id)
        ):
            comment = await self.get_comment(comment_id)
            return await self._attach_replies(comment, include_deleted=False)

    async def _attach_replies(
        self, comment: Comment, include_deleted: bool
    ) -> CommentNode:
        """Recursively attach direct replies to a comment."""
        children = await self.comment_repository.find_children(
            comment.id, include_deleted=include_deleted
        )
        replies = [await self._attach_replies(child, include_deleted) for child in children]
        return CommentNode(comment=comment, replies=replies)

    async def update_comment(
        self, comment_id: CommentId, user_id: UserId, content: str
    ) -> Comment:
        """Edit the content of a comment.

        Args:
            comment_id: Comment ID
            user_id: Requesting user ID
            content: New content (HTML, sanitized here)

        Returns:
            Updated comment

        Raises:
            NotFoundError: If comment not found
            ContentDeletedError: If the comment was deleted
            NotAuthorizedError: If the user is not the author
            ValidationError: If the sanitized content is empty or too long
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.get_comment(comment_id)
            if comment.is_deleted:
                raise ContentDeletedError("Cannot edit deleted comment")
            if comment.author_id != user_id:
                logfire.warn(
                    "Unauthorized comment edit attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError(
                    "edit", "comment", str(comment_id), str(user_id)
                )

            text = self._clean_content(content)
            updated = await self.comment_repository.update_content(
                comment_id, text, edited_at=datetime.now()
            )
            if not updated:
                # Deleted between the read and the write
                raise ContentDeletedError("Cannot edit deleted comment")

            logfire.info(
                "Comment updated", comment_id=str(comment_id), text_length=len(text)
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Soft delete a comment on behalf of its author.

        Raises:
            NotFoundError: If comment not found
            ContentDeletedError: If the comment is already deleted
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.get_comment(comment_id)
            if comment.is_deleted:
                raise ContentDeletedError("Comment already deleted")
            if comment.author_id != user_id:
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError(
                    "delete", "comment", str(comment_id), str(user_id)
                )
            return await self._soft_delete(comment, DELETED_PLACEHOLDER)

    async def remove_as_admin(self, comment_id: CommentId) -> Comment:
        """Soft delete any comment as a moderator.

        Raises:
            NotFoundError: If comment not found
            ContentDeletedError: If the comment is already deleted
        """
        with logfire.span(
            "comment_service.remove_as_admin", comment_id=str(comment_id)
        ):
            comment = await self.get_comment(comment_id)
            if comment.is_deleted:
                raise ContentDeletedError("Comment already deleted")
            return await self._soft_delete(comment, REMOVED_BY_ADMIN_PLACEHOLDER)

    async def _soft_delete(self, comment: Comment, placeholder: str) -> Comment:
        """Tombstone a comment and drop the likes on it and its direct replies.

        All steps run in a single transaction. Replies stay in place so the
        thread remains navigable.
        """
        async with self.unit_of_work.transaction():
            likes_deleted = await self.like_repository.delete_by_targets(
                LikeTargetType.COMMENT, [comment.id]
            )

            child_ids = await self.comment_repository.find_child_ids(comment.id)
            child_likes_deleted = 0
            if child_ids:
                child_likes_deleted = await self.like_repository.delete_by_targets(
                    LikeTargetType.COMMENT, child_ids
                )
                await self.comment_repository.reset_likes(child_ids)

            deleted = await self.comment_repository.mark_deleted(
                comment.id, placeholder=placeholder, deleted_at=datetime.now()
            )
            if not deleted:
                current = await self.comment_repository.find_by_id(comment.id)
                if current is None:
                    raise NotFoundError("Comment", str(comment.id))
                raise ContentDeletedError("Comment already deleted")

            await self.post_service.decrement_comment_count(comment.post_id)

        logfire.info(
            "Comment soft deleted",
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            likes_deleted=likes_deleted,
            replies=len(child_ids),
            reply_likes_deleted=child_likes_deleted,
        )
        return deleted

    async def report_comment(
        self, comment_id: CommentId, reason: str | None = None
    ) -> Comment:
        """Report a comment.

        The comment is hidden once it collects enough reports. Reporters
        are not deduplicated.

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span(
            "comment_service.report_comment", comment_id=str(comment_id)
        ):
            reported = await self.comment_repository.increment_reports(
                comment_id, hide_threshold=REPORT_VISIBILITY_THRESHOLD
            )
            if not reported:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment reported",
                comment_id=str(comment_id),
                reports=reported.reports,
                is_visible=reported.is_visible,
                reason=reason,
            )
            if not reported.is_visible:
                logfire.warn(
                    "Comment hidden after reports",
                    comment_id=str(comment_id),
                    reports=reported.reports,
                )
            return reported

    async def dismiss_report(self, comment_id: CommentId) -> Comment:
        """Clear a comment's reports and make it visible again.

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span(
            "comment_service.dismiss_report", comment_id=str(comment_id)
        ):
            dismissed = await self.comment_repository.reset_reports(comment_id)
            if not dismissed:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment reports dismissed", comment_id=str(comment_id))
            return dismissed

    async def get_comments_by_author(
        self, author_id: UserId, page: int = 1, limit: int = 20
    ) -> tuple[list[Comment], PageMeta]:
        """Get a user's non-deleted comments, newest first."""
        with logfire.span(
            "comment_service.get_comments_by_author",
            author_id=str(author_id),
            page=page,
            limit=limit,
        ):
            comments = await self.comment_repository.find_by_author(
                author_id, limit=limit, offset=(page - 1) * limit
            )
            total = await self.comment_repository.count_by_author(author_id)
            return comments, PageMeta.build(page=page, limit=limit, total=total)

    async def get_reported_comments(
        self, page: int = 1, limit: int = 20
    ) -> tuple[list[Comment], PageMeta]:
        """Get the moderation queue: reported comments, most reported first."""
        with logfire.span(
            "comment_service.get_reported_comments", page=page, limit=limit
        ):
            comments = await self.comment_repository.find_reported(
                limit=limit, offset=(page - 1) * limit
            )
            total = await self.comment_repository.count_reported()
            logfire.info("Reported comments retrieved", total=total)
            return comments, PageMeta.build(page=page, limit=limit, total=total)

    async def increment_likes(self, comment_id: CommentId) -> int:
        """Atomically increment comment likes.

        Uses SQL-level increment to avoid race conditions.

        Args:
            comment_id: Comment ID

        Returns:
            Like count after the increment
        """
        with logfire.span(
            "comment_service.increment_likes", comment_id=str(comment_id)
        ):
            likes = await self.comment_repository.increment_likes(comment_id)
            logfire.info(
                "Comment likes incremented", comment_id=str(comment_id), likes=likes
            )
            return likes

    async def decrement_likes(self, comment_id: CommentId) -> int:
        """Atomically decrement comment likes (minimum 0).

        Uses SQL-level decrement to avoid race conditions.

        Args:
            comment_id: Comment ID

        Returns:
            Like count after the decrement
        """
        with logfire.span(
            "comment_service.decrement_likes", comment_id=str(comment_id)
        ):
            likes = await self.comment_repository.decrement_likes(comment_id)
            logfire.info(
                "Comment likes decremented", comment_id=str(comment_id), likes=likes
            )
            return likes
