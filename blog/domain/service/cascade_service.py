"""Cascading deletion across posts, comments and likes."""

from dataclasses import dataclass

import logfire

from blog.domain.error import NotAuthorizedError
from blog.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    UnitOfWork,
)
from blog.domain.value import LikeTargetType, PostId, UserId

from .base import Service
from .post_service import PostService


@dataclass
class PostDeletionSummary:
    """What a post deletion removed."""

    post_id: PostId
    post_likes_deleted: int
    comments_deleted: int
    comment_likes_deleted: int


class CascadeService(Service):
    """Deletes a post together with everything that depends on it."""

    def __init__(
        self,
        post_service: PostService,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.post_service = post_service
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.like_repository = like_repository
        self.unit_of_work = unit_of_work

    async def delete_post(self, post_id: PostId, user_id: UserId) -> PostDeletionSummary:
        """Delete a post, its comments and every like on either.

        Steps, in one transaction:
        1. Delete likes on the post
        2. Collect the ids of all the post's comments (deleted ones too)
        3. Delete likes on those comments
        4. Delete the comments
        5. Delete the post

        If any step fails, nothing is deleted.

        Args:
            post_id: Post ID
            user_id: Requesting user ID

        Returns:
            Summary of what was removed

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the user is not the post's author
        """
        with logfire.span(
            "cascade_service.delete_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.post_service.get_post(post_id)
            if post.author_id != user_id:
                logfire.warn(
                    "Unauthorized post delete attempt",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("delete", "post", str(post_id), str(user_id))

            async with self.unit_of_work.transaction():
                post_likes = await self.like_repository.delete_by_targets(
                    LikeTargetType.POST, [post_id]
                )
                logfire.info(
                    "Deleted post likes", post_id=str(post_id), count=post_likes
                )

                comment_ids = await self.comment_repository.find_ids_by_post(post_id)

                comment_likes = 0
                if comment_ids:
                    comment_likes = await self.like_repository.delete_by_targets(
                        LikeTargetType.COMMENT, comment_ids
                    )
                logfire.info(
                    "Deleted comment likes", post_id=str(post_id), count=comment_likes
                )

                comments = await self.comment_repository.delete_by_post(post_id)
                logfire.info("Deleted comments", post_id=str(post_id), count=comments)

                await self.post_repository.delete(post_id)

            logfire.info(
                "Post deleted with cascade",
                post_id=str(post_id),
                post_likes=post_likes,
                comments=comments,
                comment_likes=comment_likes,
            )
            return PostDeletionSummary(
                post_id=post_id,
                post_likes_deleted=post_likes,
                comments_deleted=comments,
                comment_likes_deleted=comment_likes,
            )
