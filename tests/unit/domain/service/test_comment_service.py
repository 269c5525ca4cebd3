"""Unit tests for CommentService."""

import pytest

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
    REMOVED_BY_ADMIN_PLACEHOLDER,
    Comment,
)
from blog.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
)
from blog.domain.service import CommentService, LikeService
from blog.domain.value import CommentSortOrder, LikeTargetType, UserId
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


async def _save_all(comment_repo: CommentRepository, *comments: Comment) -> None:
    for comment in comments:
        await comment_repo.save(comment)


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Top-level comment should have depth 0 and a single-segment path."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        author = make_user()

        # Act
        result = await comment_service.create_comment(
            post_id=post.id, author_id=author.id, content="Great post"
        )

        # Assert
        assert result.depth == 0
        assert result.parent_id is None
        assert result.path.segments == [str(result.id)]
        assert result.content == "Great post"

        updated_post = await post_repo.find_by_id(post.id)
        assert updated_post.metadata.comments == 1

    @pytest.mark.asyncio
    async def test_reply_extends_parent_path(self, unit_env):
        """A reply's path is the parent's path plus its own id."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        parent = await comment_service.create_comment(
            post_id=post.id, author_id=make_user().id, content="Parent"
        )

        # Act
        reply = await comment_service.create_comment(
            post_id=post.id,
            author_id=make_user().id,
            content="Reply",
            parent_id=parent.id,
        )

        # Assert
        assert reply.depth == 1
        assert reply.parent_id == parent.id
        assert reply.path.segments == [str(parent.id), str(reply.id)]

    @pytest.mark.asyncio
    async def test_reply_at_maximum_depth_is_allowed(self, unit_env):
        """Replying to a depth-2 comment yields depth 3."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        root = make_comment(post.id)
        child = make_comment(post.id, parent=root)
        grandchild = make_comment(post.id, parent=child)
        await _save_all(comment_repo, root, child, grandchild)

        # Act
        result = await comment_service.create_comment(
            post_id=post.id,
            author_id=make_user().id,
            content="Deepest",
            parent_id=grandchild.id,
        )

        # Assert
        assert result.depth == 3
        assert len(result.path.segments) == 4

    @pytest.mark.asyncio
    async def test_reply_beyond_maximum_depth_is_rejected(self, unit_env):
        """Replying to a depth-3 comment should fail and leave the count alone."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        level0 = make_comment(post.id)
        level1 = make_comment(post.id, parent=level0)
        level2 = make_comment(post.id, parent=level1)
        level3 = make_comment(post.id, parent=level2)
        await _save_all(comment_repo, level0, level1, level2, level3)

        # Act & Assert
        with pytest.raises(MaxDepthExceededError, match=r"Maximum nesting level \(3\)"):
            await comment_service.create_comment(
                post_id=post.id,
                author_id=make_user().id,
                content="Too deep",
                parent_id=level3.id,
            )

        assert await comment_repo.count_by_post(post.id) == 4
        unchanged = await post_repo.find_by_id(post.id)
        assert unchanged.metadata.comments == 0

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        """Commenting on a post that doesn't exist should fail."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Post not found"):
            await comment_service.create_comment(
                post_id=make_post().id, author_id=make_user().id, content="Hello"
            )

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        """Replying to a comment that doesn't exist should fail."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        ghost = make_comment(post.id)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Parent comment not found"):
            await comment_service.create_comment(
                post_id=post.id,
                author_id=make_user().id,
                content="Reply",
                parent_id=ghost.id,
            )

    @pytest.mark.asyncio
    async def test_parent_from_different_post_is_rejected(self, unit_env):
        """Reply to a comment of another post should fail."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        other_post = await post_repo.save(make_post())
        parent = make_comment(other_post.id)
        await comment_repo.save(parent)

        # Act & Assert
        with pytest.raises(ParentPostMismatchError):
            await comment_service.create_comment(
                post_id=post.id,
                author_id=make_user().id,
                content="Reply",
                parent_id=parent.id,
            )

    @pytest.mark.asyncio
    async def test_content_is_sanitized(self, unit_env):
        """Disallowed markup is stripped before saving."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act
        result = await comment_service.create_comment(
            post_id=post.id,
            author_id=make_user().id,
            content="<b>bold</b><script>alert(1)</script>",
        )

        # Assert
        assert result.content == "<b>bold</b>"

    @pytest.mark.asyncio
    async def test_markup_only_content_is_rejected(self, unit_env):
        """Content that sanitizes to nothing should fail."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act & Assert
        with pytest.raises(ValidationError, match="cannot be empty"):
            await comment_service.create_comment(
                post_id=post.id,
                author_id=make_user().id,
                content="<script>alert(1)</script>   ",
            )

    @pytest.mark.asyncio
    async def test_too_long_content_is_rejected(self, unit_env):
        """Content over 1000 characters should fail."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act & Assert
        with pytest.raises(ValidationError, match="cannot exceed 1000"):
            await comment_service.create_comment(
                post_id=post.id, author_id=make_user().id, content="x" * 1001
            )


class TestGetThread:
    """Tests for get_thread method."""

    @pytest.mark.asyncio
    async def test_replies_are_attached_oldest_first(self, unit_env):
        """Roots are paginated and carry their replies."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post()
        root = make_comment(post.id, minutes_ago=10)
        late_reply = make_comment(post.id, parent=root, minutes_ago=1)
        early_reply = make_comment(post.id, parent=root, minutes_ago=5)
        nested = make_comment(post.id, parent=early_reply, minutes_ago=2)
        await _save_all(comment_repo, root, late_reply, early_reply, nested)

        # Act
        nodes, meta = await comment_service.get_thread(post.id)

        # Assert
        assert meta.total == 1
        assert [n.comment.id for n in nodes] == [root.id]
        assert [r.comment.id for r in nodes[0].replies] == [
            early_reply.id,
            late_reply.id,
        ]
        assert nodes[0].replies[0].replies[0].comment.id == nested.id

    @pytest.mark.asyncio
    async def test_pagination_and_sorting(self, unit_env):
        """Pages slice the sorted roots and report totals."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post()
        roots = [make_comment(post.id, minutes_ago=m) for m in (30, 20, 10)]
        await _save_all(comment_repo, *roots)

        # Act
        newest, meta = await comment_service.get_thread(post.id, page=1, limit=2)
        oldest, _ = await comment_service.get_thread(
            post.id, page=1, limit=2, sort=CommentSortOrder.OLDEST
        )
        second_page, second_meta = await comment_service.get_thread(
            post.id, page=2, limit=2
        )

        # Assert
        assert [n.comment.id for n in newest] == [roots[2].id, roots[1].id]
        assert [n.comment.id for n in oldest] == [roots[0].id, roots[1].id]
        assert [n.comment.id for n in second_page] == [roots[0].id]
        assert meta.total == 3
        assert meta.total_pages == 2
        assert meta.has_next is True
        assert second_meta.has_next is False
        assert second_meta.has_prev is True

    @pytest.mark.asyncio
    async def test_deleted_comments_hidden_unless_requested(self, unit_env):
        """Soft-deleted comments only appear with include_deleted."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post()
        live = make_comment(post.id)
        gone = make_comment(post.id).tombstone()
        await _save_all(comment_repo, live, gone)

        # Act
        default_nodes, _ = await comment_service.get_thread(post.id)
        all_nodes, _ = await comment_service.get_thread(post.id, include_deleted=True)

        # Assert
        assert [n.comment.id for n in default_nodes] == [live.id]
        assert {n.comment.id for n in all_nodes} == {live.id, gone.id}


class TestUpdateComment:
    """Tests for update_comment method."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        """Editing replaces the text and marks the comment edited."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post()
        comment = make_comment(post.id)
        await comment_repo.save(comment)

        # Act
        result = await comment_service.update_comment(
            comment.id, comment.author_id, "Edited <i>text</i>"
        )

        # Assert
        assert result.content == "Edited <i>text</i>"
        assert result.is_edited is True
        assert result.edited_at is not None
        assert result.path == comment.path
        assert result.depth == comment.depth

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        """Only the author may edit."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(make_post().id)
        await comment_repo.save(comment)

        # Act & Assert
        with pytest.raises(NotAuthorizedError, match="only edit your own comments"):
            await comment_service.update_comment(
                comment.id, make_user().id, "Hijacked"
            )

    @pytest.mark.asyncio
    async def test_deleted_comment_cannot_be_edited(self, unit_env):
        """Editing a tombstone should fail."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(make_post().id).tombstone()
        await comment_repo.save(comment)

        # Act & Assert
        with pytest.raises(ContentDeletedError, match="Cannot edit deleted comment"):
            await comment_service.update_comment(
                comment.id, comment.author_id, "Back again"
            )


class TestDeleteComment:
    """Tests for delete_comment and remove_as_admin."""

    @pytest.mark.asyncio
    async def test_soft_delete_keeps_replies_and_clears_likes(self, unit_env):
        """Deleting a comment tombstones it and drops likes on it and its replies."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)
        post_repo = await unit_env.get(PostRepository)

        post = await post_repo.save(make_post())
        parent = await comment_service.create_comment(
            post_id=post.id, author_id=make_user().id, content="Parent"
        )
        reply = await comment_service.create_comment(
            post_id=post.id,
            author_id=make_user().id,
            content="Reply",
            parent_id=parent.id,
        )
        fan = UserId(make_user().id)
        await like_service.like(fan, LikeTargetType.COMMENT, parent.id)
        await like_service.like(fan, LikeTargetType.COMMENT, reply.id)

        # Act
        deleted = await comment_service.delete_comment(parent.id, parent.author_id)

        # Assert
        assert deleted.is_deleted is True
        assert deleted.content == DELETED_PLACEHOLDER
        assert deleted.likes == 0

        surviving_reply = await comment_repo.find_by_id(reply.id)
        assert surviving_reply.is_deleted is False
        assert surviving_reply.likes == 0
        assert surviving_reply.path.segments[0] == str(parent.id)

        assert await like_repo.count_by_target(LikeTargetType.COMMENT, parent.id) == 0
        assert await like_repo.count_by_target(LikeTargetType.COMMENT, reply.id) == 0

        updated_post = await post_repo.find_by_id(post.id)
        assert updated_post.metadata.comments == 1

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        """Only the author may delete through the regular path."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(make_post().id)
        await comment_repo.save(comment)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(comment.id, make_user().id)

        unchanged = await comment_repo.find_by_id(comment.id)
        assert unchanged.is_deleted is False

    @pytest.mark.asyncio
    async def test_deleting_twice_fails(self, unit_env):
        """A tombstone cannot be deleted again."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(make_post().id).tombstone()
        await comment_repo.save(comment)

        # Act & Assert
        with pytest.raises(ContentDeletedError, match="already deleted"):
            await comment_service.delete_comment(comment.id, comment.author_id)

    @pytest.mark.asyncio
    async def test_concurrent_delete_decrements_post_once(
        self, unit_env, monkeypatch
    ):
        """A delete racing past the deleted check fails without side effects."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        post_repo = await unit_env.get(PostRepository)

        post = await post_repo.save(make_post())
        target = await comment_service.create_comment(
            post_id=post.id, author_id=make_user().id, content="Target"
        )
        reply = await comment_service.create_comment(
            post_id=post.id,
            author_id=make_user().id,
            content="Reply",
            parent_id=target.id,
        )
        await comment_service.create_comment(
            post_id=post.id, author_id=make_user().id, content="Bystander"
        )
        await comment_service.delete_comment(target.id, target.author_id)

        fan = UserId(make_user().id)
        await like_service.like(fan, LikeTargetType.COMMENT, reply.id)

        async def stale_lookup(*args, **kwargs):
            return target

        # Simulate a second request that read the comment before the first deleted it
        monkeypatch.setattr(comment_service, "get_comment", stale_lookup)

        # Act & Assert
        with pytest.raises(ContentDeletedError, match="already deleted"):
            await comment_service.delete_comment(target.id, target.author_id)

        updated_post = await post_repo.find_by_id(post.id)
        assert updated_post.metadata.comments == 2
        assert await like_repo.count_by_target(LikeTargetType.COMMENT, reply.id) == 1

    @pytest.mark.asyncio
    async def test_soft_delete_keeps_likes_below_direct_replies(self, unit_env):
        """Likes two levels below the deleted comment are left alone."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)
        post_repo = await unit_env.get(PostRepository)

        post = await post_repo.save(make_post())
        root = await comment_service.create_comment(
            post_id=post.id, author_id=make_user().id, content="Root"
        )
        child = await comment_service.create_comment(
            post_id=post.id,
            author_id=make_user().id,
            content="Child",
            parent_id=root.id,
        )
        grandchild = await comment_service.create_comment(
            post_id=post.id,
            author_id=make_user().id,
            content="Grandchild",
            parent_id=child.id,
        )
        fan = UserId(make_user().id)
        await like_service.like(fan, LikeTargetType.COMMENT, child.id)
        await like_service.like(fan, LikeTargetType.COMMENT, grandchild.id)

        # Act
        await comment_service.delete_comment(root.id, root.author_id)

        # Assert
        assert await like_repo.count_by_target(LikeTargetType.COMMENT, child.id) == 0
        assert (
            await like_repo.count_by_target(LikeTargetType.COMMENT, grandchild.id)
            == 1
        )
        surviving = await comment_repo.find_by_id(grandchild.id)
        assert surviving.likes == 1

    @pytest.mark.asyncio
    async def test_admin_removal_uses_admin_placeholder(self, unit_env):
        """Moderator removal tombstones with its own placeholder."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        comment = await comment_service.create_comment(
            post_id=post.id, author_id=make_user().id, content="Spam"
        )

        # Act
        removed = await comment_service.remove_as_admin(comment.id)

        # Assert
        assert removed.content == REMOVED_BY_ADMIN_PLACEHOLDER
        updated_post = await post_repo.find_by_id(post.id)
        assert updated_post.metadata.comments == 0

    @pytest.mark.asyncio
    async def test_failed_soft_delete_rolls_back(self, unit_env, monkeypatch):
        """If a step fails, likes and counters are left untouched."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)
        post_repo = await unit_env.get(PostRepository)

        post = await post_repo.save(make_post())
        comment = await comment_service.create_comment(
            post_id=post.id, author_id=make_user().id, content="Keep me"
        )
        await like_service.like(make_user().id, LikeTargetType.COMMENT, comment.id)

        async def failing_mark_deleted(*args, **kwargs):
            raise RuntimeError("storage unavailable")

        monkeypatch.setattr(comment_repo, "mark_deleted", failing_mark_deleted)

        # Act & Assert
        with pytest.raises(RuntimeError):
            await comment_service.delete_comment(comment.id, comment.author_id)

        assert await like_repo.count_by_target(LikeTargetType.COMMENT, comment.id) == 1
        unchanged = await post_repo.find_by_id(post.id)
        assert unchanged.metadata.comments == 1


class TestReports:
    """Tests for report_comment and dismiss_report."""

    @pytest.mark.asyncio
    async def test_comment_hidden_at_fifth_report(self, unit_env):
        """The comment stays visible for four reports and hides at five."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(make_post().id)
        await comment_repo.save(comment)

        # Act
        states = [
            await comment_service.report_comment(comment.id, reason="spam")
            for _ in range(5)
        ]

        # Assert
        assert [s.is_visible for s in states] == [True, True, True, True, False]
        assert states[-1].reports == 5

    @pytest.mark.asyncio
    async def test_dismiss_restores_visibility(self, unit_env):
        """Dismissing clears reports and shows the comment again."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(make_post().id, reports=7, is_visible=False)
        await comment_repo.save(comment)

        # Act
        result = await comment_service.dismiss_report(comment.id)

        # Assert
        assert result.reports == 0
        assert result.is_visible is True

    @pytest.mark.asyncio
    async def test_report_missing_comment_raises_not_found(self, unit_env):
        """Reporting an unknown comment should fail."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.report_comment(make_comment(make_post().id).id)

    @pytest.mark.asyncio
    async def test_reported_queue_orders_by_reports(self, unit_env):
        """The moderation queue lists the most reported comments first."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post()
        mild = make_comment(post.id, reports=1)
        severe = make_comment(post.id, reports=6, is_visible=False)
        clean = make_comment(post.id)
        await _save_all(comment_repo, mild, severe, clean)

        # Act
        comments, meta = await comment_service.get_reported_comments()

        # Assert
        assert [c.id for c in comments] == [severe.id, mild.id]
        assert meta.total == 2
