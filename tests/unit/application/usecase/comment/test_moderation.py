"""Unit tests for comment deletion and moderation use cases."""

import pytest

from blog.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    DismissReportRequest,
    DismissReportUseCase,
    ListReportedCommentsRequest,
    ListReportedCommentsUseCase,
    ListUserCommentsRequest,
    ListUserCommentsUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
    ReportCommentRequest,
    ReportCommentUseCase,
)
from blog.domain.repository import CommentRepository, PostRepository
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


class TestDeleteCommentUseCases:
    """Tests for DeleteCommentUseCase and RemoveCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_delete_message(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post())
        comment = make_comment(post.id)
        await comment_repo.save(comment)

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(
                comment_id=str(comment.id), user_id=str(comment.author_id)
            )
        )

        # Assert
        assert response.comment_id == str(comment.id)
        assert response.message == "Comment deleted successfully"

    @pytest.mark.asyncio
    async def test_admin_remove_message(self, unit_env):
        # Arrange
        use_case = await unit_env.get(RemoveCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post())
        comment = make_comment(post.id)
        await comment_repo.save(comment)

        # Act
        response = await use_case.execute(
            RemoveCommentRequest(comment_id=str(comment.id))
        )

        # Assert
        assert response.message == "Comment deleted by admin successfully"


class TestReportUseCases:
    """Tests for reporting, dismissing and the moderation queue."""

    @pytest.mark.asyncio
    async def test_report_then_dismiss(self, unit_env):
        # Arrange
        report_use_case = await unit_env.get(ReportCommentUseCase)
        dismiss_use_case = await unit_env.get(DismissReportUseCase)
        queue_use_case = await unit_env.get(ListReportedCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(make_post().id)
        await comment_repo.save(comment)

        # Act
        reported = await report_use_case.execute(
            ReportCommentRequest(comment_id=str(comment.id), reason="off-topic")
        )
        queue = await queue_use_case.execute(ListReportedCommentsRequest())
        dismissed = await dismiss_use_case.execute(
            DismissReportRequest(comment_id=str(comment.id))
        )
        empty_queue = await queue_use_case.execute(ListReportedCommentsRequest())

        # Assert
        assert (reported.reports, reported.is_visible) == (1, True)
        assert [c.comment_id for c in queue.comments] == [str(comment.id)]
        assert (dismissed.reports, dismissed.is_visible) == (0, True)
        assert empty_queue.meta.total == 0


class TestListUserCommentsUseCase:
    """Tests for ListUserCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_only_live_comments_of_author(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListUserCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user()
        post = make_post()
        older = make_comment(post.id, author_id=author.id, minutes_ago=5)
        newer = make_comment(post.id, author_id=author.id)
        gone = make_comment(post.id, author_id=author.id).tombstone()
        other = make_comment(post.id)
        for comment in (older, newer, gone, other):
            await comment_repo.save(comment)

        # Act
        response = await use_case.execute(
            ListUserCommentsRequest(user_id=str(author.id))
        )

        # Assert
        assert [c.comment_id for c in response.comments] == [
            str(newer.id),
            str(older.id),
        ]
        assert response.meta.total == 2
