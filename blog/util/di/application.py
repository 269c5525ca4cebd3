"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    DismissReportUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
    ListReportedCommentsUseCase,
    ListUserCommentsUseCase,
    RemoveCommentUseCase,
    ReportCommentUseCase,
    UpdateCommentUseCase,
)
from blog.application.usecase.like import (
    GetLikeStatusUseCase,
    LikeUseCase,
    ListLikersUseCase,
    UnlikeUseCase,
)
from blog.application.usecase.post import DeletePostUseCase
from blog.config import PaginationSettings
from blog.domain.service import (
    CascadeService,
    CommentService,
    JWTService,
    LikeService,
)
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        like_service: LikeService,
        jwt_service: JWTService,
        pagination: PaginationSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            like_service=like_service,
            jwt_service=jwt_service,
            pagination=pagination,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self,
        comment_service: CommentService,
        like_service: LikeService,
        jwt_service: JWTService,
    ) -> GetCommentUseCase:
        """Provide get single comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service,
            like_service=like_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_comment_use_case(
        self, comment_service: CommentService
    ) -> RemoveCommentUseCase:
        """Provide moderator removal use case."""
        return RemoveCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_report_comment_use_case(
        self, comment_service: CommentService
    ) -> ReportCommentUseCase:
        """Provide report comment use case."""
        return ReportCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_dismiss_report_use_case(
        self, comment_service: CommentService
    ) -> DismissReportUseCase:
        """Provide dismiss report use case."""
        return DismissReportUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_user_comments_use_case(
        self, comment_service: CommentService, pagination: PaginationSettings
    ) -> ListUserCommentsUseCase:
        """Provide list user comments use case."""
        return ListUserCommentsUseCase(
            comment_service=comment_service, pagination=pagination
        )

    @provide(scope=Scope.REQUEST)
    def get_list_reported_comments_use_case(
        self, comment_service: CommentService, pagination: PaginationSettings
    ) -> ListReportedCommentsUseCase:
        """Provide list reported comments use case."""
        return ListReportedCommentsUseCase(
            comment_service=comment_service, pagination=pagination
        )

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_like_use_case(self, like_service: LikeService) -> LikeUseCase:
        """Provide like use case."""
        return LikeUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_use_case(self, like_service: LikeService) -> UnlikeUseCase:
        """Provide unlike use case."""
        return UnlikeUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_list_likers_use_case(
        self, like_service: LikeService, pagination: PaginationSettings
    ) -> ListLikersUseCase:
        """Provide list likers use case."""
        return ListLikersUseCase(like_service=like_service, pagination=pagination)

    @provide(scope=Scope.REQUEST)
    def get_like_status_use_case(
        self, like_service: LikeService, jwt_service: JWTService
    ) -> GetLikeStatusUseCase:
        """Provide like status use case."""
        return GetLikeStatusUseCase(like_service=like_service, jwt_service=jwt_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self, cascade_service: CascadeService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(cascade_service=cascade_service)
