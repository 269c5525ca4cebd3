"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings
from blog.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    UnitOfWork,
    UserRepository,
)
from blog.domain.service import (
    CascadeService,
    CommentService,
    ContentSanitizer,
    JWTService,
    LikeService,
    PostService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_sanitizer(self) -> ContentSanitizer:
        """Provide the HTML sanitizer (stateless, shared)."""
        return ContentSanitizer()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        post_service: PostService,
        unit_of_work: UnitOfWork,
        sanitizer: ContentSanitizer,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            like_repository=like_repository,
            post_service=post_service,
            unit_of_work=unit_of_work,
            sanitizer=sanitizer,
        )

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        user_repository: UserRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            user_repository=user_repository,
            post_service=post_service,
            comment_service=comment_service,
        )

    @provide
    def get_cascade_service(
        self,
        post_service: PostService,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        unit_of_work: UnitOfWork,
    ) -> CascadeService:
        """Provide cascade deletion domain service."""
        return CascadeService(
            post_service=post_service,
            post_repository=post_repository,
            comment_repository=comment_repository,
            like_repository=like_repository,
            unit_of_work=unit_of_work,
        )
