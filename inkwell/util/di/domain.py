"""Domain layer DI providers."""

from dishka import Scope, provide

from inkwell.config import AuthSettings
from inkwell.domain.repository import CommentRepository, PostRepository
from inkwell.domain.service import (
    AuthorizationService,
    CommentService,
    JWTService,
    ModerationService,
    PostService,
)
from inkwell.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_authorization_service(
        self, auth_settings: AuthSettings
    ) -> AuthorizationService:
        """Provide authorization domain service."""
        return AuthorizationService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_moderation_service(
        self, comment_repository: CommentRepository
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(comment_repository=comment_repository)
