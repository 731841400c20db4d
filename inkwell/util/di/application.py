"""Application layer DI providers."""

from dishka import Scope, provide

from inkwell.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from inkwell.application.usecase.moderation import (
    DeleteCommentUseCase,
    GetOrphansUseCase,
    GetStatsUseCase,
    ListCommentsUseCase,
    ModerateCommentUseCase,
)
from inkwell.config import CommentSettings
from inkwell.domain.service import (
    AuthorizationService,
    CommentService,
    ModerationService,
    PostService,
)
from inkwell.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        comment_settings: CommentSettings,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            comment_settings=comment_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            post_service=post_service,
        )

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_moderate_comment_use_case(
        self,
        moderation_service: ModerationService,
        authorization_service: AuthorizationService,
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(
            moderation_service=moderation_service,
            authorization_service=authorization_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        moderation_service: ModerationService,
        authorization_service: AuthorizationService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            moderation_service=moderation_service,
            authorization_service=authorization_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        authorization_service: AuthorizationService,
        comment_settings: CommentSettings,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service,
            post_service=post_service,
            authorization_service=authorization_service,
            comment_settings=comment_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_orphans_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        authorization_service: AuthorizationService,
    ) -> GetOrphansUseCase:
        """Provide get orphans use case."""
        return GetOrphansUseCase(
            comment_service=comment_service,
            post_service=post_service,
            authorization_service=authorization_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_stats_use_case(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> GetStatsUseCase:
        """Provide get stats use case."""
        return GetStatsUseCase(
            comment_service=comment_service,
            authorization_service=authorization_service,
        )
