"""Get orphans use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.comment.common import ModeratedCommentItem
from inkwell.domain.model import Identity
from inkwell.domain.service import (
    AuthorizationService,
    CommentService,
    PostService,
)


class GetOrphansRequest(BaseModel):
    """Get orphans request."""

    identity: Identity
    post_ref: str  # Post UUID or slug


class GetOrphansResponse(BaseModel):
    """Get orphans response."""

    post_id: str
    orphans: list[ModeratedCommentItem]


class GetOrphansUseCase(BaseUseCase):
    """Use case for listing comments that cannot be placed in a post's tree."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        authorization_service: AuthorizationService,
    ) -> None:
        self.comment_service = comment_service
        self.post_service = post_service
        self.authorization_service = authorization_service

    async def execute(self, request: GetOrphansRequest) -> GetOrphansResponse:
        """Execute get orphans flow.

        Raises:
            NotAuthorizedError: If the identity is not a moderator
            NotFoundError: If the post does not resolve
        """
        self.authorization_service.require_moderator(
            request.identity, "inspect orphaned comments"
        )

        post = await self.post_service.resolve(request.post_ref)
        orphans = await self.comment_service.get_orphans(post.id)

        return GetOrphansResponse(
            post_id=str(post.id),
            orphans=[ModeratedCommentItem.from_comment(c, post) for c in orphans],
        )
