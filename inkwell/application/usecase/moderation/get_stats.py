"""Get moderation stats use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.model import Identity
from inkwell.domain.service import AuthorizationService, CommentService
from inkwell.domain.value import CommentState


class GetStatsRequest(BaseModel):
    """Get stats request."""

    identity: Identity


class GetStatsResponse(BaseModel):
    """Comment counts per moderation state."""

    pending_comments: int
    approved_comments: int
    spam_comments: int
    deleted_comments: int
    total_comments: int


class GetStatsUseCase(BaseUseCase):
    """Use case for the moderation dashboard counters."""

    def __init__(
        self,
        comment_service: CommentService,
        authorization_service: AuthorizationService,
    ) -> None:
        self.comment_service = comment_service
        self.authorization_service = authorization_service

    async def execute(self, request: GetStatsRequest) -> GetStatsResponse:
        """Execute get stats flow.

        Raises:
            NotAuthorizedError: If the identity is not a moderator
        """
        self.authorization_service.require_moderator(
            request.identity, "view moderation stats"
        )

        counts = await self.comment_service.count_by_state()
        return GetStatsResponse(
            pending_comments=counts[CommentState.PENDING],
            approved_comments=counts[CommentState.APPROVED],
            spam_comments=counts[CommentState.SPAM],
            deleted_comments=counts[CommentState.DELETED],
            total_comments=sum(counts.values()),
        )
