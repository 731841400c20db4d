"""Moderate comment use cases."""

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.comment.common import ModeratedCommentItem
from inkwell.domain.error import ValidationError
from inkwell.domain.model import Identity
from inkwell.domain.service import AuthorizationService, ModerationService
from inkwell.domain.value import ModerationAction

from .common import parse_comment_id


class ModerateCommentRequest(BaseModel):
    """Moderate comment request."""

    comment_id: str
    action: ModerationAction
    identity: Identity


class ModerateCommentResponse(BaseModel):
    """Moderate comment response."""

    action: ModerationAction
    comment: ModeratedCommentItem


class ModerateCommentUseCase(BaseUseCase):
    """Use case for approving, flagging as spam, or trashing a comment."""

    def __init__(
        self,
        moderation_service: ModerationService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize moderate comment use case.

        Args:
            moderation_service: Moderation domain service
            authorization_service: Decides who may moderate
        """
        self.moderation_service = moderation_service
        self.authorization_service = authorization_service

    async def execute(self, request: ModerateCommentRequest) -> ModerateCommentResponse:
        """Execute a state change on a comment.

        Args:
            request: Comment ID, action, and the moderator's identity

        Returns:
            The comment in its new state

        Raises:
            NotAuthorizedError: If the identity is not a moderator
            ValidationError: If the comment ID is malformed, or the action is
                a hard delete (see DeleteCommentUseCase)
            NotFoundError: If the comment does not exist
            InvalidStateTransitionError: If the move is not allowed
        """
        self.authorization_service.require_moderator(
            request.identity, f"{request.action.value} comments"
        )
        comment_id = parse_comment_id(request.comment_id)

        if request.action == ModerationAction.APPROVE:
            comment = await self.moderation_service.approve(comment_id)
        elif request.action == ModerationAction.SPAM:
            comment = await self.moderation_service.mark_spam(comment_id)
        elif request.action == ModerationAction.TRASH:
            comment = await self.moderation_service.mark_deleted(comment_id)
        else:
            raise ValidationError({"action": "use the delete endpoint"})

        logfire.info(
            "Comment moderated",
            comment_id=str(comment_id),
            action=request.action.value,
            moderator_id=str(request.identity.account_id),
        )
        return ModerateCommentResponse(
            action=request.action,
            comment=ModeratedCommentItem.from_comment(comment),
        )


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    identity: Identity


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    deleted: int  # The comment plus every reply below it


class DeleteCommentUseCase(BaseUseCase):
    """Use case for permanently removing a comment thread."""

    def __init__(
        self,
        moderation_service: ModerationService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            moderation_service: Moderation domain service
            authorization_service: Decides who may moderate
        """
        self.moderation_service = moderation_service
        self.authorization_service = authorization_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute hard deletion of a comment and its replies.

        Raises:
            NotAuthorizedError: If the identity is not a moderator
            ValidationError: If the comment ID is malformed
            NotFoundError: If the comment does not exist
        """
        self.authorization_service.require_moderator(
            request.identity, f"{ModerationAction.DELETE.value} comments"
        )
        comment_id = parse_comment_id(request.comment_id)

        deleted = await self.moderation_service.delete(comment_id)

        logfire.info(
            "Comment thread deleted",
            comment_id=str(comment_id),
            deleted=deleted,
            moderator_id=str(request.identity.account_id),
        )
        return DeleteCommentResponse(deleted=deleted)
