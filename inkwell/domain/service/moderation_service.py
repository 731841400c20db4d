"""Moderation domain service.

Drives comments through the moderation state machine:

    pending -> approved | spam | deleted
    approved -> spam | deleted
    spam -> deleted

Moving a comment to the state it is already in succeeds without touching
storage. Deleting a comment, soft or hard, takes all of its replies along.
"""

from datetime import datetime

import logfire

from inkwell.domain.error import InvalidStateTransitionError, NotFoundError
from inkwell.domain.model.comment import Comment
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import CommentId, CommentState

from .base import Service
from .comment_tree import collect_descendants


class ModerationService(Service):
    """Domain service for moderation actions on comments."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize moderation service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def approve(self, comment_id: CommentId) -> Comment:
        """Approve a comment so it shows up in the public tree.

        Args:
            comment_id: Comment ID

        Returns:
            The approved comment

        Raises:
            NotFoundError: If the comment does not exist
            InvalidStateTransitionError: If the comment is spam or deleted
        """
        with logfire.span("moderation_service.approve", comment_id=str(comment_id)):
            return await self._transition(comment_id, CommentState.APPROVED)

    async def mark_spam(self, comment_id: CommentId) -> Comment:
        """Mark a comment as spam.

        Replies are left alone; they stay out of the public tree because
        their parent is no longer approved.

        Raises:
            NotFoundError: If the comment does not exist
            InvalidStateTransitionError: If the comment is deleted
        """
        with logfire.span(
            "moderation_service.mark_spam", comment_id=str(comment_id)
        ):
            return await self._transition(comment_id, CommentState.SPAM)

    async def mark_deleted(self, comment_id: CommentId) -> Comment:
        """Soft delete a comment and every reply below it.

        Args:
            comment_id: Comment ID

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "moderation_service.mark_deleted", comment_id=str(comment_id)
        ):
            comment = await self._get(comment_id)
            if comment.state == CommentState.DELETED:
                logfire.info("Comment already deleted", comment_id=str(comment_id))
                return comment

            descendants = await self._descendants_of(comment)
            now = datetime.now()
            updated = await self.comment_repository.update_state(
                [comment.id, *descendants], CommentState.DELETED, now
            )
            logfire.info(
                "Comment soft deleted",
                comment_id=str(comment_id),
                previous_state=comment.state.value,
                affected=updated,
            )
            return comment.with_state(CommentState.DELETED, now)

    async def delete(self, comment_id: CommentId) -> int:
        """Permanently remove a comment and every reply below it.

        Args:
            comment_id: Comment ID

        Returns:
            Number of removed comments, the comment itself included

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("moderation_service.delete", comment_id=str(comment_id)):
            comment = await self._get(comment_id)
            descendants = await self._descendants_of(comment)

            removed = await self.comment_repository.delete_many(
                [comment.id, *descendants]
            )
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                post_id=str(comment.post_id),
                descendants=len(descendants),
                removed=removed,
            )
            return removed

    async def _get(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def _descendants_of(self, comment: Comment) -> list[CommentId]:
        siblings = await self.comment_repository.find_by_post(comment.post_id)
        return collect_descendants(comment.id, siblings)

    async def _transition(self, comment_id: CommentId, target: CommentState) -> Comment:
        comment = await self._get(comment_id)

        if comment.state == target:
            logfire.info(
                "Comment already in target state",
                comment_id=str(comment_id),
                state=target.value,
            )
            return comment

        if not comment.can_transition_to(target):
            logfire.warn(
                "Rejected moderation transition",
                comment_id=str(comment_id),
                current=comment.state.value,
                target=target.value,
            )
            raise InvalidStateTransitionError(str(comment_id), comment.state, target)

        now = datetime.now()
        await self.comment_repository.update_state([comment.id], target, now)
        logfire.info(
            "Comment state changed",
            comment_id=str(comment_id),
            previous_state=comment.state.value,
            state=target.value,
        )
        return comment.with_state(target, now)
