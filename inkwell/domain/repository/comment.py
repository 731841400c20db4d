"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Collection, List, Optional

from inkwell.domain.model.comment import Comment
from inkwell.domain.value import CommentId, CommentState, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post_id: PostId,
        states: Optional[Collection[CommentState]] = None,
    ) -> List[Comment]:
        """Find comments for a post ordered by creation time (oldest first).

        Args:
            post_id: The post ID
            states: Only return comments in these states (None for all states)

        Returns:
            List of comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_by_state(
        self,
        state: Optional[CommentState] = None,
        post_id: Optional[PostId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments for the moderation queue, newest first.

        Args:
            state: Filter by state (None for all states)
            post_id: Filter by post (None for all posts)
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_state(
        self,
        comment_ids: Collection[CommentId],
        state: CommentState,
        updated_at: datetime,
    ) -> int:
        """Move comments to a new state.

        Args:
            comment_ids: IDs of the comments to update
            state: New state
            updated_at: Timestamp to record as the mutation time

        Returns:
            Number of comments updated
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: Collection[CommentId]) -> int:
        """Hard delete comments.

        The caller is responsible for passing every descendant; implementations
        must not rely on storage-level cascades to report the count.

        Args:
            comment_ids: IDs of the comments to delete

        Returns:
            Number of comments removed
        """
        pass

    @abstractmethod
    async def count_by_state(self) -> dict[CommentState, int]:
        """Count comments in each state.

        Returns:
            Mapping of state to number of comments (states with no comments map to 0)
        """
        pass
