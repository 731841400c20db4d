"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Collection, Optional

from inkwell.domain.model.comment import Comment
from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.value import CommentId, CommentState, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Ties on created_at keep insertion order, matching the id tie-break of the
    PostgreSQL implementation closely enough for tests.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(
        self,
        post_id: PostId,
        states: Optional[Collection[CommentState]] = None,
    ) -> list[Comment]:
        """Find comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]

        if states is not None:
            comments = [c for c in comments if c.state in states]

        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_by_state(
        self,
        state: Optional[CommentState] = None,
        post_id: Optional[PostId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments for the moderation queue, newest first."""
        comments = list(self._comments.values())

        if state is not None:
            comments = [c for c in comments if c.state == state]
        if post_id is not None:
            comments = [c for c in comments if c.post_id == post_id]

        comments.sort(key=lambda c: c.created_at, reverse=True)

        # Paginate
        return comments[offset : offset + limit]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_state(
        self,
        comment_ids: Collection[CommentId],
        state: CommentState,
        updated_at: datetime,
    ) -> int:
        """Move comments to a new state."""
        updated = 0
        for comment_id in comment_ids:
            comment = self._comments.get(comment_id)
            if comment:
                # Comments are immutable, store an updated copy
                self._comments[comment_id] = comment.with_state(state, updated_at)
                updated += 1
        return updated

    async def delete_many(self, comment_ids: Collection[CommentId]) -> int:
        """Hard delete comments."""
        removed = 0
        for comment_id in comment_ids:
            if self._comments.pop(comment_id, None) is not None:
                removed += 1
        return removed

    async def count_by_state(self) -> dict[CommentState, int]:
        """Count comments in each state."""
        counts = {state: 0 for state in CommentState}
        for comment in self._comments.values():
            counts[comment.state] += 1
        return counts
