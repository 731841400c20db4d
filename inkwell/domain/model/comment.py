"""Comment entity.

Comments are threaded remarks on blog posts. A reply points at its parent
through ``parent_id``; the tree itself is never stored, it is assembled per
request from the flat list of a post's comments.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import AccountId, CommentId, CommentState, Email, PostId

# Moderation state machine. Same-state moves are no-ops and are handled by the
# service, so they are not listed here.
ALLOWED_TRANSITIONS: dict[CommentState, frozenset[CommentState]] = {
    CommentState.PENDING: frozenset(
        {CommentState.APPROVED, CommentState.SPAM, CommentState.DELETED}
    ),
    CommentState.APPROVED: frozenset({CommentState.SPAM, CommentState.DELETED}),
    CommentState.SPAM: frozenset({CommentState.DELETED}),
    CommentState.DELETED: frozenset(),
}


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment on the
    same post. Initial state depends on who submitted it:
    - Anonymous submissions start as PENDING and wait for a moderator
    - Submissions carrying an authenticated account start as APPROVED
    """

    id: CommentId
    post_id: PostId
    parent_id: Optional[CommentId] = None
    author_name: str = Field(min_length=1, max_length=255)
    author_email: Optional[Email] = None
    author_url: Optional[str] = Field(default=None, max_length=500)
    content: str = Field(min_length=1)
    state: CommentState = CommentState.PENDING
    submitter_id: Optional[AccountId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_root(self) -> bool:
        """Whether this is a top-level comment."""
        return self.parent_id is None

    def can_transition_to(self, target: CommentState) -> bool:
        """Check whether the moderation state machine allows a move to target."""
        return target == self.state or target in ALLOWED_TRANSITIONS[self.state]

    def with_state(self, state: CommentState, at: datetime | None = None) -> "Comment":
        """Return a copy in the given state with a refreshed updated_at."""
        return self.model_copy(
            update={"state": state, "updated_at": at or datetime.now()}
        )
