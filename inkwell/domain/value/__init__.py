"""Domain value objects for Inkwell."""

from inkwell.domain.value.identifiers import AccountId, CommentId, PostId
from inkwell.domain.value.types import (
    CommentState,
    Email,
    ModerationAction,
    PostStatus,
    Role,
    Slug,
)

__all__ = [
    # Identifiers
    "AccountId",
    "CommentId",
    "PostId",
    # Types
    "CommentState",
    "Email",
    "ModerationAction",
    "PostStatus",
    "Role",
    "Slug",
]
