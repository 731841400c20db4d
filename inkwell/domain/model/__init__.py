"""Domain model entities for Inkwell."""

from inkwell.domain.model.comment import ALLOWED_TRANSITIONS, Comment
from inkwell.domain.model.identity import Identity
from inkwell.domain.model.post import Post

__all__ = [
    "ALLOWED_TRANSITIONS",
    "Comment",
    "Identity",
    "Post",
]
