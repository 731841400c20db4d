"""Repository interfaces for Inkwell domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.repository.post import PostRepository

__all__ = [
    "CommentRepository",
    "PostRepository",
]
