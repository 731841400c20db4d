"""PostgreSQL repository implementations."""

from inkwell.persistence.repository.comment import PostgresCommentRepository
from inkwell.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresPostRepository",
]
