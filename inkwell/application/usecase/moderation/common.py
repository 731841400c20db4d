"""Helpers shared by the moderation use cases."""

from uuid import UUID

from inkwell.domain.error import ValidationError
from inkwell.domain.value import CommentId


def parse_comment_id(raw: str) -> CommentId:
    """Parse a comment ID from a path parameter.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return CommentId(UUID(raw))
    except ValueError:
        raise ValidationError({"comment_id": "must be a valid comment id"})
