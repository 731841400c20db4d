"""Domain value objects for Inkwell.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import EmailStr, field_validator

from inkwell.domain.value.common import RootValueObject

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class CommentState(str, Enum):
    """Moderation state of a comment."""

    PENDING = "pending"
    APPROVED = "approved"
    SPAM = "spam"
    DELETED = "deleted"


class PostStatus(str, Enum):
    """Publication status of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Role(str, Enum):
    """Account role carried in the bearer token."""

    USER = "user"
    ADMIN = "admin"


class ModerationAction(str, Enum):
    """Actions a moderator can take on a comment."""

    APPROVE = "approve"
    SPAM = "spam"
    TRASH = "trash"
    DELETE = "delete"


class Slug(RootValueObject[str]):
    """URL-safe slug for posts.

    Must be lowercase, alphanumeric with hyphens, 1-500 characters.
    Examples: 'hello-world', 'notes-on-static-hosting'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if len(v) < 1 or len(v) > 500:
            raise ValueError("Slug must be 1-500 characters")
        if not SLUG_PATTERN.match(v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v


class Email(RootValueObject[EmailStr]):
    """Email address of a comment author.

    Syntax is checked by email-validator through ``EmailStr``; deliverability
    is not.
    """

    @field_validator("root")
    @classmethod
    def validate_email_length(cls, v: str) -> str:
        """Validate email length."""
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        return v
