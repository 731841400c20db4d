"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Column names follow the
platform schema (``status``, ``user_id``) rather than the domain names.
"""

from typing import Any, Dict
from uuid import UUID

from inkwell.domain.model import Comment, Post
from inkwell.domain.value import (
    AccountId,
    CommentId,
    CommentState,
    Email,
    PostId,
    PostStatus,
    Slug,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        status=PostStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return {
        "id": post.id,
        "slug": post.slug.root,
        "title": post.title,
        "status": post.status.value,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        author_name=row["author_name"],
        author_email=Email(row["author_email"]) if row.get("author_email") else None,
        author_url=row.get("author_url"),
        content=row["content"],
        state=CommentState(row["status"]),
        submitter_id=AccountId(_uuid(row["user_id"])) if row.get("user_id") else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "parent_id": comment.parent_id,
        "author_name": comment.author_name,
        "author_email": comment.author_email.root if comment.author_email else None,
        "author_url": comment.author_url,
        "content": comment.content,
        "status": comment.state.value,
        "user_id": comment.submitter_id,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }
