"""Response models shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel, Field

from inkwell.domain.model import Comment, Post
from inkwell.domain.service import CommentNode
from inkwell.domain.value import CommentState


class CommentItem(BaseModel):
    """Comment as shown to readers.

    The author email is never part of a public response.
    """

    comment_id: str
    post_id: str
    parent_id: str | None
    author_name: str
    author_url: str | None
    content: str
    state: CommentState
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author_name=comment.author_name,
            author_url=comment.author_url,
            content=comment.content,
            state=comment.state,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentNodeItem(CommentItem):
    """Comment with its replies nested below it.

    Documents the public read; the body itself comes from
    ``render_comment_tree``.
    """

    replies: list["CommentNodeItem"] = Field(default_factory=list)


class ModeratedCommentItem(CommentItem):
    """Comment as shown to moderators, with author contact and post context."""

    author_email: str | None
    submitter_id: str | None
    post_title: str | None = None
    post_slug: str | None = None

    @classmethod
    def from_comment(
        cls, comment: Comment, post: Post | None = None
    ) -> "ModeratedCommentItem":
        return cls(
            **CommentItem.from_domain(comment).model_dump(),
            author_email=comment.author_email.root if comment.author_email else None,
            submitter_id=str(comment.submitter_id) if comment.submitter_id else None,
            post_title=post.title if post else None,
            post_slug=post.slug.root if post else None,
        )


def render_comment_tree(roots: list[CommentNode]) -> str:
    """Serialize an assembled forest as the JSON body of the public read.

    The output has the shape of ``list[CommentNodeItem]``. Each comment is
    encoded on its own by pydantic and the nesting is written from an
    explicit stack, since pydantic-core and the json module both refuse
    documents nested more than a few hundred levels deep.
    """
    parts: list[str] = ["["]
    stack: list[tuple[list[CommentNode], int]] = [(roots, 0)]

    while stack:
        siblings, index = stack.pop()
        if index == len(siblings):
            # Closes a replies list, then the comment that owns it
            parts.append("]}" if stack else "]")
            continue

        if index:
            parts.append(",")
        node = siblings[index]
        encoded = CommentItem.from_domain(node.comment).model_dump_json()
        parts.append(encoded[:-1] + ',"replies":[')
        stack.append((siblings, index + 1))
        stack.append((node.replies, 0))

    return "".join(parts)
