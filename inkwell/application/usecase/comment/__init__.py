"""Comment use cases."""

from .common import (
    CommentItem,
    CommentNodeItem,
    ModeratedCommentItem,
    render_comment_tree,
)
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .get_comments import GetCommentsRequest, GetCommentsUseCase

__all__ = [
    "CommentItem",
    "CommentNodeItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
    "ModeratedCommentItem",
    "render_comment_tree",
]
