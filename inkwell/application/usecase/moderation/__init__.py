"""Moderation use cases."""

from .get_orphans import GetOrphansRequest, GetOrphansResponse, GetOrphansUseCase
from .get_stats import GetStatsRequest, GetStatsResponse, GetStatsUseCase
from .list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from .moderate_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
)

__all__ = [
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetOrphansRequest",
    "GetOrphansResponse",
    "GetOrphansUseCase",
    "GetStatsRequest",
    "GetStatsResponse",
    "GetStatsUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "ModerateCommentRequest",
    "ModerateCommentResponse",
    "ModerateCommentUseCase",
]
