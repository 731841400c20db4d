"""Domain services."""

from .authorization_service import AuthorizationService
from .base import Service
from .comment_service import CommentService
from .comment_tree import (
    CommentForest,
    CommentNode,
    assemble_comment_tree,
    collect_descendants,
    iter_nodes,
)
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .post_service import PostService

__all__ = [
    "AuthorizationService",
    "CommentForest",
    "CommentNode",
    "CommentService",
    "JWTService",
    "ModerationService",
    "PostService",
    "Service",
    "assemble_comment_tree",
    "collect_descendants",
    "iter_nodes",
]
