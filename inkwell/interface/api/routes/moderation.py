"""Moderation routes.

Every route requires a bearer token; 401 without a valid one and 403 when
the account does not hold a moderator role.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from inkwell.application.usecase.moderation import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetOrphansRequest,
    GetOrphansResponse,
    GetOrphansUseCase,
    GetStatsRequest,
    GetStatsResponse,
    GetStatsUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
)
from inkwell.application.usecase.comment import ModeratedCommentItem
from inkwell.domain.service import JWTService
from inkwell.domain.value import CommentState, ModerationAction
from inkwell.interface.api.auth import require_identity

router = APIRouter(prefix="/moderation", tags=["moderation"], route_class=DishkaRoute)


@router.get("/comments", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    state: CommentState | None = Query(default=None),
    post: str | None = Query(default=None, description="Post UUID or slug"),
    limit: int | None = Query(default=None, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    authorization: str | None = Header(default=None),
) -> ListCommentsResponse:
    """List comments newest first, optionally by state and post."""
    identity = require_identity(jwt_service, authorization)
    return await list_comments_use_case.execute(
        ListCommentsRequest(
            identity=identity,
            state=state,
            post_ref=post,
            limit=limit,
            offset=offset,
        )
    )


async def _moderate(
    use_case: ModerateCommentUseCase,
    jwt_service: JWTService,
    authorization: str | None,
    comment_id: str,
    action: ModerationAction,
) -> ModeratedCommentItem:
    identity = require_identity(jwt_service, authorization)
    result: ModerateCommentResponse = await use_case.execute(
        ModerateCommentRequest(comment_id=comment_id, action=action, identity=identity)
    )
    return result.comment


@router.post("/comments/{comment_id}/approve", response_model=ModeratedCommentItem)
async def approve_comment(
    comment_id: str,
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ModeratedCommentItem:
    """Approve a comment. Approving an approved comment is a no-op."""
    return await _moderate(
        moderate_comment_use_case,
        jwt_service,
        authorization,
        comment_id,
        ModerationAction.APPROVE,
    )


@router.post("/comments/{comment_id}/spam", response_model=ModeratedCommentItem)
async def mark_comment_spam(
    comment_id: str,
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ModeratedCommentItem:
    """Mark a comment as spam."""
    return await _moderate(
        moderate_comment_use_case,
        jwt_service,
        authorization,
        comment_id,
        ModerationAction.SPAM,
    )


@router.post("/comments/{comment_id}/trash", response_model=ModeratedCommentItem)
async def trash_comment(
    comment_id: str,
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ModeratedCommentItem:
    """Soft delete a comment together with its replies."""
    return await _moderate(
        moderate_comment_use_case,
        jwt_service,
        authorization,
        comment_id,
        ModerationAction.TRASH,
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Permanently delete a comment and every reply below it."""
    identity = require_identity(jwt_service, authorization)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, identity=identity)
    )


@router.get("/posts/{post}/orphans", response_model=GetOrphansResponse)
async def get_orphans(
    post: str,
    get_orphans_use_case: FromDishka[GetOrphansUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetOrphansResponse:
    """List comments of a post that cannot be placed in its comment tree."""
    identity = require_identity(jwt_service, authorization)
    return await get_orphans_use_case.execute(
        GetOrphansRequest(identity=identity, post_ref=post)
    )


@router.get("/stats", response_model=GetStatsResponse)
async def get_stats(
    get_stats_use_case: FromDishka[GetStatsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetStatsResponse:
    """Comment counts per moderation state."""
    identity = require_identity(jwt_service, authorization)
    return await get_stats_use_case.execute(GetStatsRequest(identity=identity))
