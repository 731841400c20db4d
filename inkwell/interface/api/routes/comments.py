"""Public comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, Response, status
from pydantic import BaseModel

from inkwell.application.usecase.comment import (
    CommentNodeItem,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    render_comment_tree,
)
from inkwell.domain.service import JWTService
from inkwell.interface.api.auth import optional_identity

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Presence and format are checked by the use case so that every invalid
    field is reported in one response.
    """

    author_name: str | None = None
    content: str | None = None
    author_email: str | None = None
    author_url: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies


@router.get("", response_model=list[CommentNodeItem])
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    post: str = Query(min_length=1, description="Post UUID or slug"),
) -> Response:
    """Get the approved comments of a post as a tree.

    The body is rendered by hand so reply chains of any depth serialize;
    ``response_model`` only documents its shape.

    Args:
        get_comments_use_case: Get comments use case from DI
        post: Post UUID or slug

    Returns:
        Root comments, oldest first, each with nested replies
    """
    roots = await get_comments_use_case.execute(GetCommentsRequest(post_ref=post))
    return Response(
        content=render_comment_tree(roots), media_type="application/json"
    )


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    post: str = Query(min_length=1, description="Post UUID or slug"),
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Submit a comment or a reply.

    Anonymous comments are held for moderation. A valid bearer token makes
    the comment visible immediately; an invalid one is ignored.

    Args:
        request: Comment fields
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        post: Post UUID or slug
        authorization: Optional bearer token header

    Returns:
        The stored comment
    """
    use_case_request = CreateCommentRequest(
        post_ref=post,
        identity=optional_identity(jwt_service, authorization),
        **request.model_dump(),
    )
    return await create_comment_use_case.execute(use_case_request)
