"""List comments use case (moderation queue)."""

from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.comment.common import ModeratedCommentItem
from inkwell.config import CommentSettings
from inkwell.domain.model import Identity
from inkwell.domain.service import (
    AuthorizationService,
    CommentService,
    PostService,
)
from inkwell.domain.value import CommentState


class ListCommentsRequest(BaseModel):
    """List comments request."""

    identity: Identity
    state: CommentState | None = None
    post_ref: str | None = None  # Post UUID or slug
    # None uses the configured queue page size
    limit: int | None = Field(default=None, ge=1, le=200)
    offset: int = Field(default=0, ge=0)


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[ModeratedCommentItem]
    limit: int
    offset: int


class ListCommentsUseCase(BaseUseCase):
    """Use case for browsing comments by state, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        authorization_service: AuthorizationService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service, for titles and slugs
            authorization_service: Decides who may moderate
            comment_settings: Default page size of the queue
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.authorization_service = authorization_service
        self.comment_settings = comment_settings

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Unlike the public read path, unpublished posts can be filtered on.

        Raises:
            NotAuthorizedError: If the identity is not a moderator
            NotFoundError: If a post filter is given and does not resolve
        """
        self.authorization_service.require_moderator(request.identity, "list comments")

        limit = request.limit or self.comment_settings.queue_page_size

        post_id = None
        if request.post_ref:
            post = await self.post_service.resolve(request.post_ref)
            post_id = post.id

        comments = await self.comment_service.list_comments(
            state=request.state,
            post_id=post_id,
            limit=limit,
            offset=request.offset,
        )

        posts = await self.post_service.get_posts_by_ids(
            list({comment.post_id for comment in comments})
        )

        return ListCommentsResponse(
            comments=[
                ModeratedCommentItem.from_comment(comment, posts.get(comment.post_id))
                for comment in comments
            ],
            limit=limit,
            offset=request.offset,
        )
