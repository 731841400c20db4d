"""Get comments use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import CommentNode, CommentService, PostService


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_ref: str  # Post UUID or slug


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading the public comment tree of a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: GetCommentsRequest) -> list[CommentNode]:
        """Execute get comments flow.

        A post without approved comments yields an empty list, an unknown or
        unpublished post raises NotFoundError.

        Args:
            request: Get comments request with the post reference

        Returns:
            Root nodes, oldest first, each with nested replies
        """
        post = await self.post_service.resolve(request.post_ref, require_public=True)
        forest = await self.comment_service.get_comment_tree(post.id)
        return forest.roots
