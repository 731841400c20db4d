"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from inkwell.application.usecase.base import BaseUseCase
from inkwell.config import CommentSettings
from inkwell.domain.error import ValidationError
from inkwell.domain.model import Identity
from inkwell.domain.service import CommentService, PostService
from inkwell.domain.value import CommentId, Email

from .common import CommentItem

MAX_AUTHOR_NAME_LENGTH = 255
MAX_AUTHOR_URL_LENGTH = 500


class CreateCommentRequest(BaseModel):
    """Create comment request.

    Fields are loosely typed on purpose: every one of them is checked by the
    use case so all problems can be reported together.
    """

    post_ref: str  # Post UUID or slug
    author_name: str | None = None
    content: str | None = None
    author_email: str | None = None
    author_url: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies
    identity: Identity | None = None  # From the bearer token, never the body


class CreateCommentResponse(CommentItem):
    """Create comment response."""

    pass


class _CleanSubmission(BaseModel):
    author_name: str
    content: str
    author_email: Email | None
    author_url: str | None
    parent_id: CommentId | None


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            comment_settings: Limits applied to submissions
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.comment_settings = comment_settings

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate every submitted field, before touching storage
        2. Resolve the post reference to a public post
        3. Create the comment (service checks the parent is on the same post)

        Args:
            request: Create comment request

        Returns:
            The stored comment

        Raises:
            ValidationError: If any field is missing or malformed
            NotFoundError: If the post or the parent comment does not exist
            InvalidReferenceError: If the parent belongs to another post
        """
        submission = self._validate(request)

        post = await self.post_service.resolve(request.post_ref, require_public=True)

        comment = await self.comment_service.create_comment(
            post_id=post.id,
            author_name=submission.author_name,
            content=submission.content,
            author_email=submission.author_email,
            author_url=submission.author_url,
            parent_id=submission.parent_id,
            submitter_id=request.identity.account_id if request.identity else None,
        )

        return CreateCommentResponse(**CommentItem.from_domain(comment).model_dump())

    def _validate(self, request: CreateCommentRequest) -> _CleanSubmission:
        errors: dict[str, str] = {}

        author_name = (request.author_name or "").strip()
        if not author_name:
            errors["author_name"] = "is required"
        elif len(author_name) > MAX_AUTHOR_NAME_LENGTH:
            errors["author_name"] = (
                f"must be at most {MAX_AUTHOR_NAME_LENGTH} characters"
            )

        content = (request.content or "").strip()
        max_content = self.comment_settings.max_content_length
        if not content:
            errors["content"] = "is required"
        elif len(content) > max_content:
            errors["content"] = f"must be at most {max_content} characters"

        author_email = None
        raw_email = (request.author_email or "").strip()
        if raw_email:
            try:
                author_email = Email(raw_email)
            except PydanticValidationError:
                errors["author_email"] = "must be a valid email address"

        author_url = (request.author_url or "").strip() or None
        if author_url and len(author_url) > MAX_AUTHOR_URL_LENGTH:
            errors["author_url"] = f"must be at most {MAX_AUTHOR_URL_LENGTH} characters"

        parent_id = None
        raw_parent = (request.parent_id or "").strip()
        if raw_parent:
            try:
                parent_id = CommentId(UUID(raw_parent))
            except ValueError:
                errors["parent_id"] = "must be a valid comment id"

        if errors:
            logfire.warn(
                "Comment submission rejected",
                post_ref=request.post_ref,
                fields=sorted(errors),
            )
            raise ValidationError(errors)

        return _CleanSubmission(
            author_name=author_name,
            content=content,
            author_email=author_email,
            author_url=author_url,
            parent_id=parent_id,
        )
