"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from inkwell.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from inkwell.domain.error import InvalidReferenceError, NotFoundError, ValidationError
from inkwell.domain.model import Identity
from inkwell.domain.repository import CommentRepository, PostRepository
from inkwell.domain.value import AccountId, CommentState, PostStatus, Role
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for comment submission."""

    @pytest.mark.asyncio
    async def test_anonymous_submission_by_slug(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("Hello World"))

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                post_ref="hello-world",
                author_name="  Ada  ",
                content="Great read",
                author_email="ada@example.com",
            )
        )

        # Assert
        assert response.post_id == str(post.id)
        assert response.author_name == "Ada"
        assert response.state == CommentState.PENDING
        assert response.parent_id is None

    @pytest.mark.asyncio
    async def test_authenticated_submission_is_approved(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("Hello World"))
        identity = Identity(account_id=AccountId(uuid4()), role=Role.USER)

        response = await use_case.execute(
            CreateCommentRequest(
                post_ref=str(post.id),
                author_name="Ada",
                content="Signed in",
                identity=identity,
            )
        )

        assert response.state == CommentState.APPROVED

    @pytest.mark.asyncio
    async def test_empty_author_name_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post("Hello World"))

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    post_ref="hello-world", author_name="", content="hi"
                )
            )

        assert exc_info.value.fields == ["author_name"]

    @pytest.mark.asyncio
    async def test_all_invalid_fields_reported_together(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    post_ref="does-not-matter",
                    author_name="   ",
                    content="",
                    author_email="not-an-email",
                    parent_id="nope",
                )
            )

        assert set(exc_info.value.fields) == {
            "author_name",
            "content",
            "author_email",
            "parent_id",
        }
        # Validation happens before the post is even looked up
        assert await comment_repo.find_by_state() == []

    @pytest.mark.asyncio
    async def test_content_length_limit(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        limit = use_case.comment_settings.max_content_length

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    post_ref="hello-world", author_name="Ada", content="x" * (limit + 1)
                )
            )

        assert exc_info.value.fields == ["content"]

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(post_ref="missing", author_name="A", content="b")
            )

    @pytest.mark.asyncio
    async def test_draft_post_is_not_commentable(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post("Draft", status=PostStatus.DRAFT))

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(post_ref="draft", author_name="A", content="b")
            )

    @pytest.mark.asyncio
    async def test_reply_to_comment_on_other_post(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await post_repo.save(make_post("Hello World"))
        other = await post_repo.save(make_post("Other Post"))
        foreign = await comment_repo.save(make_comment(other.id))

        with pytest.raises(InvalidReferenceError):
            await use_case.execute(
                CreateCommentRequest(
                    post_ref="hello-world",
                    author_name="A",
                    content="b",
                    parent_id=str(foreign.id),
                )
            )
