"""Unit tests for PostService."""

import pytest

from inkwell.domain.error import NotFoundError
from inkwell.domain.repository import PostRepository
from inkwell.domain.service import PostService
from inkwell.domain.value import PostStatus
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestResolve:
    """Tests for resolving post references."""

    @pytest.mark.asyncio
    async def test_resolve_by_id(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("Hello World"))

        assert await post_service.resolve(str(post.id)) == post

    @pytest.mark.asyncio
    async def test_resolve_by_slug(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("Hello World"))

        assert await post_service.resolve("hello-world") == post

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "ref", ["missing-post", "Not A Slug!", "7d4f2c4e-0000-4000-8000-000000000000"]
    )
    async def test_unknown_reference_raises_not_found(self, unit_env, ref):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.resolve(ref)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [PostStatus.DRAFT, PostStatus.ARCHIVED])
    async def test_unpublished_post_hidden_when_public_required(
        self, unit_env, status
    ):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("Draft Notes", status=status))

        with pytest.raises(NotFoundError):
            await post_service.resolve(post.slug.root, require_public=True)

        # Moderators still see it
        assert await post_service.resolve(post.slug.root) == post

    @pytest.mark.asyncio
    async def test_get_posts_by_ids(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        first = await post_repo.save(make_post("First"))
        second = await post_repo.save(make_post("Second"))

        posts = await post_service.get_posts_by_ids([first.id, second.id])

        assert posts == {first.id: first, second.id: second}
