"""Unit tests for GetCommentsUseCase."""

import json
from uuid import uuid4

import pytest

from inkwell.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsUseCase,
    render_comment_tree,
)
from inkwell.domain.error import NotFoundError
from inkwell.domain.repository import CommentRepository, PostRepository
from inkwell.domain.service import assemble_comment_tree
from inkwell.domain.value import CommentState, PostId
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for the public read path."""

    @pytest.mark.asyncio
    async def test_post_without_comments_returns_empty_list(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post("Quiet Post"))

        assert await use_case.execute(GetCommentsRequest(post_ref="quiet-post")) == []

    @pytest.mark.asyncio
    async def test_unknown_post_is_not_found(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentsRequest(post_ref="no-such-post"))

    @pytest.mark.asyncio
    async def test_returns_nested_approved_comments(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post("Hello World"))
        root = await comment_repo.save(make_comment(post.id, minutes=0))
        reply = await comment_repo.save(
            make_comment(post.id, parent_id=root.id, minutes=1)
        )
        await comment_repo.save(
            make_comment(post.id, state=CommentState.PENDING, minutes=2)
        )

        roots = await use_case.execute(GetCommentsRequest(post_ref=str(post.id)))

        assert [n.comment.id for n in roots] == [root.id]
        assert [n.comment.id for n in roots[0].replies] == [reply.id]
        assert roots[0].replies[0].replies == []


class TestRenderCommentTree:
    """Tests for writing a forest as the JSON response body."""

    def test_empty_forest(self):
        assert render_comment_tree([]) == "[]"

    def test_siblings_and_replies(self):
        post_id = PostId(uuid4())
        first = make_comment(post_id, minutes=0, content="First")
        second = make_comment(post_id, minutes=1, content="Second")
        reply = make_comment(post_id, parent_id=first.id, minutes=2)
        nested = make_comment(post_id, parent_id=reply.id, minutes=3)
        forest = assemble_comment_tree([first, second, reply, nested])

        data = json.loads(render_comment_tree(forest.roots))

        assert [c["comment_id"] for c in data] == [str(first.id), str(second.id)]
        assert data[0]["content"] == "First"
        assert data[0]["replies"][0]["comment_id"] == str(reply.id)
        assert data[0]["replies"][0]["parent_id"] == str(first.id)
        assert data[0]["replies"][0]["replies"][0]["comment_id"] == str(nested.id)
        assert data[0]["replies"][0]["replies"][0]["replies"] == []
        assert data[1]["replies"] == []
        assert data[1]["state"] == "approved"
        assert "author_email" not in data[0]

    def test_deep_chain_renders_without_recursion(self):
        post_id = PostId(uuid4())
        chain = [make_comment(post_id, minutes=0)]
        for i in range(1, 2500):
            chain.append(make_comment(post_id, parent_id=chain[-1].id, minutes=i))

        body = render_comment_tree(assemble_comment_tree(chain).roots)

        # Every comment opens one replies list inside the one before it
        positions = [body.index(f'"comment_id":"{c.id}"') for c in chain]
        assert positions == sorted(positions)
        assert body.count('"replies":[') == 2500
        assert body.endswith('"replies":[' + "]}" * 2500 + "]")
