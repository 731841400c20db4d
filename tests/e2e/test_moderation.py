"""End-to-end tests for the moderation endpoints."""

from uuid import uuid4

import pytest

from inkwell.domain.repository import CommentRepository, PostRepository
from inkwell.domain.value import CommentId, CommentState, Role
from tests.conftest import auth_header, make_comment, make_post

MODERATOR = auth_header(Role.ADMIN)


async def seed(container, *states: CommentState):
    """Seed a published post with one root comment per given state."""
    post = await (await container.get(PostRepository)).save(make_post())
    comment_repo = await container.get(CommentRepository)
    comments = [
        await comment_repo.save(make_comment(post.id, state=state, minutes=i))
        for i, state in enumerate(states)
    ]
    return post, comments


class TestAccess:
    @pytest.mark.asyncio
    async def test_requires_token(self, client):
        response = await client.get("/moderation/stats")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_requires_moderator_role(self, client):
        response = await client.get("/moderation/stats", headers=auth_header())

        assert response.status_code == 403


class TestModerationActions:
    @pytest.mark.asyncio
    async def test_approve_publishes_comment(self, client, container):
        _, [pending] = await seed(container, CommentState.PENDING)

        response = await client.post(
            f"/moderation/comments/{pending.id}/approve", headers=MODERATOR
        )

        assert response.status_code == 200
        assert response.json()["state"] == CommentState.APPROVED.value
        listing = await client.get("/comments", params={"post": "hello-world"})
        assert [c["comment_id"] for c in listing.json()] == [str(pending.id)]

    @pytest.mark.asyncio
    async def test_approve_is_idempotent(self, client, container):
        _, [approved] = await seed(container, CommentState.APPROVED)

        response = await client.post(
            f"/moderation/comments/{approved.id}/approve", headers=MODERATOR
        )

        assert response.status_code == 200
        assert response.json()["state"] == CommentState.APPROVED.value

    @pytest.mark.asyncio
    async def test_spam_cannot_be_approved(self, client, container):
        _, [spam] = await seed(container, CommentState.SPAM)

        response = await client.post(
            f"/moderation/comments/{spam.id}/approve", headers=MODERATOR
        )

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_unknown_comment(self, client):
        response = await client.post(
            f"/moderation/comments/{uuid4()}/spam", headers=MODERATOR
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_comment_id(self, client):
        response = await client.post(
            "/moderation/comments/not-a-uuid/spam", headers=MODERATOR
        )

        assert response.status_code == 400
        assert response.json()["detail"]["fields"] == ["comment_id"]

    @pytest.mark.asyncio
    async def test_trash_hides_thread(self, client, container):
        post, [root] = await seed(container, CommentState.APPROVED)
        comment_repo = await container.get(CommentRepository)
        await comment_repo.save(make_comment(post.id, parent_id=root.id, minutes=5))

        response = await client.post(
            f"/moderation/comments/{root.id}/trash", headers=MODERATOR
        )

        assert response.status_code == 200
        assert response.json()["state"] == CommentState.DELETED.value
        listing = await client.get("/comments", params={"post": str(post.id)})
        assert listing.json() == []

    @pytest.mark.asyncio
    async def test_delete_removes_comment_and_replies(self, client, container):
        post, [root, sibling] = await seed(
            container, CommentState.APPROVED, CommentState.APPROVED
        )
        comment_repo = await container.get(CommentRepository)
        child = await comment_repo.save(
            make_comment(post.id, parent_id=root.id, minutes=5)
        )
        await comment_repo.save(make_comment(post.id, parent_id=child.id, minutes=6))

        response = await client.delete(
            f"/moderation/comments/{root.id}", headers=MODERATOR
        )

        assert response.status_code == 200
        assert response.json() == {"deleted": 3}
        listing = await client.get("/comments", params={"post": str(post.id)})
        assert [c["comment_id"] for c in listing.json()] == [str(sibling.id)]


class TestModerationQueries:
    @pytest.mark.asyncio
    async def test_pending_queue(self, client, container):
        post, [pending, _] = await seed(
            container, CommentState.PENDING, CommentState.APPROVED
        )

        response = await client.get(
            "/moderation/comments", params={"state": "pending"}, headers=MODERATOR
        )

        assert response.status_code == 200
        comments = response.json()["comments"]
        assert [c["comment_id"] for c in comments] == [str(pending.id)]
        assert comments[0]["post_title"] == post.title
        assert "author_email" in comments[0]

    @pytest.mark.asyncio
    async def test_unknown_state_filter(self, client):
        response = await client.get(
            "/moderation/comments", params={"state": "hidden"}, headers=MODERATOR
        )

        assert response.status_code == 400
        assert response.json()["detail"]["fields"] == ["state"]

    @pytest.mark.asyncio
    async def test_orphans(self, client, container):
        post, _ = await seed(container, CommentState.APPROVED)
        comment_repo = await container.get(CommentRepository)
        orphan = await comment_repo.save(
            make_comment(post.id, parent_id=CommentId(uuid4()), minutes=9)
        )

        response = await client.get(
            "/moderation/posts/hello-world/orphans", headers=MODERATOR
        )

        assert response.status_code == 200
        data = response.json()
        assert data["post_id"] == str(post.id)
        assert [c["comment_id"] for c in data["orphans"]] == [str(orphan.id)]

    @pytest.mark.asyncio
    async def test_stats(self, client, container):
        await seed(
            container,
            CommentState.PENDING,
            CommentState.APPROVED,
            CommentState.APPROVED,
            CommentState.DELETED,
        )

        response = await client.get("/moderation/stats", headers=MODERATOR)

        assert response.status_code == 200
        assert response.json() == {
            "pending_comments": 1,
            "approved_comments": 2,
            "spam_comments": 0,
            "deleted_comments": 1,
            "total_comments": 4,
        }


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
