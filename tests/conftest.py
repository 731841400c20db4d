"""Test configuration and fixtures."""

import re
from datetime import datetime, timedelta
from uuid import uuid4

import logfire
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from inkwell.config import Settings
from inkwell.domain.model import Comment, Post
from inkwell.domain.service import JWTService
from inkwell.domain.value import (
    AccountId,
    CommentId,
    CommentState,
    PostId,
    PostStatus,
    Role,
    Slug,
)
from tests.di import build_test_container

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_slug(title: str) -> Slug:
    """Generate a slug from a title the way the platform does."""
    slug_str = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return Slug(slug_str or "test-post")


def make_post(
    title: str = "Hello World",
    status: PostStatus = PostStatus.PUBLISHED,
    slug: str | None = None,
) -> Post:
    """Build a post with a slug derived from its title."""
    return Post(
        id=PostId(uuid4()),
        slug=Slug(slug) if slug else make_slug(title),
        title=title,
        status=status,
    )


def make_comment(
    post_id: PostId,
    parent_id: CommentId | None = None,
    state: CommentState = CommentState.APPROVED,
    minutes: int = 0,
    author_name: str = "Reader",
    content: str = "Nice post",
    submitter_id: AccountId | None = None,
) -> Comment:
    """Build a comment created ``minutes`` after a fixed base time."""
    created = BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        parent_id=parent_id,
        author_name=author_name,
        content=content,
        state=state,
        submitter_id=submitter_id,
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
def post() -> Post:
    """A published post."""
    return make_post()


def auth_header(role: Role = Role.USER) -> dict[str, str]:
    """Authorization header for a fresh account with the given role."""
    jwt_service = JWTService(Settings().auth)
    token = jwt_service.create_token(AccountId(uuid4()), role=role)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def container():
    """In-memory container shared by the app and the test for seeding."""
    test_container = build_test_container()
    yield test_container
    await test_container.close()


@pytest_asyncio.fixture
async def client(container):
    """HTTP client talking to the app over ASGI."""
    # Imported here so logfire is configured before the app module builds its app
    from inkwell.interface.api.app import create_app

    app_instance = create_app(container)
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
