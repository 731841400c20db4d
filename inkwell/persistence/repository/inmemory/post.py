"""In-memory post repository for testing."""

from typing import Optional

from inkwell.domain.model.post import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import PostId, Slug


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        for post in self._posts.values():
            if post.slug == slug:
                return post
        return None

    async def find_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Find several posts by ID."""
        return [self._posts[pid] for pid in post_ids if pid in self._posts]

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post
