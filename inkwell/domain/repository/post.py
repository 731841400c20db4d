"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from inkwell.domain.model.post import Post
from inkwell.domain.value import PostId, Slug


class PostRepository(ABC):
    """Read access to the platform's posts.

    Posts are written by the blog platform; ``save`` exists for seeding and tests.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug.

        Args:
            slug: The post's unique slug

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: List[PostId]) -> List[Post]:
        """Find several posts at once.

        Args:
            post_ids: Post IDs to look up

        Returns:
            The posts that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass
