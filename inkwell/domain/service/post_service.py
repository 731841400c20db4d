"""Post domain service."""

from uuid import UUID

import logfire
from pydantic import ValidationError as PydanticValidationError

from inkwell.domain.error import NotFoundError
from inkwell.domain.model.post import Post
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import PostId, Slug

from .base import Service


class PostService(Service):
    """Domain service for resolving the posts that comments attach to."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_post_by_slug(self, slug: Slug) -> Post | None:
        """Get a post by slug.

        Args:
            slug: Post slug

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_slug", slug=str(slug)):
            post = await self.post_repository.find_by_slug(slug)

            if post:
                logfire.info(
                    "Post found by slug",
                    slug=str(slug),
                    post_id=str(post.id),
                    title=post.title,
                )
            else:
                logfire.warn("Post not found by slug", slug=str(slug))

            return post

    async def resolve(self, post_ref: str, require_public: bool = False) -> Post:
        """Resolve a post reference to a post.

        The reference is tried as a UUID first and then as a slug, so a slug
        that happens to look like a UUID still resolves.

        Args:
            post_ref: Post ID or slug
            require_public: Treat unpublished posts as missing

        Returns:
            The resolved post

        Raises:
            NotFoundError: If no post matches, or the post is not public when
                require_public is set
        """
        with logfire.span(
            "post_service.resolve", post_ref=post_ref, require_public=require_public
        ):
            ref = post_ref.strip()
            post = None

            try:
                post_id = PostId(UUID(ref))
            except ValueError:
                post_id = None

            if post_id is not None:
                post = await self.get_post_by_id(post_id)

            if post is None:
                try:
                    post = await self.get_post_by_slug(Slug(ref))
                except PydanticValidationError:
                    logfire.info("Post reference is not a valid slug", post_ref=ref)

            if post is None:
                raise NotFoundError("Post", post_ref)

            if require_public and not post.is_public:
                logfire.warn(
                    "Post is not public",
                    post_id=str(post.id),
                    status=post.status.value,
                )
                raise NotFoundError("Post", post_ref)

            return post

    async def get_posts_by_ids(self, post_ids: list[PostId]) -> dict[PostId, Post]:
        """Get several posts keyed by ID.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of post ID to post for the posts that exist
        """
        with logfire.span("post_service.get_posts_by_ids", count=len(post_ids)):
            if not post_ids:
                return {}
            posts = await self.post_repository.find_by_ids(post_ids)
            return {post.id: post for post in posts}
