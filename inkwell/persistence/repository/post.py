"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Post
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import PostId, Slug
from inkwell.persistence.error import storage_errors
from inkwell.persistence.mappers import post_to_dict, row_to_post
from inkwell.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        with storage_errors("posts.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        stmt = select(posts_table).where(posts_table.c.slug == slug.root)
        with storage_errors("posts.find_by_slug"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_ids(self, post_ids: List[PostId]) -> List[Post]:
        """Find several posts by ID."""
        if not post_ids:
            return []

        stmt = select(posts_table).where(posts_table.c.id.in_(post_ids))
        with storage_errors("posts.find_by_ids"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_post(row._asdict()) for row in rows]

    async def save(self, post: Post) -> Post:
        """Insert a post or update an existing one."""
        post_dict = post_to_dict(post)
        existing = await self.find_by_id(post.id)

        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)

        with storage_errors("posts.save"):
            await self.session.execute(stmt)
            await self.session.flush()
        return post
