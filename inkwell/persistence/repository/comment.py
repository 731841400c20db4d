"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Collection, List, Optional

from sqlalchemy import delete, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Comment
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import CommentId, CommentState, PostId
from inkwell.persistence.error import storage_errors
from inkwell.persistence.mappers import comment_to_dict, row_to_comment
from inkwell.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        with storage_errors("comments.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(
        self,
        post_id: PostId,
        states: Optional[Collection[CommentState]] = None,
    ) -> List[Comment]:
        """Find comments for a post, oldest first."""
        stmt = select(comments_table).where(comments_table.c.post_id == post_id)

        if states is not None:
            stmt = stmt.where(comments_table.c.status.in_([s.value for s in states]))

        # id breaks ties so siblings created in the same instant keep a stable order
        stmt = stmt.order_by(comments_table.c.created_at, comments_table.c.id)

        with storage_errors("comments.find_by_post"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def find_by_state(
        self,
        state: Optional[CommentState] = None,
        post_id: Optional[PostId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments for the moderation queue, newest first."""
        stmt = select(comments_table)

        if state is not None:
            stmt = stmt.where(comments_table.c.status == state.value)
        if post_id is not None:
            stmt = stmt.where(comments_table.c.post_id == post_id)

        stmt = (
            stmt.order_by(desc(comments_table.c.created_at)).limit(limit).offset(offset)
        )

        with storage_errors("comments.find_by_state"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = (
            comments_table.insert()
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        with storage_errors("comments.save"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        return row_to_comment(row._asdict()) if row else comment

    async def update_state(
        self,
        comment_ids: Collection[CommentId],
        state: CommentState,
        updated_at: datetime,
    ) -> int:
        """Move comments to a new state in one statement."""
        if not comment_ids:
            return 0

        stmt = (
            update(comments_table)
            .where(comments_table.c.id.in_(list(comment_ids)))
            .values(status=state.value, updated_at=updated_at)
        )
        with storage_errors("comments.update_state"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount or 0

    async def delete_many(self, comment_ids: Collection[CommentId]) -> int:
        """Hard delete comments in one statement."""
        if not comment_ids:
            return 0

        stmt = delete(comments_table).where(comments_table.c.id.in_(list(comment_ids)))
        with storage_errors("comments.delete_many"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount or 0

    async def count_by_state(self) -> dict[CommentState, int]:
        """Count comments in each state."""
        stmt = select(comments_table.c.status, func.count()).group_by(
            comments_table.c.status
        )
        with storage_errors("comments.count_by_state"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()

        counts = {state: 0 for state in CommentState}
        for status, count in rows:
            counts[CommentState(status)] = count
        return counts
