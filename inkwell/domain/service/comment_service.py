"""Comment domain service."""

from datetime import datetime
from typing import Collection
from uuid import uuid4

import logfire

from inkwell.domain.error import InvalidReferenceError, NotFoundError
from inkwell.domain.model.comment import Comment
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import AccountId, CommentId, CommentState, Email, PostId

from .base import Service
from .comment_tree import CommentForest, assemble_comment_tree


class CommentService(Service):
    """Domain service for comment submission and retrieval."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        author_name: str,
        content: str,
        author_email: Email | None = None,
        author_url: str | None = None,
        parent_id: CommentId | None = None,
        submitter_id: AccountId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Comments from an authenticated account are approved immediately,
        anonymous ones wait in the moderation queue. The id is assigned here,
        so a comment can never name itself as parent: such a parent id is
        simply not found.

        Args:
            post_id: Post ID
            author_name: Display name of the author
            content: Comment body
            author_email: Author email (optional)
            author_url: Author website (optional)
            parent_id: Parent comment ID for replies (None for top-level)
            submitter_id: Authenticated account submitting the comment

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent comment does not exist
            InvalidReferenceError: If the parent belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            parent_id=str(parent_id) if parent_id else None,
            authenticated=submitter_id is not None,
        ):
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise InvalidReferenceError(
                        "Parent comment does not belong to this post"
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                parent_id=parent_id,
                author_name=author_name,
                author_email=author_email,
                author_url=author_url,
                content=content,
                state=CommentState.APPROVED if submitter_id else CommentState.PENDING,
                submitter_id=submitter_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                state=saved.state.value,
                is_reply=not saved.is_root,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID or raise NotFoundError."""
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_comments_for_post(
        self,
        post_id: PostId,
        states: Collection[CommentState] | None = None,
    ) -> list[Comment]:
        """Get comments for a post, oldest first.

        Args:
            post_id: Post ID
            states: Only include these states (None for every state)

        Returns:
            List of comments ordered by created_at ascending
        """
        with logfire.span(
            "comment_service.get_comments_for_post",
            post_id=str(post_id),
            states=[s.value for s in states] if states else None,
        ):
            comments = await self.comment_repository.find_by_post(
                post_id=post_id, states=states
            )
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def get_comment_tree(self, post_id: PostId) -> CommentForest:
        """Assemble the public comment tree of a post.

        Only approved comments are included. Approved replies whose parent is
        not approved cannot be attached and end up in the orphans.

        Args:
            post_id: Post ID

        Returns:
            Assembled forest
        """
        with logfire.span("comment_service.get_comment_tree", post_id=str(post_id)):
            comments = await self.get_comments_for_post(
                post_id, states=[CommentState.APPROVED]
            )
            forest = assemble_comment_tree(comments)
            if forest.orphans:
                logfire.warn(
                    "Approved comments left out of the tree",
                    post_id=str(post_id),
                    orphan_count=len(forest.orphans),
                    hidden_count=len(comments) - forest.count(),
                )
            return forest

    async def get_orphans(self, post_id: PostId) -> list[Comment]:
        """Find the comments of a post that cannot be attached to the tree.

        Deleted comments are ignored, everything else is assembled together
        so a reply to a pending comment is not reported.

        Args:
            post_id: Post ID

        Returns:
            Orphaned comments, oldest first
        """
        with logfire.span("comment_service.get_orphans", post_id=str(post_id)):
            comments = await self.get_comments_for_post(
                post_id,
                states=[
                    CommentState.PENDING,
                    CommentState.APPROVED,
                    CommentState.SPAM,
                ],
            )
            forest = assemble_comment_tree(comments)
            orphans = sorted(
                (node.comment for node in forest.orphans),
                key=lambda c: c.created_at,
            )
            logfire.info(
                "Orphans computed", post_id=str(post_id), count=len(orphans)
            )
            return orphans

    async def list_comments(
        self,
        state: CommentState | None = None,
        post_id: PostId | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Comment]:
        """List comments for moderation, newest first.

        Args:
            state: Filter by state (None for all)
            post_id: Filter by post (None for all)
            limit: Maximum number of comments
            offset: Number of comments to skip

        Returns:
            List of comments
        """
        with logfire.span(
            "comment_service.list_comments",
            state=state.value if state else None,
            post_id=str(post_id) if post_id else None,
            limit=limit,
            offset=offset,
        ):
            comments = await self.comment_repository.find_by_state(
                state=state, post_id=post_id, limit=limit, offset=offset
            )
            logfire.info("Comments listed", count=len(comments))
            return comments

    async def count_by_state(self) -> dict[CommentState, int]:
        """Count comments in each moderation state."""
        with logfire.span("comment_service.count_by_state"):
            counts = await self.comment_repository.count_by_state()
            return {state: counts.get(state, 0) for state in CommentState}
