"""Post entity.

Posts are owned by the blog platform; this service only reads them to
resolve the target of a comment and to check whether it is public.
"""

from datetime import datetime

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import PostId, PostStatus, Slug


class Post(DomainModel):
    """Post referenced by comments.

    Identified by an opaque id and a unique human-readable slug.
    """

    id: PostId
    slug: Slug
    title: str = Field(min_length=1, max_length=500)
    status: PostStatus = PostStatus.DRAFT
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_public(self) -> bool:
        """Whether readers can see and comment on this post."""
        return self.status == PostStatus.PUBLISHED
