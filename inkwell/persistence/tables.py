"""SQLAlchemy table definitions for Inkwell.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# BLOG_POSTS TABLE (owned by the blog platform, read here)
# ============================================================================
posts_table = Table(
    "blog_posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("slug", String(500), nullable=False, unique=True),
    Column("title", String(500), nullable=False),
    Column(
        "status",
        Enum("draft", "published", "archived", name="post_status", create_type=False),
        nullable=False,
        server_default="draft",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_blog_posts_status", posts_table.c.status)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "post_id",
        UUID,
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("author_name", String(255), nullable=False),
    Column("author_email", String(255), nullable=True),
    Column("author_url", String(500), nullable=True),
    Column("content", Text, nullable=False),
    Column(
        "status",
        Enum(
            "pending",
            "approved",
            "spam",
            "deleted",
            name="comment_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column("user_id", UUID, nullable=True),  # Submitting account, if authenticated
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_status", comments_table.c.status)
Index(
    "idx_comments_post_status_created",
    comments_table.c.post_id,
    comments_table.c.status,
    comments_table.c.created_at,
)
