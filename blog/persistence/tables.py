"""SQLAlchemy table definitions for the blog engagement engine.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the account service, read here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(50), nullable=False, unique=True),
    Column("display_name", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("email_verified", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(200), nullable=False),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("comments_count", Integer, nullable=False, server_default="0"),
    Column("views_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes_count >= 0", name="posts_likes_non_negative"),
    CheckConstraint("comments_count >= 0", name="posts_comments_non_negative"),
)

Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# No foreign key to posts: the cascade is performed explicitly so that
# like cleanup happens in the same transaction.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("post_id", UUID, nullable=False),
    Column("author_id", UUID, nullable=False),
    Column("parent_id", UUID, nullable=True),
    Column("content", Text, nullable=False),  # Placeholder once deleted
    Column("path", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("reports", Integer, nullable=False, server_default="0"),
    Column("is_visible", Boolean, nullable=False, server_default="true"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth >= 0 AND depth <= 3", name="comments_depth_range"),
    CheckConstraint("likes >= 0", name="comments_likes_non_negative"),
    CheckConstraint("reports >= 0", name="comments_reports_non_negative"),
)

Index("idx_comments_post_path", comments_table.c.post_id, comments_table.c.path)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index(
    "idx_comments_author_created", comments_table.c.author_id, comments_table.c.created_at
)
Index("idx_comments_post_created", comments_table.c.post_id, comments_table.c.created_at)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", UUID, nullable=False),
    Column(
        "target_type",
        Enum("post", "comment", name="like_target_type", create_type=False),
        nullable=False,
    ),
    Column("target_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "target_id", "target_type", name="unique_like"),
)

Index(
    "idx_likes_target_created",
    likes_table.c.target_type,
    likes_table.c.target_id,
    likes_table.c.created_at,
)
