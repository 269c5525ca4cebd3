"""initial_schema

Create the schema of the blog engagement engine:
- Users (profiles mirrored from the account service)
- Posts (with denormalized like and comment counters)
- Comments (materialized path threading, at most 3 levels below a root)
- Likes (one per user and target, on posts or comments)

Revision ID: 3c1d7e2a9b40
Revises:
Create Date: 2026-10-18 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1d7e2a9b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM type (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE like_target_type AS ENUM ('post', 'comment');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "email_verified", sa.Boolean(), nullable=False, server_default="false"
        ),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("likes_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("views_count", sa.Integer(), nullable=False, server_default="0"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        # Counters are floored at zero by the atomic decrements
        sa.CheckConstraint("likes_count >= 0", name="posts_likes_non_negative"),
        sa.CheckConstraint("comments_count >= 0", name="posts_comments_non_negative"),
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    # No foreign key to posts: deleting a post removes its comments and
    # their likes explicitly, in one transaction.
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("path", sa.Text(), nullable=False),  # Slash-joined ancestor ids
        sa.Column("depth", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("reports", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_visible", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("is_edited", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("edited_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("depth >= 0 AND depth <= 3", name="comments_depth_range"),
        sa.CheckConstraint("likes >= 0", name="comments_likes_non_negative"),
        sa.CheckConstraint("reports >= 0", name="comments_reports_non_negative"),
    )
    op.create_index("idx_comments_post_path", "comments", ["post_id", "path"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index(
        "idx_comments_author_created", "comments", ["author_id", "created_at"]
    )
    op.create_index("idx_comments_post_created", "comments", ["post_id", "created_at"])

    # ========================================================================
    # LIKES table
    # ========================================================================
    op.create_table(
        "likes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "target_type",
            postgresql.ENUM(
                "post", "comment", name="like_target_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("target_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        # One like per user and target; concurrent duplicates fail here
        sa.UniqueConstraint("user_id", "target_id", "target_type", name="unique_like"),
    )
    op.create_index(
        "idx_likes_target_created", "likes", ["target_type", "target_id", "created_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("likes")
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("users")

    op.execute("DROP TYPE IF EXISTS like_target_type")

    # Extension left in place, it may be shared
