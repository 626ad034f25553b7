"""initial_schema

Create the schema for Pen n Pixel:
- Users (email/password accounts with public profiles)
- Blogs (drafts and published posts with denormalized activity counters)
- Comments (root comments and replies, children kept in insertion order)
- Notifications (likes, comments and replies; one like per user and blog)

Revision ID: 3f1c9a2d7b40
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(*names: str) -> list[sa.Column]:
    return [
        sa.Column(
            name,
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        )
        for name in names
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE notification_type AS ENUM ('like', 'comment', 'reply');
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
        sa.Column("fullname", sa.String(120), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("username", sa.String(60), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=True),
        sa.Column("bio", sa.String(150), nullable=False, server_default=""),
        sa.Column("profile_img", sa.Text(), nullable=True),
        sa.Column(
            "social_links",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column("total_posts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_reads", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps("created_at", "updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="users_email_key"),
        sa.UniqueConstraint("username", name="users_username_key"),
        sa.CheckConstraint("total_posts >= 0", name="users_total_posts_non_negative"),
        sa.CheckConstraint("total_reads >= 0", name="users_total_reads_non_negative"),
    )

    # ========================================================================
    # BLOGS table
    # ========================================================================
    op.create_table(
        "blogs",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.String(200), nullable=False, server_default=""),
        sa.Column("banner", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "content",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(60)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("draft", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("total_likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_comments", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "total_parent_comments", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column("total_reads", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps("published_at", "updated_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="blogs_slug_key"),
        sa.CheckConstraint(
            "total_likes >= 0 AND total_comments >= 0 "
            "AND total_parent_comments >= 0 AND total_reads >= 0",
            name="blogs_counters_non_negative",
        ),
    )
    op.create_index(
        "idx_blogs_published_at", "blogs", [sa.text("published_at DESC")]
    )
    op.create_index("idx_blogs_author_id", "blogs", ["author_id"])
    op.create_index("idx_blogs_tags", "blogs", ["tags"], postgresql_using="gin")

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    # No foreign key on parent_id: replies keep it until they are deleted
    # themselves, after their parent is gone.
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("blog_id", sa.UUID(), nullable=False),
        sa.Column("blog_author_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column(
            "children",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        *_timestamps("created_at"),
        sa.ForeignKeyConstraint(["blog_id"], ["blogs.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["blog_author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_blog_id", "comments", ["blog_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index(
        "idx_comments_created_at", "comments", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column(
            "type",
            postgresql.ENUM(
                "like", "comment", "reply", name="notification_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("notification_for", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("blog_id", sa.UUID(), nullable=True),
        sa.Column("comment_id", sa.UUID(), nullable=True),
        sa.Column("replied_on_comment_id", sa.UUID(), nullable=True),
        sa.Column("reply_id", sa.UUID(), nullable=True),
        sa.Column("seen", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps("created_at"),
        sa.ForeignKeyConstraint(
            ["notification_for"], ["users.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["blog_id"], ["blogs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_recipient_created",
        "notifications",
        ["notification_for", sa.text("created_at DESC")],
    )
    op.create_index("idx_notifications_comment_id", "notifications", ["comment_id"])
    op.create_index("idx_notifications_reply_id", "notifications", ["reply_id"])
    op.create_index("idx_notifications_blog_id", "notifications", ["blog_id"])

    # One like per (user, blog); toggle_like relies on it
    op.create_index(
        "idx_notifications_unique_like",
        "notifications",
        ["user_id", "blog_id"],
        unique=True,
        postgresql_where=sa.text("type = 'like'"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("notifications")
    op.drop_table("comments")
    op.drop_table("blogs")
    op.drop_table("users")
    op.execute("DROP TYPE IF EXISTS notification_type")
