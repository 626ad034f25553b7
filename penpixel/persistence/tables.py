"""SQLAlchemy table definitions for Pen n Pixel.

These table definitions are used for Core queries in the repositories.
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
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("fullname", String(120), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("username", String(60), nullable=False, unique=True),
    Column("password_hash", Text, nullable=True),
    Column("bio", String(150), nullable=False, server_default=""),
    Column("profile_img", Text, nullable=True),
    Column("social_links", JSONB, nullable=False, server_default="{}"),
    Column("total_posts", Integer, nullable=False, server_default="0"),
    Column("total_reads", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("total_posts >= 0", name="users_total_posts_non_negative"),
    CheckConstraint("total_reads >= 0", name="users_total_reads_non_negative"),
)

# ============================================================================
# BLOGS TABLE
# ============================================================================
blogs_table = Table(
    "blogs",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("slug", String(200), nullable=False, unique=True),
    Column("title", String(300), nullable=False),
    Column("description", String(200), nullable=False, server_default=""),
    Column("banner", Text, nullable=False, server_default=""),
    Column("content", JSONB, nullable=False, server_default="{}"),  # Editor blocks
    Column("tags", ARRAY(String(60)), nullable=False, server_default="{}"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("draft", Boolean, nullable=False, server_default="false"),
    Column("total_likes", Integer, nullable=False, server_default="0"),
    Column("total_comments", Integer, nullable=False, server_default="0"),
    Column("total_parent_comments", Integer, nullable=False, server_default="0"),
    Column("total_reads", Integer, nullable=False, server_default="0"),
    Column(
        "published_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "total_likes >= 0 AND total_comments >= 0 "
        "AND total_parent_comments >= 0 AND total_reads >= 0",
        name="blogs_counters_non_negative",
    ),
)

Index("idx_blogs_published_at", blogs_table.c.published_at.desc())
Index("idx_blogs_author_id", blogs_table.c.author_id)
Index("idx_blogs_tags", blogs_table.c.tags, postgresql_using="gin")

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# parent_id deliberately has no foreign key: the application deletes
# comment subtrees itself and needs every reply to keep its parent_id
# until the reply is deleted.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("blog_id", UUID, ForeignKey("blogs.id", ondelete="CASCADE"), nullable=False),
    Column(
        "blog_author_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("text", Text, nullable=False),
    Column("parent_id", UUID, nullable=True),
    Column("children", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_blog_id", comments_table.c.blog_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at.desc())

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "type",
        Enum("like", "comment", "reply", name="notification_type", create_type=False),
        nullable=False,
    ),
    Column(
        "notification_for",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("blog_id", UUID, ForeignKey("blogs.id", ondelete="CASCADE"), nullable=True),
    Column("comment_id", UUID, nullable=True),
    Column("replied_on_comment_id", UUID, nullable=True),
    Column("reply_id", UUID, nullable=True),
    Column("seen", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.notification_for,
    notifications_table.c.created_at.desc(),
)
Index("idx_notifications_comment_id", notifications_table.c.comment_id)
Index("idx_notifications_reply_id", notifications_table.c.reply_id)
Index("idx_notifications_blog_id", notifications_table.c.blog_id)

# One like per (user, blog)
Index(
    "idx_notifications_unique_like",
    notifications_table.c.user_id,
    notifications_table.c.blog_id,
    unique=True,
    postgresql_where=notifications_table.c.type == "like",
)
