"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Denormalized counters
are stored as flat columns and nested into value objects here.
"""

from typing import Any, Dict
from uuid import UUID

from penpixel.domain.model import (
    AccountInfo,
    Blog,
    BlogActivity,
    Comment,
    Notification,
    User,
)
from penpixel.domain.value import (
    BlogId,
    CommentId,
    NotificationId,
    NotificationType,
    Slug,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        fullname=row["fullname"],
        email=row["email"],
        username=Username(row["username"]),
        password_hash=row.get("password_hash"),
        bio=row.get("bio") or "",
        profile_img=row.get("profile_img"),
        social_links=row.get("social_links") or {},
        account_info=AccountInfo(
            total_posts=row["total_posts"], total_reads=row["total_reads"]
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update (counters included)
    """
    return {
        "id": user.id,
        "fullname": user.fullname,
        "email": user.email,
        "username": user.username.root,
        "password_hash": user.password_hash,
        "bio": user.bio,
        "profile_img": user.profile_img,
        "social_links": user.social_links,
        "total_posts": user.account_info.total_posts,
        "total_reads": user.account_info.total_reads,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_blog(row: Dict[str, Any]) -> Blog:
    """Convert database row to Blog domain model.

    Args:
        row: Database row as dict

    Returns:
        Blog domain model
    """
    return Blog(
        id=BlogId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        description=row.get("description") or "",
        banner=row.get("banner") or "",
        content=row.get("content") or {},
        tags=list(row.get("tags") or []),
        author_id=UserId(_uuid(row["author_id"])),
        draft=row["draft"],
        activity=BlogActivity(
            total_likes=row["total_likes"],
            total_comments=row["total_comments"],
            total_parent_comments=row["total_parent_comments"],
            total_reads=row["total_reads"],
        ),
        published_at=row["published_at"],
        updated_at=row["updated_at"],
    )


def blog_to_dict(blog: Blog) -> Dict[str, Any]:
    """Convert Blog domain model to database dict.

    Args:
        blog: Blog domain model

    Returns:
        Dict suitable for database insertion/update (counters included)
    """
    return {
        "id": blog.id,
        "slug": blog.slug.root,
        "title": blog.title,
        "description": blog.description,
        "banner": blog.banner,
        "content": blog.content,
        "tags": blog.tags,
        "author_id": blog.author_id,
        "draft": blog.draft,
        "total_likes": blog.activity.total_likes,
        "total_comments": blog.activity.total_comments,
        "total_parent_comments": blog.activity.total_parent_comments,
        "total_reads": blog.activity.total_reads,
        "published_at": blog.published_at,
        "updated_at": blog.updated_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        blog_id=BlogId(_uuid(row["blog_id"])),
        blog_author_id=UserId(_uuid(row["blog_author_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        text=row["text"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        children=[CommentId(_uuid(child)) for child in row.get("children") or []],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump()


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    Args:
        row: Database row as dict

    Returns:
        Notification domain model
    """
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        type=NotificationType(row["type"]),
        notification_for=UserId(_uuid(row["notification_for"])),
        user_id=UserId(_uuid(row["user_id"])),
        blog_id=_optional_uuid(row.get("blog_id")),
        comment_id=_optional_uuid(row.get("comment_id")),
        replied_on_comment_id=_optional_uuid(row.get("replied_on_comment_id")),
        reply_id=_optional_uuid(row.get("reply_id")),
        seen=row["seen"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict.

    Args:
        notification: Notification domain model

    Returns:
        Dict suitable for database insertion
    """
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
