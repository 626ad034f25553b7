"""Domain value objects for Pen n Pixel."""

from penpixel.domain.value.identifiers import (
    BlogId,
    CommentId,
    NotificationId,
    UserId,
)
from penpixel.domain.value.types import (
    BlogSortOrder,
    NotificationFilter,
    NotificationType,
    Slug,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "BlogId",
    "CommentId",
    "NotificationId",
    # Types
    "BlogSortOrder",
    "NotificationFilter",
    "NotificationType",
    "Slug",
    "Username",
]
