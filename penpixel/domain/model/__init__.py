"""Domain model entities for Pen n Pixel."""

from penpixel.domain.model.blog import Blog, BlogActivity
from penpixel.domain.model.comment import Comment
from penpixel.domain.model.notification import Notification
from penpixel.domain.model.user import AccountInfo, User

__all__ = [
    "AccountInfo",
    "Blog",
    "BlogActivity",
    "Comment",
    "Notification",
    "User",
]
