"""Domain services."""

from .base import Service
from .blog_service import BlogService
from .comment_service import CommentDeletion, CommentService
from .counter_service import CounterService
from .jwt_service import JWTService
from .notification_service import NotificationService
from .user_service import UserService

__all__ = [
    "BlogService",
    "CommentDeletion",
    "CommentService",
    "CounterService",
    "JWTService",
    "NotificationService",
    "Service",
    "UserService",
]
