"""Repository interfaces for Pen n Pixel domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer. Together they form the store
the domain services are given at construction.
"""

from penpixel.domain.repository.blog import BlogQuery, BlogRepository
from penpixel.domain.repository.comment import CommentRepository
from penpixel.domain.repository.notification import NotificationRepository
from penpixel.domain.repository.user import UserRepository

__all__ = [
    "BlogQuery",
    "BlogRepository",
    "CommentRepository",
    "NotificationRepository",
    "UserRepository",
]
