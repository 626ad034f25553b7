"""PostgreSQL repository implementations."""

from penpixel.persistence.repository.blog import PostgresBlogRepository
from penpixel.persistence.repository.comment import PostgresCommentRepository
from penpixel.persistence.repository.notification import (
    PostgresNotificationRepository,
)
from penpixel.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresBlogRepository",
    "PostgresCommentRepository",
    "PostgresNotificationRepository",
]
