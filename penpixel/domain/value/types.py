"""Domain value objects for Pen n Pixel.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from penpixel.domain.value.common import RootValueObject


class NotificationType(str, Enum):
    """Kind of event a notification records."""

    LIKE = "like"
    COMMENT = "comment"
    REPLY = "reply"


class NotificationFilter(str, Enum):
    """Feed filter: every type, or a single one."""

    ALL = "all"
    LIKE = "like"
    COMMENT = "comment"
    REPLY = "reply"

    @property
    def notification_type(self) -> NotificationType | None:
        """Concrete type to filter on, None for ``all``."""
        if self is NotificationFilter.ALL:
            return None
        return NotificationType(self.value)


class BlogSortOrder(str, Enum):
    """Sort order for published blog listings."""

    LATEST = "latest"  # published_at DESC
    TRENDING = "trending"  # total_reads, total_likes, published_at DESC


class Username(RootValueObject[str]):
    """Public username, unique across users."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        if len(v) < 1 or len(v) > 60:
            raise ValueError("Username must be 1-60 characters")
        return v


class Slug(RootValueObject[str]):
    """URL-safe public identifier for blogs.

    Lowercase alphanumeric with hyphens, 1-200 characters.
    Example: 'my-first-trip-to-lisbon-x3k9q2'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 200:
            raise ValueError("Slug must be 1-200 characters")
        return v
