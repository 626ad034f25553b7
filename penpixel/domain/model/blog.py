"""Blog aggregate root."""

from datetime import datetime
from typing import Any

from pydantic import Field

from penpixel.domain.model.common import DomainModel
from penpixel.domain.value import BlogId, Slug, UserId


class BlogActivity(DomainModel):
    """Denormalized activity counters kept in sync by CounterService."""

    total_likes: int = Field(default=0, ge=0)
    total_comments: int = Field(default=0, ge=0)
    total_parent_comments: int = Field(default=0, ge=0)
    total_reads: int = Field(default=0, ge=0)


class Blog(DomainModel):
    """Blog aggregate root.

    Drafts only need a title; published blogs are validated by BlogService.
    """

    id: BlogId
    slug: Slug
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(default="", max_length=200)
    banner: str = ""
    content: dict[str, Any] = Field(default_factory=dict)  # Editor JSON
    tags: list[str] = Field(default_factory=list)
    author_id: UserId
    draft: bool = False
    activity: BlogActivity = Field(default_factory=BlogActivity)
    published_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def blocks(self) -> list[Any]:
        """Content blocks from the editor payload."""
        return list(self.content.get("blocks") or [])
