"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from penpixel.domain.model.common import DomainModel
from penpixel.domain.value import UserId, Username

SOCIAL_PLATFORMS = ("youtube", "instagram", "facebook", "twitter", "github", "website")


class AccountInfo(DomainModel):
    """Denormalized account counters."""

    total_posts: int = Field(default=0, ge=0)
    total_reads: int = Field(default=0, ge=0)


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    fullname: str = Field(min_length=1, max_length=120)
    email: str
    username: Username
    password_hash: Optional[str] = None
    bio: str = Field(default="", max_length=150)
    profile_img: Optional[str] = None
    social_links: dict[str, str] = Field(
        default_factory=lambda: {platform: "" for platform in SOCIAL_PLATFORMS}
    )
    account_info: AccountInfo = Field(default_factory=AccountInfo)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
