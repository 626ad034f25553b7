"""Response pieces shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from penpixel.domain.error import NotFoundError
from penpixel.domain.model import Blog, User
from penpixel.domain.service import UserService
from penpixel.domain.value import UserId


class AuthorSummary(BaseModel):
    """Public identity of a user, embedded in blogs, comments and notifications."""

    user_id: str
    fullname: str
    username: str
    profile_img: str | None

    @classmethod
    def from_user(cls, user: User) -> "AuthorSummary":
        return cls(
            user_id=str(user.id),
            fullname=user.fullname,
            username=user.username.root,
            profile_img=user.profile_img,
        )


class ActivityItem(BaseModel):
    """Blog activity counters."""

    total_likes: int
    total_comments: int
    total_parent_comments: int
    total_reads: int


class BlogSummary(BaseModel):
    """Blog card as shown in listings."""

    blog_id: str  # Public slug
    title: str
    description: str
    banner: str
    tags: list[str]
    draft: bool
    activity: ActivityItem
    published_at: datetime
    author: AuthorSummary | None

    @classmethod
    def from_blog(cls, blog: Blog, author: AuthorSummary | None) -> "BlogSummary":
        return cls(
            blog_id=str(blog.slug),
            title=blog.title,
            description=blog.description,
            banner=blog.banner,
            tags=blog.tags,
            draft=blog.draft,
            activity=ActivityItem(**blog.activity.model_dump()),
            published_at=blog.published_at,
            author=author,
        )


class CountResponse(BaseModel):
    """Total number of documents behind a paginated listing."""

    total_docs: int


async def load_authors(
    user_service: UserService, user_ids: list[UserId]
) -> dict[UserId, AuthorSummary]:
    """Look up each distinct user once.

    Users that no longer exist are left out of the mapping.
    """
    authors: dict[UserId, AuthorSummary] = {}
    for user_id in dict.fromkeys(user_ids):
        try:
            user = await user_service.get_by_id(user_id)
        except NotFoundError:
            continue
        authors[user_id] = AuthorSummary.from_user(user)
    return authors
