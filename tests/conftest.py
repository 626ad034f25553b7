"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from penpixel.domain.model import Blog, User
from penpixel.domain.repository import BlogRepository, UserRepository
from penpixel.domain.value import BlogId, Slug, UserId, Username

VALID_CONTENT = {"blocks": [{"type": "paragraph", "data": {"text": "Hello"}}]}


async def make_user(user_repo: UserRepository, username: str = "alice") -> User:
    """Save a user directly through the repository."""
    return await user_repo.save(
        User(
            id=UserId(uuid4()),
            fullname=username.capitalize(),
            email=f"{username}@example.com",
            username=Username(username),
        )
    )


async def make_blog(
    blog_repo: BlogRepository,
    author_id: UserId,
    title: str = "A day in Lisbon",
    draft: bool = False,
    tags: list[str] | None = None,
    age: timedelta = timedelta(0),
) -> Blog:
    """Save a blog directly through the repository.

    Args:
        age: How long ago the blog was published
    """
    blog_id = BlogId(uuid4())
    published_at = datetime.now() - age
    return await blog_repo.save(
        Blog(
            id=blog_id,
            slug=Slug(f"blog-{str(blog_id)[:8]}"),
            title=title,
            description="A short description",
            banner="https://img.example.com/banner.png",
            content=VALID_CONTENT,
            tags=tags if tags is not None else ["travel"],
            author_id=author_id,
            draft=draft,
            published_at=published_at,
            updated_at=published_at,
        )
    )
