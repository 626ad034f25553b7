"""Blog domain service."""

import re
import secrets
import string
from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from penpixel.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from penpixel.domain.model.blog import Blog
from penpixel.domain.repository import BlogQuery, BlogRepository
from penpixel.domain.value import BlogId, BlogSortOrder, Slug, UserId

from .base import Service
from .comment_service import CommentService
from .counter_service import CounterService
from .notification_service import NotificationService

TITLE_LIMIT = 300
DESCRIPTION_LIMIT = 200
TAG_LIMIT = 10
SLUG_SUFFIX_LENGTH = 8
SLUG_ALPHABET = string.ascii_lowercase + string.digits


class BlogService(Service):
    """Domain service for writing, reading and removing blogs."""

    def __init__(
        self,
        blog_repository: BlogRepository,
        counter_service: CounterService,
        notification_service: NotificationService,
        comment_service: CommentService,
    ) -> None:
        """Initialize blog service.

        Args:
            blog_repository: Blog repository
            counter_service: Counter service for reads and post counts
            notification_service: Notification service for blog cleanup
            comment_service: Comment service for blog cleanup
        """
        self.blog_repository = blog_repository
        self.counter_service = counter_service
        self.notification_service = notification_service
        self.comment_service = comment_service

    async def create_blog(
        self,
        author_id: UserId,
        title: str,
        description: str,
        banner: str,
        content: dict[str, Any],
        tags: list[str],
        draft: bool,
    ) -> Blog:
        """Create a draft or a published blog.

        Publishing counts towards the author's total_posts, best-effort.

        Raises:
            ValidationError: If the blog is not complete enough to be saved
        """
        with logfire.span(
            "blog_service.create_blog", author_id=str(author_id), draft=draft
        ):
            tags = self._validate(title, description, banner, content, tags, draft)

            blog_id = BlogId(uuid4())
            now = datetime.now()
            blog = await self.blog_repository.save(
                Blog(
                    id=blog_id,
                    slug=await self.generate_unique_slug(title),
                    title=title,
                    description=description,
                    banner=banner,
                    content=content,
                    tags=tags,
                    author_id=author_id,
                    draft=draft,
                    published_at=now,
                    updated_at=now,
                )
            )

            if not draft:
                await self.best_effort(
                    "adjust_post_count",
                    author_id,
                    self.counter_service.adjust_post_count(author_id, 1),
                )

            logfire.info(
                "Blog created", blog_id=str(blog.id), slug=str(blog.slug), draft=draft
            )
            return blog

    async def update_blog(
        self,
        slug: Slug,
        requester_id: UserId,
        title: str,
        description: str,
        banner: str,
        content: dict[str, Any],
        tags: list[str],
        draft: bool,
    ) -> Blog:
        """Replace the editable fields of a blog.

        Publishing a draft counts towards the author's total_posts,
        best-effort. The slug and counters never change.

        Raises:
            NotFoundError: If the blog does not exist
            NotAuthorizedError: If the requester is not the author
            ValidationError: If the blog is not complete enough to be saved
        """
        with logfire.span(
            "blog_service.update_blog", slug=str(slug), requester_id=str(requester_id)
        ):
            blog = await self.blog_repository.find_by_slug(slug)
            if not blog:
                raise NotFoundError("Blog", str(slug))
            if blog.author_id != requester_id:
                logfire.warn(
                    "Unauthorized blog update attempt",
                    slug=str(slug),
                    requester_id=str(requester_id),
                )
                raise NotAuthorizedError("update", "blog", str(slug), str(requester_id))

            tags = self._validate(title, description, banner, content, tags, draft)
            now = datetime.now()
            updated = await self.blog_repository.save(
                blog.model_copy(
                    update={
                        "title": title,
                        "description": description,
                        "banner": banner,
                        "content": content,
                        "tags": tags,
                        "draft": draft,
                        "published_at": now if blog.draft and not draft else blog.published_at,
                        "updated_at": now,
                    }
                )
            )

            if blog.draft and not draft:
                await self.best_effort(
                    "adjust_post_count",
                    blog.author_id,
                    self.counter_service.adjust_post_count(blog.author_id, 1),
                )

            logfire.info("Blog updated", blog_id=str(blog.id), draft=draft)
            return updated

    async def get_blog(
        self,
        slug: Slug,
        viewer_id: UserId | None = None,
        draft: bool = False,
        count_read: bool = True,
    ) -> Blog:
        """Fetch a blog for display or editing.

        Drafts are only returned to their author, and only when asked for.
        A successful read counts towards the blog's and author's reads,
        best-effort. The returned blog shows the counters before this read.

        Args:
            slug: Blog slug
            viewer_id: Authenticated viewer, if any
            draft: Whether the caller expects a draft
            count_read: False when opening the blog in the editor

        Raises:
            NotFoundError: If the blog does not exist
            NotAuthorizedError: If a draft is requested by someone else or
                without asking for it
        """
        with logfire.span("blog_service.get_blog", slug=str(slug), draft=draft):
            blog = await self.blog_repository.find_by_slug(slug)
            if not blog:
                logfire.warn("Blog not found", slug=str(slug))
                raise NotFoundError("Blog", str(slug))

            if blog.draft and (not draft or viewer_id != blog.author_id):
                logfire.warn(
                    "Draft access denied",
                    slug=str(slug),
                    viewer_id=str(viewer_id) if viewer_id else None,
                )
                raise NotAuthorizedError(
                    "read", "draft blog", str(slug), str(viewer_id) if viewer_id else "anonymous"
                )

            if count_read:
                await self.best_effort(
                    "adjust_reads",
                    blog.id,
                    self.counter_service.adjust_reads(blog.id, 1),
                )

            logfire.info("Blog found", blog_id=str(blog.id), counted=count_read)
            return blog

    async def delete_blog(self, slug: Slug, requester_id: UserId) -> Blog:
        """Delete a blog with its comments and notifications.

        Deleting the blog is the operation of record; cleaning up its
        notifications, comments and the author's post count is best-effort.

        Raises:
            NotFoundError: If the blog does not exist
            NotAuthorizedError: If the requester is not the author
        """
        with logfire.span(
            "blog_service.delete_blog", slug=str(slug), requester_id=str(requester_id)
        ):
            blog = await self.blog_repository.find_by_slug(slug)
            if not blog:
                raise NotFoundError("Blog", str(slug))
            if blog.author_id != requester_id:
                logfire.warn(
                    "Unauthorized blog deletion attempt",
                    slug=str(slug),
                    requester_id=str(requester_id),
                )
                raise NotAuthorizedError("delete", "blog", str(slug), str(requester_id))

            deleted = await self.blog_repository.delete(blog.id)
            if deleted is None:
                raise NotFoundError("Blog", str(slug))

            await self.best_effort(
                "delete_blog_notifications",
                blog.id,
                self.notification_service.delete_by_blog(blog.id),
            )
            await self.best_effort(
                "delete_blog_comments",
                blog.id,
                self.comment_service.delete_blog_comments(blog.id),
            )
            if not deleted.draft:
                await self.best_effort(
                    "adjust_post_count",
                    blog.author_id,
                    self.counter_service.adjust_post_count(blog.author_id, -1),
                )

            logfire.info("Blog deleted", blog_id=str(blog.id), slug=str(slug))
            return deleted

    async def get_blog_by_id(self, blog_id: BlogId) -> Blog | None:
        """Get a blog by ID.

        Args:
            blog_id: Blog ID

        Returns:
            Blog if found, None otherwise
        """
        with logfire.span("blog_service.get_blog_by_id", blog_id=str(blog_id)):
            blog = await self.blog_repository.find_by_id(blog_id)
            if not blog:
                logfire.warn("Blog not found", blog_id=str(blog_id))
            return blog

    async def get_blog_by_slug(self, slug: Slug) -> Blog | None:
        """Get a blog by slug without counting a read or checking draft access."""
        with logfire.span("blog_service.get_blog_by_slug", slug=str(slug)):
            blog = await self.blog_repository.find_by_slug(slug)
            if not blog:
                logfire.warn("Blog not found", slug=str(slug))
            return blog

    async def list_published(
        self,
        query: BlogQuery | None = None,
        sort: BlogSortOrder = BlogSortOrder.LATEST,
        page: int = 1,
        limit: int = 5,
    ) -> list[Blog]:
        """Get a page of published blogs."""
        with logfire.span(
            "blog_service.list_published", sort=sort.value, page=page, limit=limit
        ):
            blogs = await self.blog_repository.find_published(
                query, sort=sort, limit=limit, offset=(max(page, 1) - 1) * limit
            )
            logfire.info("Published blogs listed", count=len(blogs))
            return blogs

    async def count_published(self, query: BlogQuery | None = None) -> int:
        """Count published blogs matching the filters."""
        with logfire.span("blog_service.count_published"):
            return await self.blog_repository.count_published(query)

    async def list_by_author(
        self,
        author_id: UserId,
        draft: bool,
        title_query: str = "",
        page: int = 1,
        limit: int = 5,
        deleted_count: int = 0,
    ) -> list[Blog]:
        """Get a page of an author's own blogs for their dashboard.

        deleted_count compensates for blogs removed since the previous pages
        were loaded.
        """
        with logfire.span(
            "blog_service.list_by_author",
            author_id=str(author_id),
            draft=draft,
            page=page,
        ):
            offset = max(0, (max(page, 1) - 1) * limit - deleted_count)
            return await self.blog_repository.find_by_author(
                author_id, draft, title_query=title_query, limit=limit, offset=offset
            )

    async def count_by_author(
        self, author_id: UserId, draft: bool, title_query: str = ""
    ) -> int:
        """Count an author's own blogs."""
        with logfire.span(
            "blog_service.count_by_author", author_id=str(author_id), draft=draft
        ):
            return await self.blog_repository.count_by_author(
                author_id, draft, title_query=title_query
            )

    async def generate_unique_slug(self, title: str) -> Slug:
        """Generate a unique slug from a title.

        The slug is the slugified title followed by a random suffix, so two
        blogs with the same title still get distinct public ids.

        Args:
            title: Blog title

        Returns:
            Unused slug
        """
        with logfire.span("blog_service.generate_unique_slug", title=title):
            base = self._slugify(title)
            while True:
                suffix = "".join(
                    secrets.choice(SLUG_ALPHABET) for _ in range(SLUG_SUFFIX_LENGTH)
                )
                slug = Slug(f"{base}-{suffix}" if base else suffix)
                if not await self.blog_repository.slug_exists(slug):
                    return slug
                logfire.debug("Slug collision, retrying", slug=str(slug))

    @staticmethod
    def _slugify(title: str) -> str:
        """Convert title to URL-safe slug format.

        - Converts to lowercase
        - Replaces non-alphanumeric runs with a single hyphen
        - Strips leading/trailing hyphens
        - Truncates to 100 characters
        """
        slug = re.sub(r"[^a-z0-9]+", "-", title.lower())
        return slug.strip("-")[:100].strip("-")

    @staticmethod
    def _validate(
        title: str,
        description: str,
        banner: str,
        content: dict[str, Any],
        tags: list[str],
        draft: bool,
    ) -> list[str]:
        """Check a blog is complete enough to save and normalize its tags.

        Drafts only need a title.

        Returns:
            Lower-cased tags
        """
        if not title or not title.strip():
            raise ValidationError("You must provide a title to publish the blog")
        if len(title) > TITLE_LIMIT:
            raise ValidationError(f"Title must be under {TITLE_LIMIT} characters")

        if not draft:
            if not description or len(description) > DESCRIPTION_LIMIT:
                raise ValidationError(
                    f"You must provide blog description under {DESCRIPTION_LIMIT} characters"
                )
            if not banner:
                raise ValidationError("You must provide a banner to publish the blog")
            if not content.get("blocks"):
                raise ValidationError("There must be blog content to publish it")
            if not tags or len(tags) > TAG_LIMIT:
                raise ValidationError(
                    f"You must provide tags to publish the blog, max {TAG_LIMIT}"
                )
        elif len(description) > DESCRIPTION_LIMIT:
            raise ValidationError(
                f"Blog description must be under {DESCRIPTION_LIMIT} characters"
            )

        return [tag.lower() for tag in tags]
