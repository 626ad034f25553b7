"""Unit tests for blog use cases."""

import pytest

from penpixel.application.usecase.blog import (
    CountBlogsUseCase,
    CreateBlogRequest,
    CreateBlogUseCase,
    DeleteBlogRequest,
    DeleteBlogUseCase,
    GetBlogRequest,
    GetBlogUseCase,
    ListBlogsRequest,
    ListBlogsUseCase,
    UpdateBlogRequest,
    UpdateBlogUseCase,
    UserBlogsRequest,
    UserBlogsUseCase,
)
from penpixel.domain.error import NotAuthorizedError, NotFoundError
from penpixel.domain.repository import BlogRepository, UserRepository
from penpixel.domain.value import BlogSortOrder
from tests.conftest import VALID_CONTENT, make_blog, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def create_request(author_id, **overrides):
    fields = {
        "author_id": str(author_id),
        "title": "Cycling the Danube",
        "description": "Vienna to Budapest",
        "banner": "https://img.example.com/danube.png",
        "content": VALID_CONTENT,
        "tags": ["travel"],
    }
    fields.update(overrides)
    return CreateBlogRequest(**fields)


class TestGetBlogUseCase:
    """Tests for GetBlogUseCase."""

    @pytest.mark.asyncio
    async def test_read_counts_but_edit_does_not(self, unit_env):
        # Arrange
        get_blog = await unit_env.get(GetBlogUseCase)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await make_user(user_repo, "author")
        blog = await make_blog(blog_repo, author.id)

        # Act
        read = await get_blog.execute(GetBlogRequest(blog_id=str(blog.slug)))
        await get_blog.execute(
            GetBlogRequest(blog_id=str(blog.slug), viewer_id=str(author.id), mode="edit")
        )

        # Assert
        assert read.blog.blog_id == str(blog.slug)
        assert read.blog.author.username == "author"
        assert read.blog.activity.total_reads == 0
        assert (await blog_repo.find_by_id(blog.id)).activity.total_reads == 1

    @pytest.mark.asyncio
    async def test_draft_for_author_only(self, unit_env):
        # Arrange
        get_blog = await unit_env.get(GetBlogUseCase)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await make_user(user_repo, "author")
        other = await make_user(user_repo, "other")
        draft = await make_blog(blog_repo, author.id, draft=True)

        # Act
        response = await get_blog.execute(
            GetBlogRequest(blog_id=str(draft.slug), viewer_id=str(author.id), draft=True)
        )

        # Assert
        assert response.blog.draft is True
        with pytest.raises(NotAuthorizedError):
            await get_blog.execute(
                GetBlogRequest(blog_id=str(draft.slug), viewer_id=str(other.id), draft=True)
            )

    @pytest.mark.asyncio
    async def test_malformed_slug_is_not_found(self, unit_env):
        get_blog = await unit_env.get(GetBlogUseCase)

        with pytest.raises(NotFoundError):
            await get_blog.execute(GetBlogRequest(blog_id="Bad Slug"))


class TestBlogLifecycle:
    """Create, update, list and delete through the use cases."""

    @pytest.mark.asyncio
    async def test_create_update_delete(self, unit_env):
        # Arrange
        create_blog = await unit_env.get(CreateBlogUseCase)
        update_blog = await unit_env.get(UpdateBlogUseCase)
        delete_blog = await unit_env.get(DeleteBlogUseCase)
        get_blog = await unit_env.get(GetBlogUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await make_user(user_repo, "author")

        # Act
        created = await create_blog.execute(create_request(author.id, draft=True))
        updated = await update_blog.execute(
            UpdateBlogRequest(
                blog_id=created.blog_id,
                user_id=str(author.id),
                title="Cycling the Danube, part one",
                description="Vienna to Bratislava",
                banner="https://img.example.com/danube.png",
                content=VALID_CONTENT,
                tags=["Travel", "Cycling"],
            )
        )
        fetched = await get_blog.execute(GetBlogRequest(blog_id=created.blog_id))
        deleted = await delete_blog.execute(
            DeleteBlogRequest(blog_id=created.blog_id, user_id=str(author.id))
        )

        # Assert
        assert created.blog_id.startswith("cycling-the-danube-")
        assert updated.blog_id == created.blog_id
        assert fetched.blog.title == "Cycling the Danube, part one"
        assert fetched.blog.tags == ["travel", "cycling"]
        assert deleted.status == "Done"
        with pytest.raises(NotFoundError):
            await get_blog.execute(GetBlogRequest(blog_id=created.blog_id))

    @pytest.mark.asyncio
    async def test_listing_search_and_count(self, unit_env):
        # Arrange
        create_blog = await unit_env.get(CreateBlogUseCase)
        list_blogs = await unit_env.get(ListBlogsUseCase)
        count_blogs = await unit_env.get(CountBlogsUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await make_user(user_repo, "author")
        await create_blog.execute(create_request(author.id))
        await create_blog.execute(create_request(author.id, title="Baking sourdough", tags=["food"]))
        await create_blog.execute(create_request(author.id, title="Draft notes", draft=True))

        # Act
        latest = await list_blogs.execute(ListBlogsRequest())
        trending = await list_blogs.execute(ListBlogsRequest(sort=BlogSortOrder.TRENDING))
        search = await list_blogs.execute(ListBlogsRequest(query="SOURDOUGH"))
        by_tag = await count_blogs.execute(ListBlogsRequest(tag="travel"))
        by_author = await count_blogs.execute(ListBlogsRequest(author_id=str(author.id)))

        # Assert
        assert [b.title for b in latest.blogs] == ["Baking sourdough", "Cycling the Danube"]
        assert latest.blogs[0].author.username == "author"
        assert len(trending.blogs) == 2
        assert [b.title for b in search.blogs] == ["Baking sourdough"]
        assert by_tag.total_docs == 1
        assert by_author.total_docs == 2

    @pytest.mark.asyncio
    async def test_dashboard_lists_own_drafts(self, unit_env):
        # Arrange
        create_blog = await unit_env.get(CreateBlogUseCase)
        user_blogs = await unit_env.get(UserBlogsUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await make_user(user_repo, "author")
        await create_blog.execute(create_request(author.id))
        await create_blog.execute(create_request(author.id, title="Half done", draft=True))

        # Act
        drafts = await user_blogs.execute(UserBlogsRequest(user_id=str(author.id), draft=True))
        published = await user_blogs.execute(UserBlogsRequest(user_id=str(author.id)))

        # Assert
        assert [b.title for b in drafts.blogs] == ["Half done"]
        assert drafts.total_docs == 1
        assert [b.title for b in published.blogs] == ["Cycling the Danube"]
        assert published.total_docs == 1
