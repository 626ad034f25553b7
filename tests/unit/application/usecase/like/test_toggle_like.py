"""Unit tests for ToggleLikeUseCase and LikeStatusUseCase."""

import pytest

from penpixel.application.usecase.like import (
    LikeStatusRequest,
    LikeStatusUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from penpixel.domain.error import ValidationError
from penpixel.domain.repository import BlogRepository, UserRepository
from tests.conftest import make_blog, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleLikeUseCase:
    """Tests for ToggleLikeUseCase."""

    @pytest.mark.asyncio
    async def test_toggle_is_decided_server_side(self, unit_env):
        """Two toggles in a row like and then unlike."""
        # Arrange
        toggle_like = await unit_env.get(ToggleLikeUseCase)
        like_status = await unit_env.get(LikeStatusUseCase)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await make_user(user_repo, "author")
        reader = await make_user(user_repo, "reader")
        blog = await make_blog(blog_repo, author.id)
        request = ToggleLikeRequest(blog_id=str(blog.slug), user_id=str(reader.id))
        status_request = LikeStatusRequest(blog_id=str(blog.slug), user_id=str(reader.id))

        # Act
        first = await toggle_like.execute(request)
        status_after_first = await like_status.execute(status_request)
        second = await toggle_like.execute(request)

        # Assert
        assert first.liked_by_user is True
        assert status_after_first.liked_by_user is True
        assert second.liked_by_user is False
        assert (await like_status.execute(status_request)).liked_by_user is False
        assert (await blog_repo.find_by_id(blog.id)).activity.total_likes == 0

    @pytest.mark.asyncio
    async def test_likes_from_two_readers(self, unit_env):
        # Arrange
        toggle_like = await unit_env.get(ToggleLikeUseCase)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await make_user(user_repo, "author")
        readers = [await make_user(user_repo, name) for name in ("ann", "ben")]
        blog = await make_blog(blog_repo, author.id)

        # Act
        for reader in readers:
            await toggle_like.execute(
                ToggleLikeRequest(blog_id=str(blog.slug), user_id=str(reader.id))
            )

        # Assert
        assert (await blog_repo.find_by_id(blog.id)).activity.total_likes == 2

    @pytest.mark.asyncio
    async def test_cannot_like_draft(self, unit_env):
        # Arrange
        toggle_like = await unit_env.get(ToggleLikeUseCase)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await make_user(user_repo, "author")
        draft = await make_blog(blog_repo, author.id, draft=True)

        # Act & Assert
        with pytest.raises(ValidationError):
            await toggle_like.execute(
                ToggleLikeRequest(blog_id=str(draft.slug), user_id=str(author.id))
            )
