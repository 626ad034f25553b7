"""Unit tests for UserService."""

import threading
import time
from uuid import uuid4

import pytest

from penpixel.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from penpixel.domain.repository import UserRepository
from penpixel.domain.service import UserService
from penpixel.domain.service import user_service as user_service_module
from penpixel.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PASSWORD = "Secret123"


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_derives_username_from_email(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        user = await user_service.register("Ada Lovelace", "ada@example.com", PASSWORD)

        # Assert
        assert user.username.root == "ada"
        assert user.password_hash and user.password_hash != PASSWORD
        assert user.account_info.total_posts == 0

    @pytest.mark.asyncio
    async def test_taken_username_gets_suffix(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.register("Ada Lovelace", "ada@example.com", PASSWORD)

        # Act
        user = await user_service.register("Ada Other", "ada@example.org", PASSWORD)

        # Assert
        assert user.username.root.startswith("ada")
        assert len(user.username.root) == len("ada") + 5

    @pytest.mark.asyncio
    async def test_no_free_username_conflicts_on_username(self, unit_env, monkeypatch):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await make_user(user_repo, "ada")
        await make_user(user_repo, "adaaaaaa")
        monkeypatch.setattr(
            "penpixel.domain.service.user_service.secrets.choice", lambda seq: "a"
        )

        # Act / Assert
        with pytest.raises(ConflictError, match="Username already exists"):
            await user_service.register("Ada Lovelace", "ada@example.com", PASSWORD)

    @pytest.mark.asyncio
    async def test_email_without_domain_is_rejected_quickly(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        started = time.monotonic()

        # Act / Assert
        with pytest.raises(ValidationError, match="Email is invalid"):
            await user_service.register("Ada Lovelace", "a" * 5000 + "!", PASSWORD)
        assert time.monotonic() - started < 1

    @pytest.mark.asyncio
    async def test_malformed_email_fails_fast(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        started = time.monotonic()

        # Act / Assert
        with pytest.raises(ValidationError, match="Email is invalid"):
            await user_service.register("Ada Lovelace", "a" * 40 + "!", PASSWORD)
        assert time.monotonic() - started < 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["ada@example.co.uk", "ada.l-ovelace@mail.example.org"])
    async def test_dotted_emails_are_accepted(self, unit_env, email):
        user_service = await unit_env.get(UserService)

        user = await user_service.register("Ada Lovelace", email, PASSWORD)

        assert user.email == email

    @pytest.mark.asyncio
    async def test_password_is_hashed_off_the_event_loop(self, unit_env, monkeypatch):
        # Arrange
        user_service = await unit_env.get(UserService)
        hashing_threads = []
        real_hash = user_service_module.hash_password

        def recording_hash(password, rounds):
            hashing_threads.append(threading.current_thread())
            return real_hash(password, rounds)

        monkeypatch.setattr(user_service_module, "hash_password", recording_hash)

        # Act
        await user_service.register("Ada Lovelace", "ada@example.com", PASSWORD)

        # Assert
        assert hashing_threads
        assert threading.main_thread() not in hashing_threads

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.register("Ada Lovelace", "ada@example.com", PASSWORD)

        # Act & Assert
        with pytest.raises(ConflictError, match="Email already exists"):
            await user_service.register("Ada Again", "ada@example.com", PASSWORD)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "fullname,email,password",
        [
            ("Al", "al@example.com", PASSWORD),
            ("Ada Lovelace", "not-an-email", PASSWORD),
            ("Ada Lovelace", "", PASSWORD),
            ("Ada Lovelace", "ada@example.com", "short"),
            ("Ada Lovelace", "ada@example.com", "alllowercase1"),
            ("Ada Lovelace", "ada@example.com", "NoDigitsHere"),
        ],
    )
    async def test_invalid_fields_are_rejected(self, unit_env, fullname, email, password):
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError):
            await user_service.register(fullname, email, password)


class TestAuthenticate:
    """Tests for authenticate and change_password."""

    @pytest.mark.asyncio
    async def test_correct_credentials(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        registered = await user_service.register("Ada Lovelace", "ada@example.com", PASSWORD)

        # Act
        user = await user_service.authenticate("ada@example.com", PASSWORD)

        # Assert
        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_unknown_email(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(AuthenticationError, match="Email not found"):
            await user_service.authenticate("nobody@example.com", PASSWORD)

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.register("Ada Lovelace", "ada@example.com", PASSWORD)

        # Act & Assert
        with pytest.raises(AuthenticationError, match="Incorrect password"):
            await user_service.authenticate("ada@example.com", "Wrong123")

    @pytest.mark.asyncio
    async def test_change_password(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user = await user_service.register("Ada Lovelace", "ada@example.com", PASSWORD)

        # Act
        await user_service.change_password(user.id, PASSWORD, "Changed456")

        # Assert
        await user_service.authenticate("ada@example.com", "Changed456")
        with pytest.raises(AuthenticationError):
            await user_service.authenticate("ada@example.com", PASSWORD)

    @pytest.mark.asyncio
    async def test_change_password_needs_current_password(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user = await user_service.register("Ada Lovelace", "ada@example.com", PASSWORD)

        # Act & Assert
        with pytest.raises(AuthenticationError, match="Incorrect current password"):
            await user_service.change_password(user.id, "Wrong123", "Changed456")


class TestProfile:
    """Tests for profile updates and lookups."""

    @pytest.mark.asyncio
    async def test_update_profile(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await make_user(user_repo, "alice")

        # Act
        updated = await user_service.update_profile(
            user.id,
            username="alice_w",
            bio="Writes about trains",
            social_links={"github": "https://github.com/alice", "website": ""},
        )

        # Assert
        assert updated.username.root == "alice_w"
        assert updated.bio == "Writes about trains"
        assert updated.social_links["github"] == "https://github.com/alice"
        assert updated.social_links["youtube"] == ""
        assert await user_service.get_by_username("alice_w") is not None
        assert await user_service.get_by_username("alice") is None

    @pytest.mark.asyncio
    async def test_username_taken_by_someone_else(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await make_user(user_repo, "alice")
        await make_user(user_repo, "bob")

        # Act & Assert
        with pytest.raises(ConflictError, match="Username is already taken"):
            await user_service.update_profile(alice.id, "bob", "", {})

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,bio,links",
        [
            ("al", "", {}),
            ("alice", "x" * 151, {}),
            ("alice", "", {"github": "github.com/alice"}),
            ("alice", "", {"twitter": "https://example.com/alice"}),
            ("alice", "", {"myspace": "https://myspace.com/alice"}),
        ],
    )
    async def test_invalid_profile_is_rejected(self, unit_env, username, bio, links):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await make_user(user_repo, "alice")

        # Act & Assert
        with pytest.raises(ValidationError):
            await user_service.update_profile(alice.id, username, bio, links)

    @pytest.mark.asyncio
    async def test_update_profile_img(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await make_user(user_repo, "alice")

        # Act
        await user_service.update_profile_img(alice.id, "https://img.example.com/a.png")

        # Assert
        stored = await user_repo.find_by_id(alice.id)
        assert stored.profile_img == "https://img.example.com/a.png"

    @pytest.mark.asyncio
    async def test_search_matches_username_substring(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await make_user(user_repo, "alice")
        await make_user(user_repo, "malik")
        await make_user(user_repo, "bob")

        # Act
        users = await user_service.search("LI")

        # Assert
        assert [u.username.root for u in users] == ["alice", "malik"]

    @pytest.mark.asyncio
    async def test_get_missing_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))
