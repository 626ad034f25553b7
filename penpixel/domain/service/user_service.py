"""User domain service."""

import asyncio
import re
import secrets
import string
from datetime import datetime
from urllib.parse import urlparse
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from penpixel.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from penpixel.domain.model import User
from penpixel.domain.model.user import SOCIAL_PLATFORMS
from penpixel.domain.repository import UserRepository
from penpixel.domain.value import UserId, Username
from penpixel.util.password import check_password, hash_password

from .base import Service

EMAIL_PATTERN = re.compile(r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*\.\w{2,3}$")
PASSWORD_PATTERN = re.compile(r"^(?=.*\d)(?=.*[a-z])(?=.*[A-Z]).{6,20}$")

FULLNAME_LIMIT = 120
EMAIL_LIMIT = 254
BIO_LIMIT = 150
USERNAME_SUFFIX_LENGTH = 5
USERNAME_ATTEMPTS = 10
USERNAME_ALPHABET = string.ascii_lowercase + string.digits


def validate_password(password: str) -> None:
    """Check password strength.

    Raises:
        ValidationError: If the password is not 6-20 characters with a digit,
            a lowercase and an uppercase letter
    """
    if not PASSWORD_PATTERN.match(password):
        raise ValidationError(
            "Password should be 6 to 20 characters long with a numeric, "
            "1 lowercase and 1 uppercase letters"
        )


class UserService(Service):
    """Domain service for accounts and profiles."""

    def __init__(self, user_repository: UserRepository, bcrypt_rounds: int = 10) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            bcrypt_rounds: bcrypt work factor for new password hashes
        """
        self.user_repository = user_repository
        self.bcrypt_rounds = bcrypt_rounds

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: str) -> User | None:
        """Get user by username.

        Args:
            username: Username

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_by_username", username=username):
            try:
                value = Username(username)
            except ValueError:
                return None
            user = await self.user_repository.find_by_username(value)
            if user:
                logfire.info("User found", username=username, user_id=str(user.id))
            else:
                logfire.warn("User not found", username=username)
            return user

    async def register(self, fullname: str, email: str, password: str) -> User:
        """Create an account with email and password.

        The username is derived from the local part of the email, with a
        random suffix when it is already taken.

        Args:
            fullname: Display name (at least 3 characters)
            email: Email address
            password: Plain text password

        Returns:
            Created user

        Raises:
            ValidationError: If any field is invalid
            ConflictError: If the email is already registered
        """
        with logfire.span("user_service.register", email=email):
            if len(fullname) < 3:
                raise ValidationError("Fullname must be at least 3 letters long")
            if len(fullname) > FULLNAME_LIMIT:
                raise ValidationError(
                    f"Fullname must be at most {FULLNAME_LIMIT} characters long"
                )
            if not email:
                raise ValidationError("Please enter your email")
            if len(email) > EMAIL_LIMIT or not EMAIL_PATTERN.match(email):
                raise ValidationError("Email is invalid")
            validate_password(password)

            if await self.user_repository.find_by_email(email):
                logfire.warn("Signup with registered email", email=email)
                raise ConflictError("Email already exists")

            user = User(
                id=UserId(uuid4()),
                fullname=fullname,
                email=email,
                username=await self.generate_username(email),
                password_hash=await asyncio.to_thread(
                    hash_password, password, self.bcrypt_rounds
                ),
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError as e:
                # Lost a race on the unique email or username
                logfire.warn("User insert rejected", email=email, error=str(e))
                if await self.user_repository.find_by_email(email):
                    raise ConflictError("Email already exists") from e
                raise ConflictError("Username already exists") from e

            logfire.info(
                "User registered", user_id=str(saved.id), username=saved.username.root
            )
            return saved

    async def generate_username(self, email: str) -> Username:
        """Derive a free username from an email address.

        The local part is used as is when free, otherwise a random suffix is
        appended until an unused name turns up.

        Raises:
            ConflictError: If no free name was found
        """
        base = email.split("@")[0][: 60 - USERNAME_SUFFIX_LENGTH]
        username = Username(base)
        for _ in range(USERNAME_ATTEMPTS):
            if not await self.user_repository.find_by_username(username):
                return username
            suffix = "".join(
                secrets.choice(USERNAME_ALPHABET) for _ in range(USERNAME_SUFFIX_LENGTH)
            )
            logfire.debug("Username taken, trying suffix", base=base, suffix=suffix)
            username = Username(base + suffix)
        logfire.warn("No free username found", base=base)
        raise ConflictError("Username already exists")

    async def authenticate(self, email: str, password: str) -> User:
        """Check email and password credentials.

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user or not user.password_hash:
                logfire.warn("Signin with unknown email", email=email)
                raise AuthenticationError("Email not found")
            if not await asyncio.to_thread(check_password, password, user.password_hash):
                logfire.warn("Signin with incorrect password", user_id=str(user.id))
                raise AuthenticationError("Incorrect password")
            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def change_password(
        self, user_id: UserId, current_password: str, new_password: str
    ) -> None:
        """Replace a user's password after checking the current one.

        Raises:
            ValidationError: If either password fails the strength rule
            NotFoundError: If the user does not exist
            AuthenticationError: If the current password is wrong
        """
        with logfire.span("user_service.change_password", user_id=str(user_id)):
            validate_password(current_password)
            validate_password(new_password)

            user = await self.get_by_id(user_id)
            if not user.password_hash or not await asyncio.to_thread(
                check_password, current_password, user.password_hash
            ):
                raise AuthenticationError("Incorrect current password")

            await self.user_repository.save(
                user.model_copy(
                    update={
                        "password_hash": await asyncio.to_thread(
                            hash_password, new_password, self.bcrypt_rounds
                        ),
                        "updated_at": datetime.now(),
                    }
                )
            )
            logfire.info("Password changed", user_id=str(user_id))

    async def search(self, query: str, limit: int = 50) -> list[User]:
        """Find users by username substring."""
        with logfire.span("user_service.search", query=query):
            users = await self.user_repository.search_by_username(query, limit=limit)
            logfire.info("Users searched", query=query, count=len(users))
            return users

    async def update_profile(
        self,
        user_id: UserId,
        username: str,
        bio: str,
        social_links: dict[str, str],
        fullname: str | None = None,
    ) -> User:
        """Update editable profile fields.

        Raises:
            ValidationError: If username, bio or a social link is invalid
            ConflictError: If the username belongs to someone else
            NotFoundError: If the user does not exist
        """
        with logfire.span(
            "user_service.update_profile", user_id=str(user_id), username=username
        ):
            if len(username) < 3:
                raise ValidationError("Username should be at least 3 letters long")
            if fullname is not None and not 3 <= len(fullname) <= FULLNAME_LIMIT:
                raise ValidationError(
                    f"Fullname must be 3 to {FULLNAME_LIMIT} characters long"
                )
            if len(bio) > BIO_LIMIT:
                raise ValidationError(
                    f"Your bio should not be more than {BIO_LIMIT} characters"
                )
            links = self._validate_social_links(social_links)

            try:
                new_username = Username(username)
            except ValueError as e:
                raise ValidationError(str(e)) from e

            user = await self.get_by_id(user_id)
            if new_username != user.username:
                owner = await self.user_repository.find_by_username(new_username)
                if owner and owner.id != user_id:
                    raise ConflictError("Username is already taken")

            updated = user.model_copy(
                update={
                    "username": new_username,
                    "bio": bio,
                    "fullname": fullname if fullname else user.fullname,
                    "social_links": {**user.social_links, **links},
                    "updated_at": datetime.now(),
                }
            )
            try:
                saved = await self.user_repository.save(updated)
            except IntegrityError as e:
                raise ConflictError("Username is already taken") from e

            logfire.info(
                "Profile updated", user_id=str(user_id), username=saved.username.root
            )
            return saved

    async def update_profile_img(self, user_id: UserId, url: str) -> User:
        """Set a user's profile image URL.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.update_profile_img", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            saved = await self.user_repository.save(
                user.model_copy(update={"profile_img": url, "updated_at": datetime.now()})
            )
            logfire.info("Profile image updated", user_id=str(user_id))
            return saved

    @staticmethod
    def _validate_social_links(social_links: dict[str, str]) -> dict[str, str]:
        """Check each non-empty link points at its platform.

        Every platform except ``website`` must be an absolute URL whose host
        contains ``<platform>.com``.
        """
        links: dict[str, str] = {}
        for platform, link in social_links.items():
            if platform not in SOCIAL_PLATFORMS:
                raise ValidationError(f"Unknown social platform: {platform}")
            if link:
                parsed = urlparse(link)
                if not parsed.scheme or not parsed.hostname:
                    raise ValidationError(
                        "You must provide full social links with https:// included"
                    )
                if platform != "website" and f"{platform}.com" not in parsed.hostname:
                    raise ValidationError(
                        f"{platform} link is invalid. You must enter full link."
                    )
            links[platform] = link
        return links
