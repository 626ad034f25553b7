"""JWT token domain service."""

import logfire

from penpixel.config import AuthSettings
from penpixel.util.jwt import TokenPayload, create_token, parse_bearer, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        """Create an access token for a user.

        Args:
            user_id: User ID
            username: Username at the time of issuance

        Returns:
            JWT token string
        """
        with logfire.span(
            "jwt_service.create_token", user_id=user_id, username=username
        ):
            token = create_token(user_id, username, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id, username=username)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def get_user_id_from_header(self, authorization: str | None) -> str | None:
        """Extract the user ID from an Authorization header without raising.

        Args:
            authorization: Raw ``Authorization`` header value (optional)

        Returns:
            User ID if a valid bearer token is present, None otherwise
        """
        token = parse_bearer(authorization)
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except Exception as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
