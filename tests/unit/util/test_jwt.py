"""Unit tests for JWT utilities."""

import pytest

from penpixel.config import AuthSettings
from penpixel.util.jwt import JWTError, create_token, parse_bearer, verify_token


class TestTokens:
    """Tests for create_token and verify_token."""

    def test_round_trip_keeps_claims(self):
        settings = AuthSettings(jwt_secret="test-secret")

        payload = verify_token(create_token("user-1", "alice", settings), settings)

        assert payload.user_id == "user-1"
        assert payload.username == "alice"

    def test_wrong_secret_is_rejected(self):
        token = create_token("user-1", "alice", AuthSettings(jwt_secret="one"))

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, AuthSettings(jwt_secret="two"))

    def test_expired_token_is_rejected(self):
        settings = AuthSettings(jwt_secret="test-secret", jwt_expiry_days=-1)

        with pytest.raises(JWTError, match="expired"):
            verify_token(create_token("user-1", "alice", settings), settings)


class TestParseBearer:
    """Tests for parse_bearer."""

    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Bearer abc.def", "abc.def"),
            ("bearer abc.def", "abc.def"),
            ("Basic abc", None),
            ("Bearer", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parse(self, header, expected):
        assert parse_bearer(header) == expected
