"""Unit tests for password hashing."""

from penpixel.util.password import check_password, hash_password


class TestPasswordHashing:
    """Tests for hash_password and check_password."""

    def test_hash_is_salted_and_verifiable(self):
        first = hash_password("Secret123", rounds=4)
        second = hash_password("Secret123", rounds=4)

        assert first != second
        assert check_password("Secret123", first)
        assert check_password("Secret123", second)

    def test_wrong_password_does_not_match(self):
        hashed = hash_password("Secret123", rounds=4)

        assert not check_password("secret123", hashed)
