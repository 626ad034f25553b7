"""Password hashing helpers (bcrypt)."""

import bcrypt


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def check_password(password: str, hashed_password: str) -> bool:
    """Check if a password matches the hashed version."""
    return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
