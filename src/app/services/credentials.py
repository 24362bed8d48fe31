"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.
"""

from functools import lru_cache

import bcrypt

from config import ApplicationConfig

# bcrypt only reads the first 72 bytes; newer releases reject longer input
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode()[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with bcrypt (auto-salted, cost from BCRYPT_ROUNDS)."""
    rounds = ApplicationConfig.BCRYPT_ROUNDS
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode())
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("dummy_password")


def burn_password_check(password: str) -> None:
    """
    Run one bcrypt check against a throwaway hash.

    Called when the email is unknown so that login takes as long as
    a real password mismatch.
    """
    verify_password(password, _dummy_hash())
