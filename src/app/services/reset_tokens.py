"""
Password reset secrets.

The raw secret is emailed once; only its SHA-256 digest is stored.
The digest must be deterministic because lookup is by equality.
"""

import hashlib
import secrets

RESET_SECRET_BYTES = 32


def generate_reset_secret() -> str:
    """32 random bytes as 64 hex characters."""
    return secrets.token_hex(RESET_SECRET_BYTES)


def hash_reset_secret(raw_token: str) -> str:
    return hashlib.sha256(raw_token.encode()).hexdigest()
