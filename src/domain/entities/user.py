"""
User Entity

Represents an account holder who books cleanings.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - an account that owns bookings.

    Business Rules:
    - Email is unique across all users (unique index), stored lower-cased
    - Password stored as bcrypt hash, never plaintext
    - Reset token hash and its expiry are set together and cleared together
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Password reset (SHA-256 hex digest of the emailed token)
    reset_password_token_hash: Optional[str] = Field(
        default=None, index=True, max_length=64
    )
    reset_password_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    def start_password_reset(self, token_hash: str, expires_at: datetime) -> None:
        self.reset_password_token_hash = token_hash
        self.reset_password_expires_at = expires_at

    def clear_password_reset(self) -> None:
        self.reset_password_token_hash = None
        self.reset_password_expires_at = None
