from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import User


class EmailAlreadyExistsError(Exception):
    """Raised by the store when the unique email constraint rejects a write"""


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (normalized) email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_reset_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[User]:
        """Get user whose reset token hash matches and has not expired at `now`"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user, raising EmailAlreadyExistsError on a duplicate email"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass
