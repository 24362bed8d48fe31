"""
Confirm Password Reset Use Case

Handles password reset confirmation with secure token validation.
"""

import logging
from typing import Optional

from src.app.services.credentials import hash_password
from src.app.services.reset_tokens import hash_reset_secret
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.result import Error, Result, Return
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token is validated by hashing and comparing with the stored hash
    - Hash match and unexpired expiry are checked in one lookup, so an
      unknown token and an expired one fail identically
    - Password is re-hashed with bcrypt
    - Both reset fields are cleared, making the token single-use
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, token: str, new_password: Optional[str]
    ) -> Result[MessageResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Password reset token (plain text from email)
            new_password: New password to set

        Returns:
            Result with confirmation message, or Error

        Errors:
            - VALIDATION_ERROR: New password missing
            - INVALID_OR_EXPIRED_TOKEN: No user holds this token, or it expired
        """
        if not new_password:
            return Return.err(
                Error("VALIDATION_ERROR", "Please provide a new password")
            )

        token_hash = hash_reset_secret(token)

        async with self.uow:
            user = await self.uow.users.get_by_reset_token_hash(token_hash, utcnow())
            if user is None:
                return Return.err(
                    Error("INVALID_OR_EXPIRED_TOKEN", "Invalid or expired token")
                )

            user.password_hash = hash_password(new_password)
            user.clear_password_reset()
            await self.uow.users.update(user)
            await self.uow.commit()

            logger.info(f"Password reset completed: {user.id}")
            return Return.ok(MessageResponse(message="Password reset successful"))
