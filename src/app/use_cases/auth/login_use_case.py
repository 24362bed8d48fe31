"""
Login Use Case

Handles user authentication and returns a session JWT.
"""

import logging

from src.app.services.credentials import burn_password_check, verify_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email
from src.domain.result import Error, Result, Return
from src.api.utils.jwt import generate_jwt
from .dtos import AuthResponse, CredentialsCommand, UserSummary

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email and wrong password produce the same error
    - A bcrypt check runs on both branches so timing does not reveal
      whether the email is registered
    - Each successful login issues a fresh session token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CredentialsCommand) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            command: CredentialsCommand with email and password

        Returns:
            Result with AuthResponse, or Error(VALIDATION_ERROR) /
            Error(INVALID_CREDENTIALS)
        """
        if not command.email or not command.email.strip() or not command.password:
            return Return.err(
                Error("VALIDATION_ERROR", "Please provide email and password")
            )

        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(command.email))

            if user is None:
                burn_password_check(command.password)
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid credentials"))

            if not verify_password(command.password, user.password_hash):
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid credentials"))

            token = generate_jwt(user.id)
            logger.info(f"User logged in: {user.id}")

            return Return.ok(
                AuthResponse(
                    message="Logged in",
                    user=UserSummary(id=str(user.id), email=user.email),
                    token=token,
                )
            )
