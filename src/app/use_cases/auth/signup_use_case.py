import logging

from src.api.utils.jwt import generate_jwt
from src.app.repositories.user_repository import EmailAlreadyExistsError
from src.app.services.credentials import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email
from src.domain.entities import User
from src.domain.result import Error, Result, Return
from .dtos import AuthResponse, CredentialsCommand, UserSummary

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: CredentialsCommand (email, password)
    - Output: Result[AuthResponse] (user summary and session token)

    Business Logic:
    1. Require both email and password
    2. Normalize email (trim, lower-case)
    3. Reject an already registered email
    4. Hash password with bcrypt
    5. Create User and commit
    6. Issue a session token for the new user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CredentialsCommand) -> Result[AuthResponse]:
        """
        Execute signup use case

        Args:
            command: CredentialsCommand with email and password

        Returns:
            Result[AuthResponse] with user summary and token,
            or Error(VALIDATION_ERROR) / Error(EMAIL_ALREADY_EXISTS)
        """
        if not command.email or not command.email.strip() or not command.password:
            return Return.err(
                Error("VALIDATION_ERROR", "Please provide email and password")
            )

        email = normalize_email(command.email)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            user = User(email=email, password_hash=hash_password(command.password))
            try:
                # The unique index catches a concurrent signup that passed the check above
                user = await self.uow.users.create(user)
            except EmailAlreadyExistsError:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            await self.uow.commit()

            token = generate_jwt(user.id)
            logger.info(f"User signed up: {user.id}")

            return Return.ok(
                AuthResponse(
                    message="User created",
                    user=UserSummary(id=str(user.id), email=user.email),
                    token=token,
                )
            )
