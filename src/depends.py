import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from config import ApplicationConfig
from src.adapter.services.smtp_email_sender import SmtpEmailSender
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError, ServerError
from src.api.utils.jwt import verify_jwt
from src.app.services.email_sender import IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import CurrentUser
from src.app.use_cases.users import LoadCurrentUserUseCase
from src.domain.result import Error

logger = logging.getLogger(__name__)

# auto_error=False: a missing header must be a 401 with our own body
security = HTTPBearer(auto_error=False)


async def get_unit_of_work(request: Request):
    """Yield a unit of work bound to a fresh session from the app's session factory."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_email_sender() -> IEmailSender:
    return SmtpEmailSender.from_config(ApplicationConfig)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> CurrentUser:
    """
    Session guard for protected routes.

    Verifies the Bearer token from the Authorization header and resolves
    it to an existing user.

    Args:
        credentials: Bearer token from Authorization header
        uow: Unit of work used to look the user up

    Returns:
        CurrentUser (never includes the password hash)

    Raises:
        ClientError: 401 if the header is missing or malformed, the token is
        invalid or expired, or the user no longer exists
    """
    if credentials is None or not credentials.credentials:
        raise ClientError(
            Error("UNAUTHORIZED", "Not authorized, token missing"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Not authorized"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    try:
        user_id = UUID(payload["user_id"])
    except ValueError:
        raise ClientError(
            Error("UNAUTHORIZED", "Not authorized"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    result = await LoadCurrentUserUseCase(uow).execute(user_id)
    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(
                Error("UNAUTHORIZED", error.message),
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        raise ServerError(error)

    return result.value
