from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.email_sender import IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    ConfirmPasswordResetUseCase,
    CredentialsCommand,
    LoginUseCase,
    MessageResponse,
    RequestPasswordResetUseCase,
    SignupUseCase,
)
from src.depends import get_email_sender, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class CredentialsRequest(BaseModel):
    """
    Signup/login HTTP request payload

    Both fields may be omitted at the schema level; the use case reports
    a missing field with a 400 and a readable message.
    """

    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(None, description="User password")


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def signup(
    request: CredentialsRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    User Signup

    Creates a user account and returns a session token.

    Raises:
        - 400 Bad Request: Missing field or email already registered
        - 500 Internal Server Error: Server error
    """
    command = CredentialsCommand(email=request.email, password=request.password)

    result = await SignupUseCase(uow).execute(command)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
                "EMAIL_ALREADY_EXISTS": status.HTTP_400_BAD_REQUEST,
            },
        )

    return result.value


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(
    request: CredentialsRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    User Login

    Authenticates the user and returns a new session token.

    Raises:
        - 400 Bad Request: Missing field or invalid credentials (same
          message for unknown email and wrong password)
        - 500 Internal Server Error: Server error
    """
    command = CredentialsCommand(email=request.email, password=request.password)

    result = await LoginUseCase(uow).execute(command)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
                "INVALID_CREDENTIALS": status.HTTP_400_BAD_REQUEST,
            },
        )

    return result.value


class ForgotPasswordRequest(BaseModel):
    email: Optional[str] = Field(None, description="User email address")


@router.post(
    "/forgot-password", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
):
    """
    Request Password Reset

    Emails a one-time reset link valid for one hour.

    Security:
        - No email enumeration (same response for known/unknown emails)
        - Only the SHA-256 hash of the token is stored

    Raises:
        - 400 Bad Request: Email missing
        - 500 Internal Server Error: Email could not be sent, or server error
    """
    use_case = RequestPasswordResetUseCase(uow, email_sender)
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(
            result.error, {"VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST}
        )

    return result.value


class ResetPasswordRequest(BaseModel):
    password: Optional[str] = Field(None, description="New password")


@router.post(
    "/reset-password/{token}",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
)
async def reset_password(
    token: str,
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Confirm Password Reset

    Sets a new password using the raw token from the reset email.
    The token is single-use.

    Raises:
        - 400 Bad Request: Password missing, or token invalid/expired
          (deliberately not distinguished)
        - 500 Internal Server Error: Server error
    """
    result = await ConfirmPasswordResetUseCase(uow).execute(token, request.password)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
                "INVALID_OR_EXPIRED_TOKEN": status.HTTP_400_BAD_REQUEST,
            },
        )

    return result.value
