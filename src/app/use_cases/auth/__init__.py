"""
Authentication Use Cases

All authentication-related business logic.
"""

from .signup_use_case import SignupUseCase
from .login_use_case import LoginUseCase
from .request_password_reset_use_case import (
    GENERIC_RESET_MESSAGE,
    RequestPasswordResetUseCase,
)
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .dtos import (
    AuthResponse,
    CredentialsCommand,
    CurrentUser,
    MeResponse,
    MessageResponse,
    UserSummary,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # DTOs - Commands
    "CredentialsCommand",
    # DTOs - Responses
    "AuthResponse",
    "MessageResponse",
    "MeResponse",
    # DTOs - Nested Models
    "UserSummary",
    "CurrentUser",
    # Constants
    "GENERIC_RESET_MESSAGE",
]
