"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class CredentialsCommand(BaseModel):
    """
    Email/password pair for signup and login

    Fields are optional here: a missing field is a business-level
    validation error reported by the use case, not a schema error.
    """

    email: Optional[str] = None
    password: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserSummary(BaseModel):
    """Public user fields returned on signup/login"""

    id: str
    email: str


class AuthResponse(BaseModel):
    """Response for signup and login use cases"""

    message: str
    user: UserSummary
    token: str


class MessageResponse(BaseModel):
    """Response carrying only a human-readable message"""

    message: str


class CurrentUser(BaseModel):
    """Authenticated user as seen by protected routes (no credentials)"""

    id: str
    email: str
    created_at: datetime


class MeResponse(BaseModel):
    """Response for the who-am-I use case"""

    user: CurrentUser
