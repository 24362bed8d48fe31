"""
Request Password Reset Use Case

Handles generating and emailing password reset tokens.
"""

import logging
from datetime import timedelta
from html import escape
from typing import Optional

from config import ApplicationConfig
from src.app.services.email_sender import EmailDeliveryError, IEmailSender
from src.app.services.reset_tokens import generate_reset_secret, hash_reset_secret
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email, utcnow
from src.domain.result import Error, Result, Return
from .dtos import MessageResponse

logger = logging.getLogger(__name__)

GENERIC_RESET_MESSAGE = "If that email exists, a reset link has been sent"
RESET_EMAIL_SUBJECT = "Password Reset Instructions"


def render_reset_email(reset_url: str, ttl_minutes: int) -> str:
    url = escape(reset_url, quote=True)
    return f"""
<div style="font-family: Arial, sans-serif; background-color: #f9f9f9; padding: 30px;">
  <div style="max-width: 500px; margin: auto; background: white; border-radius: 10px; padding: 20px;">
    <h2 style="color: #333; text-align: center;">Password Reset Request</h2>
    <p style="font-size: 15px; color: #555;">
      Hello,<br/><br/>
      You recently requested to reset your password. Click the button below to choose a new password.
    </p>
    <div style="text-align: center; margin: 30px 0;">
      <a href="{url}" style="background-color: #007bff; color: white; text-decoration: none; padding: 12px 25px; border-radius: 5px; font-weight: bold;">
        Reset My Password
      </a>
    </div>
    <p style="font-size: 13px; color: #888;">
      If you didn't request a password reset, you can safely ignore this email.<br/>
      This link will expire in {ttl_minutes} minutes.
    </p>
  </div>
</div>
"""


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Generate a cryptographically secure 32-byte token
    - Store only its SHA-256 hash, with an expiry (1 hour by default)
    - A new request replaces any outstanding token
    - No email enumeration (same response for valid/invalid emails)
    - Reset link is {CLIENT_URL}/reset-password/{raw token}
    - A delivery failure is an error, never a silent success
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_sender: IEmailSender,
        client_url: Optional[str] = None,
        ttl_minutes: Optional[int] = None,
    ):
        self.uow = uow
        self.email_sender = email_sender
        self.client_url = (client_url or ApplicationConfig.CLIENT_URL).rstrip("/")
        self.ttl_minutes = (
            ttl_minutes
            if ttl_minutes is not None
            else ApplicationConfig.RESET_TOKEN_TTL_MINUTES
        )

    async def execute(self, email: Optional[str]) -> Result[MessageResponse]:
        """
        Execute request password reset use case.

        Args:
            email: User's email address

        Returns:
            Result with the generic message, or Error

        Note:
            For security (no email enumeration), always returns the same
            message whether or not the email exists. Only generates a
            token and sends mail if it does.
        """
        if not email or not email.strip():
            return Return.err(Error("VALIDATION_ERROR", "Please provide an email"))

        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))

            if user is None:
                return Return.ok(MessageResponse(message=GENERIC_RESET_MESSAGE))

            reset_token = generate_reset_secret()
            user.start_password_reset(
                token_hash=hash_reset_secret(reset_token),
                expires_at=utcnow() + timedelta(minutes=self.ttl_minutes),
            )
            await self.uow.users.update(user)
            await self.uow.commit()

            reset_url = f"{self.client_url}/reset-password/{reset_token}"
            try:
                await self.email_sender.send(
                    to=user.email,
                    subject=RESET_EMAIL_SUBJECT,
                    html=render_reset_email(reset_url, self.ttl_minutes),
                )
            except EmailDeliveryError:
                return Return.err(
                    Error(
                        "EMAIL_DELIVERY_FAILED",
                        "Password reset email could not be sent",
                    )
                )

            logger.info(f"Password reset requested: {user.id}")
            return Return.ok(MessageResponse(message=GENERIC_RESET_MESSAGE))
