"""
Unit tests for ConfirmPasswordResetUseCase
"""
from datetime import datetime, timedelta
from uuid import uuid4

import bcrypt
import pytest

from src.app.services.reset_tokens import generate_reset_secret, hash_reset_secret
from src.app.use_cases.auth import ConfirmPasswordResetUseCase
from src.domain.base import utcnow
from src.domain.entities import User


def make_user_with_reset_token():
    raw_token = generate_reset_secret()
    user = User(id=uuid4(), email="user@example.com", password_hash="old_hash")
    user.start_password_reset(
        token_hash=hash_reset_secret(raw_token),
        expires_at=utcnow() + timedelta(minutes=30),
    )
    return user, raw_token


@pytest.mark.asyncio
async def test_successful_password_reset_confirmation(mock_uow):
    """Test password is replaced and reset fields are cleared"""
    user, raw_token = make_user_with_reset_token()
    mock_uow.users.get_by_reset_token_hash.return_value = user

    result = await ConfirmPasswordResetUseCase(mock_uow).execute(raw_token, "NewPass123!")

    assert result.is_ok()
    assert result.value.message == "Password reset successful"

    assert bcrypt.checkpw(b"NewPass123!", user.password_hash.encode())
    assert user.reset_password_token_hash is None
    assert user.reset_password_expires_at is None
    mock_uow.users.update.assert_called_once_with(user)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_lookup_uses_hash_and_current_time(mock_uow):
    """Test the store is queried by the token's SHA-256 hash and the current time"""
    raw_token = generate_reset_secret()

    before = utcnow()
    await ConfirmPasswordResetUseCase(mock_uow).execute(raw_token, "NewPass123!")
    after = utcnow()

    token_hash, now = mock_uow.users.get_by_reset_token_hash.call_args[0]
    assert token_hash == hash_reset_secret(raw_token)
    assert isinstance(now, datetime)
    assert before <= now <= after


@pytest.mark.asyncio
async def test_invalid_or_expired_token(mock_uow):
    """Test no match (unknown or expired) gives one combined error"""
    mock_uow.users.get_by_reset_token_hash.return_value = None

    result = await ConfirmPasswordResetUseCase(mock_uow).execute("bogus", "NewPass123!")

    assert result.is_err()
    assert result.error.code == "INVALID_OR_EXPIRED_TOKEN"
    assert result.error.message == "Invalid or expired token"
    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("new_password", [None, ""])
async def test_missing_new_password(mock_uow, new_password):
    result = await ConfirmPasswordResetUseCase(mock_uow).execute("token", new_password)

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    assert result.error.message == "Please provide a new password"
    mock_uow.users.get_by_reset_token_hash.assert_not_called()
