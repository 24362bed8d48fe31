import pytest
from unittest.mock import AsyncMock, MagicMock

from config import ApplicationConfig

# Keep bcrypt cheap in tests
ApplicationConfig.BCRYPT_ROUNDS = 4


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_reset_token_hash = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.bookings = MagicMock()
    uow.bookings.create = AsyncMock(side_effect=lambda booking: booking)
    uow.bookings.get_by_id = AsyncMock(return_value=None)
    uow.bookings.list_by_user = AsyncMock(return_value=[])
    uow.bookings.update = AsyncMock(side_effect=lambda booking: booking)
    return uow


@pytest.fixture
def email_sender():
    sender = MagicMock()
    sender.send = AsyncMock()
    return sender
