"""
Update Booking Status Use Case

Moves a booking between pending, done and cancelled.
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import CurrentUser
from src.domain.entities import BookingStatus
from src.domain.result import Error, Result, Return
from .booking_access import get_owned_booking
from .dtos import BookingChangedResponse, BookingView

logger = logging.getLogger(__name__)


class UpdateBookingStatusUseCase:
    """
    Use case for changing a booking's status.

    Business Rules:
    - Only the owner may change the status
    - Status must be one of pending, done, cancelled
    - Ownership is checked before the status value, so a non-owner
      learns nothing about the request they sent
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user: CurrentUser, booking_id: UUID, status: Optional[str]
    ) -> Result[BookingChangedResponse]:
        async with self.uow:
            owned = await get_owned_booking(
                self.uow, user, booking_id, "Not allowed to update this booking"
            )
            if owned.is_err():
                return Return.err(owned.error)

            try:
                new_status = BookingStatus(status)
            except ValueError:
                return Return.err(Error("INVALID_STATUS", "Invalid status"))

            booking = owned.value
            booking.status = new_status
            booking = await self.uow.bookings.update(booking)
            await self.uow.commit()

            logger.info(f"Booking {booking.id} status set to {new_status.value}")
            return Return.ok(
                BookingChangedResponse(
                    message="Status updated",
                    booking=BookingView.from_entity(booking),
                )
            )
