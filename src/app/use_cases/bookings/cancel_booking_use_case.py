import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import CurrentUser
from src.domain.entities import BookingStatus
from src.domain.result import Result, Return
from .booking_access import get_owned_booking
from .dtos import BookingChangedResponse, BookingView

logger = logging.getLogger(__name__)


class CancelBookingUseCase:
    """
    Use case for cancelling a booking.

    The record is kept; its status becomes cancelled. Owner only.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user: CurrentUser, booking_id: UUID
    ) -> Result[BookingChangedResponse]:
        async with self.uow:
            owned = await get_owned_booking(
                self.uow, user, booking_id, "Not allowed to cancel this booking"
            )
            if owned.is_err():
                return Return.err(owned.error)

            booking = owned.value
            booking.status = BookingStatus.cancelled
            booking = await self.uow.bookings.update(booking)
            await self.uow.commit()

            logger.info(f"Booking cancelled: {booking.id}")
            return Return.ok(
                BookingChangedResponse(
                    message="Booking cancelled",
                    booking=BookingView.from_entity(booking),
                )
            )
