from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import CurrentUser
from src.domain.result import Result, Return
from .booking_access import get_owned_booking
from .dtos import BookingResponse, BookingView


class GetBookingUseCase:
    """Returns a single booking, only to its owner."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user: CurrentUser, booking_id: UUID) -> Result[BookingResponse]:
        async with self.uow:
            owned = await get_owned_booking(self.uow, user, booking_id, "Unauthorized")
            if owned.is_err():
                return Return.err(owned.error)

            return Return.ok(BookingResponse(booking=BookingView.from_entity(owned.value)))
