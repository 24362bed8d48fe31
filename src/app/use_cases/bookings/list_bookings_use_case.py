from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import CurrentUser
from src.domain.result import Result, Return
from .dtos import BookingListResponse, BookingView


class ListBookingsUseCase:
    """Lists the caller's bookings, newest first."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user: CurrentUser) -> Result[BookingListResponse]:
        async with self.uow:
            bookings = await self.uow.bookings.list_by_user(UUID(user.id))
            return Return.ok(
                BookingListResponse(
                    bookings=[BookingView.from_entity(b) for b in bookings]
                )
            )
