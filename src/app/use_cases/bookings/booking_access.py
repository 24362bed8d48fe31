from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import CurrentUser
from src.domain.entities import Booking
from src.domain.result import Error, Result, Return


async def get_owned_booking(
    uow: UnitOfWork, user: CurrentUser, booking_id: UUID, forbidden_message: str
) -> Result[Booking]:
    """
    Load a booking and check the caller owns it.

    Must be called inside an open unit of work.

    Errors:
        - BOOKING_NOT_FOUND: No booking with this id
        - FORBIDDEN: Booking belongs to another user
    """
    booking = await uow.bookings.get_by_id(booking_id)
    if booking is None:
        return Return.err(Error("BOOKING_NOT_FOUND", "Booking not found"))

    if str(booking.user_id) != user.id:
        return Return.err(Error("FORBIDDEN", forbidden_message))

    return Return.ok(booking)
