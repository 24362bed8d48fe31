"""
Create Booking Use Case

Records a cleaning appointment for the authenticated user.
"""

import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import CurrentUser
from src.domain.base import normalize_email
from src.domain.entities import Booking
from src.domain.result import Error, Result, Return
from .dtos import BookingChangedResponse, BookingView, CreateBookingCommand

logger = logging.getLogger(__name__)


class CreateBookingUseCase:
    """
    Use case for creating a booking.

    Business Rules:
    - First name, last name and email are required
    - Service type and frequency are required
    - Contact email must equal the logged-in user's email (case-insensitive)
    - New bookings start as pending
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user: CurrentUser, command: CreateBookingCommand
    ) -> Result[BookingChangedResponse]:
        if not command.first_name or not command.last_name or not command.email:
            return Return.err(
                Error("VALIDATION_ERROR", "Name and email are required.")
            )

        if not command.service_type or not command.frequency:
            return Return.err(
                Error("VALIDATION_ERROR", "Service type and frequency are required.")
            )

        email = normalize_email(command.email)
        if email != normalize_email(user.email):
            return Return.err(
                Error("EMAIL_MISMATCH", "Email does not match logged-in user.")
            )

        async with self.uow:
            booking = Booking(
                user_id=UUID(user.id),
                first_name=command.first_name.strip(),
                last_name=command.last_name.strip(),
                email=email,
                phone=command.phone,
                bedrooms=command.bedrooms,
                bathrooms=command.bathrooms,
                service_type=command.service_type,
                frequency=command.frequency,
                price=command.price,
                scheduled_date=command.scheduled_date,
            )
            booking = await self.uow.bookings.create(booking)
            await self.uow.commit()

            logger.info(f"Booking created: {booking.id} for user {user.id}")
            return Return.ok(
                BookingChangedResponse(
                    message="Booking created successfully",
                    booking=BookingView.from_entity(booking),
                )
            )
