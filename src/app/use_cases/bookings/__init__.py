"""
Booking Use Cases

All booking business logic. Every use case is scoped to the
authenticated user.
"""

from .create_booking_use_case import CreateBookingUseCase
from .list_bookings_use_case import ListBookingsUseCase
from .get_booking_use_case import GetBookingUseCase
from .update_booking_status_use_case import UpdateBookingStatusUseCase
from .cancel_booking_use_case import CancelBookingUseCase
from .dtos import (
    BookingChangedResponse,
    BookingListResponse,
    BookingResponse,
    BookingView,
    CreateBookingCommand,
)

__all__ = [
    # Use Cases
    "CreateBookingUseCase",
    "ListBookingsUseCase",
    "GetBookingUseCase",
    "UpdateBookingStatusUseCase",
    "CancelBookingUseCase",
    # DTOs
    "CreateBookingCommand",
    "BookingView",
    "BookingResponse",
    "BookingChangedResponse",
    "BookingListResponse",
]
