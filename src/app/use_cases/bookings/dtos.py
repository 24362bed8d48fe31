"""
Booking Use Case DTOs

Commands carry snake_case business fields; responses are serialized with
the camelCase names the booking client uses.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.domain.entities import Booking, BookingStatus, Frequency, ServiceType


class CreateBookingCommand(BaseModel):
    """
    Create booking command

    Name, email, service type and frequency are optional here so the use
    case can report which group is missing.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    bedrooms: int
    bathrooms: int
    service_type: Optional[ServiceType] = None
    frequency: Optional[Frequency] = None
    price: float
    scheduled_date: Optional[datetime] = None


class BookingView(BaseModel):
    """Booking as returned to its owner"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    user: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    bedrooms: int
    bathrooms: int
    service_type: ServiceType
    frequency: Frequency
    price: float
    status: BookingStatus
    scheduled_date: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingView":
        return cls(
            id=str(booking.id),
            user=str(booking.user_id),
            first_name=booking.first_name,
            last_name=booking.last_name,
            email=booking.email,
            phone=booking.phone,
            bedrooms=booking.bedrooms,
            bathrooms=booking.bathrooms,
            service_type=booking.service_type,
            frequency=booking.frequency,
            price=booking.price,
            status=booking.status,
            scheduled_date=booking.scheduled_date,
            created_at=booking.created_at,
        )


class BookingResponse(BaseModel):
    booking: BookingView


class BookingChangedResponse(BaseModel):
    """Single booking after a create/update/cancel"""

    message: str
    booking: BookingView


class BookingListResponse(BaseModel):
    bookings: List[BookingView]
