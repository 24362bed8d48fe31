"""
Booking Entity

A cleaning appointment requested by a user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import BookingStatus, Frequency, ServiceType


class Booking(SQLModel, table=True):
    """
    Booking entity - a cleaning appointment owned by exactly one user.

    Business Rules:
    - Contact email must match the owner's email at creation time
    - Bedrooms and bathrooms are between 1 and 4
    - Only the owner may read, update or cancel it
    - Cancelling keeps the record and sets status=cancelled
    """

    __tablename__ = "bookings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    # Contact details, copied for history
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=40)

    bedrooms: int = Field(ge=1, le=4)
    bathrooms: int = Field(ge=1, le=4)
    service_type: ServiceType
    frequency: Frequency
    price: float = Field(ge=0)

    status: BookingStatus = Field(default=BookingStatus.pending)
    scheduled_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_booking_user_created", "user_id", "created_at"),)
