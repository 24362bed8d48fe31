from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Booking


class IBookingRepository(ABC):
    """Booking repository interface - application layer"""

    @abstractmethod
    async def create(self, booking: Booking) -> Booking:
        """Create a new booking"""
        pass

    @abstractmethod
    async def get_by_id(self, booking_id: UUID) -> Optional[Booking]:
        """Get booking by ID"""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: UUID) -> List[Booking]:
        """Get all bookings of a user, newest first"""
        pass

    @abstractmethod
    async def update(self, booking: Booking) -> Booking:
        """Update existing booking"""
        pass
