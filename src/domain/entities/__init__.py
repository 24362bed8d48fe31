"""
Booking Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import BookingStatus, Frequency, ServiceType

# Export all entities
from .user import User
from .booking import Booking

__all__ = [
    # Enums
    "BookingStatus",
    "Frequency",
    "ServiceType",
    # Entities
    "User",
    "Booking",
]
