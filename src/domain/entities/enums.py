"""
Booking Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class BookingStatus(str, Enum):
    """Booking lifecycle status"""

    pending = "pending"
    done = "done"
    cancelled = "cancelled"


class ServiceType(str, Enum):
    """Kind of cleaning ordered"""

    standard = "standard"
    deep = "deep"
    post_construction = "post_construction"


class Frequency(str, Enum):
    """How often the cleaning repeats"""

    one_time = "one_time"
    weekly = "weekly"
    two_weeks = "two_weeks"
    four_weeks = "four_weeks"
