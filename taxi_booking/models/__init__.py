"""Database models."""

from taxi_booking.models.booking import Booking
from taxi_booking.models.customer import Customer
from taxi_booking.models.taxi import Taxi

__all__ = [
    "Customer",
    "Taxi",
    "Booking",
]
