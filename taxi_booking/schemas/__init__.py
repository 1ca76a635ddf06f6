"""Pydantic schemas for API validation."""

from taxi_booking.schemas.booking import (
    BookingBase,
    BookingCreate,
    BookingResponse,
    BookingUpdate,
)
from taxi_booking.schemas.customer import (
    CustomerBase,
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
)
from taxi_booking.schemas.taxi import TaxiBase, TaxiCreate, TaxiResponse, TaxiUpdate

__all__ = [
    # Customer
    "CustomerBase",
    "CustomerCreate",
    "CustomerUpdate",
    "CustomerResponse",
    # Taxi
    "TaxiBase",
    "TaxiCreate",
    "TaxiUpdate",
    "TaxiResponse",
    # Booking
    "BookingBase",
    "BookingCreate",
    "BookingUpdate",
    "BookingResponse",
]
