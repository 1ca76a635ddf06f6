"""Booking-related Pydantic schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from taxi_booking.schemas.common import EntityId


class BookingBase(BaseModel):
    """Proposed (customer, taxi, date) assignment.

    Every field is optional at the schema level: a draft with missing
    parts is still handed to the validator, which reports them as field
    violations.
    """

    booking_date: date | None = None
    customer_id: EntityId | None = None
    taxi_id: EntityId | None = None


class BookingCreate(BookingBase):
    """Schema for creating a booking."""


class BookingUpdate(BookingBase):
    """Schema for updating a booking; ``id`` must match the target."""

    id: EntityId | None = None


class BookingResponse(BaseModel):
    """Schema for booking response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    booking_date: date
    customer_id: int
    taxi_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
