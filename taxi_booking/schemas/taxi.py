"""Taxi-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from taxi_booking.schemas.common import EntityId


class TaxiBase(BaseModel):
    """Base taxi schema."""

    num_seats: int | None = None
    reg: str | None = None


class TaxiCreate(TaxiBase):
    """Schema for registering a taxi."""


class TaxiUpdate(TaxiBase):
    """Schema for updating a taxi; ``id`` must match the target."""

    id: EntityId | None = None


class TaxiResponse(BaseModel):
    """Schema for taxi response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    num_seats: int
    reg: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
