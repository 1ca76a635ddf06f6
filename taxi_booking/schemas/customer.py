"""Customer-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from taxi_booking.schemas.common import EntityId


class CustomerBase(BaseModel):
    """Base customer schema.

    Presence, pattern and length rules are enforced by
    ``check_customer_fields`` so that they surface as field violations.
    """

    name: str | None = None
    email: EmailStr | None = None
    phone_number: str | None = Field(None, max_length=32)


class CustomerCreate(CustomerBase):
    """Schema for registering a customer."""


class CustomerUpdate(CustomerBase):
    """Schema for updating a customer; ``id`` must match the target."""

    id: EntityId | None = None


class CustomerResponse(BaseModel):
    """Schema for customer response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone_number: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
