"""Booking database model."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from taxi_booking.database import Base

if TYPE_CHECKING:
    from taxi_booking.models.customer import Customer
    from taxi_booking.models.taxi import Taxi

TAXI_DATE_CONSTRAINT = "uq_bookings_taxi_date"


class Booking(Base):
    """A customer's reservation of one taxi for one date."""

    __tablename__ = "bookings"
    __table_args__ = (
        # A taxi can only be booked once per date
        UniqueConstraint("taxi_id", "booking_date", name=TAXI_DATE_CONSTRAINT),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    booking_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customers.id"), nullable=False, index=True
    )
    taxi_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("taxis.id"), nullable=False, index=True
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    customer: Mapped["Customer"] = relationship("Customer", back_populates="bookings")
    taxi: Mapped["Taxi"] = relationship("Taxi", back_populates="bookings")

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, customer={self.customer_id}, "
            f"taxi={self.taxi_id}, date={self.booking_date})>"
        )
