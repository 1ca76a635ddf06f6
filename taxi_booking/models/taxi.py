"""Taxi database model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from taxi_booking.database import Base

if TYPE_CHECKING:
    from taxi_booking.models.booking import Booking

MIN_SEATS = 2
MAX_SEATS = 20
REG_LENGTH = 7


class Taxi(Base):
    """Taxi in the fleet."""

    __tablename__ = "taxis"
    __table_args__ = (
        UniqueConstraint("reg", name="uq_taxis_reg"),
        CheckConstraint(
            f"num_seats >= {MIN_SEATS} AND num_seats <= {MAX_SEATS}",
            name="ck_taxis_num_seats",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    num_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    reg: Mapped[str] = mapped_column(String(REG_LENGTH), nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    bookings: Mapped[list["Booking"]] = relationship(
        "Booking", back_populates="taxi", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Taxi(id={self.id}, reg={self.reg})>"
