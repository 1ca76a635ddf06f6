"""Taxi x date uniqueness for bookings."""

from datetime import date, datetime

from taxi_booking.models.booking import Booking
from taxi_booking.repositories.entity_store import EntityStore


def calendar_day(value: date) -> date:
    """Reduce a date or datetime to its calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


class UniquenessChecker:
    """Detect another booking already holding a (taxi, date) slot."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    async def is_taken(
        self,
        taxi_id: int,
        booking_date: date,
        exclude_id: int | None = None,
    ) -> bool:
        """Whether a booking other than ``exclude_id`` holds the slot.

        Dates are compared by calendar value. ``exclude_id`` is the id of
        the booking being updated, so it never conflicts with itself; on
        create it is ``None`` and any match is a conflict.
        """
        wanted = calendar_day(booking_date)
        for booking in await self.store.find_by(Booking, "taxi_id", taxi_id):
            if calendar_day(booking.booking_date) == wanted and booking.id != exclude_id:
                return True
        return False
