"""Booking service: validate, then persist, then return."""

import logging

from taxi_booking.core.exceptions import (
    AppException,
    DuplicateBooking,
    IdentityMismatch,
    NotFoundError,
    ReferenceNotFound,
    StoreUnavailable,
)
from taxi_booking.domain.booking_validator import BookingValidator
from taxi_booking.models.booking import TAXI_DATE_CONSTRAINT, Booking
from taxi_booking.repositories.entity_store import EntityStore, StoreConflict
from taxi_booking.schemas.booking import BookingBase, BookingUpdate

logger = logging.getLogger(__name__)


class BookingService:
    """Create, update, delete and look up bookings.

    Every write goes through ``BookingValidator`` first; a rejected draft
    leaves the store untouched.
    """

    def __init__(self, store: EntityStore, validator: BookingValidator | None = None) -> None:
        self.store = store
        self.validator = validator or BookingValidator(store)

    async def find_by_id(self, booking_id: int) -> Booking | None:
        return await self.store.get(Booking, booking_id)

    async def get(self, booking_id: int) -> Booking:
        """Find a booking or raise ``NotFoundError``."""
        booking = await self.store.get(Booking, booking_id)
        if booking is None:
            raise NotFoundError("Booking", str(booking_id))
        return booking

    async def find_all_ordered_by_date(self) -> list[Booking]:
        return await self.store.list_all(Booking, Booking.booking_date, Booking.id)

    async def find_by_customer(self, customer_id: int) -> list[Booking]:
        return await self.store.find_by(
            Booking, "customer_id", customer_id, Booking.booking_date, Booking.id
        )

    async def find_by_taxi(self, taxi_id: int) -> list[Booking]:
        return await self.store.find_by(
            Booking, "taxi_id", taxi_id, Booking.booking_date, Booking.id
        )

    async def create(self, draft: BookingBase) -> Booking:
        """Admit and persist a new booking."""
        logger.info(
            f"Creating booking: customer={draft.customer_id} taxi={draft.taxi_id} "
            f"date={draft.booking_date}"
        )
        await self.validator.validate(draft)

        booking = Booking(
            booking_date=draft.booking_date,
            customer_id=draft.customer_id,
            taxi_id=draft.taxi_id,
        )
        try:
            await self.store.insert(booking)
        except StoreConflict as e:
            raise await self._translate_conflict(e, draft) from e

        logger.info(f"Created booking {booking.id}")
        return booking

    async def update(self, booking_id: int, draft: BookingUpdate) -> Booking:
        """Re-admit and overwrite an existing booking.

        The booking itself is excluded from the uniqueness scan, so keeping
        its own taxi and date is not a conflict.
        """
        logger.info(
            f"Updating booking {booking_id}: customer={draft.customer_id} "
            f"taxi={draft.taxi_id} date={draft.booking_date}"
        )
        if draft.id != booking_id:
            raise IdentityMismatch("Booking")

        booking = await self.get(booking_id)
        await self.validator.validate(draft, exclude_id=booking_id)

        booking.booking_date = draft.booking_date
        booking.customer_id = draft.customer_id
        booking.taxi_id = draft.taxi_id
        try:
            await self.store.update(booking)
        except StoreConflict as e:
            raise await self._translate_conflict(e, draft) from e

        logger.info(f"Updated booking {booking.id}")
        return booking

    async def delete(self, booking_id: int) -> Booking:
        """Remove a booking by id and return the removed record."""
        booking = await self.get(booking_id)
        await self.store.delete(booking)
        logger.info(f"Deleted booking {booking_id}")
        return booking

    async def delete_record(self, booking: Booking) -> Booking:
        """Remove the given booking; one without an id is returned as-is."""
        if booking.id is None:
            logger.info("No ID was found so can't delete booking")
            return booking
        return await self.delete(booking.id)

    async def _translate_conflict(self, conflict: StoreConflict, draft: BookingBase) -> AppException:
        """Map a storage constraint rejection onto a booking error.

        Reached when a concurrent writer commits between admission and
        flush; the constraint, not the earlier scan, has the final say.
        """
        if conflict.constraint == TAXI_DATE_CONSTRAINT:
            return DuplicateBooking()

        references = self.validator.references
        for kind, entity_id in (("customer", draft.customer_id), ("taxi", draft.taxi_id)):
            if not await references.exists(kind, entity_id):
                return ReferenceNotFound(kind)

        logger.error(f"Unexpected constraint rejection for booking: {conflict}")
        return StoreUnavailable(str(conflict))
