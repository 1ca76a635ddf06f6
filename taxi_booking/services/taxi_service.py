"""Taxi registration service."""

import logging
from collections.abc import Callable

from taxi_booking.core.exceptions import (
    AppException,
    DuplicateReg,
    FieldViolation,
    IdentityMismatch,
    NotFoundError,
    StoreUnavailable,
    TaxiInUse,
)
from taxi_booking.models.booking import Booking
from taxi_booking.models.taxi import Taxi
from taxi_booking.repositories.entity_store import EntityStore, StoreConflict
from taxi_booking.schemas.taxi import TaxiBase, TaxiUpdate
from taxi_booking.utils.validators import check_taxi_fields

logger = logging.getLogger(__name__)


class TaxiService:
    """Register, update, remove and look up taxis."""

    def __init__(
        self,
        store: EntityStore,
        field_checker: Callable[[TaxiBase], dict[str, str]] = check_taxi_fields,
    ) -> None:
        self.store = store
        self.field_checker = field_checker

    async def find_by_id(self, taxi_id: int) -> Taxi | None:
        return await self.store.get(Taxi, taxi_id)

    async def get(self, taxi_id: int) -> Taxi:
        taxi = await self.store.get(Taxi, taxi_id)
        if taxi is None:
            raise NotFoundError("Taxi", str(taxi_id))
        return taxi

    async def find_by_reg(self, reg: str) -> Taxi | None:
        return await self.store.find_one_by(Taxi, "reg", reg)

    async def find_all_ordered_by_reg(self) -> list[Taxi]:
        return await self.store.list_all(Taxi, Taxi.reg)

    async def create(self, draft: TaxiBase) -> Taxi:
        """Validate and register a new taxi."""
        logger.info(f"Creating taxi {draft.reg} ({draft.num_seats} seats)")
        await self._validate(draft)

        taxi = Taxi(num_seats=draft.num_seats, reg=draft.reg)
        try:
            await self.store.insert(taxi)
        except StoreConflict as e:
            raise self._translate_conflict(e) from e
        return taxi

    async def update(self, taxi_id: int, draft: TaxiUpdate) -> Taxi:
        """Validate and overwrite an existing taxi."""
        logger.info(f"Updating taxi {taxi_id}")
        if draft.id != taxi_id:
            raise IdentityMismatch("Taxi")

        taxi = await self.get(taxi_id)
        await self._validate(draft, exclude_id=taxi_id)

        taxi.num_seats = draft.num_seats
        taxi.reg = draft.reg
        try:
            await self.store.update(taxi)
        except StoreConflict as e:
            raise self._translate_conflict(e) from e
        return taxi

    async def delete(self, taxi_id: int) -> Taxi:
        """Remove a taxi that no booking refers to."""
        taxi = await self.get(taxi_id)
        if await self.store.find_by(Booking, "taxi_id", taxi_id):
            logger.info(f"Taxi {taxi_id} still has bookings, not deleting")
            raise TaxiInUse()

        try:
            await self.store.delete(taxi)
        except StoreConflict as e:
            raise TaxiInUse() from e
        logger.info(f"Deleted taxi {taxi_id}")
        return taxi

    async def _validate(self, draft: TaxiBase, exclude_id: int | None = None) -> None:
        errors = self.field_checker(draft)
        if errors:
            raise FieldViolation(errors)

        existing = await self.find_by_reg(draft.reg)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateReg()

    @staticmethod
    def _translate_conflict(conflict: StoreConflict) -> AppException:
        if conflict.constraint == "uq_taxis_reg":
            return DuplicateReg()
        logger.error(f"Unexpected constraint rejection for taxi: {conflict}")
        return StoreUnavailable(str(conflict))
