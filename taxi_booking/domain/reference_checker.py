"""Referential checks for booking drafts."""

from taxi_booking.models.customer import Customer
from taxi_booking.models.taxi import Taxi
from taxi_booking.repositories.entity_store import EntityStore

REFERENCE_KINDS: dict[str, type[Customer] | type[Taxi]] = {
    "customer": Customer,
    "taxi": Taxi,
}


class ReferenceChecker:
    """Report whether a referenced customer or taxi exists."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    async def exists(self, kind: str, entity_id: int | None) -> bool:
        if kind not in REFERENCE_KINDS:
            raise ValueError(f"Unknown reference kind: {kind}")
        return await self.store.exists(REFERENCE_KINDS[kind], entity_id)
