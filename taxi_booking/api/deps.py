"""API dependencies wiring sessions, the store and services."""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from taxi_booking.database import get_db
from taxi_booking.repositories.entity_store import EntityStore
from taxi_booking.schemas.common import MAX_ENTITY_ID
from taxi_booking.services.booking_service import BookingService
from taxi_booking.services.customer_service import CustomerService
from taxi_booking.services.taxi_service import TaxiService

IdPath = Annotated[int, Path(ge=1, le=MAX_ENTITY_ID)]


async def get_store(db: Annotated[AsyncSession, Depends(get_db)]) -> EntityStore:
    """Request-scoped entity store."""
    return EntityStore(db)


async def get_booking_service(
    store: Annotated[EntityStore, Depends(get_store)],
) -> BookingService:
    return BookingService(store)


async def get_customer_service(
    store: Annotated[EntityStore, Depends(get_store)],
) -> CustomerService:
    return CustomerService(store)


async def get_taxi_service(
    store: Annotated[EntityStore, Depends(get_store)],
) -> TaxiService:
    return TaxiService(store)
