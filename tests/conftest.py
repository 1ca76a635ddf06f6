"""Shared fixtures for taxi booking tests.

Every test gets a fresh in-memory SQLite database; the API client shares
it with the service-level fixtures through ``get_db`` overrides.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from collections.abc import AsyncGenerator  # noqa: E402
from datetime import date  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import taxi_booking.models  # noqa: E402,F401
from taxi_booking.database import Base, build_engine, get_db  # noqa: E402
from taxi_booking.main import app  # noqa: E402
from taxi_booking.models import Booking, Customer, Taxi  # noqa: E402
from taxi_booking.repositories.entity_store import EntityStore  # noqa: E402

FUTURE_DATE = date(2099, 1, 1)
API = "/api/v1"


@pytest_asyncio.fixture
async def engine():
    engine = build_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest.fixture
def store(db) -> EntityStore:
    return EntityStore(db)


@pytest.fixture
def make_customer(store, db):
    """Factory inserting and committing a customer."""

    async def _make(name: str = "Bob", email: str | None = None, phone: str = "01225593234"):
        customer = Customer(
            name=name,
            email=email or f"{name.lower()}@mailinator.com",
            phone_number=phone,
        )
        await store.insert(customer)
        await db.commit()
        return customer

    return _make


@pytest.fixture
def make_taxi(store, db):
    """Factory inserting and committing a taxi."""

    async def _make(reg: str = "AB12CDE", num_seats: int = 4):
        taxi = Taxi(reg=reg, num_seats=num_seats)
        await store.insert(taxi)
        await db.commit()
        return taxi

    return _make


@pytest.fixture
def make_booking(store, db):
    """Factory inserting and committing a booking without validation."""

    async def _make(customer: Customer, taxi: Taxi, booking_date: date = FUTURE_DATE):
        booking = Booking(customer_id=customer.id, taxi_id=taxi.id, booking_date=booking_date)
        await store.insert(booking)
        await db.commit()
        return booking

    return _make


@pytest_asyncio.fixture
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app with the test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
