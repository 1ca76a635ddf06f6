"""Unit tests for BookingService."""

from datetime import date, timedelta

import pytest

from taxi_booking.core.exceptions import (
    DuplicateBooking,
    FieldViolation,
    IdentityMismatch,
    NotFoundError,
    ReferenceNotFound,
)
from taxi_booking.domain.booking_validator import BookingValidator
from taxi_booking.models import Booking
from taxi_booking.schemas.booking import BookingCreate, BookingUpdate
from taxi_booking.services.booking_service import BookingService

FUTURE_DATE = date(2099, 1, 1)


class AdmitEverything(BookingValidator):
    """Validator that skips admission, as if a concurrent writer won the race."""

    async def validate(self, draft, exclude_id=None):
        return None


@pytest.fixture
def service(store):
    return BookingService(store)


class TestCreate:
    """Tests for BookingService.create."""

    @pytest.mark.asyncio
    async def test_create_then_find(self, service, make_customer, make_taxi):
        bob = await make_customer()
        taxi = await make_taxi()

        booking = await service.create(
            BookingCreate(booking_date=FUTURE_DATE, customer_id=bob.id, taxi_id=taxi.id)
        )

        assert booking.id is not None
        found = await service.find_by_id(booking.id)
        assert (found.booking_date, found.customer_id, found.taxi_id) == (
            FUTURE_DATE,
            bob.id,
            taxi.id,
        )

    @pytest.mark.asyncio
    async def test_rejected_create_stores_nothing(self, service, store, make_customer):
        bob = await make_customer()

        with pytest.raises(ReferenceNotFound):
            await service.create(
                BookingCreate(booking_date=FUTURE_DATE, customer_id=bob.id, taxi_id=999999)
            )
        with pytest.raises(FieldViolation):
            await service.create(BookingCreate(booking_date=date(2000, 1, 1), customer_id=bob.id))

        assert await store.list_all(Booking) == []

    @pytest.mark.asyncio
    async def test_second_booking_for_slot_is_refused(self, service, make_customer, make_taxi):
        bob = await make_customer()
        will = await make_customer("Will")
        taxi = await make_taxi()
        await service.create(
            BookingCreate(booking_date=FUTURE_DATE, customer_id=bob.id, taxi_id=taxi.id)
        )

        with pytest.raises(DuplicateBooking):
            await service.create(
                BookingCreate(booking_date=FUTURE_DATE, customer_id=will.id, taxi_id=taxi.id)
            )

    @pytest.mark.asyncio
    async def test_constraint_decides_when_scan_is_skipped(
        self, store, make_customer, make_taxi, make_booking
    ):
        bob = await make_customer()
        taxi = await make_taxi()
        await make_booking(bob, taxi)
        service = BookingService(store, AdmitEverything(store))

        with pytest.raises(DuplicateBooking):
            await service.create(
                BookingCreate(booking_date=FUTURE_DATE, customer_id=bob.id, taxi_id=taxi.id)
            )
        assert len(await store.list_all(Booking)) == 1

    @pytest.mark.asyncio
    async def test_foreign_key_rejection_maps_to_missing_reference(
        self, store, make_customer
    ):
        bob = await make_customer()
        service = BookingService(store, AdmitEverything(store))

        with pytest.raises(ReferenceNotFound) as exc_info:
            await service.create(
                BookingCreate(booking_date=FUTURE_DATE, customer_id=bob.id, taxi_id=999999)
            )
        assert exc_info.value.kind == "taxi"


class TestUpdate:
    """Tests for BookingService.update."""

    @pytest.mark.asyncio
    async def test_update_keeping_own_slot(self, service, make_customer, make_taxi, make_booking):
        bob = await make_customer()
        will = await make_customer("Will")
        taxi = await make_taxi()
        booking = await make_booking(bob, taxi)

        updated = await service.update(
            booking.id,
            BookingUpdate(
                id=booking.id, booking_date=FUTURE_DATE, customer_id=will.id, taxi_id=taxi.id
            ),
        )

        assert updated.id == booking.id
        assert updated.customer_id == will.id

    @pytest.mark.asyncio
    async def test_update_onto_taken_slot(self, service, make_customer, make_taxi, make_booking):
        bob = await make_customer()
        taxi = await make_taxi()
        await make_booking(bob, taxi)
        later = await make_booking(bob, taxi, FUTURE_DATE + timedelta(days=1))

        with pytest.raises(DuplicateBooking):
            await service.update(
                later.id,
                BookingUpdate(
                    id=later.id, booking_date=FUTURE_DATE, customer_id=bob.id, taxi_id=taxi.id
                ),
            )

        assert (await service.get(later.id)).booking_date == FUTURE_DATE + timedelta(days=1)

    @pytest.mark.asyncio
    async def test_payload_id_must_match(self, service, make_customer, make_taxi, make_booking):
        bob = await make_customer()
        taxi = await make_taxi()
        booking = await make_booking(bob, taxi)

        with pytest.raises(IdentityMismatch):
            await service.update(
                booking.id,
                BookingUpdate(
                    id=booking.id + 1, booking_date=FUTURE_DATE, customer_id=bob.id, taxi_id=taxi.id
                ),
            )

    @pytest.mark.asyncio
    async def test_update_missing_booking(self, service):
        with pytest.raises(NotFoundError):
            await service.update(42, BookingUpdate(id=42, booking_date=FUTURE_DATE))


class TestQueriesAndDelete:
    """Tests for lookups and removal."""

    @pytest.mark.asyncio
    async def test_find_all_ordered_by_date(self, service, make_customer, make_taxi, make_booking):
        bob = await make_customer()
        taxi = await make_taxi()
        await make_booking(bob, taxi, FUTURE_DATE + timedelta(days=5))
        await make_booking(bob, taxi, FUTURE_DATE)

        dates = [b.booking_date for b in await service.find_all_ordered_by_date()]
        assert dates == [FUTURE_DATE, FUTURE_DATE + timedelta(days=5)]

    @pytest.mark.asyncio
    async def test_find_by_customer_and_taxi(
        self, service, make_customer, make_taxi, make_booking
    ):
        bob = await make_customer()
        will = await make_customer("Will")
        taxi = await make_taxi()
        booking = await make_booking(bob, taxi)

        assert [b.id for b in await service.find_by_customer(bob.id)] == [booking.id]
        assert await service.find_by_customer(will.id) == []
        assert [b.id for b in await service.find_by_taxi(taxi.id)] == [booking.id]

    @pytest.mark.asyncio
    async def test_delete(self, service, make_customer, make_taxi, make_booking):
        bob = await make_customer()
        taxi = await make_taxi()
        booking = await make_booking(bob, taxi)

        removed = await service.delete(booking.id)

        assert removed.id == booking.id
        assert await service.find_by_id(booking.id) is None

    @pytest.mark.asyncio
    async def test_delete_record_without_id_is_noop(self, service):
        draft = Booking(booking_date=FUTURE_DATE)
        assert await service.delete_record(draft) is draft

    @pytest.mark.asyncio
    async def test_delete_missing(self, service):
        with pytest.raises(NotFoundError):
            await service.delete(42)
