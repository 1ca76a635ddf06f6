"""Unit tests for CustomerService."""

import pytest

from taxi_booking.core.exceptions import (
    DuplicateEmail,
    FieldViolation,
    IdentityMismatch,
    NotFoundError,
)
from taxi_booking.schemas.customer import CustomerCreate, CustomerUpdate
from taxi_booking.services.customer_service import CustomerService


@pytest.fixture
def service(store):
    return CustomerService(store)


def bob(**overrides) -> CustomerCreate:
    data = {"name": "Bob", "email": "bob@mailinator.com", "phone_number": "01225593234"}
    data.update(overrides)
    return CustomerCreate(**data)


class TestCustomerService:
    """Registration, update and lookups."""

    @pytest.mark.asyncio
    async def test_create_and_find_by_email(self, service):
        customer = await service.create(bob())

        assert customer.id is not None
        assert (await service.find_by_email("bob@mailinator.com")).id == customer.id

    @pytest.mark.asyncio
    async def test_invalid_fields(self, service):
        with pytest.raises(FieldViolation) as exc_info:
            await service.create(bob(phone_number="123"))
        assert set(exc_info.value.errors) == {"phone_number"}

    @pytest.mark.asyncio
    async def test_duplicate_email(self, service):
        await service.create(bob())

        with pytest.raises(DuplicateEmail) as exc_info:
            await service.create(bob(name="Robert"))
        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_update_keeps_own_email(self, service):
        customer = await service.create(bob())

        updated = await service.update(
            customer.id,
            CustomerUpdate(
                id=customer.id, name="Bobby", email="bob@mailinator.com", phone_number="01225593234"
            ),
        )
        assert updated.name == "Bobby"

    @pytest.mark.asyncio
    async def test_update_onto_other_email(self, service):
        await service.create(bob())
        will = await service.create(bob(name="Will", email="will@mailinator.com"))

        with pytest.raises(DuplicateEmail):
            await service.update(
                will.id,
                CustomerUpdate(
                    id=will.id, name="Will", email="bob@mailinator.com", phone_number="01225593234"
                ),
            )

    @pytest.mark.asyncio
    async def test_update_id_mismatch(self, service):
        customer = await service.create(bob())

        with pytest.raises(IdentityMismatch):
            await service.update(customer.id, CustomerUpdate(id=customer.id + 1))

    @pytest.mark.asyncio
    async def test_ordered_by_name(self, service):
        await service.create(bob(name="Will", email="will@mailinator.com"))
        await service.create(bob())

        names = [c.name for c in await service.find_all_ordered_by_name()]
        assert names == ["Bob", "Will"]

    @pytest.mark.asyncio
    async def test_delete_keeps_customer(self, service):
        customer = await service.create(bob())

        assert (await service.delete(customer.id)).id == customer.id
        assert await service.find_by_id(customer.id) is not None

    @pytest.mark.asyncio
    async def test_delete_missing(self, service):
        with pytest.raises(NotFoundError):
            await service.delete(42)

    @pytest.mark.asyncio
    async def test_phone_is_stored_without_separators(self, service):
        customer = await service.create(bob(phone_number="01225-593 234"))

        stored = await service.find_by_id(customer.id)
        assert stored.phone_number == "01225593234"

        updated = await service.update(
            customer.id,
            CustomerUpdate(
                id=customer.id, name="Bob", email="bob@mailinator.com", phone_number="0122 559 3235"
            ),
        )
        assert updated.phone_number == "01225593235"
