"""Customer registration service."""

import logging
from collections.abc import Callable

from taxi_booking.core.exceptions import (
    AppException,
    DuplicateEmail,
    FieldViolation,
    IdentityMismatch,
    NotFoundError,
    StoreUnavailable,
)
from taxi_booking.models.customer import Customer
from taxi_booking.repositories.entity_store import EntityStore, StoreConflict
from taxi_booking.schemas.customer import CustomerBase, CustomerUpdate
from taxi_booking.utils.validators import check_customer_fields, normalize_phone_number

logger = logging.getLogger(__name__)


class CustomerService:
    """Register, update and look up customers."""

    def __init__(
        self,
        store: EntityStore,
        field_checker: Callable[[CustomerBase], dict[str, str]] = check_customer_fields,
    ) -> None:
        self.store = store
        self.field_checker = field_checker

    async def find_by_id(self, customer_id: int) -> Customer | None:
        return await self.store.get(Customer, customer_id)

    async def get(self, customer_id: int) -> Customer:
        customer = await self.store.get(Customer, customer_id)
        if customer is None:
            raise NotFoundError("Customer", str(customer_id))
        return customer

    async def find_by_email(self, email: str) -> Customer | None:
        return await self.store.find_one_by(Customer, "email", email)

    async def find_all_ordered_by_name(self) -> list[Customer]:
        return await self.store.list_all(Customer, Customer.name, Customer.id)

    async def create(self, draft: CustomerBase) -> Customer:
        """Validate and register a new customer."""
        logger.info(f"Creating customer {draft.name} <{draft.email}>")
        await self._validate(draft)

        customer = Customer(
            name=draft.name,
            email=draft.email,
            phone_number=normalize_phone_number(draft.phone_number),
        )
        try:
            await self.store.insert(customer)
        except StoreConflict as e:
            raise self._translate_conflict(e) from e
        return customer

    async def update(self, customer_id: int, draft: CustomerUpdate) -> Customer:
        """Validate and overwrite an existing customer."""
        logger.info(f"Updating customer {customer_id}")
        if draft.id != customer_id:
            raise IdentityMismatch("Customer")

        customer = await self.get(customer_id)
        await self._validate(draft, exclude_id=customer_id)

        customer.name = draft.name
        customer.email = draft.email
        customer.phone_number = normalize_phone_number(draft.phone_number)
        try:
            await self.store.update(customer)
        except StoreConflict as e:
            raise self._translate_conflict(e) from e
        return customer

    async def delete(self, customer_id: int) -> Customer:
        """Deleting customers is not supported: the record is returned unchanged."""
        customer = await self.get(customer_id)
        logger.info(f"Deleting a customer is an unsupported operation (customer {customer_id})")
        return customer

    async def _validate(self, draft: CustomerBase, exclude_id: int | None = None) -> None:
        errors = self.field_checker(draft)
        if errors:
            raise FieldViolation(errors)

        existing = await self.find_by_email(draft.email)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateEmail()

    @staticmethod
    def _translate_conflict(conflict: StoreConflict) -> AppException:
        if conflict.constraint == "uq_customers_email":
            return DuplicateEmail()
        logger.error(f"Unexpected constraint rejection for customer: {conflict}")
        return StoreUnavailable(str(conflict))
