"""Generic persistence for customers, taxis and bookings."""

import logging
from typing import Any, TypeVar

from sqlalchemy import UniqueConstraint, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taxi_booking.core.exceptions import StoreUnavailable
from taxi_booking.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class StoreConflict(Exception):
    """A write was rejected by a storage-level constraint."""

    def __init__(self, constraint: str | None, message: str) -> None:
        self.constraint = constraint
        super().__init__(message)


def _unique_constraint_signatures() -> dict[str, str]:
    """Map every known unique constraint to the text drivers use for it.

    PostgreSQL reports the constraint name; SQLite only lists the
    columns (``UNIQUE constraint failed: bookings.taxi_id, bookings.booking_date``).
    """
    signatures: dict[str, str] = {}
    for table in Base.metadata.tables.values():
        for constraint in table.constraints:
            if isinstance(constraint, UniqueConstraint) and constraint.name:
                columns = ", ".join(f"{table.name}.{col.name}" for col in constraint.columns)
                signatures[str(constraint.name)] = columns
    return signatures


def resolve_constraint_name(exc: IntegrityError) -> str | None:
    """Work out which constraint an IntegrityError came from."""
    orig = getattr(exc, "orig", None)
    for candidate in (orig, getattr(orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name
        diag = getattr(candidate, "diag", None)
        if diag is not None and getattr(diag, "constraint_name", None):
            return diag.constraint_name

    text = str(orig if orig is not None else exc)
    for name, columns in _unique_constraint_signatures().items():
        if name in text or text.rstrip().endswith(columns):
            return name
    return None


class EntityStore:
    """Find, insert, update and delete ORM entities on one session.

    Reads return ``None`` or an empty list when nothing matches; writes
    flush immediately so that constraint violations surface at the call
    site rather than at commit.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get(self, model: type[ModelT], entity_id: int | None) -> ModelT | None:
        """Find an entity by surrogate id."""
        if entity_id is None:
            return None
        try:
            return await self.db.get(model, entity_id)
        except SQLAlchemyError as e:
            raise self._unavailable(e) from e

    async def exists(self, model: type[ModelT], entity_id: int | None) -> bool:
        """Whether an entity with this id is stored."""
        return await self.get(model, entity_id) is not None

    async def list_all(self, model: type[ModelT], *order_by: Any) -> list[ModelT]:
        """All entities of a kind, in the given order (id order by default)."""
        query = select(model).order_by(*(order_by or (model.id,)))
        return await self._all(query)

    async def find_by(
        self,
        model: type[ModelT],
        field: str,
        value: Any,
        *order_by: Any,
    ) -> list[ModelT]:
        """Entities whose ``field`` equals ``value``, e.g. bookings by ``taxi_id``."""
        column = getattr(model, field)
        query = select(model).where(column == value).order_by(*(order_by or (model.id,)))
        return await self._all(query)

    async def find_one_by(self, model: type[ModelT], field: str, value: Any) -> ModelT | None:
        """First entity whose ``field`` equals ``value``."""
        matches = await self.find_by(model, field, value)
        return matches[0] if matches else None

    async def insert(self, entity: ModelT) -> ModelT:
        """Persist a new entity and return it with its assigned id."""
        self.db.add(entity)
        await self._flush(entity, "insert")
        return entity

    async def update(self, entity: ModelT) -> ModelT:
        """Write the in-place changes of a tracked entity."""
        await self._flush(entity, "update")
        return entity

    async def delete(self, entity: ModelT) -> ModelT:
        """Remove a tracked entity."""
        try:
            await self.db.delete(entity)
        except SQLAlchemyError as e:
            raise self._unavailable(e) from e
        await self._flush(None, "delete")
        return entity

    async def _all(self, query: Any) -> list[Any]:
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            raise self._unavailable(e) from e
        return list(result.scalars().all())

    async def _flush(self, entity: Base | None, operation: str) -> None:
        try:
            await self.db.flush()
            if entity is not None:
                await self.db.refresh(entity)
        except IntegrityError as e:
            await self.db.rollback()
            constraint = resolve_constraint_name(e)
            logger.info(f"Store rejected {operation}: constraint={constraint}")
            raise StoreConflict(constraint, str(e.orig)) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise self._unavailable(e) from e

    @staticmethod
    def _unavailable(exc: SQLAlchemyError) -> StoreUnavailable:
        logger.error(f"Store failure: {exc.__class__.__name__}: {exc}")
        return StoreUnavailable()
