"""Booking admission.

A draft is admitted only when, in this order:

1. its fields pass ``check_booking_fields`` (date present and after
   today, customer and taxi references present);
2. the referenced customer and taxi both exist;
3. no other booking holds the same taxi on the same date.

The first failing stage raises; admission itself has no side effects.
"""

import logging
from collections.abc import Callable
from datetime import date, datetime
from zoneinfo import ZoneInfo

from taxi_booking.config import settings
from taxi_booking.core.exceptions import DuplicateBooking, FieldViolation, ReferenceNotFound
from taxi_booking.domain.reference_checker import ReferenceChecker
from taxi_booking.domain.uniqueness_checker import UniquenessChecker
from taxi_booking.repositories.entity_store import EntityStore
from taxi_booking.schemas.booking import BookingBase
from taxi_booking.utils.validators import check_booking_fields

logger = logging.getLogger(__name__)

BookingFieldChecker = Callable[[BookingBase, date], dict[str, str]]


def today_in(timezone_name: str) -> date:
    """Current calendar date in the given IANA time zone."""
    return datetime.now(ZoneInfo(timezone_name)).date()


class BookingValidator:
    """Decide whether a proposed booking may be committed."""

    def __init__(
        self,
        store: EntityStore,
        field_checker: BookingFieldChecker = check_booking_fields,
        clock: Callable[[], date] | None = None,
        references: ReferenceChecker | None = None,
        uniqueness: UniquenessChecker | None = None,
    ) -> None:
        self.field_checker = field_checker
        self.clock = clock or (lambda: today_in(settings.booking_timezone))
        self.references = references or ReferenceChecker(store)
        self.uniqueness = uniqueness or UniquenessChecker(store)

    async def validate(self, draft: BookingBase, exclude_id: int | None = None) -> None:
        """Admit the draft or raise the first failing check.

        Args:
            draft: Proposed booking
            exclude_id: Id of the booking being updated; ``None`` on create

        Raises:
            FieldViolation: Missing references or a date that is not in the future
            ReferenceNotFound: Customer or taxi id does not exist
            DuplicateBooking: The taxi is already booked on that date
        """
        errors = self.field_checker(draft, self.clock())
        if errors:
            logger.info(f"Booking rejected, field violations: {sorted(errors)}")
            raise FieldViolation(errors)

        for kind, entity_id in (("customer", draft.customer_id), ("taxi", draft.taxi_id)):
            if not await self.references.exists(kind, entity_id):
                logger.info(f"Booking rejected, {kind} {entity_id} does not exist")
                raise ReferenceNotFound(kind)

        if await self.uniqueness.is_taken(draft.taxi_id, draft.booking_date, exclude_id):
            logger.info(
                f"Booking rejected, taxi {draft.taxi_id} already booked on {draft.booking_date}"
            )
            raise DuplicateBooking()
