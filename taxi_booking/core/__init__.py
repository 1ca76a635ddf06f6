"""Core exceptions, logging and middleware."""

from taxi_booking.core.exceptions import (
    AppException,
    ConflictError,
    DuplicateBooking,
    DuplicateEmail,
    DuplicateReg,
    FieldViolation,
    IdentityMismatch,
    NotFoundError,
    ReferenceNotFound,
    StoreUnavailable,
    TaxiInUse,
)

__all__ = [
    "AppException",
    "ConflictError",
    "DuplicateBooking",
    "DuplicateEmail",
    "DuplicateReg",
    "FieldViolation",
    "IdentityMismatch",
    "NotFoundError",
    "ReferenceNotFound",
    "StoreUnavailable",
    "TaxiInUse",
]
