"""Custom application exceptions."""

from typing import Any

from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: Any = "An unexpected error occurred",
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class FieldViolation(AppException):
    """One or more fields failed their format, range or presence rules."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=self.errors)


class NotFoundError(AppException):
    """Resource not found exception."""

    def __init__(self, resource: str = "Resource", identifier: str | None = None) -> None:
        self.resource = resource
        self.identifier = identifier
        detail = f"{resource} not found"
        if identifier:
            detail = f"{resource} with ID '{identifier}' not found"
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictError(AppException):
    """Request conflicts with the current state of stored records."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail={field: message})


class ReferenceNotFound(ConflictError):
    """A booking references a customer or taxi that does not exist."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(
            f"{kind}_id",
            f"That {kind} doesn't exist, please use another {kind} ID",
        )


class DuplicateBooking(ConflictError):
    """The taxi is already booked on that date by another booking."""

    def __init__(self) -> None:
        super().__init__(
            "booking",
            "That taxi is already booked on that date, please choose another taxi or date",
        )


class DuplicateEmail(ConflictError):
    """Another customer already uses this email."""

    def __init__(self) -> None:
        super().__init__("email", "That email is already used, please use a unique email")


class DuplicateReg(ConflictError):
    """Another taxi already uses this registration."""

    def __init__(self) -> None:
        super().__init__("reg", "That reg is already used, please use a unique reg")


class IdentityMismatch(ConflictError):
    """Update payload id disagrees with the target id."""

    def __init__(self, resource: str = "Resource") -> None:
        super().__init__("id", f"The {resource.lower()} ID cannot be modified")


class TaxiInUse(ConflictError):
    """Taxi still has bookings and cannot be removed."""

    def __init__(self) -> None:
        super().__init__("taxi", "That taxi still has bookings and cannot be deleted")


class StoreUnavailable(AppException):
    """Storage failure unrelated to validation."""

    def __init__(self, detail: str | None = None) -> None:
        message = "The booking store is unavailable"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=message)
