"""Field-level validation rules.

Each ``check_*_fields`` function returns a mapping of field name to
message; an empty mapping means the entity passes every format, range
and presence rule.  They never touch storage.
"""

import re
from datetime import date

from email_validator import EmailNotValidError, validate_email

from taxi_booking.models.taxi import MAX_SEATS, MIN_SEATS, REG_LENGTH
from taxi_booking.schemas.booking import BookingBase
from taxi_booking.schemas.customer import CustomerBase
from taxi_booking.schemas.taxi import TaxiBase

NAME_MAX_LENGTH = 50
NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z '\-]*$")
PHONE_PATTERN = re.compile(r"^0[0-9]{10}$")

PAST_DATE_MESSAGE = "Booking dates can not be in the past. Please choose one from the future"


def validate_reg(reg: str) -> bool:
    """Validate a taxi registration.

    Args:
        reg: Registration string, e.g. 'AB12CDE'

    Returns:
        bool: True if exactly 7 non-blank characters
    """
    return len(reg) == REG_LENGTH and not reg.isspace()


def validate_num_seats(num_seats: int) -> bool:
    """Check the seat count is within the fleet's range (inclusive)."""
    return MIN_SEATS <= num_seats <= MAX_SEATS


def validate_phone_number(phone: str) -> bool:
    """Validate a customer phone number.

    Accepted format: 11 digits with a leading zero, e.g. 01225593234.
    Spaces and dashes are ignored.

    Args:
        phone: Phone number to validate

    Returns:
        bool: True if valid
    """
    return bool(PHONE_PATTERN.fullmatch(normalize_phone_number(phone)))


def normalize_phone_number(phone: str) -> str:
    """Strip the spaces and dashes a phone number may be written with."""
    return re.sub(r"[\s\-]", "", phone)


def validate_customer_name(name: str) -> bool:
    """Letters, spaces, apostrophes and hyphens only, up to 50 characters."""
    return len(name) <= NAME_MAX_LENGTH and bool(NAME_PATTERN.match(name))


def validate_email_address(email: str) -> bool:
    """Syntactic email check (no DNS lookups)."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def check_customer_fields(customer: CustomerBase) -> dict[str, str]:
    """Field rules for a customer draft."""
    errors: dict[str, str] = {}

    if not customer.name or not customer.name.strip():
        errors["name"] = "Name is required"
    elif not validate_customer_name(customer.name):
        errors["name"] = (
            f"Please use a name of at most {NAME_MAX_LENGTH} letters, "
            "spaces, apostrophes or hyphens"
        )

    if not customer.email:
        errors["email"] = "Email is required"
    elif not validate_email_address(customer.email):
        errors["email"] = "The email address must be in the format of name@domain"

    if not customer.phone_number:
        errors["phone_number"] = "Phone number is required"
    elif not validate_phone_number(customer.phone_number):
        errors["phone_number"] = "Phone number must be 11 digits starting with 0"

    return errors


def check_taxi_fields(taxi: TaxiBase) -> dict[str, str]:
    """Field rules for a taxi draft."""
    errors: dict[str, str] = {}

    if taxi.num_seats is None:
        errors["num_seats"] = "Number of seats is required"
    elif taxi.num_seats < MIN_SEATS:
        errors["num_seats"] = f"The minimum number of seats is {MIN_SEATS}"
    elif taxi.num_seats > MAX_SEATS:
        errors["num_seats"] = f"The maximum number of seats is {MAX_SEATS}"

    if not taxi.reg:
        errors["reg"] = "Registration is required"
    elif not validate_reg(taxi.reg):
        errors["reg"] = f"Registration must be exactly {REG_LENGTH} characters"

    return errors


def check_booking_fields(booking: BookingBase, today: date) -> dict[str, str]:
    """Field rules for a booking draft.

    Args:
        booking: The draft to check
        today: Current calendar date; the booking date must be after it

    Returns:
        dict: Field name to message for every violated rule
    """
    errors: dict[str, str] = {}

    if booking.booking_date is None:
        errors["booking_date"] = "Booking date is required"
    elif booking.booking_date <= today:
        errors["booking_date"] = PAST_DATE_MESSAGE

    if booking.customer_id is None:
        errors["customer_id"] = "Customer is required"

    if booking.taxi_id is None:
        errors["taxi_id"] = "Taxi is required"

    return errors
