"""
Formatters

Handles:
    - Money (Decimal) to JSON numbers
    - Date / datetime to strings
    - Parsing dates and amounts from request payloads
"""

# Python Packages
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

# Exceptions
from .exceptions import ValidationException

# App Messages
from . import messages


ZERO = Decimal("0")





def to_decimal(value) -> Decimal:
    """ None / blank / garbage -> 0 """

    if value is None or value == "":
        return ZERO

    if isinstance(value, Decimal):
        return value

    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return ZERO


def parse_amount(value, field_name: str = "amount") -> Decimal:
    """
    Strict amount parsing for create payloads

    Raises:
        ValidationException: value is not a number
    """

    if isinstance(value, bool):
        raise ValidationException(
            message = messages.ERROR["INVALID_NUMBER"].format(field = field_name)
        )

    try:
        return Decimal(str(value).replace(",", "").strip())
    except (InvalidOperation, ValueError):
        raise ValidationException(
            message = messages.ERROR["INVALID_NUMBER"].format(field = field_name)
        )


def money(value):
    """ Decimal -> float for JSON, None stays None """

    if value is None:
        return None

    return float(value)


def format_currency(value) -> str:
    """ 1234.5 -> $1,234.50 """

    return f"${to_decimal(value):,.2f}"


def format_date(value):
    """ Date Format... """

    return value.isoformat() if value else None


def format_datetime(value):
    """ Datetime Format... """

    return value.strftime("%Y-%m-%d %H:%M:%S") if value else None


def parse_date(value, field_name: str = "date"):
    """
    Accepts date / datetime / "YYYY-MM-DD" (a trailing time part is ignored)

    Returns None for empty input.
    """

    if value in (None, ""):
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    invalid = ValidationException(
        message = messages.ERROR["INVALID_DATE"].format(field = field_name)
    )

    text = str(value).strip()

    # Only an ISO time part may follow the date
    if len(text) > 10 and text[10] not in ("T", " "):
        raise invalid

    try:
        return datetime.strptime(text[:10], "%Y-%m-%d").date()
    except ValueError:
        raise invalid
