"""
Field Validators

Small checks shared by the validation classes of every module.
All of them raise ValidationException with a user facing message.
"""

# Exceptions
from .exceptions import ValidationException

# App Messages
from . import messages

# Utils
from .formatters import parse_amount, parse_date


def is_blank(value) -> bool:
    """ None, "" or whitespace """

    return value is None or (isinstance(value, str) and not value.strip())


def require(value, field_name: str):
    if is_blank(value):
        raise ValidationException(
            message = messages.ERROR["FIELD_REQUIRED"].format(field = field_name)
        )

    return value


def require_choice(value, choices, field_name: str, required: bool = True):
    """ Value must belong to a fixed vocabulary """

    if is_blank(value) and not required:
        return None

    if value not in choices:
        raise ValidationException(
            message = messages.ERROR["INVALID_CHOICE"].format(
                field = field_name,
                choices = ", ".join(choices)
            )
        )

    return value


def non_negative_amount(value, field_name: str):
    """ Parsed amount >= 0, None when blank """

    if is_blank(value):
        return None

    amount = parse_amount(value, field_name)

    if amount < 0:
        raise ValidationException(
            message = messages.ERROR["NEGATIVE_NUMBER"].format(field = field_name)
        )

    return amount


def optional_date(value, field_name: str):
    return parse_date(value, field_name)


def require_date(value, field_name: str):
    require(value, field_name)
    return parse_date(value, field_name)


def require_file(file, allowed_extensions = None):
    """
    Multipart upload present, optionally with a known extension

    Returns:
        str: lower case extension
    """

    if not file:
        raise ValidationException(message = messages.ERROR["FILE_REQUIRED"])

    filename = file.filename

    if not filename:
        raise ValidationException(message = messages.ERROR["INVALID_FILE"])

    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""

    if allowed_extensions and ext not in allowed_extensions:
        raise ValidationException(
            message = messages.ERROR["UNSUPPORTED_FILE_FORMAT"].format(
                file_extension = ext.upper() or "NONE",
                supported = ", ".join(sorted(e.upper() for e in allowed_extensions))
            )
        )

    return ext


def optional_int(value, field_name: str):
    """ Query string id -> int, None when blank """

    if is_blank(value):
        return None

    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationException(
            message = messages.ERROR["INVALID_NUMBER"].format(field = field_name)
        )
