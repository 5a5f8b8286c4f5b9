"""
Error message helper

Turns whatever a backend call raised into one readable line for the
user. Used by services when wrapping failures into ServiceException.
"""

# Python Packages
from collections.abc import Mapping

# Exceptions
from .exceptions import AppException

# App Messages
from . import messages


DEFAULT_FALLBACK = messages.ERROR["UNKNOWN_ERROR"]





def get_error_message(error, fallback: str = DEFAULT_FALLBACK) -> str:
    """
    Extract a human readable message from an error-like value

    Order:
        1. AppException -> its user message
        2. Any exception with a non-empty text
        3. Object or mapping with a non-blank "message"
        4. fallback
    """

    if isinstance(error, AppException):
        return error.message

    if isinstance(error, BaseException):
        text = str(error)
        if text:
            return text

    if isinstance(error, Mapping):
        message = error.get("message")
    else:
        message = getattr(error, "message", None)

    if isinstance(message, str) and message.strip():
        return message.strip()

    return fallback
