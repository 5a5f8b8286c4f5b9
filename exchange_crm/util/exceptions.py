"""
CRM Exceptions

Every endpoint answers failures with the same envelope:

    {"status": "error", "error_code": ..., "message": ..., "details": ...}

Handlers catch AppException and return `error.to_dict(), error.status_code`.
Subclasses only fix the error code and HTTP status.
"""

# App Messages
from . import messages





class AppException(Exception):
    """ Base of every CRM error... """

    error_code = "APP_ERROR"
    status_code = 400

    def __init__(self, message: str, details: str = None, error_code: str = None):
        """
        Args:
            message (str): Text shown to the back office user
            details (str): Backend error text, returned as "details"
            error_code (str): Overrides the class error code
        """

        super().__init__(message)

        self.message = message
        self.details = details

        if error_code:
            self.error_code = error_code


    def to_dict(self) -> dict:
        body = {
            "status": "error",
            "error_code": self.error_code,
            "message": self.message
        }

        if self.details:
            body["details"] = self.details

        return body

    def __str__(self):
        return f"{self.error_code}: {self.message}"





class ValidationException(AppException):
    """ Missing or malformed input """

    error_code = "VALIDATION_ERROR"


class ServiceException(AppException):
    """
    A write or a business rule failed

    The error code names the operation, e.g. "TAX_ACCOUNT_CREATE_FAILED"
    or "EXCHANGE_RULE_VIOLATION".
    """

    def __init__(self, error_code: str, message: str, details: str = None):
        super().__init__(message, details = details, error_code = error_code)


class NotFoundException(AppException):

    error_code = "NOT_FOUND"
    status_code = 404

    def __init__(self, message: str = None):
        super().__init__(message or messages.ERROR["RECORD_NOT_FOUND"])


class StorageException(AppException):
    """ Object store refused an upload or delete """

    error_code = "STORAGE_ERROR"
    status_code = 502


class InternalServerException(AppException):
    """ Anything a handler did not expect; the cause travels in details """

    error_code = "INTERNAL_SERVER_ERROR"
    status_code = 500

    def __init__(self, details: str = None):
        super().__init__(messages.ERROR["INTERNAL_SERVER_ERROR"], details = details)
