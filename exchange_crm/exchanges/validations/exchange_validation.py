"""
Exchange Validation
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.validators import require_choice, optional_date





class ExchangeValidation:

    def validate_update(self, args):
        """
        Status vocabulary and dates (parsed in place)
        """

        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if "status" in args:
            require_choice(args.get("status"), constants.EXCHANGE_STATUSES, "status")

        for key in ("relinquished_close_date", "day_45_date", "day_180_date"):
            if key in args:
                args[key] = optional_date(args.get(key), key)

        return True
