"""
Accounting Validation

Create is strict, update is lenient: a blank or unreadable amount
on update counts as 0.
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.formatters import ZERO, to_decimal
from ...util.validators import (
    is_blank,
    require,
    require_choice,
    non_negative_amount,
    optional_date,
    optional_int,
)





class AccountingValidation:

    def validate_filter(self, args):
        for key in ("transaction_id", "exchange_id"):
            args[key] = optional_int(args.get(key), key)

        return True


    def validate_create(self, args):
        """
        entry_type vocabulary, amounts >= 0 and not both 0,
        at least one exchange side
        """

        if not args:
            raise ValidationException(message = messages.ERROR["REQUIRED_FIELDS"])

        require_choice(args.get("entry_type"), constants.ENTRY_TYPES, "entry_type")

        credit = non_negative_amount(args.get("credit"), "credit") or ZERO
        debit = non_negative_amount(args.get("debit"), "debit") or ZERO

        if credit == ZERO and debit == ZERO:
            raise ValidationException(message = messages.ERROR["ENTRY_AMOUNT_REQUIRED"])

        if not args.get("from_exchange_id") and not args.get("to_exchange_id"):
            raise ValidationException(message = messages.ERROR["ENTRY_EXCHANGE_REQUIRED"])

        args["credit"] = credit
        args["debit"] = debit
        args["date"] = optional_date(args.get("date"), "date")

        if is_blank(args.get("description")):
            args["description"] = None

        return True


    def validate_update(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        for key in ("credit", "debit"):
            if key in args:
                args[key] = to_decimal(args.get(key))

        if "description" in args and is_blank(args.get("description")):
            args["description"] = None

        if "date" in args:
            entry_date = optional_date(args.get("date"), "date")

            if entry_date is None:
                raise ValidationException(
                    message = messages.ERROR["FIELD_REQUIRED"].format(field = "date")
                )

            args["date"] = entry_date

        for key in ("from_exchange_id", "to_exchange_id", "task_id"):
            if key in args and is_blank(args.get(key)):
                args[key] = None

        return True


    def validate_take_fee(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if is_blank(args.get("fee_schedule_id")):
            raise ValidationException(message = messages.ERROR["FEE_REQUIRED"])

        require(args.get("exchange_id"), "exchange_id")

        return True
