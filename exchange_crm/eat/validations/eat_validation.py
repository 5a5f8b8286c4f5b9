"""
EAT Validation

Handles:
    - LLC create / update and access grants
    - Parked file create / update, Secretary of State and lender rows
    - Invoices and invoice items
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.formatters import parse_amount, ZERO
from ...util.validators import (
    is_blank,
    require,
    require_choice,
    non_negative_amount,
    optional_date,
)

# Services
from ..services.eat_file_service import SOS_FIELDS


def _dates(args, keys):
    for key in keys:
        if key in args:
            args[key] = optional_date(args.get(key), key)





class EATValidation:

    # ---------------------------------------------------------
    # LLC
    # ---------------------------------------------------------

    def validate_llc_create(self, args):
        if not args or any(is_blank(args.get(key)) for key in ("company_name", "state_formation", "date_formation")):
            raise ValidationException(message = messages.ERROR["EAT_LLC_FIELDS_REQUIRED"])

        args["company_name"] = args["company_name"].strip()
        args["state_formation"] = args["state_formation"].strip().upper()
        args["date_formation"] = optional_date(args.get("date_formation"), "date_formation")

        return True


    def validate_llc_update(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if "status" in args:
            require_choice(args.get("status"), constants.EAT_LLC_STATUSES, "status")

        for key in ("company_name", "state_formation", "date_formation"):
            if key in args and is_blank(args.get(key)):
                raise ValidationException(message = messages.ERROR["EAT_LLC_FIELDS_REQUIRED"])

        if "state_formation" in args:
            args["state_formation"] = args["state_formation"].strip().upper()

        _dates(args, ("date_formation",))

        return True


    def validate_access(self, args):
        if not args or is_blank(args.get("user_profile_id")):
            raise ValidationException(message = messages.ERROR["EAT_ACCESS_PROFILE_REQUIRED"])

        require_choice(args.get("access_type") or "signer", constants.EAT_ACCESS_TYPES, "access_type")

        return True



    # ---------------------------------------------------------
    # Parked file
    # ---------------------------------------------------------

    def validate_file_create(self, args):
        required = ("eat_name", "eat_llc_id", "state", "date_of_formation")

        if not args or any(is_blank(args.get(key)) for key in required) or not args.get("exchangor_tax_account_ids"):
            raise ValidationException(message = messages.ERROR["EAT_FILE_FIELDS_REQUIRED"])

        args["date_of_formation"] = optional_date(args.get("date_of_formation"), "date_of_formation")

        return True


    def validate_file_update(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if "status" in args:
            require_choice(args.get("status"), constants.EAT_FILE_STATUSES, "status")

        if "eat_name" in args:
            args["eat_name"] = require(args.get("eat_name"), "eat_name").strip()

        _dates(args, (
            "day_45_date",
            "day_180_date",
            "close_date",
            "improvement_start_date",
            "improvement_estimated_completion_date",
            "improvement_actual_completion_date"
        ))

        if "total_sale_property_value" in args:
            args["total_sale_property_value"] = non_negative_amount(
                args.get("total_sale_property_value"), "total_sale_property_value"
            ) or ZERO

        return True


    def validate_secretary_of_state(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        _dates(args, tuple(key for key in SOS_FIELDS if key.endswith("_date")))

        return True


    def validate_lender(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        _dates(args, ("lender_note_date",))

        if "lender_note_amount" in args:
            args["lender_note_amount"] = non_negative_amount(args.get("lender_note_amount"), "lender_note_amount")

        return True


    def validate_exchangor(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        require(args.get("tax_account_id"), "tax_account_id")

        return True



    # ---------------------------------------------------------
    # Invoices
    # ---------------------------------------------------------

    def validate_invoice_item(self, item):
        """ Description required, amount >= 0 """

        if not item or is_blank(item.get("description")) or is_blank(item.get("amount")):
            raise ValidationException(message = messages.ERROR["EAT_INVOICE_ITEM_INVALID"])

        try:
            amount = parse_amount(item.get("amount"), "amount")
        except ValidationException:
            raise ValidationException(message = messages.ERROR["EAT_INVOICE_ITEM_INVALID"])

        if amount < ZERO:
            raise ValidationException(message = messages.ERROR["EAT_INVOICE_ITEM_INVALID"])

        item["amount"] = amount

        return True


    def validate_invoice(self, args, creating = True):
        if not args:
            raise ValidationException(message = messages.ERROR["EAT_INVOICE_FIELDS_REQUIRED"])

        if creating and any(is_blank(args.get(key)) for key in ("invoice_type", "paid_to", "invoice_date")):
            raise ValidationException(message = messages.ERROR["EAT_INVOICE_FIELDS_REQUIRED"])

        if "invoice_type" in args:
            require_choice(args.get("invoice_type"), constants.EAT_INVOICE_TYPES, "invoice_type")

        for key in ("paid_to", "invoice_date"):
            if key in args and is_blank(args.get(key)):
                raise ValidationException(message = messages.ERROR["EAT_INVOICE_FIELDS_REQUIRED"])

        _dates(args, ("invoice_date",))

        for item in args.get("items") or []:
            self.validate_invoice_item(item)

        return True
