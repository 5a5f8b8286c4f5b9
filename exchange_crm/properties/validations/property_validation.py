"""
Property Validation
"""

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.validators import is_blank, require





class PropertyValidation:

    def validate_create(self, args):
        if not args or is_blank(args.get("address")):
            raise ValidationException(message = messages.ERROR["PROPERTY_ADDRESS_REQUIRED"])

        args["address"] = args["address"].strip()

        return True


    def validate_update(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if "address" in args:
            if is_blank(args.get("address")):
                raise ValidationException(message = messages.ERROR["PROPERTY_ADDRESS_REQUIRED"])

            args["address"] = args["address"].strip()

        return True


    def validate_ownership(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        require(args.get("tax_account_id"), "tax_account_id")

        return True
