"""
Identified Property Validation

Shared by exchange and EAT identified properties.
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.validators import (
    is_blank,
    require_choice,
    non_negative_amount,
    optional_date,
)





class IdentifiedPropertyValidation:

    @staticmethod
    def _normalize(args):
        """ Parse numbers / dates / flags in place """

        for key in ("value", "percentage"):
            if key in args:
                args[key] = non_negative_amount(args.get(key), key)

        if "identification_date" in args:
            args["identification_date"] = optional_date(args.get("identification_date"), "identification_date")

        if "is_parked" in args:
            args["is_parked"] = bool(args.get("is_parked"))

        if "status" in args:
            require_choice(args.get("status"), constants.IDENTIFIED_PROPERTY_STATUSES, "status")


    def validate_create(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        require_choice(args.get("identification_type"), constants.IDENTIFICATION_TYPES, "identification_type")
        require_choice(args.get("property_type"), constants.IDENTIFIED_PROPERTY_TYPES, "property_type")

        if "status" in args and is_blank(args.get("status")):
            args.pop("status")

        self._normalize(args)

        return True


    def validate_update(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if "identification_type" in args:
            require_choice(args.get("identification_type"), constants.IDENTIFICATION_TYPES, "identification_type")

        if "property_type" in args:
            require_choice(args.get("property_type"), constants.IDENTIFIED_PROPERTY_TYPES, "property_type")

        self._normalize(args)

        return True


    def validate_improvement(self, args):
        """
        Description required, value >= 0
        """

        if not args or is_blank(args.get("description")):
            raise ValidationException(message = messages.ERROR["IMPROVEMENT_DESCRIPTION_REQUIRED"])

        args["value"] = non_negative_amount(args.get("value"), "value")

        return True
