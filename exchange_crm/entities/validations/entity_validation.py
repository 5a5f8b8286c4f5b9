"""
Entity Validation
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.validators import is_blank, require, require_choice





class EntityValidation:

    def validate_entity(self, args, creating = True):
        if not args:
            raise ValidationException(message = messages.ERROR["ENTITY_NAME_REQUIRED"])

        if (creating or "name" in args) and is_blank(args.get("name")):
            raise ValidationException(message = messages.ERROR["ENTITY_NAME_REQUIRED"])

        if "name" in args:
            args["name"] = args["name"].strip()

        if "email" in args:
            args["email"] = (args.get("email") or "").strip() or None

        return True


    def validate_access(self, args, creating = True):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if creating:
            require(args.get("tax_account_id"), "tax_account_id")

        if creating or "relationship" in args:
            require_choice(args.get("relationship"), constants.ENTITY_RELATIONSHIPS, "relationship")

        for key in ("has_signing_authority", "is_main_contact"):
            if key in args:
                args[key] = bool(args[key])

        return True
