"""
Document Validation

Handles:
    - Components, templates and signature fields
    - Document generation / update and signature requests
    - Vesting-name and admin signatures
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.validators import is_blank, require_choice, optional_int


TARGET_KEYS = ("transaction_id", "exchange_id", "property_id", "eat_parked_file_id")





class DocumentValidation:

    # ---------------------------------------------------------
    # Templates
    # ---------------------------------------------------------

    def validate_component(self, args, creating = True):
        if not args:
            raise ValidationException(message = messages.ERROR["COMPONENT_FIELDS_REQUIRED"])

        for key in ("name", "component_type"):
            if (creating or key in args) and is_blank(args.get(key)):
                raise ValidationException(message = messages.ERROR["COMPONENT_FIELDS_REQUIRED"])

        if "component_type" in args:
            require_choice(args.get("component_type"), constants.COMPONENT_TYPES, "component_type")

        return True


    def validate_template(self, args, creating = True):
        if not args:
            raise ValidationException(message = messages.ERROR["TEMPLATE_FIELDS_REQUIRED"])

        for key in ("name", "template_type"):
            if (creating or key in args) and is_blank(args.get(key)):
                raise ValidationException(message = messages.ERROR["TEMPLATE_FIELDS_REQUIRED"])

        if "template_type" in args:
            require_choice(args.get("template_type"), constants.TEMPLATE_TYPES, "template_type")

        if "name" in args:
            args["name"] = args["name"].strip()

        if "content" in args and not isinstance(args.get("content") or {}, dict):
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        return True


    def validate_template_type(self, template_type):
        require_choice(template_type, constants.TEMPLATE_TYPES, "template_type")

        return True


    def validate_signature_field(self, args, creating = True):
        if not args:
            raise ValidationException(message = messages.ERROR["SIGNATURE_FIELD_NAME_REQUIRED"])

        if (creating or "field_name" in args) and is_blank(args.get("field_name")):
            raise ValidationException(message = messages.ERROR["SIGNATURE_FIELD_NAME_REQUIRED"])

        if creating or "field_type" in args:
            args["field_type"] = args.get("field_type") or "signature"
            require_choice(args["field_type"], constants.SIGNATURE_FIELD_TYPES, "field_type")

        return True


    # ---------------------------------------------------------
    # Documents
    # ---------------------------------------------------------

    def validate_filter(self, args):
        for key in TARGET_KEYS:
            if key in args:
                args[key] = optional_int(args.get(key), key)

        if "status" in args:
            require_choice(args.get("status"), constants.DOCUMENT_STATUSES, "status")

        return True


    def validate_create(self, args):
        if not args or is_blank(args.get("template_id")):
            raise ValidationException(message = messages.ERROR["DOCUMENT_TEMPLATE_REQUIRED"])

        args["template_id"] = optional_int(args.get("template_id"), "template_id")

        for key in TARGET_KEYS:
            if key in args:
                args[key] = optional_int(args.get(key), key)

        if not isinstance(args.get("values") or {}, dict):
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        return True


    def validate_update(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if "status" in args:
            require_choice(args.get("status"), constants.DOCUMENT_STATUSES, "status")

        if "document_name" in args and is_blank(args.get("document_name")):
            raise ValidationException(
                message = messages.ERROR["FIELD_REQUIRED"].format(field = "document_name")
            )

        return True


    def validate_signature_request(self, args):
        if args is None:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if "signing_order" in args:
            args["signing_order"] = optional_int(args.get("signing_order"), "signing_order") or 1

        return True


    # ---------------------------------------------------------
    # Signatures
    # ---------------------------------------------------------

    def _validate_signature(self, args, creating):
        for key in ("signature_type", "signature_text", "signature_font"):
            if (creating or key in args) and is_blank(args.get(key)):
                raise ValidationException(message = messages.ERROR["SIGNATURE_FIELDS_REQUIRED"])

        if "signature_type" in args:
            require_choice(args.get("signature_type"), constants.SIGNATURE_TYPES, "signature_type")

        if "signature_font" in args:
            require_choice(args.get("signature_font"), constants.SIGNATURE_FONTS, "signature_font")


    def validate_vesting_signature(self, args, creating = True):
        if not args:
            raise ValidationException(message = messages.ERROR["VESTING_SIGNATURE_FIELDS_REQUIRED"])

        if creating and (is_blank(args.get("tax_account_id")) or is_blank(args.get("vesting_name"))):
            raise ValidationException(message = messages.ERROR["VESTING_SIGNATURE_FIELDS_REQUIRED"])

        if not creating and "vesting_name" in args and is_blank(args.get("vesting_name")):
            raise ValidationException(message = messages.ERROR["VESTING_SIGNATURE_FIELDS_REQUIRED"])

        self._validate_signature(args, creating)

        return True


    def validate_admin_signature(self, args, creating = True):
        if not args:
            raise ValidationException(message = messages.ERROR["SIGNATURE_FIELDS_REQUIRED"])

        if creating and is_blank(args.get("admin_user_id")):
            raise ValidationException(message = messages.ERROR["ADMIN_SIGNATURE_USER_REQUIRED"])

        self._validate_signature(args, creating)

        return True
