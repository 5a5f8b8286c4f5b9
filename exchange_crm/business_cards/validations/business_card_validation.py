"""
Business Card Validation
"""

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.validators import is_blank, require_file


LOGO_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "svg", "webp"}





class BusinessCardValidation:

    def validate_card(self, args, creating = True):
        if not args:
            raise ValidationException(message = messages.ERROR["BUSINESS_CARD_FIELDS_REQUIRED"])

        for key in ("business_name", "email"):
            if creating or key in args:
                if is_blank(args.get(key)):
                    raise ValidationException(message = messages.ERROR["BUSINESS_CARD_FIELDS_REQUIRED"])

                args[key] = args[key].strip()

        if "branches" in args and not isinstance(args.get("branches") or [], list):
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        return True


    def validate_logo(self, args):
        require_file(args.get("file"), LOGO_EXTENSIONS)

        return True
