"""
Profile Validation
"""

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.validators import is_blank





class ProfileValidation:

    def validate_create(self, args):
        """
        First and last name are required
        """

        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if is_blank(args.get("first_name")) or is_blank(args.get("last_name")):
            raise ValidationException(message = messages.ERROR["PROFILE_NAME_REQUIRED"])

        return True


    def validate_update(self, args):
        """
        Names may be omitted but not blanked
        """

        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        for key in ("first_name", "last_name"):
            if key in args and is_blank(args.get(key)):
                raise ValidationException(message = messages.ERROR["PROFILE_NAME_REQUIRED"])

        return True
