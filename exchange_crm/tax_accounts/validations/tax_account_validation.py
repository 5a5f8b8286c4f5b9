"""
Tax Account Validation
"""

# Python Packages
from datetime import date

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.validators import is_blank
from ...util.formatters import parse_date





class TaxAccountValidation:

    def validate_create(self, args):
        """
        Individual account: name + owner profile
        """

        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if is_blank(args.get("name")):
            raise ValidationException(message = messages.ERROR["TAX_ACCOUNT_NAME_REQUIRED"])

        if not args.get("profile_id"):
            raise ValidationException(message = messages.ERROR["TAX_ACCOUNT_PROFILE_REQUIRED"])

        return True


    def validate_create_spousal(self, args):
        """
        Both profiles and both names, profiles must differ
        """

        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        required = (
            "primary_profile_id",
            "spouse_profile_id",
            "primary_tax_account_name",
            "spouse_tax_account_name"
        )

        if any(is_blank(args.get(key)) for key in required):
            raise ValidationException(message = messages.ERROR["SPOUSAL_FIELDS_REQUIRED"])

        if str(args["primary_profile_id"]) == str(args["spouse_profile_id"]):
            raise ValidationException(message = messages.ERROR["SPOUSAL_SAME_PROFILE"])

        return True


    def validate_create_for_entity(self, args):
        if not args or is_blank(args.get("name")):
            raise ValidationException(message = messages.ERROR["TAX_ACCOUNT_NAME_REQUIRED"])

        return True


    def validate_update(self, args):
        if not args or is_blank(args.get("name")):
            raise ValidationException(message = messages.ERROR["TAX_ACCOUNT_NAME_REQUIRED"])

        return True


    def validate_business_name(self, args):
        if not args or is_blank(args.get("name")):
            raise ValidationException(message = messages.ERROR["BUSINESS_NAME_REQUIRED"])

        return True


    def validate_period(self, args) -> tuple:
        """
        start_date / end_date, or year, or the current calendar year

        Returns:
            tuple: (start_date, end_date)
        """

        if args.get("year"):
            year = str(args["year"]).strip()

            if not (year.isdigit() and len(year) == 4 and int(year) >= 1):
                raise ValidationException(message = messages.ERROR["INVALID_YEAR"])

            return date(int(year), 1, 1), date(int(year), 12, 31)

        today = date.today()

        start_date = parse_date(args.get("start_date"), "start_date") or date(today.year, 1, 1)
        end_date = parse_date(args.get("end_date"), "end_date") or date(today.year, 12, 31)

        if start_date > end_date:
            raise ValidationException(message = messages.ERROR["INVALID_DATE_RANGE"])

        return start_date, end_date
