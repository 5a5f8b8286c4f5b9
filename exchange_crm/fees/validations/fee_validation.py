"""
Fee Validation
"""

# Python Packages
from decimal import Decimal, InvalidOperation

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.validators import is_blank





class FeeValidation:

    @staticmethod
    def _price(value) -> Decimal:
        """ Number >= 0 or "Price must be a positive number" """

        if isinstance(value, bool):
            raise ValidationException(message = messages.ERROR["FEE_PRICE_INVALID"])

        try:
            price = Decimal(str(value).replace(",", "").strip())
        except (InvalidOperation, ValueError):
            raise ValidationException(message = messages.ERROR["FEE_PRICE_INVALID"])

        if not price.is_finite() or price < 0:
            raise ValidationException(message = messages.ERROR["FEE_PRICE_INVALID"])

        return price


    def validate_template(self, args):
        """
        Name and price required, price parsed in place
        """

        if not args or is_blank(args.get("name")) or is_blank(args.get("price")):
            raise ValidationException(message = messages.ERROR["FEE_NAME_PRICE_REQUIRED"])

        args["price"] = self._price(args["price"])

        return True


    def validate_price_change(self, args):
        if not args or is_blank(args.get("price")):
            raise ValidationException(message = messages.ERROR["FEE_PRICE_INVALID"])

        args["price"] = self._price(args["price"])

        return True


    def validate_schedule_filter(self, args):
        if not args.get("tax_account_id"):
            raise ValidationException(
                message = messages.ERROR["FIELD_REQUIRED"].format(field = "tax_account_id")
            )

        try:
            args["tax_account_id"] = int(args["tax_account_id"])
        except (TypeError, ValueError):
            raise ValidationException(
                message = messages.ERROR["INVALID_NUMBER"].format(field = "tax_account_id")
            )

        return True
