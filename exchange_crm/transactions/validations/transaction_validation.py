"""
Transaction Validation

Create payload rules for sellers and buyers, update vocabulary,
settlement rows and contract upload.
"""

# Constants
from ...base import constants

# Models
from ...models.exchange import Exchange
from ...models.tax_account import TaxAccount

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.formatters import parse_amount, ZERO
from ...util.validators import (
    is_blank,
    require_choice,
    non_negative_amount,
    optional_date,
    require_file,
)

# Services
from ..services.transaction_service import is_non_exchange_party
from ..services.settlement_service import SELLER_AMOUNTS, BUYER_AMOUNTS


def _percent(value):
    """ contract_percent > 0, None when missing or invalid """

    if is_blank(value):
        return None

    try:
        percent = parse_amount(value, "contract_percent")
    except ValidationException:
        return None

    return percent if percent > ZERO else None





class TransactionValidation:

    def validate_create(self, args):
        """
        Required header fields, sellers and buyers

        Parses amounts / dates and contract percents in place.
        """

        if not args:
            raise ValidationException(message = messages.ERROR["REQUIRED_FIELDS"])

        if any(is_blank(args.get(key)) for key in ("contract_purchase_price", "contract_date", "sale_type")):
            raise ValidationException(message = messages.ERROR["REQUIRED_FIELDS"])

        require_choice(args.get("sale_type"), constants.SALE_TYPES, "sale_type")

        args["contract_purchase_price"] = non_negative_amount(
            args.get("contract_purchase_price"), "contract_purchase_price"
        )
        args["contract_date"] = optional_date(args.get("contract_date"), "contract_date")

        sellers = args.get("sellers") or []
        buyers = args.get("buyers") or []

        if not sellers:
            raise ValidationException(message = messages.ERROR["SELLER_REQUIRED"])

        if not buyers:
            raise ValidationException(message = messages.ERROR["BUYER_REQUIRED"])

        for seller in sellers:
            self._validate_seller(seller)

        for buyer in buyers:
            self._validate_buyer(buyer)

        if args["sale_type"] == "Property" and is_blank(args.get("property_id")):
            raise ValidationException(message = messages.ERROR["PROPERTY_REQUIRED"])

        args["sellers"] = sellers
        args["buyers"] = buyers

        return True


    @staticmethod
    def _validate_seller(seller: dict):
        percent = _percent(seller.get("contract_percent"))

        if is_non_exchange_party(seller, "tax_account_id"):
            if is_blank(seller.get("non_exchange_name")) or percent is None:
                raise ValidationException(message = messages.ERROR["NON_EXCHANGE_SELLER_INVALID"])

        elif not seller.get("tax_account_id") or is_blank(seller.get("vesting_name")) or percent is None:
            raise ValidationException(message = messages.ERROR["SELLER_INVALID"])

        seller["contract_percent"] = percent


    @staticmethod
    def _validate_buyer(buyer: dict):
        percent = _percent(buyer.get("contract_percent"))

        if is_non_exchange_party(buyer, "profile_id"):
            if is_blank(buyer.get("non_exchange_name")) or percent is None:
                raise ValidationException(message = messages.ERROR["NON_EXCHANGE_BUYER_INVALID"])

            buyer["contract_percent"] = percent
            return

        if not buyer.get("profile_id") or not buyer.get("exchange_id") or percent is None:
            raise ValidationException(message = messages.ERROR["BUYER_INVALID"])

        # Selected exchange must belong to one of the buyer's tax accounts
        owned = (
            Exchange.query
            .join(TaxAccount, TaxAccount.id == Exchange.tax_account_id)
            .filter(
                Exchange.id == buyer["exchange_id"],
                TaxAccount.profile_id == buyer["profile_id"]
            )
            .first()
        )

        if owned is None:
            raise ValidationException(message = messages.ERROR["BUYER_EXCHANGE_MISMATCH"])

        buyer["contract_percent"] = percent


    def validate_update(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if "status" in args:
            require_choice(args.get("status"), constants.TRANSACTION_STATUSES, "status")

        for key in ("estimated_close_date", "actual_close_date", "contract_date"):
            if key in args:
                args[key] = optional_date(args.get(key), key)

        if "contract_purchase_price" in args:
            price = non_negative_amount(args.get("contract_purchase_price"), "contract_purchase_price")

            if price is None:
                raise ValidationException(
                    message = messages.ERROR["FIELD_REQUIRED"].format(field = "contract_purchase_price")
                )

            args["contract_purchase_price"] = price

        return True


    def validate_contract(self, args):
        """ PDF only """

        require_file(args.get("file"), {"pdf"})

        return True





class SettlementValidation:

    @staticmethod
    def _amounts(args, keys):
        for key in keys:
            if key in args:
                args[key] = non_negative_amount(args.get(key), key)


    def validate_seller_row(self, args, creating = True):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if creating and is_blank(args.get("seller_id")):
            raise ValidationException(message = messages.ERROR["SETTLEMENT_SELLER_REQUIRED"])

        self._amounts(args, SELLER_AMOUNTS)

        if "date_writing_instructions" in args:
            args["date_writing_instructions"] = optional_date(
                args.get("date_writing_instructions"), "date_writing_instructions"
            )

        return True


    def validate_buyer_row(self, args, creating = True):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if creating and is_blank(args.get("buyer_id")):
            raise ValidationException(message = messages.ERROR["SETTLEMENT_BUYER_REQUIRED"])

        self._amounts(args, BUYER_AMOUNTS)

        return True
