"""
Settlement Service

Handles:
    - Seller side / buyer side rows of the settlement statement
    - Listing both sides of a transaction
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.transaction import (
    Transaction,
    TransactionSeller,
    TransactionBuyer,
    SettlementSeller,
    SettlementBuyer,
)

# Base
from ...base.lookups import get_or_raise

# Exceptions
from ...util.exceptions import AppException, ServiceException, ValidationException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import money, format_date


logger = logging.getLogger(__name__)


SELLER_AMOUNTS = (
    "balance",
    "closing_cost",
    "debt_payoff",
    "funds_to_exchange",
    "funds_to_exchanger",
    "sale_price"
)

BUYER_AMOUNTS = (
    "closing_cost",
    "deposit_from_exchange",
    "deposit_from_exchanger",
    "funds_from_exchange",
    "loan_amount",
    "replacement_of_deposit",
    "sale_price"
)


def serialize_settlement_seller(row: SettlementSeller) -> dict:
    data = {
        "id": row.id,
        "transaction_id": row.transaction_id,
        "seller_id": row.seller_id,
        "tax_seller_id": row.tax_seller_id,
        "current_exchange_id": row.current_exchange_id,
        "date_writing_instructions": format_date(row.date_writing_instructions)
    }
    data.update({key: money(getattr(row, key)) for key in SELLER_AMOUNTS})

    return data


def serialize_settlement_buyer(row: SettlementBuyer) -> dict:
    data = {
        "id": row.id,
        "transaction_id": row.transaction_id,
        "buyer_id": row.buyer_id,
        "tax_buyer_id": row.tax_buyer_id,
        "selected_exchange_id": row.selected_exchange_id
    }
    data.update({key: money(getattr(row, key)) for key in BUYER_AMOUNTS})

    return data





class SettlementService:

    def get_settlement(self, transaction_id: int) -> dict:
        get_or_raise(Transaction, transaction_id, "TRANSACTION_NOT_FOUND")

        sellers = (
            SettlementSeller.query
            .filter(SettlementSeller.transaction_id == transaction_id)
            .order_by(SettlementSeller.created_at)
            .all()
        )
        buyers = (
            SettlementBuyer.query
            .filter(SettlementBuyer.transaction_id == transaction_id)
            .order_by(SettlementBuyer.created_at)
            .all()
        )

        return {
            "transaction_id": transaction_id,
            "sellers": [serialize_settlement_seller(row) for row in sellers],
            "buyers": [serialize_settlement_buyer(row) for row in buyers]
        }


    @staticmethod
    def _check_party(model, party_id, transaction_id: int, message_key: str):
        """ The seller / buyer must belong to this transaction """

        party = db.session.get(model, party_id)

        if party is None or party.transaction_id != transaction_id:
            raise ValidationException(message = messages.ERROR[message_key])

        return party


    def _save(self, row, args: dict, amounts: tuple, links: tuple):
        try:
            for key in amounts + links:
                if key in args:
                    setattr(row, key, args[key])

            db.session.add(row)
            db.session.commit()

            return row

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "SETTLEMENT_SAVE_FAILED",
                message = messages.ERROR["SETTLEMENT_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    # ---------------------------------------------------------
    # Seller side
    # ---------------------------------------------------------

    def create_seller_row(self, transaction_id: int, args: dict) -> dict:
        get_or_raise(Transaction, transaction_id, "TRANSACTION_NOT_FOUND")

        seller = self._check_party(
            TransactionSeller, args.get("seller_id"), transaction_id, "SETTLEMENT_SELLER_REQUIRED"
        )

        row = SettlementSeller(
            transaction_id = transaction_id,
            seller_id = seller.id,
            tax_seller_id = seller.tax_account_id,
            date_writing_instructions = args.get("date_writing_instructions")
        )
        row = self._save(row, args, SELLER_AMOUNTS, ("current_exchange_id",))
        logger.info("Settlement seller row %s added to transaction %s", row.id, transaction_id)

        return serialize_settlement_seller(row)


    def update_seller_row(self, row_id: str, args: dict) -> dict:
        row = get_or_raise(SettlementSeller, row_id, "SETTLEMENT_NOT_FOUND")

        if args.get("seller_id"):
            seller = self._check_party(
                TransactionSeller, args["seller_id"], row.transaction_id, "SETTLEMENT_SELLER_REQUIRED"
            )
            row.seller_id = seller.id
            row.tax_seller_id = seller.tax_account_id

        if "date_writing_instructions" in args:
            row.date_writing_instructions = args["date_writing_instructions"]

        return serialize_settlement_seller(
            self._save(row, args, SELLER_AMOUNTS, ("current_exchange_id",))
        )


    # ---------------------------------------------------------
    # Buyer side
    # ---------------------------------------------------------

    def create_buyer_row(self, transaction_id: int, args: dict) -> dict:
        get_or_raise(Transaction, transaction_id, "TRANSACTION_NOT_FOUND")

        buyer = self._check_party(
            TransactionBuyer, args.get("buyer_id"), transaction_id, "SETTLEMENT_BUYER_REQUIRED"
        )

        row = SettlementBuyer(
            transaction_id = transaction_id,
            buyer_id = buyer.id,
            tax_buyer_id = buyer.profile_id
        )
        row = self._save(row, args, BUYER_AMOUNTS, ("selected_exchange_id",))
        logger.info("Settlement buyer row %s added to transaction %s", row.id, transaction_id)

        return serialize_settlement_buyer(row)


    def update_buyer_row(self, row_id: str, args: dict) -> dict:
        row = get_or_raise(SettlementBuyer, row_id, "SETTLEMENT_NOT_FOUND")

        if args.get("buyer_id"):
            buyer = self._check_party(
                TransactionBuyer, args["buyer_id"], row.transaction_id, "SETTLEMENT_BUYER_REQUIRED"
            )
            row.buyer_id = buyer.id
            row.tax_buyer_id = buyer.profile_id

        return serialize_settlement_buyer(
            self._save(row, args, BUYER_AMOUNTS, ("selected_exchange_id",))
        )
