"""
Accounting Service

Handles:
    - Ledger listing with reference labels and table totals
    - Create / update / delete entries
    - Take a fee from an exchange
"""

# Python Packages
import logging
from datetime import date

# SQLAlchemy
from sqlalchemy import or_

# Database
from ...config.database import db

# Models
from ...models.accounting_entry import AccountingEntry
from ...models.exchange import Exchange
from ...models.fee import FeeSchedule

# Base
from ...base.lookups import get_or_raise
from ...base.request_context import current_user_id

# Calculations
from ..calculations import ledger_totals, FEES

# Exceptions
from ...util.exceptions import AppException, ServiceException, ValidationException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import ZERO, money, format_date, format_datetime


logger = logging.getLogger(__name__)


def _exchange_ref(exchange):
    return {"id": exchange.id, "number": exchange.exchange_number} if exchange else None


def serialize_entry(entry: AccountingEntry) -> dict:
    return {
        "id": entry.id,
        "date": format_date(entry.date),
        "credit": money(entry.credit),
        "debit": money(entry.debit),
        "description": entry.description,
        "entry_type": entry.entry_type,
        "from_exchange_id": entry.from_exchange_id,
        "to_exchange_id": entry.to_exchange_id,
        "transaction_id": entry.transaction_id,
        "task_id": entry.task_id,
        "from_exchange": _exchange_ref(entry.from_exchange),
        "to_exchange": _exchange_ref(entry.to_exchange),
        "transaction": {
            "id": entry.transaction.id,
            "number": entry.transaction.transaction_number
        } if entry.transaction else None,
        "task": {
            "id": entry.task.id,
            "title": entry.task.title,
            "status": entry.task.status
        } if entry.task else None,
        "metadata": entry.extra,
        "created_by": entry.created_by,
        "created_at": format_datetime(entry.created_at)
    }





class AccountingService:

    def list_entries(self, transaction_id: int = None, exchange_id: int = None) -> dict:
        """
        Ledger rows, latest date first

        exchange_id matches either side of the entry.
        """

        query = AccountingEntry.query

        if transaction_id:
            query = query.filter(AccountingEntry.transaction_id == transaction_id)

        if exchange_id:
            query = query.filter(
                or_(
                    AccountingEntry.to_exchange_id == exchange_id,
                    AccountingEntry.from_exchange_id == exchange_id
                )
            )

        entries = (
            query
            .order_by(AccountingEntry.date.desc(), AccountingEntry.created_at.desc(), AccountingEntry.id.desc())
            .all()
        )

        return {
            "entries": [serialize_entry(entry) for entry in entries],
            "totals": ledger_totals(entries)
        }


    def create_entry(self, args: dict) -> dict:
        try:
            entry = AccountingEntry(
                date = args.get("date") or date.today(),
                credit = args.get("credit") or ZERO,
                debit = args.get("debit") or ZERO,
                description = args.get("description"),
                entry_type = args["entry_type"],
                from_exchange_id = args.get("from_exchange_id") or None,
                to_exchange_id = args.get("to_exchange_id") or None,
                transaction_id = args.get("transaction_id") or None,
                task_id = args.get("task_id") or None,
                settlement_seller_id = args.get("settlement_seller_id") or None,
                settlement_buyer_id = args.get("settlement_buyer_id") or None,
                settlement_type = args.get("settlement_type") or None,
                extra = args.get("metadata"),
                created_by = current_user_id()
            )
            db.session.add(entry)
            db.session.commit()

            logger.info("Accounting entry %s (%s) created", entry.id, entry.entry_type)

            return serialize_entry(entry)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "ENTRY_SAVE_FAILED",
                message = messages.ERROR["ENTRY_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def update_entry(self, entry_id: int, args: dict) -> dict:
        entry = get_or_raise(AccountingEntry, entry_id, "ENTRY_NOT_FOUND")

        editable = (
            "date",
            "credit",
            "debit",
            "description",
            "from_exchange_id",
            "to_exchange_id",
            "task_id"
        )

        try:
            for key in editable:
                if key in args:
                    setattr(entry, key, args[key])

            db.session.commit()

            return serialize_entry(entry)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "ENTRY_SAVE_FAILED",
                message = messages.ERROR["ENTRY_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def delete_entry(self, entry_id: int) -> dict:
        entry = get_or_raise(AccountingEntry, entry_id, "ENTRY_NOT_FOUND")

        try:
            db.session.delete(entry)
            db.session.commit()

            logger.info("Accounting entry %s deleted", entry_id)

            return {"message": messages.SUCCESS["ENTRY_DELETED"]}

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "ENTRY_SAVE_FAILED",
                message = messages.ERROR["ENTRY_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def take_fee(self, exchange_id: int, fee_schedule_id: int) -> dict:
        """
        Debit a fee of the exchange's tax account from the exchange

        Raises:
            ValidationException: fee does not belong to the tax account
        """

        exchange = get_or_raise(Exchange, exchange_id, "EXCHANGE_NOT_FOUND")
        fee = db.session.get(FeeSchedule, fee_schedule_id)

        if fee is None or fee.tax_account_id != exchange.tax_account_id:
            raise ValidationException(message = messages.ERROR["FEE_NOT_FOUND"])

        description = f"Fee: {fee.name}"
        if fee.description:
            description += f" - {fee.description}"

        try:
            entry = AccountingEntry(
                date = date.today(),
                credit = ZERO,
                debit = fee.price,
                description = description,
                entry_type = FEES,
                from_exchange_id = exchange.id,
                created_by = current_user_id()
            )
            db.session.add(entry)
            db.session.commit()

            logger.info("Fee %s taken from exchange %s", fee.name, exchange.exchange_number)

            return serialize_entry(entry)

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "TAKE_FEE_FAILED",
                message = messages.ERROR["TAKE_FEE_FAILED"],
                details = get_error_message(errors)
            )
