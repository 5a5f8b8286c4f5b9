"""
Exchange Service

Handles:
    - List / detail of exchanges
    - Status and deadline updates (day 45 / day 180 derived from close date)
    - Financial figures from the ledger, and syncing them to the row
    - Current balance
"""

# Python Packages
import logging
from datetime import timedelta

# SQLAlchemy
from sqlalchemy import or_

# Database
from ...config.database import db

# Models
from ...models.exchange import Exchange, ExchangeTransaction
from ...models.tax_account import TaxAccount
from ...models.transaction import Transaction
from ...models.accounting_entry import AccountingEntry

# Base
from ...base import constants
from ...base.lookups import get_or_raise

# Calculations
from ...accounting.calculations import calculate_exchange_financials, calculate_exchange_balance

# Services
from ...audit_logs.services.audit_log_service import AuditLogService
from ...profiles.services.profile_service import serialize_profile

# Exceptions
from ...util.exceptions import AppException, ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import money, format_date, format_datetime


logger = logging.getLogger(__name__)


def derive_deadlines(close_date) -> tuple:
    """ (day 45, day 180) counted from the relinquished close date """

    if close_date is None:
        return None, None

    return (
        close_date + timedelta(days = constants.IDENTIFICATION_PERIOD_DAYS),
        close_date + timedelta(days = constants.EXCHANGE_PERIOD_DAYS)
    )


def exchange_number(account_number: str, year: int, sequence: int) -> str:
    """ INVSMI001-2026-EXCH-7 """

    return f"{account_number}-{year}-EXCH-{sequence}"


def serialize_exchange(exchange: Exchange) -> dict:
    account = exchange.tax_account

    return {
        "id": exchange.id,
        "exchange_number": exchange.exchange_number,
        "tax_account_id": exchange.tax_account_id,
        "tax_account_name": account.name if account else None,
        "status": exchange.status,
        "relinquished_close_date": format_date(exchange.relinquished_close_date),
        "day_45_date": format_date(exchange.day_45_date),
        "day_180_date": format_date(exchange.day_180_date),
        "total_sale_property_value": money(exchange.total_sale_property_value),
        "total_replacement_property": money(exchange.total_replacement_property),
        "value_remaining": money(exchange.value_remaining),
        "created_at": format_datetime(exchange.created_at)
    }


def entries_for_exchange(exchange_id: int) -> list:
    return AccountingEntry.query.filter(
        or_(
            AccountingEntry.to_exchange_id == exchange_id,
            AccountingEntry.from_exchange_id == exchange_id
        )
    ).all()





class ExchangeService:

    def list_exchanges(self, search: str = None, status: str = None) -> dict:
        """
        Newest first, search on exchange number or tax account name
        """

        query = Exchange.query.outerjoin(TaxAccount, TaxAccount.id == Exchange.tax_account_id)

        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(
                    Exchange.exchange_number.ilike(pattern),
                    TaxAccount.name.ilike(pattern)
                )
            )

        if status:
            query = query.filter(Exchange.status == status)

        exchanges = query.order_by(Exchange.created_at.desc(), Exchange.id.desc()).all()

        return {
            "total": len(exchanges),
            "exchanges": [serialize_exchange(exchange) for exchange in exchanges]
        }


    def get_exchange(self, exchange_id: int) -> dict:
        """
        Exchange with its tax account, owner (profile or entity)
        and linked transactions, newest first
        """

        exchange = get_or_raise(Exchange, exchange_id, "EXCHANGE_NOT_FOUND")
        account = exchange.tax_account

        links = (
            ExchangeTransaction.query
            .filter(ExchangeTransaction.exchange_id == exchange.id)
            .join(Transaction, Transaction.id == ExchangeTransaction.transaction_id)
            .order_by(Transaction.created_at.desc(), Transaction.id.desc())
            .all()
        )

        data = serialize_exchange(exchange)
        data["tax_account"] = None

        if account is not None:
            data["tax_account"] = {
                "id": account.id,
                "name": account.name,
                "account_number": account.account_number,
                "is_spousal": account.is_spousal,
                "profile": serialize_profile(account.profile),
                "entity": {"id": account.entity.id, "name": account.entity.name} if account.entity else None
            }

        data["transactions"] = [
            {
                "link_id": link.id,
                "transaction_type": link.transaction_type,
                "transaction_id": link.transaction.id,
                "transaction_number": link.transaction.transaction_number,
                "contract_date": format_date(link.transaction.contract_date),
                "contract_purchase_price": money(link.transaction.contract_purchase_price),
                "status": link.transaction.status
            }
            for link in links
        ]

        return data


    def update_exchange(self, exchange_id: int, args: dict) -> dict:
        """
        Status and dates

        A relinquished close date without explicit deadlines fills
        day 45 / day 180.
        """

        exchange = get_or_raise(Exchange, exchange_id, "EXCHANGE_NOT_FOUND")

        try:
            changes = {}

            if "status" in args:
                changes["status"] = args["status"]

            for key in ("relinquished_close_date", "day_45_date", "day_180_date"):
                if key in args:
                    changes[key] = args[key]

            if changes.get("relinquished_close_date"):
                day_45, day_180 = derive_deadlines(changes["relinquished_close_date"])

                if not changes.get("day_45_date"):
                    changes["day_45_date"] = day_45

                if not changes.get("day_180_date"):
                    changes["day_180_date"] = day_180

            AuditLogService.record_changes("exchange", exchange.id, exchange, changes)
            db.session.commit()

            return serialize_exchange(exchange)

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "EXCHANGE_UPDATE_FAILED",
                message = messages.ERROR["EXCHANGE_UPDATE_FAILED"],
                details = get_error_message(errors)
            )


    def get_financials(self, exchange_id: int) -> dict:
        """ Sale / replacement / remaining value from the ledger """

        exchange = get_or_raise(Exchange, exchange_id, "EXCHANGE_NOT_FOUND")
        financials = calculate_exchange_financials(entries_for_exchange(exchange.id), exchange.id)

        return financials.to_dict()


    def sync_financials(self, exchange_id: int) -> dict:
        """ Write the ledger figures to the exchange row """

        exchange = get_or_raise(Exchange, exchange_id, "EXCHANGE_NOT_FOUND")
        financials = calculate_exchange_financials(entries_for_exchange(exchange.id), exchange.id)

        try:
            exchange.total_sale_property_value = financials.total_sale_property_value
            exchange.total_replacement_property = financials.total_replacement_property
            exchange.value_remaining = financials.value_remaining
            db.session.commit()
            logger.info("Exchange %s financials synced", exchange.id)

            return financials.to_dict()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "EXCHANGE_UPDATE_FAILED",
                message = messages.ERROR["EXCHANGE_UPDATE_FAILED"],
                details = get_error_message(errors)
            )


    def get_balance(self, exchange_id: int) -> dict:
        exchange = get_or_raise(Exchange, exchange_id, "EXCHANGE_NOT_FOUND")
        balance = calculate_exchange_balance(entries_for_exchange(exchange.id), exchange.id)

        return {"exchange_id": exchange.id, "balance": money(balance)}
