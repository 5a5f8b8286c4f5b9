"""
Transaction Service

Handles:
    - Create transaction with sellers, buyers, seller exchanges,
      buyer exchange links and pending ownership (one unit of work)
    - Upload PDF contract
    - List / detail / update (closing a sale starts the exchange clock)
"""

# Python Packages
import logging
import time
from datetime import date

# SQLAlchemy
from sqlalchemy import or_

# Database
from ...config.database import db

# Models
from ...models.transaction import Transaction, TransactionSeller, TransactionBuyer
from ...models.tax_account import TaxAccount, BusinessName
from ...models.exchange import Exchange, ExchangeTransaction
from ...models.property import Property, PropertyOwnership

# Base
from ...base import constants
from ...base.lookups import get_or_raise
from ...base.request_context import current_user_id

# Services
from ...audit_logs.services.audit_log_service import AuditLogService
from ...exchanges.services.exchange_service import derive_deadlines, exchange_number

# Vendors
from ...vendors.storage import StorageUploader

# Exceptions
from ...util.exceptions import AppException, ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import money, format_date, format_datetime


logger = logging.getLogger(__name__)


def is_non_exchange_party(party: dict, id_key: str) -> bool:
    """
    Flagged non-exchange, or named without a system id

    Args:
        id_key: tax_account_id for sellers, profile_id for buyers
    """

    if party.get("is_non_exchange"):
        return True

    name = (party.get("non_exchange_name") or "").strip()

    return bool(name) and not party.get(id_key)


def transaction_number(sale_type: str, today: date, sequence: int) -> str:
    """ STA10192026-4 """

    prefix = constants.TRANSACTION_NUMBER_PREFIX[sale_type]

    return f"{prefix}{today.strftime('%m%d%Y')}-{sequence}"


def serialize_seller(seller: TransactionSeller) -> dict:
    return {
        "id": seller.id,
        "tax_account_id": seller.tax_account_id,
        "tax_account_name": seller.tax_account.name if seller.tax_account else None,
        "account_number": seller.tax_account.account_number if seller.tax_account else None,
        "vesting_name": seller.vesting_name,
        "contract_percent": money(seller.contract_percent),
        "non_exchange_name": seller.non_exchange_name
    }


def serialize_buyer(buyer: TransactionBuyer) -> dict:
    return {
        "id": buyer.id,
        "profile_id": buyer.profile_id,
        "profile_name": buyer.profile.full_name if buyer.profile else None,
        "contract_percent": money(buyer.contract_percent),
        "non_exchange_name": buyer.non_exchange_name
    }


def serialize_transaction(transaction: Transaction) -> dict:
    return {
        "id": transaction.id,
        "transaction_number": transaction.transaction_number,
        "contract_purchase_price": money(transaction.contract_purchase_price),
        "contract_date": format_date(transaction.contract_date),
        "sale_type": transaction.sale_type,
        "status": transaction.status,
        "estimated_close_date": format_date(transaction.estimated_close_date),
        "actual_close_date": format_date(transaction.actual_close_date),
        "pdf_contract_url": transaction.pdf_contract_url,
        "closing_agent_profile_id": transaction.closing_agent_profile_id,
        "closing_agent_name": transaction.closing_agent.full_name if transaction.closing_agent else None,
        "created_by": transaction.created_by,
        "created_at": format_datetime(transaction.created_at)
    }





class TransactionService:

    # ---------------------------------------------------------
    # Create
    # ---------------------------------------------------------

    def create_transaction(self, args: dict) -> dict:
        """
        Create a sale contract

        Args:
            args (dict): validated payload
                contract_purchase_price (Decimal), contract_date (date),
                sale_type, property_id, closing_agent_profile_id,
                sellers [...], buyers [...]

        Flow:
            1. Transaction number + row
            2. Sellers and buyers
            3. One new exchange per exchange seller, linked as Sale
               (a failing seller is logged and skipped)
            4. Buyer exchanges linked as Purchase (logged and skipped on failure)
            5. Pending ownership per buyer (Property sales)
        """

        sale_type = args["sale_type"]
        sellers = args["sellers"]
        buyers = args["buyers"]

        try:
            today = date.today()
            sequence = Transaction.query.filter(Transaction.sale_type == sale_type).count() + 1

            transaction = Transaction(
                transaction_number = transaction_number(sale_type, today, sequence),
                contract_purchase_price = args["contract_purchase_price"],
                contract_date = args["contract_date"],
                sale_type = sale_type,
                status = "Pending",
                closing_agent_profile_id = args.get("closing_agent_profile_id") or None,
                created_by = current_user_id()
            )
            db.session.add(transaction)
            db.session.flush()

            for seller in sellers:
                db.session.add(TransactionSeller(
                    transaction_id = transaction.id,
                    tax_account_id = seller.get("tax_account_id") or None,
                    vesting_name = (seller.get("vesting_name") or "").strip() or None,
                    contract_percent = seller["contract_percent"],
                    non_exchange_name = (seller.get("non_exchange_name") or "").strip() or None
                ))

            for buyer in buyers:
                db.session.add(TransactionBuyer(
                    transaction_id = transaction.id,
                    profile_id = buyer.get("profile_id") or None,
                    contract_percent = buyer["contract_percent"],
                    non_exchange_name = (buyer.get("non_exchange_name") or "").strip() or None
                ))

            db.session.flush()

            created_exchanges = self._create_seller_exchanges(transaction, sellers, today.year)
            self._link_buyer_exchanges(transaction, buyers)

            if sale_type == "Property" and args.get("property_id"):
                self._create_pending_ownership(transaction, args["property_id"], buyers)

            AuditLogService.record(
                "transaction", transaction.id, "create",
                new_value = transaction.transaction_number
            )

            db.session.commit()
            logger.info(
                "Transaction %s created with %s seller exchange(s)",
                transaction.transaction_number, len(created_exchanges)
            )

            return self.get_transaction(transaction.id)

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "TRANSACTION_CREATE_FAILED",
                message = messages.ERROR["TRANSACTION_CREATE_FAILED"],
                details = get_error_message(errors)
            )


    def _create_seller_exchanges(self, transaction: Transaction, sellers: list, year: int) -> list:
        """
        New exchange per exchange seller whose tax account has a number

        Each seller runs in its own savepoint so one failure does not
        abort the transaction.
        """

        created = []

        for seller in sellers:
            if is_non_exchange_party(seller, "tax_account_id") or not seller.get("tax_account_id"):
                continue

            try:
                with db.session.begin_nested():
                    account = db.session.get(TaxAccount, seller["tax_account_id"])

                    if account is None or not account.account_number:
                        logger.warning(
                            "Tax account %s has no account number, no exchange created",
                            seller["tax_account_id"]
                        )
                        continue

                    sequence = Exchange.query.count() + 1
                    exchange = Exchange(
                        exchange_number = exchange_number(account.account_number, year, sequence),
                        tax_account_id = account.id
                    )
                    db.session.add(exchange)
                    db.session.flush()

                    db.session.add(ExchangeTransaction(
                        exchange_id = exchange.id,
                        transaction_id = transaction.id,
                        transaction_type = constants.EXCHANGE_LINK_SALE
                    ))
                    db.session.flush()

                    created.append(exchange)

            except Exception as error:
                logger.error(
                    "Exchange for seller tax account %s not created: %s",
                    seller.get("tax_account_id"), get_error_message(error)
                )

        return created


    def _link_buyer_exchanges(self, transaction: Transaction, buyers: list):
        """ Selected exchange of each exchange buyer, linked as Purchase """

        for buyer in buyers:
            if is_non_exchange_party(buyer, "profile_id") or not buyer.get("exchange_id"):
                continue

            try:
                with db.session.begin_nested():
                    db.session.add(ExchangeTransaction(
                        exchange_id = buyer["exchange_id"],
                        transaction_id = transaction.id,
                        transaction_type = constants.EXCHANGE_LINK_PURCHASE
                    ))
                    db.session.flush()

            except Exception as error:
                logger.error(
                    "Exchange %s not linked to transaction %s: %s",
                    buyer.get("exchange_id"), transaction.id, get_error_message(error)
                )


    def _create_pending_ownership(self, transaction: Transaction, property_id: int, buyers: list):
        """
        Pending ownership row per buyer

        Exchange buyers take their first tax account and its first
        business name as vesting name.
        """

        property_record = get_or_raise(Property, property_id, "PROPERTY_NOT_FOUND")
        property_record.transaction_id = transaction.id

        for buyer in buyers:
            ownership = PropertyOwnership(
                property_id = property_record.id,
                ownership_type = "pending",
                transaction_id = transaction.id
            )

            if is_non_exchange_party(buyer, "profile_id"):
                ownership.non_exchange_name = (buyer.get("non_exchange_name") or "").strip() or None

            elif buyer.get("profile_id"):
                account = (
                    TaxAccount.query
                    .filter(TaxAccount.profile_id == buyer["profile_id"])
                    .order_by(TaxAccount.id)
                    .first()
                )

                if account is not None:
                    ownership.tax_account_id = account.id

                    business_name = (
                        BusinessName.query
                        .filter(BusinessName.tax_account_id == account.id)
                        .order_by(BusinessName.id)
                        .first()
                    )
                    if business_name is not None:
                        ownership.vesting_name = business_name.name

            db.session.add(ownership)



    # ---------------------------------------------------------
    # Contract
    # ---------------------------------------------------------

    def upload_contract(self, transaction_id: int, file) -> dict:
        """
        Store the signed contract PDF and keep its public URL
        """

        transaction = get_or_raise(Transaction, transaction_id, "TRANSACTION_NOT_FOUND")

        ext = file.filename.rsplit(".", 1)[-1].lower()
        key = f"contracts/{int(time.time() * 1000)}.{ext}"
        bucket = constants.STORAGE_TRANSACTIONS_BUCKET

        uploader = StorageUploader()
        uploader.upload_file(file_obj = file, key = key, bucket = bucket)

        try:
            transaction.pdf_contract_url = uploader.public_url(key, bucket)
            db.session.commit()

            return serialize_transaction(transaction)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "CONTRACT_UPLOAD_FAILED",
                message = messages.ERROR["CONTRACT_UPLOAD_FAILED"],
                details = get_error_message(errors)
            )



    # ---------------------------------------------------------
    # Read
    # ---------------------------------------------------------

    def list_transactions(self, search: str = None, sale_type: str = None) -> dict:
        """ Newest first """

        query = Transaction.query

        if search:
            query = query.filter(Transaction.transaction_number.ilike(f"%{search.strip()}%"))

        if sale_type:
            query = query.filter(Transaction.sale_type == sale_type)

        transactions = query.order_by(Transaction.created_at.desc(), Transaction.id.desc()).all()

        return {
            "total": len(transactions),
            "transactions": [
                dict(
                    serialize_transaction(transaction),
                    sellers = [serialize_seller(seller) for seller in transaction.sellers],
                    buyers = [serialize_buyer(buyer) for buyer in transaction.buyers]
                )
                for transaction in transactions
            ]
        }


    def get_transaction(self, transaction_id: int) -> dict:
        """
        Transaction with sellers, buyers, properties and exchange links
        """

        transaction = get_or_raise(Transaction, transaction_id, "TRANSACTION_NOT_FOUND")

        properties = (
            Property.query
            .outerjoin(PropertyOwnership, PropertyOwnership.property_id == Property.id)
            .filter(
                or_(
                    Property.transaction_id == transaction.id,
                    PropertyOwnership.transaction_id == transaction.id
                )
            )
            .distinct()
            .order_by(Property.id)
            .all()
        )

        data = serialize_transaction(transaction)
        data["sellers"] = [serialize_seller(seller) for seller in transaction.sellers]
        data["buyers"] = [serialize_buyer(buyer) for buyer in transaction.buyers]
        data["properties"] = [
            {
                "id": item.id,
                "address": item.address,
                "city": item.city,
                "state": item.state,
                "zip": item.zip,
                "property_type": item.property_type
            }
            for item in properties
        ]
        data["exchanges"] = [
            {
                "link_id": link.id,
                "exchange_id": link.exchange_id,
                "exchange_number": link.exchange.exchange_number if link.exchange else None,
                "transaction_type": link.transaction_type
            }
            for link in sorted(transaction.exchange_links, key = lambda link: link.id)
        ]

        return data



    # ---------------------------------------------------------
    # Update
    # ---------------------------------------------------------

    def update_transaction(self, transaction_id: int, args: dict) -> dict:
        """
        Status, close dates, price, contract date

        Closing with an actual close date starts the 45 / 180 day
        clock of every Sale exchange that has no close date yet.
        """

        transaction = get_or_raise(Transaction, transaction_id, "TRANSACTION_NOT_FOUND")

        editable = (
            "status",
            "estimated_close_date",
            "actual_close_date",
            "contract_purchase_price",
            "contract_date"
        )

        try:
            changes = {key: args[key] for key in editable if key in args}
            AuditLogService.record_changes("transaction", transaction.id, transaction, changes)

            if transaction.status == constants.TRANSACTION_STATUS_CLOSED and transaction.actual_close_date:
                self._start_exchange_clock(transaction)

            db.session.commit()

            return self.get_transaction(transaction.id)

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "TRANSACTION_UPDATE_FAILED",
                message = messages.ERROR["TRANSACTION_UPDATE_FAILED"],
                details = get_error_message(errors)
            )


    @staticmethod
    def _start_exchange_clock(transaction: Transaction):
        close_date = transaction.actual_close_date
        day_45, day_180 = derive_deadlines(close_date)

        for link in transaction.exchange_links:
            exchange = link.exchange

            if link.transaction_type != constants.EXCHANGE_LINK_SALE or exchange is None:
                continue

            if exchange.relinquished_close_date:
                continue

            exchange.relinquished_close_date = close_date
            exchange.day_45_date = day_45
            exchange.day_180_date = day_180

            AuditLogService.record(
                "exchange", exchange.id, "update",
                field_name = "relinquished_close_date",
                new_value = close_date
            )
            logger.info("Exchange %s clock started on %s", exchange.exchange_number, close_date)
