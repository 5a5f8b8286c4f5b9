"""
Tax Account Summary Service

Handles:
    - Exchanges rollup (tax-account-exchanges)
    - Transactions grouped by exchange (tax-account-transactions)
    - Year to date review (tax-account-ytd-calculations)

Rows are loaded here, the figures come from accounting.calculations.
Query errors propagate; an account with no exchanges yields zeros.
"""

# Python Packages
from datetime import date

# SQLAlchemy
from sqlalchemy import or_

# Models
from ...models.tax_account import TaxAccount
from ...models.exchange import Exchange, ExchangeTransaction, IdentifiedProperty
from ...models.accounting_entry import AccountingEntry
from ...models.transaction import Transaction, TransactionSeller, TransactionBuyer, SettlementSeller
from ...models.property import Property

# Base
from ...base.lookups import get_or_raise

# Calculations
from ...accounting.calculations import (
    calculate_ytd_metrics,
    group_transactions_by_exchange,
    rollup_exchanges,
)

# Utils
from ...util.formatters import format_date





class TaxAccountSummaryService:

    def _exchanges(self, tax_account_id: int) -> list:
        get_or_raise(TaxAccount, tax_account_id, "TAX_ACCOUNT_NOT_FOUND")

        return (
            Exchange.query
            .filter(Exchange.tax_account_id == tax_account_id)
            .order_by(Exchange.created_at.desc(), Exchange.id.desc())
            .all()
        )


    @staticmethod
    def _entries_touching(exchange_ids: list):
        return AccountingEntry.query.filter(
            or_(
                AccountingEntry.to_exchange_id.in_(exchange_ids),
                AccountingEntry.from_exchange_id.in_(exchange_ids)
            )
        )


    def get_exchanges_rollup(self, tax_account_id: int) -> list:
        """
        Per exchange: sale / replacement / remaining value, balance,
        sale and purchase counts, identified properties count
        """

        exchanges = self._exchanges(tax_account_id)

        if not exchanges:
            return []

        ids = [exchange.id for exchange in exchanges]

        entries = self._entries_touching(ids).all()
        links = ExchangeTransaction.query.filter(ExchangeTransaction.exchange_id.in_(ids)).all()
        identified = IdentifiedProperty.query.filter(IdentifiedProperty.exchange_id.in_(ids)).all()

        summaries = rollup_exchanges(exchanges, entries, links, identified)

        return [summary.to_dict() for summary in summaries]


    def get_transactions_by_exchange(self, tax_account_id: int) -> dict:
        """
        Sales and purchases of the account, one group per exchange
        """

        exchanges = self._exchanges(tax_account_id)

        if not exchanges:
            return {"groups": [], "orphan_sales": [], "orphan_purchases": []}

        ids = [exchange.id for exchange in exchanges]

        link_rows = (
            ExchangeTransaction.query
            .filter(ExchangeTransaction.exchange_id.in_(ids))
            .join(Transaction, Transaction.id == ExchangeTransaction.transaction_id)
            .order_by(Transaction.created_at.desc(), Transaction.id.desc())
            .all()
        )

        links = [
            {
                "exchange_id": link.exchange_id,
                "transaction_type": link.transaction_type,
                "transaction_id": link.transaction.id,
                "transaction_number": link.transaction.transaction_number,
                "contract_date": link.transaction.contract_date,
                "contract_purchase_price": link.transaction.contract_purchase_price
            }
            for link in link_rows
        ]

        transaction_ids = list({link["transaction_id"] for link in links})

        sellers = [
            {
                "id": seller.id,
                "transaction_id": seller.transaction_id,
                "vesting_name": seller.vesting_name,
                "non_exchange_name": seller.non_exchange_name,
                "tax_account_name": seller.tax_account.name if seller.tax_account else None,
                "contract_percent": seller.contract_percent
            }
            for seller in TransactionSeller.query
            .filter(TransactionSeller.transaction_id.in_(transaction_ids))
            .order_by(TransactionSeller.id)
            .all()
        ]

        buyers = [
            {
                "id": buyer.id,
                "transaction_id": buyer.transaction_id,
                "non_exchange_name": buyer.non_exchange_name,
                "first_name": buyer.profile.first_name if buyer.profile else None,
                "last_name": buyer.profile.last_name if buyer.profile else None,
                "contract_percent": buyer.contract_percent
            }
            for buyer in TransactionBuyer.query
            .filter(TransactionBuyer.transaction_id.in_(transaction_ids))
            .order_by(TransactionBuyer.id)
            .all()
        ]

        properties = (
            Property.query
            .filter(Property.transaction_id.in_(transaction_ids))
            .order_by(Property.id)
            .all()
        )

        settlements = (
            SettlementSeller.query
            .filter(SettlementSeller.transaction_id.in_(transaction_ids))
            .all()
        )

        grouped = group_transactions_by_exchange(exchanges, links, sellers, buyers, properties, settlements)

        return grouped.to_dict()


    def get_ytd_metrics(self, tax_account_id: int, start_date: date, end_date: date) -> dict:
        """
        Year to date review over [start_date, end_date]
        """

        exchanges = self._exchanges(tax_account_id)
        ids = [exchange.id for exchange in exchanges]

        entries = []
        if ids:
            entries = (
                self._entries_touching(ids)
                .filter(
                    AccountingEntry.date >= start_date,
                    AccountingEntry.date <= end_date
                )
                .all()
            )

        metrics = calculate_ytd_metrics(entries, ids)

        data = metrics.to_dict()
        data["start_date"] = format_date(start_date)
        data["end_date"] = format_date(end_date)
        data["exchange_count"] = len(ids)

        return data
