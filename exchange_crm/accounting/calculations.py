"""
Exchange Calculations

Pure reducers over rows already fetched from the database.
Rows may be ORM objects or plain dicts. A missing credit / debit is 0.

Direction convention:
    credit side -> money INTO an exchange   (entry.to_exchange_id)
    debit side  -> money OUT of an exchange (entry.from_exchange_id)
"""

# Python Packages
from collections import OrderedDict
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

# Utils
from ..util.formatters import ZERO, to_decimal, money, format_date, format_datetime


SALE_PROCEEDS = "sale_proceeds"
PURCHASE_FUNDS = "purchase_funds"
FEES = "fees"
SALE_LINK = "Sale"
UNKNOWN_PARTY = "Unknown"


def _get(row, key, default = None):
    """ Attribute or key access """

    if isinstance(row, dict):
        return row.get(key, default)

    return getattr(row, key, default)


def _credit(row) -> Decimal:
    return to_decimal(_get(row, "credit"))


def _debit(row) -> Decimal:
    return to_decimal(_get(row, "debit"))





# ---------------------------------------------------------
# Result types
# ---------------------------------------------------------

@dataclass
class ExchangeFinancials:
    total_sale_property_value: Decimal = ZERO
    total_replacement_property: Decimal = ZERO
    value_remaining: Decimal = ZERO

    def to_dict(self) -> dict:
        return {
            "total_sale_property_value": money(self.total_sale_property_value),
            "total_replacement_property": money(self.total_replacement_property),
            "value_remaining": money(self.value_remaining)
        }


@dataclass
class YearToDateMetrics:
    total_value_property_sold: Decimal = ZERO
    total_amount_received_to_qi: Decimal = ZERO
    total_exchangeable_value_acquired: Decimal = ZERO
    total_funds_sent_from_exchange: Decimal = ZERO
    funds_returned_to_exchanger: Decimal = ZERO

    def to_dict(self) -> dict:
        return {
            "total_value_property_sold": money(self.total_value_property_sold),
            "total_amount_received_to_qi": money(self.total_amount_received_to_qi),
            "total_exchangeable_value_acquired": money(self.total_exchangeable_value_acquired),
            "total_funds_sent_from_exchange": money(self.total_funds_sent_from_exchange),
            "funds_returned_to_exchanger": money(self.funds_returned_to_exchanger)
        }


@dataclass
class ExchangeSummary:
    id: int
    exchange_number: str
    status: Optional[str] = None
    created_at: object = None
    relinquished_close_date: object = None
    day_45_date: object = None
    day_180_date: object = None
    total_sale_value: Decimal = ZERO
    total_replacement_value: Decimal = ZERO
    value_remaining: Decimal = ZERO
    sale_transactions_count: int = 0
    purchase_transactions_count: int = 0
    identified_properties_count: int = 0
    current_balance: Decimal = ZERO

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "exchange_number": self.exchange_number,
            "status": self.status,
            "created_at": format_datetime(self.created_at),
            "relinquished_close_date": format_date(self.relinquished_close_date),
            "day_45_date": format_date(self.day_45_date),
            "day_180_date": format_date(self.day_180_date),
            "total_sale_value": money(self.total_sale_value),
            "total_replacement_value": money(self.total_replacement_value),
            "value_remaining": money(self.value_remaining),
            "sale_transactions_count": self.sale_transactions_count,
            "purchase_transactions_count": self.purchase_transactions_count,
            "identified_properties_count": self.identified_properties_count,
            "current_balance": money(self.current_balance)
        }


@dataclass
class TransactionParty:
    id: int
    name: str
    percent: Decimal = ZERO

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "percent": float(self.percent)}


@dataclass
class GroupedTransaction:
    transaction_id: int
    transaction_number: str
    transaction_type: str
    contract_date: object = None
    property_address: Optional[str] = None
    sellers: List[TransactionParty] = field(default_factory = list)
    buyers: List[TransactionParty] = field(default_factory = list)
    funds_to_exchange: Decimal = ZERO
    sales_price: Decimal = ZERO
    total_value: Decimal = ZERO

    def to_dict(self) -> dict:
        return {
            "transaction_id": self.transaction_id,
            "transaction_number": self.transaction_number,
            "transaction_type": self.transaction_type,
            "contract_date": format_date(self.contract_date),
            "property_address": self.property_address,
            "sellers": [seller.to_dict() for seller in self.sellers],
            "buyers": [buyer.to_dict() for buyer in self.buyers],
            "funds_to_exchange": money(self.funds_to_exchange),
            "sales_price": money(self.sales_price),
            "total_value": money(self.total_value)
        }


@dataclass
class ExchangeTransactionGroup:
    exchange_id: int
    exchange_number: str
    sales: List[GroupedTransaction] = field(default_factory = list)
    purchases: List[GroupedTransaction] = field(default_factory = list)

    def to_dict(self) -> dict:
        return {
            "exchange_id": self.exchange_id,
            "exchange_number": self.exchange_number,
            "sales": [item.to_dict() for item in self.sales],
            "purchases": [item.to_dict() for item in self.purchases]
        }


@dataclass
class GroupedTransactions:
    groups: "OrderedDict[int, ExchangeTransactionGroup]" = field(default_factory = OrderedDict)
    orphan_sales: List[GroupedTransaction] = field(default_factory = list)
    orphan_purchases: List[GroupedTransaction] = field(default_factory = list)

    def to_dict(self) -> dict:
        return {
            "groups": [group.to_dict() for group in self.groups.values()],
            "orphan_sales": [item.to_dict() for item in self.orphan_sales],
            "orphan_purchases": [item.to_dict() for item in self.orphan_purchases]
        }





# ---------------------------------------------------------
# Single exchange
# ---------------------------------------------------------

def calculate_exchange_financials(entries: Iterable, exchange_id: int) -> ExchangeFinancials:
    """
    Sale value, replacement value and remainder of one exchange

    Sale: credits into the exchange that are sale proceeds or positive.
    Replacement: debits out of the exchange that are purchase funds or positive.
    """

    sale = ZERO
    replacement = ZERO

    for entry in entries:
        entry_type = _get(entry, "entry_type")

        if _get(entry, "to_exchange_id") == exchange_id:
            credit = _credit(entry)
            if entry_type == SALE_PROCEEDS or credit > 0:
                sale += credit

        if _get(entry, "from_exchange_id") == exchange_id:
            debit = _debit(entry)
            if entry_type == PURCHASE_FUNDS or debit > 0:
                replacement += debit

    return ExchangeFinancials(
        total_sale_property_value = sale,
        total_replacement_property = replacement,
        value_remaining = sale - replacement
    )


def calculate_exchange_balance(entries: Iterable, exchange_id: int) -> Decimal:
    """ Credits in minus debits out """

    balance = ZERO

    for entry in entries:
        if _get(entry, "to_exchange_id") == exchange_id:
            balance += _credit(entry)

        if _get(entry, "from_exchange_id") == exchange_id:
            balance -= _debit(entry)

    return balance


def ledger_totals(entries: Iterable) -> dict:
    """ Footer of the accounting table """

    total_credit = ZERO
    total_debit = ZERO

    for entry in entries:
        total_credit += _credit(entry)
        total_debit += _debit(entry)

    return {
        "total_credit": money(total_credit),
        "total_debit": money(total_debit),
        "balance": money(total_credit - total_debit)
    }





# ---------------------------------------------------------
# Tax account: year to date
# ---------------------------------------------------------

def calculate_ytd_metrics(entries: Iterable, exchange_ids: Iterable[int]) -> YearToDateMetrics:
    """
    Year to date review of a tax account

    entries are expected to be pre-filtered to the period. Boot
    (funds returned to the exchanger) never goes below zero.
    """

    ids = set(exchange_ids)
    metrics = YearToDateMetrics()

    if not ids:
        return metrics

    fees = ZERO

    for entry in entries:
        entry_type = _get(entry, "entry_type")

        if _get(entry, "to_exchange_id") in ids:
            credit = _credit(entry)
            metrics.total_amount_received_to_qi += credit
            if entry_type == SALE_PROCEEDS:
                metrics.total_value_property_sold += credit

        if _get(entry, "from_exchange_id") in ids:
            debit = _debit(entry)
            metrics.total_funds_sent_from_exchange += debit
            if entry_type == PURCHASE_FUNDS:
                metrics.total_exchangeable_value_acquired += debit
            elif entry_type == FEES:
                fees += debit

    returned = (
        metrics.total_amount_received_to_qi
        - metrics.total_exchangeable_value_acquired
        - fees
    )
    metrics.funds_returned_to_exchanger = max(ZERO, returned)

    return metrics





# ---------------------------------------------------------
# Tax account: exchanges rollup
# ---------------------------------------------------------

def summarize_exchange(exchange, entries: Iterable, transaction_links: Iterable, identified_properties: Iterable) -> ExchangeSummary:
    """
    Key figures of one exchange for the tax account page

    One entry may land on both sides (transfer between two exchanges of
    the same account is credit for one and debit for the other; a
    self-transfer is both).
    """

    exchange_id = _get(exchange, "id")

    sale = ZERO
    replacement = ZERO
    credits = ZERO
    debits = ZERO

    for entry in entries:
        entry_type = _get(entry, "entry_type")

        if _get(entry, "to_exchange_id") == exchange_id:
            credit = _credit(entry)
            credits += credit
            if entry_type == SALE_PROCEEDS:
                sale += credit

        if _get(entry, "from_exchange_id") == exchange_id:
            debit = _debit(entry)
            debits += debit
            if entry_type == PURCHASE_FUNDS:
                replacement += debit

    sales_count = 0
    purchases_count = 0
    for link in transaction_links:
        if _get(link, "transaction_type") == SALE_LINK:
            sales_count += 1
        else:
            purchases_count += 1

    return ExchangeSummary(
        id = exchange_id,
        exchange_number = _get(exchange, "exchange_number"),
        status = _get(exchange, "status"),
        created_at = _get(exchange, "created_at"),
        relinquished_close_date = _get(exchange, "relinquished_close_date"),
        day_45_date = _get(exchange, "day_45_date"),
        day_180_date = _get(exchange, "day_180_date"),
        total_sale_value = sale,
        total_replacement_value = replacement,
        value_remaining = sale - replacement,
        sale_transactions_count = sales_count,
        purchase_transactions_count = purchases_count,
        identified_properties_count = len(list(identified_properties)),
        current_balance = credits - debits
    )


def rollup_exchanges(exchanges: Iterable, entries: Iterable, links: Iterable, identified: Iterable) -> List[ExchangeSummary]:
    """ summarize_exchange for each exchange, input order kept """

    exchanges = list(exchanges)
    entries_by_exchange: Dict[int, list] = {_get(ex, "id"): [] for ex in exchanges}
    links_by_exchange: Dict[int, list] = {_get(ex, "id"): [] for ex in exchanges}
    identified_by_exchange: Dict[int, list] = {_get(ex, "id"): [] for ex in exchanges}

    for entry in entries:
        to_id = _get(entry, "to_exchange_id")
        from_id = _get(entry, "from_exchange_id")

        if to_id in entries_by_exchange:
            entries_by_exchange[to_id].append(entry)

        if from_id in entries_by_exchange and from_id != to_id:
            entries_by_exchange[from_id].append(entry)

    for link in links:
        exchange_id = _get(link, "exchange_id")
        if exchange_id in links_by_exchange:
            links_by_exchange[exchange_id].append(link)

    for item in identified:
        exchange_id = _get(item, "exchange_id")
        if exchange_id in identified_by_exchange:
            identified_by_exchange[exchange_id].append(item)

    return [
        summarize_exchange(
            exchange,
            entries_by_exchange[_get(exchange, "id")],
            links_by_exchange[_get(exchange, "id")],
            identified_by_exchange[_get(exchange, "id")]
        )
        for exchange in exchanges
    ]





# ---------------------------------------------------------
# Tax account: transactions grouped by exchange
# ---------------------------------------------------------

def _seller_name(seller) -> str:
    return (
        _get(seller, "vesting_name")
        or _get(seller, "non_exchange_name")
        or _get(seller, "tax_account_name")
        or UNKNOWN_PARTY
    )


def _buyer_name(buyer) -> str:
    if _get(buyer, "non_exchange_name"):
        return _get(buyer, "non_exchange_name")

    first_name = _get(buyer, "first_name")
    last_name = _get(buyer, "last_name")
    if first_name or last_name:
        return f"{first_name or ''} {last_name or ''}".strip()

    return UNKNOWN_PARTY


def group_transactions_by_exchange(exchanges, links, sellers, buyers, properties, settlements) -> GroupedTransactions:
    """
    Sales and purchases of a tax account, one group per exchange

    Args:
        exchanges: rows with id, exchange_number
        links: rows with exchange_id, transaction_type and the linked
            transaction's id, transaction_number, contract_date,
            contract_purchase_price
        sellers: rows with transaction_id, id, vesting_name,
            non_exchange_name, tax_account_name, contract_percent
        buyers: rows with transaction_id, id, non_exchange_name,
            first_name, last_name, contract_percent
        properties: rows with transaction_id, address
        settlements: settlement seller rows with transaction_id,
            funds_to_exchange, sale_price
    """

    result = GroupedTransactions()

    for exchange in exchanges:
        result.groups[_get(exchange, "id")] = ExchangeTransactionGroup(
            exchange_id = _get(exchange, "id"),
            exchange_number = _get(exchange, "exchange_number")
        )

    sellers_by_tx: Dict[int, list] = {}
    for seller in sellers:
        sellers_by_tx.setdefault(_get(seller, "transaction_id"), []).append(seller)

    buyers_by_tx: Dict[int, list] = {}
    for buyer in buyers:
        buyers_by_tx.setdefault(_get(buyer, "transaction_id"), []).append(buyer)

    address_by_tx: Dict[int, str] = {}
    for item in properties:
        address_by_tx.setdefault(_get(item, "transaction_id"), _get(item, "address"))

    funds_by_tx: Dict[int, Decimal] = {}
    price_by_tx: Dict[int, Decimal] = {}
    for settlement in settlements:
        transaction_id = _get(settlement, "transaction_id")
        funds_by_tx[transaction_id] = funds_by_tx.get(transaction_id, ZERO) + to_decimal(_get(settlement, "funds_to_exchange"))
        price_by_tx[transaction_id] = price_by_tx.get(transaction_id, ZERO) + to_decimal(_get(settlement, "sale_price"))

    for link in links:
        group = result.groups.get(_get(link, "exchange_id"))
        if group is None:
            continue

        transaction_id = _get(link, "transaction_id")
        transaction_type = _get(link, "transaction_type")

        item = GroupedTransaction(
            transaction_id = transaction_id,
            transaction_number = _get(link, "transaction_number"),
            transaction_type = transaction_type,
            contract_date = _get(link, "contract_date"),
            property_address = address_by_tx.get(transaction_id),
            sellers = [
                TransactionParty(
                    id = _get(seller, "id"),
                    name = _seller_name(seller),
                    percent = to_decimal(_get(seller, "contract_percent"))
                )
                for seller in sellers_by_tx.get(transaction_id, [])
            ],
            buyers = [
                TransactionParty(
                    id = _get(buyer, "id"),
                    name = _buyer_name(buyer),
                    percent = to_decimal(_get(buyer, "contract_percent"))
                )
                for buyer in buyers_by_tx.get(transaction_id, [])
            ],
            funds_to_exchange = funds_by_tx.get(transaction_id, ZERO),
            sales_price = price_by_tx.get(transaction_id, ZERO),
            total_value = to_decimal(_get(link, "contract_purchase_price"))
        )

        if transaction_type == SALE_LINK:
            group.sales.append(item)
        else:
            group.purchases.append(item)

    return result
