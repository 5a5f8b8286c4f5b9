"""
Model: Transaction and its parties
Tables: transactions, transaction_sellers, transaction_buyers,
        settlement_sellers, settlement_buyers

A transaction is one sale contract. Sellers relinquish (tax account +
vesting name), buyers acquire (profile + selected exchange). Either side
may be a non-exchange party identified by name only.

Settlement rows hold the final settlement statement per party.
"""

# Python Packages
import uuid

# Database
from ..config.database import db

# Mixins
from .mixins import TimestampMixin


def _uuid():
    return str(uuid.uuid4())





class Transaction(TimestampMixin, db.Model):
    """ Sale contract... """

    # Table Name
    __tablename__ = "transactions"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    transaction_number = db.Column(
        db.String(50),
        nullable = False,
        index = True,
        doc = "STA10192026-3 (Property) or ENT10192026-1 (Entity)."
    )

    contract_purchase_price = db.Column(db.Numeric(14, 2), nullable = False)

    contract_date = db.Column(db.Date, nullable = False)

    sale_type = db.Column(db.String(20), nullable = False, doc = "Property or Entity.")

    status = db.Column(db.String(20), nullable = False, default = "Pending")

    estimated_close_date = db.Column(db.Date, nullable = True)

    actual_close_date = db.Column(db.Date, nullable = True)

    pdf_contract_url = db.Column(db.Text, nullable = True)

    closing_agent_profile_id = db.Column(
        db.Integer,
        db.ForeignKey("profile.id", ondelete = "SET NULL"),
        nullable = True
    )

    created_by = db.Column(db.String(64), nullable = True)

    # Relationships
    closing_agent = db.relationship("Profile")

    sellers = db.relationship(
        "TransactionSeller",
        back_populates = "transaction",
        cascade = "all, delete-orphan",
        order_by = "TransactionSeller.id"
    )

    buyers = db.relationship(
        "TransactionBuyer",
        back_populates = "transaction",
        cascade = "all, delete-orphan",
        order_by = "TransactionBuyer.id"
    )

    exchange_links = db.relationship(
        "ExchangeTransaction",
        back_populates = "transaction",
        cascade = "all, delete-orphan"
    )

    def __repr__(self):
        return f"<Transaction {self.transaction_number}>"





class TransactionSeller(TimestampMixin, db.Model):
    """ Relinquishing party... """

    # Table Name
    __tablename__ = "transaction_sellers"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    transaction_id = db.Column(
        db.Integer,
        db.ForeignKey("transactions.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    tax_account_id = db.Column(
        db.Integer,
        db.ForeignKey("tax_accounts.id", ondelete = "SET NULL"),
        nullable = True
    )

    vesting_name = db.Column(db.String(255), nullable = True)

    contract_percent = db.Column(db.Numeric(7, 4), nullable = True)

    non_exchange_name = db.Column(db.String(255), nullable = True)

    # Relationships
    transaction = db.relationship("Transaction", back_populates = "sellers")
    tax_account = db.relationship("TaxAccount")

    def __repr__(self):
        return f"<TransactionSeller {self.id} tx={self.transaction_id}>"





class TransactionBuyer(TimestampMixin, db.Model):
    """ Acquiring party... """

    # Table Name
    __tablename__ = "transaction_buyers"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    transaction_id = db.Column(
        db.Integer,
        db.ForeignKey("transactions.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    profile_id = db.Column(
        db.Integer,
        db.ForeignKey("profile.id", ondelete = "SET NULL"),
        nullable = True
    )

    contract_percent = db.Column(db.Numeric(7, 4), nullable = True)

    non_exchange_name = db.Column(db.String(255), nullable = True)

    # Relationships
    transaction = db.relationship("Transaction", back_populates = "buyers")
    profile = db.relationship("Profile")

    def __repr__(self):
        return f"<TransactionBuyer {self.id} tx={self.transaction_id}>"





class SettlementSeller(TimestampMixin, db.Model):
    """ Seller side of the final settlement statement... """

    # Table Name
    __tablename__ = "settlement_sellers"

    id = db.Column(db.String(36), primary_key = True, default = _uuid)

    transaction_id = db.Column(
        db.Integer,
        db.ForeignKey("transactions.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    seller_id = db.Column(
        db.Integer,
        db.ForeignKey("transaction_sellers.id", ondelete = "CASCADE"),
        nullable = False
    )

    tax_seller_id = db.Column(db.Integer, nullable = True)

    current_exchange_id = db.Column(
        db.Integer,
        db.ForeignKey("exchanges.id", ondelete = "SET NULL"),
        nullable = True
    )

    balance = db.Column(db.Numeric(14, 2), nullable = True)
    closing_cost = db.Column(db.Numeric(14, 2), nullable = True)
    debt_payoff = db.Column(db.Numeric(14, 2), nullable = True)
    funds_to_exchange = db.Column(db.Numeric(14, 2), nullable = True)
    funds_to_exchanger = db.Column(db.Numeric(14, 2), nullable = True)
    sale_price = db.Column(db.Numeric(14, 2), nullable = True)

    date_writing_instructions = db.Column(db.Date, nullable = True)

    def __repr__(self):
        return f"<SettlementSeller {self.id}>"





class SettlementBuyer(TimestampMixin, db.Model):
    """ Buyer side of the final settlement statement... """

    # Table Name
    __tablename__ = "settlement_buyers"

    id = db.Column(db.String(36), primary_key = True, default = _uuid)

    transaction_id = db.Column(
        db.Integer,
        db.ForeignKey("transactions.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    buyer_id = db.Column(
        db.Integer,
        db.ForeignKey("transaction_buyers.id", ondelete = "CASCADE"),
        nullable = False
    )

    tax_buyer_id = db.Column(db.Integer, nullable = True)

    selected_exchange_id = db.Column(
        db.Integer,
        db.ForeignKey("exchanges.id", ondelete = "SET NULL"),
        nullable = True
    )

    closing_cost = db.Column(db.Numeric(14, 2), nullable = True)
    deposit_from_exchange = db.Column(db.Numeric(14, 2), nullable = True)
    deposit_from_exchanger = db.Column(db.Numeric(14, 2), nullable = True)
    funds_from_exchange = db.Column(db.Numeric(14, 2), nullable = True)
    loan_amount = db.Column(db.Numeric(14, 2), nullable = True)
    replacement_of_deposit = db.Column(db.Numeric(14, 2), nullable = True)
    sale_price = db.Column(db.Numeric(14, 2), nullable = True)

    def __repr__(self):
        return f"<SettlementBuyer {self.id}>"
