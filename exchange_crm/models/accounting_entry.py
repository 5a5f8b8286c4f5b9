"""
Model: AccountingEntry
Table: accounting_entries

One ledger line. Money flows INTO an exchange as a credit
(to_exchange_id) and OUT of an exchange as a debit (from_exchange_id).
A transfer between two exchanges sets both sides on the same row.
"""

# Database
from ..config.database import db

# Mixins
from .mixins import TimestampMixin





class AccountingEntry(TimestampMixin, db.Model):
    """ Ledger line of the exchange accounts... """

    # Table Name
    __tablename__ = "accounting_entries"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    date = db.Column(db.Date, nullable = False, index = True)

    credit = db.Column(db.Numeric(14, 2), nullable = False, default = 0)

    debit = db.Column(db.Numeric(14, 2), nullable = False, default = 0)

    description = db.Column(db.Text, nullable = True)

    entry_type = db.Column(
        db.String(30),
        nullable = False,
        doc = "sale_proceeds, purchase_funds, fees, earnest_money, wire_in, wire_out, manual."
    )

    from_exchange_id = db.Column(
        db.Integer,
        db.ForeignKey("exchanges.id", ondelete = "SET NULL"),
        nullable = True,
        index = True
    )

    to_exchange_id = db.Column(
        db.Integer,
        db.ForeignKey("exchanges.id", ondelete = "SET NULL"),
        nullable = True,
        index = True
    )

    transaction_id = db.Column(
        db.Integer,
        db.ForeignKey("transactions.id", ondelete = "SET NULL"),
        nullable = True,
        index = True
    )

    task_id = db.Column(
        db.Integer,
        db.ForeignKey("tasks.id", ondelete = "SET NULL"),
        nullable = True
    )

    settlement_seller_id = db.Column(db.String(36), nullable = True)

    settlement_buyer_id = db.Column(db.String(36), nullable = True)

    settlement_type = db.Column(db.String(10), nullable = True, doc = "seller or buyer.")

    extra = db.Column("metadata", db.JSON, nullable = True)

    created_by = db.Column(db.String(64), nullable = True)

    # Relationships
    from_exchange = db.relationship("Exchange", foreign_keys = [from_exchange_id])
    to_exchange = db.relationship("Exchange", foreign_keys = [to_exchange_id])
    transaction = db.relationship("Transaction")
    task = db.relationship("Task")

    def __repr__(self):
        return f"<AccountingEntry {self.id} {self.entry_type} +{self.credit} -{self.debit}>"
