"""
Model: Exchange, ExchangeTransaction, IdentifiedProperty, PropertyImprovement
Tables: exchanges, exchange_transactions, identified_properties,
        property_improvements

An exchange is one 1031 exchange of a tax account. It is opened by a
sale ("Sale" link) and consumed by purchases ("Purchase" links).
Replacement candidates are tracked as identified properties.
"""

# Database
from ..config.database import db

# Mixins
from .mixins import TimestampMixin





class Exchange(TimestampMixin, db.Model):
    """ A 1031 exchange... """

    # Table Name
    __tablename__ = "exchanges"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    exchange_number = db.Column(
        db.String(80),
        nullable = False,
        index = True,
        doc = "{account_number}-{year}-EXCH-{n}"
    )

    tax_account_id = db.Column(
        db.Integer,
        db.ForeignKey("tax_accounts.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    status = db.Column(db.String(20), nullable = False, default = "active")

    relinquished_close_date = db.Column(db.Date, nullable = True)

    day_45_date = db.Column(db.Date, nullable = True)

    day_180_date = db.Column(db.Date, nullable = True)

    total_sale_property_value = db.Column(db.Numeric(14, 2), nullable = False, default = 0)

    total_replacement_property = db.Column(db.Numeric(14, 2), nullable = False, default = 0)

    value_remaining = db.Column(db.Numeric(14, 2), nullable = False, default = 0)

    # Relationships
    tax_account = db.relationship("TaxAccount", back_populates = "exchanges")

    transaction_links = db.relationship(
        "ExchangeTransaction",
        back_populates = "exchange",
        cascade = "all, delete-orphan"
    )

    identified_properties = db.relationship(
        "IdentifiedProperty",
        back_populates = "exchange",
        cascade = "all, delete-orphan",
        order_by = "IdentifiedProperty.id"
    )

    def __repr__(self):
        return f"<Exchange {self.exchange_number}>"





class ExchangeTransaction(TimestampMixin, db.Model):
    """ Link between an exchange and a transaction (Sale / Purchase)... """

    # Table Name
    __tablename__ = "exchange_transactions"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    exchange_id = db.Column(
        db.Integer,
        db.ForeignKey("exchanges.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    transaction_id = db.Column(
        db.Integer,
        db.ForeignKey("transactions.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    transaction_type = db.Column(db.String(20), nullable = False, doc = "Sale or Purchase.")

    # Relationships
    exchange = db.relationship("Exchange", back_populates = "transaction_links")
    transaction = db.relationship("Transaction", back_populates = "exchange_links")

    def __repr__(self):
        return f"<ExchangeTransaction {self.exchange_id}:{self.transaction_id} {self.transaction_type}>"





class IdentifiedProperty(TimestampMixin, db.Model):
    """ Replacement property candidate of an exchange... """

    # Table Name
    __tablename__ = "identified_properties"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    exchange_id = db.Column(
        db.Integer,
        db.ForeignKey("exchanges.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    property_id = db.Column(
        db.Integer,
        db.ForeignKey("properties.id", ondelete = "SET NULL"),
        nullable = True
    )

    identification_type = db.Column(db.String(20), nullable = False)

    property_type = db.Column(db.String(30), nullable = False)

    description = db.Column(db.Text, nullable = True)

    status = db.Column(db.String(20), nullable = False, default = "identified")

    percentage = db.Column(db.Numeric(7, 4), nullable = True)

    value = db.Column(db.Numeric(14, 2), nullable = True)

    identification_date = db.Column(db.Date, nullable = False)

    is_parked = db.Column(db.Boolean, nullable = False, default = False)

    document_storage_path = db.Column(db.Text, nullable = True)

    extra = db.Column("metadata", db.JSON, nullable = True)

    created_by = db.Column(db.String(64), nullable = True)

    # Relationships
    exchange = db.relationship("Exchange", back_populates = "identified_properties")
    property = db.relationship("Property")

    improvements = db.relationship(
        "PropertyImprovement",
        back_populates = "identified_property",
        cascade = "all, delete-orphan",
        order_by = "PropertyImprovement.id"
    )

    def __repr__(self):
        return f"<IdentifiedProperty {self.id} exchange={self.exchange_id}>"





class PropertyImprovement(TimestampMixin, db.Model):
    """ Build-out added to an identified property's value... """

    # Table Name
    __tablename__ = "property_improvements"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    identified_property_id = db.Column(
        db.Integer,
        db.ForeignKey("identified_properties.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    description = db.Column(db.Text, nullable = False)

    value = db.Column(db.Numeric(14, 2), nullable = False, default = 0)

    # Relationship
    identified_property = db.relationship("IdentifiedProperty", back_populates = "improvements")

    def __repr__(self):
        return f"<PropertyImprovement {self.id}>"
