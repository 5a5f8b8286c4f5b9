"""
Model: Property, PropertyOwnership
Tables: properties, property_ownership

Ownership rows are the title history of a property:
    current  -> titled to the tax account today
    pending  -> buyer side of an open transaction
    prior    -> replaced by a later owner
"""

# Database
from ..config.database import db

# Mixins
from .mixins import TimestampMixin





class Property(TimestampMixin, db.Model):
    """ Real estate parcel... """

    # Table Name
    __tablename__ = "properties"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    address = db.Column(db.Text, nullable = False)

    city = db.Column(db.String(120), nullable = True)
    state = db.Column(db.String(50), nullable = True)
    zip = db.Column(db.String(20), nullable = True)

    property_type = db.Column(db.String(100), nullable = True)

    legal_description = db.Column(db.Text, nullable = True)

    transaction_id = db.Column(
        db.Integer,
        db.ForeignKey("transactions.id", ondelete = "SET NULL"),
        nullable = True,
        index = True,
        doc = "Latest sale transaction of this property."
    )

    business_name_id = db.Column(
        db.Integer,
        db.ForeignKey("business_names.id", ondelete = "SET NULL"),
        nullable = True,
        doc = "Vesting name the property is currently titled under."
    )

    # Relationships
    ownerships = db.relationship(
        "PropertyOwnership",
        back_populates = "property",
        cascade = "all, delete-orphan",
        order_by = "PropertyOwnership.id.desc()"
    )

    business_name = db.relationship("BusinessName")

    def __repr__(self):
        return f"<Property {self.id} {self.address}>"





class PropertyOwnership(TimestampMixin, db.Model):
    """ One title holder of a property... """

    # Table Name
    __tablename__ = "property_ownership"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    property_id = db.Column(
        db.Integer,
        db.ForeignKey("properties.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    tax_account_id = db.Column(
        db.Integer,
        db.ForeignKey("tax_accounts.id", ondelete = "CASCADE"),
        nullable = True,
        index = True
    )

    transaction_id = db.Column(
        db.Integer,
        db.ForeignKey("transactions.id", ondelete = "SET NULL"),
        nullable = True
    )

    business_name_id = db.Column(
        db.Integer,
        db.ForeignKey("business_names.id", ondelete = "SET NULL"),
        nullable = True
    )

    ownership_type = db.Column(
        db.String(20),
        nullable = False,
        default = "current",
        doc = "current, pending or prior."
    )

    vesting_name = db.Column(db.String(255), nullable = True)

    non_exchange_name = db.Column(
        db.String(255),
        nullable = True,
        doc = "Buyer outside the CRM (no tax account)."
    )

    # Relationships
    property = db.relationship("Property", back_populates = "ownerships")
    tax_account = db.relationship("TaxAccount")
    transaction = db.relationship("Transaction")

    def __repr__(self):
        return f"<PropertyOwnership {self.property_id} {self.ownership_type}>"
