"""
Model: TaxAccount, BusinessName
Tables: tax_accounts, business_names

A tax account is the exchanging taxpayer. It belongs to a profile
(individual), to two profiles (spousal) or to an entity. Business names
are the vesting names title is held under.
"""

# Database
from ..config.database import db

# Mixins
from .mixins import TimestampMixin





class TaxAccount(TimestampMixin, db.Model):
    """ Exchanging taxpayer... """

    # Table Name
    __tablename__ = "tax_accounts"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    name = db.Column(db.String(255), nullable = False)

    account_number = db.Column(
        db.String(50),
        nullable = True,
        index = True,
        doc = "INVSMI001 for individuals, INV-SMIDOE001 for spousal accounts."
    )

    profile_id = db.Column(
        db.Integer,
        db.ForeignKey("profile.id", ondelete = "SET NULL"),
        nullable = True,
        index = True,
        doc = "Owner profile (primary owner for spousal accounts)."
    )

    primary_profile_id = db.Column(
        db.Integer,
        db.ForeignKey("profile.id", ondelete = "SET NULL"),
        nullable = True
    )

    spouse_profile_id = db.Column(
        db.Integer,
        db.ForeignKey("profile.id", ondelete = "SET NULL"),
        nullable = True
    )

    entity_id = db.Column(
        db.Integer,
        db.ForeignKey("entities.id", ondelete = "SET NULL"),
        nullable = True,
        index = True
    )

    is_spousal = db.Column(db.Boolean, nullable = False, default = False)

    qi_company_id = db.Column(db.String(64), nullable = True)

    # Relationships
    profile = db.relationship("Profile", foreign_keys = [profile_id])
    spouse_profile = db.relationship("Profile", foreign_keys = [spouse_profile_id])
    entity = db.relationship("Entity", back_populates = "tax_accounts")

    business_names = db.relationship(
        "BusinessName",
        back_populates = "tax_account",
        cascade = "all, delete-orphan",
        order_by = "BusinessName.id"
    )

    fee_schedules = db.relationship(
        "FeeSchedule",
        back_populates = "tax_account",
        cascade = "all, delete-orphan",
        order_by = "FeeSchedule.id"
    )

    exchanges = db.relationship(
        "Exchange",
        back_populates = "tax_account",
        cascade = "all, delete-orphan"
    )

    def __repr__(self):
        return f"<TaxAccount {self.account_number or self.id}>"





class BusinessName(TimestampMixin, db.Model):
    """ Vesting name of a tax account... """

    # Table Name
    __tablename__ = "business_names"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    tax_account_id = db.Column(
        db.Integer,
        db.ForeignKey("tax_accounts.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    name = db.Column(db.String(255), nullable = False)

    # Relationship
    tax_account = db.relationship("TaxAccount", back_populates = "business_names")

    def __repr__(self):
        return f"<BusinessName {self.name}>"
