"""
Model: BusinessCard, Branch
Tables: business_cards, branches

Third parties (lenders, title companies) with their branch offices.
"""

# Database
from ..config.database import db

# Mixins
from .mixins import TimestampMixin





class BusinessCard(TimestampMixin, db.Model):
    """ Third party company card... """

    # Table Name
    __tablename__ = "business_cards"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    business_name = db.Column(db.String(255), nullable = False)

    email = db.Column(db.String(255), nullable = False)

    logo_url = db.Column(db.Text, nullable = True)

    # Relationship
    branches = db.relationship(
        "Branch",
        back_populates = "business_card",
        cascade = "all, delete-orphan",
        order_by = "Branch.id"
    )

    def __repr__(self):
        return f"<BusinessCard {self.business_name}>"





class Branch(TimestampMixin, db.Model):
    """ Office of a business card... """

    # Table Name
    __tablename__ = "branches"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    business_card_id = db.Column(
        db.Integer,
        db.ForeignKey("business_cards.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    branch_name = db.Column(db.String(255), nullable = True)
    state = db.Column(db.String(50), nullable = True)
    address = db.Column(db.Text, nullable = True)
    email = db.Column(db.String(255), nullable = True)

    # Relationship
    business_card = db.relationship("BusinessCard", back_populates = "branches")

    def __repr__(self):
        return f"<Branch {self.branch_name}>"
