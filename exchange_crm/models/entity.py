"""
Model: Entity, EntityProfileAccess
Tables: entities, entity_profile_access

Entities (LLCs, trusts) own tax accounts. Access rows say which tax
account holders act for the entity and whether they can sign.
"""

# Database
from ..config.database import db

# Mixins
from .mixins import TimestampMixin





class Entity(TimestampMixin, db.Model):
    """ LLC / trust / corporation... """

    # Table Name
    __tablename__ = "entities"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    name = db.Column(db.String(255), nullable = False)

    email = db.Column(db.String(255), nullable = True)

    # Relationships
    tax_accounts = db.relationship("TaxAccount", back_populates = "entity")

    profile_accesses = db.relationship(
        "EntityProfileAccess",
        back_populates = "entity",
        cascade = "all, delete-orphan",
        order_by = "EntityProfileAccess.id"
    )

    def __repr__(self):
        return f"<Entity {self.name}>"





class EntityProfileAccess(TimestampMixin, db.Model):
    """ Who acts for an entity... """

    # Table Name
    __tablename__ = "entity_profile_access"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    entity_id = db.Column(
        db.Integer,
        db.ForeignKey("entities.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    tax_account_id = db.Column(
        db.Integer,
        db.ForeignKey("tax_accounts.id", ondelete = "CASCADE"),
        nullable = False
    )

    relationship = db.Column(
        db.String(50),
        nullable = False,
        doc = "Manager, Trustee, Owner/Member, Managing Member or Beneficiary."
    )

    has_signing_authority = db.Column(db.Boolean, nullable = False, default = False)

    is_main_contact = db.Column(db.Boolean, nullable = False, default = False)

    created_by = db.Column(db.String(64), nullable = True)

    # Relationships
    entity = db.relationship("Entity", back_populates = "profile_accesses")
    tax_account = db.relationship("TaxAccount")

    def __repr__(self):
        return f"<EntityProfileAccess entity={self.entity_id} tax_account={self.tax_account_id}>"
