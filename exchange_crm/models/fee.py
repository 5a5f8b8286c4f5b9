"""
Model: FeeTemplate, FeeSchedule, FeeChangeHistory
Tables: fee_templates, fee_schedules, fee_change_history

Templates are the global price list. Every new tax account gets its own
copy (fee schedule) which can be repriced; each reprice is recorded.
"""

# Database
from ..config.database import db

# Mixins
from .mixins import TimestampMixin





class FeeTemplate(TimestampMixin, db.Model):
    """ Global fee price list entry... """

    # Table Name
    __tablename__ = "fee_templates"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    name = db.Column(db.String(255), nullable = False)

    price = db.Column(db.Numeric(14, 2), nullable = False)

    description = db.Column(db.Text, nullable = True)

    is_active = db.Column(db.Boolean, nullable = False, default = True)

    def __repr__(self):
        return f"<FeeTemplate {self.name} {self.price}>"





class FeeSchedule(TimestampMixin, db.Model):
    """ Fee of one tax account... """

    # Table Name
    __tablename__ = "fee_schedules"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    tax_account_id = db.Column(
        db.Integer,
        db.ForeignKey("tax_accounts.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    fee_template_id = db.Column(
        db.Integer,
        db.ForeignKey("fee_templates.id", ondelete = "SET NULL"),
        nullable = True
    )

    name = db.Column(db.String(255), nullable = False)

    price = db.Column(db.Numeric(14, 2), nullable = False)

    description = db.Column(db.Text, nullable = True)

    # Relationships
    tax_account = db.relationship("TaxAccount", back_populates = "fee_schedules")

    history = db.relationship(
        "FeeChangeHistory",
        back_populates = "fee_schedule",
        cascade = "all, delete-orphan"
    )

    def __repr__(self):
        return f"<FeeSchedule {self.name} {self.price}>"





class FeeChangeHistory(db.Model):
    """ Price change of a fee schedule... """

    # Table Name
    __tablename__ = "fee_change_history"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    fee_schedule_id = db.Column(
        db.Integer,
        db.ForeignKey("fee_schedules.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    old_price = db.Column(db.Numeric(14, 2), nullable = False)

    new_price = db.Column(db.Numeric(14, 2), nullable = False)

    comment = db.Column(db.Text, nullable = False)

    changed_by = db.Column(db.String(64), nullable = True)

    changed_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = db.func.now()
    )

    # Relationship
    fee_schedule = db.relationship("FeeSchedule", back_populates = "history")

    def __repr__(self):
        return f"<FeeChangeHistory {self.fee_schedule_id} {self.old_price}->{self.new_price}>"
