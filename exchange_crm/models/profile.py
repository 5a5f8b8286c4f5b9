"""
Model: Profile
Table: profile

A person known to the CRM: exchanger, spouse, buyer, closing agent.
"""

# Database
from ..config.database import db

# Mixins
from .mixins import TimestampMixin





class Profile(TimestampMixin, db.Model):
    """ A person record... """

    # Table Name
    __tablename__ = "profile"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    first_name = db.Column(db.String(120), nullable = False)

    last_name = db.Column(db.String(120), nullable = False)

    email = db.Column(db.String(255), nullable = True, index = True)

    phone = db.Column(db.String(50), nullable = True)

    user_id = db.Column(
        db.String(64),
        nullable = True,
        doc = "Hosted auth user id when the person can sign in."
    )

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def __repr__(self):
        return f"<Profile {self.id} {self.full_name}>"
