"""
Model mixins

Every CRM table carries created_at / updated_at filled by the database.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db





class TimestampMixin:
    """ created_at / updated_at columns... """

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now(),
        onupdate = func.now()
    )
