"""
Model: AuditLog
Table: audit_logs

Field level change history of CRM records. Values are stored as text.
"""

# Database
from ..config.database import db





class AuditLog(db.Model):
    """ One recorded change... """

    # Table Name
    __tablename__ = "audit_logs"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    entity_type = db.Column(db.String(20), nullable = False, index = True)

    entity_id = db.Column(db.Integer, nullable = False, index = True)

    action_type = db.Column(db.String(10), nullable = False, doc = "create, update or delete.")

    field_name = db.Column(db.String(100), nullable = True)

    old_value = db.Column(db.Text, nullable = True)

    new_value = db.Column(db.Text, nullable = True)

    changed_by = db.Column(db.String(64), nullable = True)

    extra = db.Column("metadata", db.JSON, nullable = True)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = db.func.now(),
        index = True
    )

    def __repr__(self):
        return f"<AuditLog {self.entity_type}:{self.entity_id} {self.action_type}>"
