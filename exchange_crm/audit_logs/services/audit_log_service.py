"""
Audit Log Service

Handles:
    - Record create / update / delete of CRM records
    - List logs grouped by calendar day
"""

# Python Packages
import json
import logging

# Database
from ...config.database import db

# Models
from ...models.audit_log import AuditLog

# Base
from ...base.request_context import current_user_id

# Utils
from ...util.formatters import format_datetime


logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100


def _as_text(value):
    """ Audit values are stored as text """

    if value is None:
        return None

    if isinstance(value, (dict, list)):
        return json.dumps(value, default = str)

    return str(value)


def day_label(value) -> str:
    """ October 5, 2026 """

    return f"{value.strftime('%B')} {value.day}, {value.year}"





class AuditLogService:

    @staticmethod
    def record(entity_type: str, entity_id: int, action_type: str, field_name: str = None,
               old_value = None, new_value = None, metadata: dict = None) -> AuditLog:
        """
        Add an audit row to the current unit of work

        The caller commits (or rolls back) together with the change
        being audited.
        """

        log = AuditLog(
            entity_type = entity_type,
            entity_id = entity_id,
            action_type = action_type,
            field_name = field_name,
            old_value = _as_text(old_value),
            new_value = _as_text(new_value),
            changed_by = current_user_id(),
            extra = metadata
        )
        db.session.add(log)

        logger.debug("audit %s %s #%s %s", action_type, entity_type, entity_id, field_name or "")

        return log


    @staticmethod
    def record_changes(entity_type: str, entity_id: int, record, changes: dict) -> list:
        """
        Apply changes to a model and audit each field whose value differs

        Args:
            record: model instance
            changes (dict): {column: new value}

        Returns:
            list: changed column names
        """

        changed = []

        for field_name, new_value in changes.items():
            old_value = getattr(record, field_name)

            if old_value == new_value:
                continue

            setattr(record, field_name, new_value)
            AuditLogService.record(
                entity_type = entity_type,
                entity_id = entity_id,
                action_type = "update",
                field_name = field_name,
                old_value = old_value,
                new_value = new_value
            )
            changed.append(field_name)

        return changed


    def list_logs(self, args: dict) -> dict:
        """
        Newest first, grouped by day while keeping the order

        Args:
            args (dict): entity_type, entity_id, action_type, limit
        """

        query = AuditLog.query

        if args.get("entity_type"):
            query = query.filter(AuditLog.entity_type == args["entity_type"])

        if args.get("entity_id") is not None:
            query = query.filter(AuditLog.entity_id == args["entity_id"])

        if args.get("action_type"):
            query = query.filter(AuditLog.action_type == args["action_type"])

        logs = (
            query
            .order_by(AuditLog.created_at.desc(), AuditLog.id.desc())
            .limit(args.get("limit") or DEFAULT_LIMIT)
            .all()
        )

        groups = []
        for log in logs:
            label = day_label(log.created_at) if log.created_at else None

            if not groups or groups[-1]["date"] != label:
                groups.append({"date": label, "logs": []})

            groups[-1]["logs"].append(self.serialize(log))

        return {
            "total": len(logs),
            "groups": groups
        }


    @staticmethod
    def serialize(log: AuditLog) -> dict:
        return {
            "id": log.id,
            "entity_type": log.entity_type,
            "entity_id": log.entity_id,
            "action_type": log.action_type,
            "field_name": log.field_name,
            "old_value": log.old_value,
            "new_value": log.new_value,
            "changed_by": log.changed_by,
            "metadata": log.extra,
            "created_at": format_datetime(log.created_at)
        }
