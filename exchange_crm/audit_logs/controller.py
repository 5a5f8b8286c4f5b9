"""
Audit Log Controller
"""

# Services
from .services.audit_log_service import AuditLogService





class AuditLogController:

    def list_logs(self, args: dict) -> dict:
        return AuditLogService().list_logs(args)
