"""
File: Audit Log Routes

Handles:
    - List audit logs of a record
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.audit_log_request import ListAuditLogsRequest

# Validations
from .validations.audit_log_validation import AuditLogValidation

# Controller
from .controller import AuditLogController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
audit_log_namespace = Namespace('logs', description = 'Audit Log APIs')





@audit_log_namespace.route('')
class AuditLogList(Resource):

    @ListAuditLogsRequest.apply(audit_log_namespace)
    def get(self):
        """
        Audit trail, newest first, grouped by day
        """

        try:
            # Args
            args = ListAuditLogsRequest.get_data()

            # Validations
            AuditLogValidation().validate(args)

            # Controller
            result = AuditLogController().list_logs(args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
