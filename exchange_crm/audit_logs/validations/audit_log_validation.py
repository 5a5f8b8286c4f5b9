"""
Audit Log Validation
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.validators import require_choice





class AuditLogValidation:

    def validate(self, args):
        """
        Validate list filters, converts ids in place
        """

        require_choice(args.get("action_type"), constants.AUDIT_ACTIONS, "action_type", required = False)

        for key in ("entity_id", "limit"):
            if args.get(key) is None:
                continue

            try:
                args[key] = int(args[key])
            except (TypeError, ValueError):
                raise ValidationException(
                    message = messages.ERROR["INVALID_NUMBER"].format(field = key)
                )

        return True
