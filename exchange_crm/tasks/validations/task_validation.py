"""
Task Validation
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.validators import is_blank, require, require_choice, optional_date, optional_int





class TaskValidation:

    def validate_filter(self, args):
        if "entity_id" in args:
            args["entity_id"] = optional_int(args.get("entity_id"), "entity_id")

        if "status" in args:
            require_choice(args.get("status"), constants.TASK_STATUSES, "status")

        return True


    def validate_create(self, args):
        if not args or any(is_blank(args.get(key)) for key in ("title", "entity_type", "entity_id")):
            raise ValidationException(message = messages.ERROR["TASK_FIELDS_REQUIRED"])

        args["title"] = args["title"].strip()
        args["entity_id"] = optional_int(args.get("entity_id"), "entity_id")
        args["due_date"] = optional_date(args.get("due_date"), "due_date")

        for assignee_type in args.get("assignee_types") or []:
            require_choice(assignee_type or "user", constants.ASSIGNEE_TYPES, "assignee_types")

        return True


    def validate_update(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if "title" in args:
            args["title"] = require(args.get("title"), "title").strip()

        if "due_date" in args:
            args["due_date"] = optional_date(args.get("due_date"), "due_date")

        return True


    def validate_status(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        require_choice(args.get("status"), constants.TASK_STATUSES, "status")

        return True


    def validate_note(self, args):
        if not args or is_blank(args.get("note_text")):
            raise ValidationException(message = messages.ERROR["TASK_NOTE_REQUIRED"])

        args["note_text"] = args["note_text"].strip()

        return True
