"""
Messaging Validation
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.validators import is_blank, require_choice, optional_date, optional_int, require_file





class MessagingValidation:

    def validate_user(self, user_id):
        """ Acting user is needed for participants and read markers """

        if is_blank(user_id):
            raise ValidationException(message = messages.ERROR["USER_REQUIRED"])

        return True


    def validate_filter(self, args):
        if "entity_id" in args:
            args["entity_id"] = optional_int(args.get("entity_id"), "entity_id")

        return True


    def validate_conversation(self, args):
        if not args or is_blank(args.get("entity_type")) or is_blank(args.get("entity_id")):
            raise ValidationException(message = messages.ERROR["CONVERSATION_ENTITY_REQUIRED"])

        args["entity_id"] = optional_int(args.get("entity_id"), "entity_id")

        return True


    def validate_message(self, args):
        files = args.get("files") or []

        for file in files:
            require_file(file)

        if is_blank(args.get("content")) and not files:
            raise ValidationException(message = messages.ERROR["MESSAGE_CONTENT_REQUIRED"])

        args["parent_message_id"] = optional_int(args.get("parent_message_id"), "parent_message_id")

        return True


    def validate_edit(self, args):
        if not args or is_blank(args.get("content")):
            raise ValidationException(message = messages.ERROR["MESSAGE_CONTENT_REQUIRED"])

        return True


    def validate_task(self, args):
        if "due_date" in args:
            args["due_date"] = optional_date(args.get("due_date"), "due_date")

        for assignee_type in args.get("assignee_types") or []:
            require_choice(assignee_type or "user", constants.ASSIGNEE_TYPES, "assignee_types")

        return True
