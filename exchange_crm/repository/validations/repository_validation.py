"""
Repository Validation
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

# Utils
from ...util.validators import is_blank, require_choice, require_file





class RepositoryValidation:

    def validate_entity(self, entity_type, entity_id):
        require_choice(entity_type, constants.REPOSITORY_ENTITY_TYPES, "entity_type")

        if is_blank(entity_id):
            raise ValidationException(
                message = messages.ERROR["FIELD_REQUIRED"].format(field = "entity_id")
            )

        return True


    def validate_folder_create(self, args):
        if not args or is_blank(args.get("repository_id")):
            raise ValidationException(
                message = messages.ERROR["FIELD_REQUIRED"].format(field = "repository_id")
            )

        return self.validate_folder_name(args)


    def validate_folder_name(self, args):
        if not args or is_blank(args.get("name")):
            raise ValidationException(message = messages.ERROR["FOLDER_NAME_REQUIRED"])

        args["name"] = args["name"].strip()

        return True


    def validate_file_name(self, args):
        if not args or is_blank(args.get("name")):
            raise ValidationException(message = messages.ERROR["FILE_NAME_REQUIRED"])

        args["name"] = args["name"].strip()

        return True


    def validate_upload(self, args):
        require_file(args.get("file"))

        return True
