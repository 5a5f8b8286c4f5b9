"""
Search Validation
"""

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException


MIN_QUERY_LENGTH = 2





class SearchValidation:

    def validate_query(self, args):
        text = (args.get("q") or "").strip()

        if len(text) < MIN_QUERY_LENGTH:
            raise ValidationException(
                message = messages.ERROR["SEARCH_QUERY_TOO_SHORT"].format(MIN_QUERY_LENGTH)
            )

        args["q"] = text

        return True
