""" Row lookups that raise NotFoundException instead of aborting... """

# Database
from ..config.database import db

# Exceptions
from ..util.exceptions import NotFoundException

# App Messages
from ..util import messages





def get_or_raise(model, record_id, message_key: str):
    """
    Primary key lookup

    Raises:
        NotFoundException: no row with that id
    """

    record = db.session.get(model, record_id) if record_id is not None else None

    if record is None:
        raise NotFoundException(message = messages.ERROR[message_key])

    return record
