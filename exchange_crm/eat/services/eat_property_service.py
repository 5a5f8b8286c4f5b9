"""
EAT Identified Property Service

Same field rules as exchange identified properties, scoped to a
parked file. No identification rule pre-check.
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.eat import EATParkedFile, EATIdentifiedProperty, EATPropertyImprovement

# Base
from ...base.lookups import get_or_raise

# Services
from ...exchanges.services.identified_property_service import (
    apply_identified_fields,
    serialize_identified_property,
    serialize_improvement,
)

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message


logger = logging.getLogger(__name__)





class EATPropertyService:

    @staticmethod
    def _commit():
        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "IDENTIFIED_PROPERTY_SAVE_FAILED",
                message = messages.ERROR["IDENTIFIED_PROPERTY_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def list_properties(self, file_id: int) -> list:
        get_or_raise(EATParkedFile, file_id, "EAT_FILE_NOT_FOUND")

        records = (
            EATIdentifiedProperty.query
            .filter(EATIdentifiedProperty.eat_parked_file_id == file_id)
            .order_by(EATIdentifiedProperty.identification_date.desc(), EATIdentifiedProperty.id.desc())
            .all()
        )

        return [serialize_identified_property(record) for record in records]


    def add_property(self, file_id: int, args: dict) -> dict:
        parked_file = get_or_raise(EATParkedFile, file_id, "EAT_FILE_NOT_FOUND")

        record = apply_identified_fields(
            EATIdentifiedProperty(eat_parked_file_id = parked_file.id),
            args,
            creating = True
        )
        db.session.add(record)
        self._commit()

        logger.info("EAT parked file %s identified property %s", parked_file.eat_number, record.id)

        return serialize_identified_property(record)


    def update_property(self, property_id: int, args: dict) -> dict:
        record = get_or_raise(EATIdentifiedProperty, property_id, "IDENTIFIED_PROPERTY_NOT_FOUND")

        apply_identified_fields(record, args)
        self._commit()

        return serialize_identified_property(record)


    def delete_property(self, property_id: int) -> dict:
        record = get_or_raise(EATIdentifiedProperty, property_id, "IDENTIFIED_PROPERTY_NOT_FOUND")

        db.session.delete(record)
        self._commit()

        return {"id": property_id, "message": messages.SUCCESS["IDENTIFIED_PROPERTY_DELETED"]}


    def add_improvement(self, property_id: int, args: dict) -> dict:
        record = get_or_raise(EATIdentifiedProperty, property_id, "IDENTIFIED_PROPERTY_NOT_FOUND")

        improvement = EATPropertyImprovement(
            eat_identified_property_id = record.id,
            description = args["description"].strip(),
            value = args.get("value") or 0
        )
        db.session.add(improvement)
        self._commit()

        return serialize_improvement(improvement)


    def delete_improvement(self, improvement_id: int) -> dict:
        improvement = get_or_raise(EATPropertyImprovement, improvement_id, "IMPROVEMENT_NOT_FOUND")

        db.session.delete(improvement)
        self._commit()

        return {"id": improvement_id, "message": messages.SUCCESS["IMPROVEMENT_DELETED"]}
