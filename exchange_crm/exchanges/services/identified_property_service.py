"""
Identified Property Service

Handles:
    - Replacement properties identified within the 45 day window
    - Identification rule pre-check (3 property / 200% / 95%)
    - Improvements of an identified property
    - Rule status of an exchange
"""

# Python Packages
import logging
from datetime import date

# Database
from ...config.database import db

# Models
from ...models.exchange import Exchange, IdentifiedProperty, PropertyImprovement

# Base
from ...base.lookups import get_or_raise
from ...base.request_context import current_user_id

# Services
from .exchange_service import entries_for_exchange
from .rule_service import calculate_exchange_rule, can_add_property

# Calculations
from ...accounting.calculations import calculate_exchange_financials

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import money, format_date, format_datetime


logger = logging.getLogger(__name__)

# Columns shared by exchange and EAT identified properties
IDENTIFIED_FIELDS = (
    "property_id",
    "identification_type",
    "property_type",
    "description",
    "status",
    "percentage",
    "value",
    "identification_date",
    "is_parked",
    "document_storage_path"
)


def apply_identified_fields(record, args: dict, creating: bool = False):
    """ Copy validated payload keys onto an identified property row """

    for key in IDENTIFIED_FIELDS:
        if key in args:
            setattr(record, key, args[key])

    if "metadata" in args:
        record.extra = args["metadata"]

    if creating:
        record.status = record.status or "identified"
        record.identification_date = record.identification_date or date.today()
        record.is_parked = bool(record.is_parked)
        record.created_by = current_user_id()

    return record


def serialize_improvement(improvement) -> dict:
    return {
        "id": improvement.id,
        "description": improvement.description,
        "value": money(improvement.value),
        "created_at": format_datetime(improvement.created_at)
    }


def serialize_identified_property(record) -> dict:
    return {
        "id": record.id,
        "property_id": record.property_id,
        "property_address": record.property.address if record.property else None,
        "identification_type": record.identification_type,
        "property_type": record.property_type,
        "description": record.description,
        "status": record.status,
        "percentage": money(record.percentage),
        "value": money(record.value),
        "identification_date": format_date(record.identification_date),
        "is_parked": record.is_parked,
        "document_storage_path": record.document_storage_path,
        "metadata": record.extra,
        "created_by": record.created_by,
        "improvements": [serialize_improvement(item) for item in record.improvements],
        "created_at": format_datetime(record.created_at)
    }





class IdentifiedPropertyService:

    @staticmethod
    def _sale_value(exchange: Exchange):
        """ Relinquished value computed from the ledger """

        financials = calculate_exchange_financials(entries_for_exchange(exchange.id), exchange.id)
        return financials.total_sale_property_value


    def list_properties(self, exchange_id: int) -> list:
        exchange = get_or_raise(Exchange, exchange_id, "EXCHANGE_NOT_FOUND")

        return [serialize_identified_property(item) for item in exchange.identified_properties]


    def add_property(self, exchange_id: int, args: dict) -> dict:
        """
        Identify one more replacement property

        Raises:
            ServiceException: EXCHANGE_RULE_VIOLATION when the rule pre-check refuses
        """

        exchange = get_or_raise(Exchange, exchange_id, "EXCHANGE_NOT_FOUND")

        check = can_add_property(
            exchange.identified_properties,
            args.get("value"),
            self._sale_value(exchange)
        )

        if not check["can_add"]:
            raise ServiceException(
                error_code = "EXCHANGE_RULE_VIOLATION",
                message = check["reason"] or messages.ERROR["EXCHANGE_RULE_VIOLATION"]
            )

        try:
            record = apply_identified_fields(
                IdentifiedProperty(exchange_id = exchange.id),
                args,
                creating = True
            )
            db.session.add(record)
            db.session.commit()
            logger.info("Exchange %s identified property %s", exchange.id, record.id)

            data = serialize_identified_property(record)
            data["rule_notice"] = check["reason"]

            return data

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "IDENTIFIED_PROPERTY_SAVE_FAILED",
                message = messages.ERROR["IDENTIFIED_PROPERTY_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def update_property(self, identified_property_id: int, args: dict) -> dict:
        record = get_or_raise(IdentifiedProperty, identified_property_id, "IDENTIFIED_PROPERTY_NOT_FOUND")

        try:
            apply_identified_fields(record, args)
            db.session.commit()

            return serialize_identified_property(record)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "IDENTIFIED_PROPERTY_SAVE_FAILED",
                message = messages.ERROR["IDENTIFIED_PROPERTY_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def delete_property(self, identified_property_id: int) -> dict:
        record = get_or_raise(IdentifiedProperty, identified_property_id, "IDENTIFIED_PROPERTY_NOT_FOUND")

        try:
            db.session.delete(record)
            db.session.commit()

            return {"id": identified_property_id, "message": messages.SUCCESS["IDENTIFIED_PROPERTY_DELETED"]}

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "IDENTIFIED_PROPERTY_SAVE_FAILED",
                message = messages.ERROR["IDENTIFIED_PROPERTY_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def add_improvement(self, identified_property_id: int, args: dict) -> dict:
        record = get_or_raise(IdentifiedProperty, identified_property_id, "IDENTIFIED_PROPERTY_NOT_FOUND")

        try:
            improvement = PropertyImprovement(
                identified_property_id = record.id,
                description = args["description"].strip(),
                value = args.get("value") or 0
            )
            db.session.add(improvement)
            db.session.commit()

            return serialize_improvement(improvement)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "IDENTIFIED_PROPERTY_SAVE_FAILED",
                message = messages.ERROR["IDENTIFIED_PROPERTY_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def delete_improvement(self, improvement_id: int) -> dict:
        improvement = get_or_raise(PropertyImprovement, improvement_id, "IMPROVEMENT_NOT_FOUND")

        try:
            db.session.delete(improvement)
            db.session.commit()

            return {"id": improvement_id, "message": messages.SUCCESS["IMPROVEMENT_DELETED"]}

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "IDENTIFIED_PROPERTY_SAVE_FAILED",
                message = messages.ERROR["IDENTIFIED_PROPERTY_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def get_rule_status(self, exchange_id: int) -> dict:
        """ Which identification rule applies right now """

        exchange = get_or_raise(Exchange, exchange_id, "EXCHANGE_NOT_FOUND")
        status = calculate_exchange_rule(exchange.identified_properties, self._sale_value(exchange))

        return status.to_dict()
