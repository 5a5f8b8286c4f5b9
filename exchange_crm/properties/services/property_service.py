"""
Property Service

Handles:
    - Search / create / update properties
    - Ownership history (current, pending, prior)
    - Assign and remove current ownership
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.property import Property, PropertyOwnership
from ...models.tax_account import TaxAccount, BusinessName

# Base
from ...base.lookups import get_or_raise

# Services
from ...audit_logs.services.audit_log_service import AuditLogService

# Exceptions
from ...util.exceptions import AppException, ServiceException, NotFoundException, ValidationException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import format_datetime


logger = logging.getLogger(__name__)


EDITABLE_FIELDS = ("address", "city", "state", "zip", "property_type", "legal_description")


def serialize_property(record: Property) -> dict:
    return {
        "id": record.id,
        "address": record.address,
        "city": record.city,
        "state": record.state,
        "zip": record.zip,
        "property_type": record.property_type,
        "legal_description": record.legal_description,
        "transaction_id": record.transaction_id,
        "business_name_id": record.business_name_id,
        "business_name": record.business_name.name if record.business_name else None,
        "created_at": format_datetime(record.created_at)
    }


def serialize_ownership(ownership: PropertyOwnership) -> dict:
    return {
        "id": ownership.id,
        "property_id": ownership.property_id,
        "tax_account_id": ownership.tax_account_id,
        "tax_account_name": ownership.tax_account.name if ownership.tax_account else None,
        "transaction_id": ownership.transaction_id,
        "business_name_id": ownership.business_name_id,
        "ownership_type": ownership.ownership_type,
        "vesting_name": ownership.vesting_name,
        "non_exchange_name": ownership.non_exchange_name,
        "created_at": format_datetime(ownership.created_at)
    }





class PropertyService:

    def list_properties(self, search: str = None) -> dict:
        query = Property.query

        if search:
            query = query.filter(Property.address.ilike(f"%{search.strip()}%"))

        properties = query.order_by(Property.created_at.desc(), Property.id.desc()).all()

        return {
            "total": len(properties),
            "properties": [serialize_property(item) for item in properties]
        }


    def get_property(self, property_id: int) -> dict:
        """ Property plus its ownership history """

        record = get_or_raise(Property, property_id, "PROPERTY_NOT_FOUND")

        ownerships = (
            PropertyOwnership.query
            .filter(PropertyOwnership.property_id == record.id)
            .order_by(PropertyOwnership.created_at.desc(), PropertyOwnership.id.desc())
            .all()
        )

        data = serialize_property(record)
        data["ownership"] = [serialize_ownership(item) for item in ownerships]

        return data


    def create_property(self, args: dict) -> dict:
        try:
            record = Property(**{key: args.get(key) for key in EDITABLE_FIELDS})
            db.session.add(record)
            db.session.flush()

            AuditLogService.record("property", record.id, "create", new_value = record.address)
            db.session.commit()

            logger.info("Property %s created", record.id)

            return serialize_property(record)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "PROPERTY_SAVE_FAILED",
                message = messages.ERROR["PROPERTY_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def update_property(self, property_id: int, args: dict) -> dict:
        record = get_or_raise(Property, property_id, "PROPERTY_NOT_FOUND")

        try:
            changes = {key: args[key] for key in EDITABLE_FIELDS if key in args}
            AuditLogService.record_changes("property", record.id, record, changes)
            db.session.commit()

            return serialize_property(record)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "PROPERTY_SAVE_FAILED",
                message = messages.ERROR["PROPERTY_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    # ---------------------------------------------------------
    # Ownership
    # ---------------------------------------------------------

    def assign_ownership(self, property_id: int, args: dict) -> dict:
        """
        Title the property to a tax account

        The account's previous current row becomes prior.
        """

        record = get_or_raise(Property, property_id, "PROPERTY_NOT_FOUND")
        account = get_or_raise(TaxAccount, args.get("tax_account_id"), "TAX_ACCOUNT_NOT_FOUND")

        business_name = None
        if args.get("business_name_id"):
            business_name = get_or_raise(BusinessName, args["business_name_id"], "BUSINESS_NAME_NOT_FOUND")

            if business_name.tax_account_id != account.id:
                raise ValidationException(message = messages.ERROR["BUSINESS_NAME_NOT_FOUND"])

        try:
            (
                PropertyOwnership.query
                .filter(
                    PropertyOwnership.property_id == record.id,
                    PropertyOwnership.tax_account_id == account.id,
                    PropertyOwnership.ownership_type == "current"
                )
                .update({"ownership_type": "prior"}, synchronize_session = "fetch")
            )

            ownership = PropertyOwnership(
                property_id = record.id,
                tax_account_id = account.id,
                business_name_id = business_name.id if business_name else None,
                ownership_type = "current",
                vesting_name = args.get("vesting_name") or (business_name.name if business_name else None)
            )
            db.session.add(ownership)

            record.business_name_id = business_name.id if business_name else None

            AuditLogService.record(
                "property", record.id, "update",
                field_name = "ownership",
                new_value = account.name
            )
            db.session.commit()

            logger.info("Property %s assigned to tax account %s", record.id, account.id)

            return self.get_property(record.id)

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "PROPERTY_SAVE_FAILED",
                message = messages.ERROR["PROPERTY_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def remove_ownership(self, property_id: int, tax_account_id: int) -> dict:
        record = get_or_raise(Property, property_id, "PROPERTY_NOT_FOUND")

        current = (
            PropertyOwnership.query
            .filter(
                PropertyOwnership.property_id == record.id,
                PropertyOwnership.tax_account_id == tax_account_id,
                PropertyOwnership.ownership_type == "current"
            )
            .all()
        )

        if not current:
            raise NotFoundException(message = messages.ERROR["OWNERSHIP_NOT_FOUND"])

        try:
            for ownership in current:
                ownership.ownership_type = "prior"

            record.business_name_id = None

            AuditLogService.record(
                "property", record.id, "update",
                field_name = "ownership",
                old_value = tax_account_id
            )
            db.session.commit()

            return {"message": messages.SUCCESS["OWNERSHIP_REMOVED"]}

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "PROPERTY_SAVE_FAILED",
                message = messages.ERROR["PROPERTY_SAVE_FAILED"],
                details = get_error_message(errors)
            )
