"""
Entity Service

Handles:
    - Entity CRUD
    - Profile access rows (who acts for the entity)
    - Tax accounts, properties and transactions of an entity
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.entity import Entity, EntityProfileAccess
from ...models.tax_account import TaxAccount
from ...models.property import Property, PropertyOwnership
from ...models.transaction import Transaction, TransactionSeller

# Base
from ...base.lookups import get_or_raise
from ...base.request_context import current_user_id

# Services
from ...audit_logs.services.audit_log_service import AuditLogService
from ...tax_accounts.services.tax_account_service import serialize_tax_account
from ...properties.services.property_service import serialize_property
from ...transactions.services.transaction_service import serialize_transaction

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import format_datetime


logger = logging.getLogger(__name__)


ACCESS_FIELDS = ("tax_account_id", "relationship", "has_signing_authority", "is_main_contact")


def serialize_entity(entity: Entity) -> dict:
    return {
        "id": entity.id,
        "name": entity.name,
        "email": entity.email,
        "created_at": format_datetime(entity.created_at)
    }


def serialize_entity_access(access: EntityProfileAccess) -> dict:
    account = access.tax_account

    return {
        "id": access.id,
        "entity_id": access.entity_id,
        "tax_account_id": access.tax_account_id,
        "tax_account_name": account.name if account else None,
        "profile_name": account.profile.full_name if account and account.profile else None,
        "relationship": access.relationship,
        "has_signing_authority": access.has_signing_authority,
        "is_main_contact": access.is_main_contact,
        "created_by": access.created_by
    }





class EntityService:

    def _commit(self):
        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "ENTITY_SAVE_FAILED",
                message = messages.ERROR["ENTITY_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    # ---------------------------------------------------------
    # Entities
    # ---------------------------------------------------------

    def list_entities(self, search: str = None) -> list:
        query = Entity.query

        if search:
            query = query.filter(Entity.name.ilike(f"%{search.strip()}%"))

        entities = query.order_by(Entity.created_at.desc(), Entity.id.desc()).all()

        return [serialize_entity(entity) for entity in entities]


    def create_entity(self, args: dict) -> dict:
        entity = Entity(name = args["name"].strip(), email = (args.get("email") or "").strip() or None)
        db.session.add(entity)
        db.session.flush()

        AuditLogService.record("entity", entity.id, "create", new_value = entity.name)
        self._commit()

        logger.info("Entity %s created", entity.id)

        return serialize_entity(entity)


    def get_entity(self, entity_id: int) -> dict:
        entity = get_or_raise(Entity, entity_id, "ENTITY_NOT_FOUND")

        data = serialize_entity(entity)
        data["profile_access"] = [serialize_entity_access(access) for access in entity.profile_accesses]

        return data


    def update_entity(self, entity_id: int, args: dict) -> dict:
        entity = get_or_raise(Entity, entity_id, "ENTITY_NOT_FOUND")

        changes = {key: args[key] for key in ("name", "email") if key in args}
        AuditLogService.record_changes("entity", entity.id, entity, changes)
        self._commit()

        return serialize_entity(entity)


    def delete_entity(self, entity_id: int) -> dict:
        entity = get_or_raise(Entity, entity_id, "ENTITY_NOT_FOUND")

        db.session.delete(entity)
        AuditLogService.record("entity", entity_id, "delete", old_value = entity.name)
        self._commit()

        logger.info("Entity %s deleted", entity_id)

        return {"id": entity_id, "message": messages.SUCCESS["RECORD_DELETED"]}


    # ---------------------------------------------------------
    # Access
    # ---------------------------------------------------------

    def add_access(self, entity_id: int, args: dict) -> dict:
        entity = get_or_raise(Entity, entity_id, "ENTITY_NOT_FOUND")
        get_or_raise(TaxAccount, args.get("tax_account_id"), "TAX_ACCOUNT_NOT_FOUND")

        access = EntityProfileAccess(
            entity_id = entity.id,
            tax_account_id = args["tax_account_id"],
            relationship = args["relationship"],
            has_signing_authority = bool(args.get("has_signing_authority")),
            is_main_contact = bool(args.get("is_main_contact")),
            created_by = current_user_id()
        )
        db.session.add(access)
        self._commit()

        return serialize_entity_access(access)


    def update_access(self, access_id: int, args: dict) -> dict:
        access = get_or_raise(EntityProfileAccess, access_id, "ENTITY_ACCESS_NOT_FOUND")

        for key in ACCESS_FIELDS:
            if key in args:
                setattr(access, key, args[key])

        self._commit()

        return serialize_entity_access(access)


    def delete_access(self, access_id: int) -> dict:
        access = get_or_raise(EntityProfileAccess, access_id, "ENTITY_ACCESS_NOT_FOUND")

        db.session.delete(access)
        self._commit()

        return {"id": access_id, "message": messages.SUCCESS["RECORD_DELETED"]}


    # ---------------------------------------------------------
    # Related records
    # ---------------------------------------------------------

    def list_tax_accounts(self, entity_id: int) -> list:
        get_or_raise(Entity, entity_id, "ENTITY_NOT_FOUND")

        accounts = (
            TaxAccount.query
            .filter(TaxAccount.entity_id == entity_id)
            .order_by(TaxAccount.name)
            .all()
        )

        return [serialize_tax_account(account) for account in accounts]


    def list_properties(self, entity_id: int) -> list:
        """ Unique properties currently owned by the entity's tax accounts """

        get_or_raise(Entity, entity_id, "ENTITY_NOT_FOUND")

        properties = (
            Property.query
            .join(PropertyOwnership, PropertyOwnership.property_id == Property.id)
            .join(TaxAccount, TaxAccount.id == PropertyOwnership.tax_account_id)
            .filter(
                TaxAccount.entity_id == entity_id,
                PropertyOwnership.ownership_type == "current"
            )
            .distinct()
            .order_by(Property.id)
            .all()
        )

        return [serialize_property(item) for item in properties]


    def list_transactions(self, entity_id: int) -> list:
        """ Transactions where an entity tax account sells """

        get_or_raise(Entity, entity_id, "ENTITY_NOT_FOUND")

        transactions = (
            Transaction.query
            .join(TransactionSeller, TransactionSeller.transaction_id == Transaction.id)
            .join(TaxAccount, TaxAccount.id == TransactionSeller.tax_account_id)
            .filter(TaxAccount.entity_id == entity_id)
            .distinct()
            .order_by(Transaction.created_at.desc(), Transaction.id.desc())
            .all()
        )

        return [serialize_transaction(transaction) for transaction in transactions]
