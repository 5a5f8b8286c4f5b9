"""
Tax Account Service

Handles:
    - Create individual / spousal / entity tax accounts
      (account number, business name and fee schedule in one unit of work)
    - List, detail, rename, delete
    - Business names (vesting names) of an account
"""

# Python Packages
import logging

# SQLAlchemy
from sqlalchemy import or_

# Database
from ...config.database import db

# Models
from ...models.profile import Profile
from ...models.entity import Entity
from ...models.tax_account import TaxAccount, BusinessName
from ...models.property import PropertyOwnership

# Base
from ...base.lookups import get_or_raise

# Services
from ...audit_logs.services.audit_log_service import AuditLogService
from ...fees.services.fee_schedule_service import FeeScheduleService
from ...profiles.services.profile_service import serialize_profile

# Exceptions
from ...util.exceptions import AppException, ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import format_datetime


logger = logging.getLogger(__name__)


def name_prefix(value: str) -> str:
    """ First 3 letters upper cased, padded with X (Li -> LIX) """

    return (value or "XXX")[:3].upper().ljust(3, "X")


def serialize_business_name(business_name: BusinessName) -> dict:
    return {
        "id": business_name.id,
        "tax_account_id": business_name.tax_account_id,
        "name": business_name.name
    }


def serialize_tax_account(account: TaxAccount) -> dict:
    if account is None:
        return None

    return {
        "id": account.id,
        "name": account.name,
        "account_number": account.account_number,
        "profile_id": account.profile_id,
        "primary_profile_id": account.primary_profile_id,
        "spouse_profile_id": account.spouse_profile_id,
        "entity_id": account.entity_id,
        "is_spousal": account.is_spousal,
        "qi_company_id": account.qi_company_id,
        "owner_name": account.profile.full_name if account.profile else None,
        "spouse_name": account.spouse_profile.full_name if account.spouse_profile else None,
        "entity_name": account.entity.name if account.entity else None,
        "created_at": format_datetime(account.created_at)
    }





class TaxAccountService:

    # ---------------------------------------------------------
    # Create
    # ---------------------------------------------------------

    def create_tax_account(self, args: dict) -> dict:
        """
        Individual tax account

        Args:
            args (dict): name, profile_id, business_name, qi_company_id

        Flow:
            1. Insert account
            2. INV + LAST3 + count of individual accounts (after insert)
            3. Business name (given one or the account name)
            4. Fee schedule copied from active templates
        """

        profile = get_or_raise(Profile, args.get("profile_id"), "PROFILE_NOT_FOUND")
        name = args["name"].strip()

        try:
            account = TaxAccount(
                name = name,
                profile_id = profile.id,
                primary_profile_id = profile.id,
                is_spousal = False,
                qi_company_id = args.get("qi_company_id")
            )
            db.session.add(account)
            db.session.flush()

            sequence = TaxAccount.query.filter(TaxAccount.is_spousal.is_(False)).count()
            account.account_number = f"INV{name_prefix(profile.last_name)}{sequence:03d}"

            business_name = (args.get("business_name") or "").strip() or name
            db.session.add(BusinessName(tax_account_id = account.id, name = business_name))

            FeeScheduleService.seed_from_templates(account.id)

            AuditLogService.record("tax_account", account.id, "create", new_value = account.account_number)

            db.session.commit()
            logger.info("Tax account %s created (%s)", account.id, account.account_number)

            return self.get_tax_account(account.id)

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "TAX_ACCOUNT_CREATE_FAILED",
                message = messages.ERROR["TAX_ACCOUNT_CREATE_FAILED"],
                details = get_error_message(errors)
            )


    def create_spousal_tax_account(self, args: dict) -> dict:
        """
        Joint account of two profiles

        Args:
            args (dict): primary_profile_id, spouse_profile_id,
                primary_tax_account_name, spouse_tax_account_name,
                primary_business_name, spouse_business_name
        """

        primary = get_or_raise(Profile, args.get("primary_profile_id"), "PROFILE_NOT_FOUND")
        spouse = get_or_raise(Profile, args.get("spouse_profile_id"), "PROFILE_NOT_FOUND")

        joint_name = (
            f"{args['primary_tax_account_name'].strip()} & "
            f"{args['spouse_tax_account_name'].strip()}"
        )

        try:
            account = TaxAccount(
                name = joint_name,
                profile_id = primary.id,
                primary_profile_id = primary.id,
                spouse_profile_id = spouse.id,
                is_spousal = True,
                qi_company_id = args.get("qi_company_id")
            )
            db.session.add(account)
            db.session.flush()

            sequence = TaxAccount.query.filter(TaxAccount.is_spousal.is_(True)).count()
            account.account_number = (
                f"INV-{name_prefix(primary.last_name)}{name_prefix(spouse.last_name)}{sequence:03d}"
            )

            business_names = [
                value.strip()
                for value in (args.get("primary_business_name"), args.get("spouse_business_name"))
                if value and value.strip()
            ] or [joint_name]

            for value in business_names:
                db.session.add(BusinessName(tax_account_id = account.id, name = value))

            FeeScheduleService.seed_from_templates(account.id)

            AuditLogService.record("tax_account", account.id, "create", new_value = account.account_number)

            db.session.commit()
            logger.info("Spousal tax account %s created (%s)", account.id, account.account_number)

            return self.get_tax_account(account.id)

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "TAX_ACCOUNT_CREATE_FAILED",
                message = messages.ERROR["TAX_ACCOUNT_CREATE_FAILED"],
                details = get_error_message(errors)
            )


    def create_entity_tax_account(self, entity_id: int, args: dict) -> dict:
        """
        Tax account held by an entity (no owner profile)

        Number: INV + first 3 letters of the account name + count of
        all accounts (after insert). The business name is only added
        when given.
        """

        entity = get_or_raise(Entity, entity_id, "ENTITY_NOT_FOUND")
        name = args["name"].strip()

        try:
            account = TaxAccount(
                name = name,
                entity_id = entity.id,
                is_spousal = False,
                qi_company_id = args.get("qi_company_id")
            )
            db.session.add(account)
            db.session.flush()

            sequence = TaxAccount.query.count()
            account.account_number = f"INV{name_prefix(name)}{sequence:03d}"

            business_name = (args.get("business_name") or "").strip()
            if business_name:
                db.session.add(BusinessName(tax_account_id = account.id, name = business_name))

            FeeScheduleService.seed_from_templates(account.id)

            AuditLogService.record("tax_account", account.id, "create", new_value = account.account_number)

            db.session.commit()
            logger.info("Entity %s tax account %s created", entity.id, account.id)

            return self.get_tax_account(account.id)

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "TAX_ACCOUNT_CREATE_FAILED",
                message = messages.ERROR["TAX_ACCOUNT_CREATE_FAILED"],
                details = get_error_message(errors)
            )



    # ---------------------------------------------------------
    # Read
    # ---------------------------------------------------------

    def list_tax_accounts(self, search: str = None) -> dict:
        """ Newest first, search on name or account number """

        query = TaxAccount.query

        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(
                    TaxAccount.name.ilike(pattern),
                    TaxAccount.account_number.ilike(pattern)
                )
            )

        accounts = query.order_by(TaxAccount.created_at.desc(), TaxAccount.id.desc()).all()

        return {
            "total": len(accounts),
            "tax_accounts": [serialize_tax_account(account) for account in accounts]
        }


    def get_tax_account(self, tax_account_id: int) -> dict:
        """
        Account with business names, owned properties and spouse profile
        """

        account = get_or_raise(TaxAccount, tax_account_id, "TAX_ACCOUNT_NOT_FOUND")

        ownerships = (
            PropertyOwnership.query
            .filter(
                PropertyOwnership.tax_account_id == account.id,
                PropertyOwnership.ownership_type.in_(("current", "pending"))
            )
            .order_by(PropertyOwnership.id.desc())
            .all()
        )

        data = serialize_tax_account(account)
        data["profile"] = serialize_profile(account.profile)
        data["spouse_profile"] = serialize_profile(account.spouse_profile)
        data["business_names"] = [serialize_business_name(item) for item in account.business_names]
        data["properties"] = [
            {
                "ownership_id": ownership.id,
                "ownership_type": ownership.ownership_type,
                "vesting_name": ownership.vesting_name,
                "transaction_id": ownership.transaction_id,
                "property_id": ownership.property.id,
                "address": ownership.property.address,
                "city": ownership.property.city,
                "state": ownership.property.state,
                "zip": ownership.property.zip,
                "property_type": ownership.property.property_type
            }
            for ownership in ownerships
            if ownership.property is not None
        ]

        return data



    # ---------------------------------------------------------
    # Update / Delete
    # ---------------------------------------------------------

    def update_tax_account(self, tax_account_id: int, args: dict) -> dict:
        account = get_or_raise(TaxAccount, tax_account_id, "TAX_ACCOUNT_NOT_FOUND")

        try:
            AuditLogService.record_changes(
                "tax_account", account.id, account, {"name": args["name"].strip()}
            )
            db.session.commit()

            return serialize_tax_account(account)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "TAX_ACCOUNT_UPDATE_FAILED",
                message = messages.ERROR["TAX_ACCOUNT_UPDATE_FAILED"],
                details = get_error_message(errors)
            )


    def delete_tax_account(self, tax_account_id: int) -> dict:
        account = get_or_raise(TaxAccount, tax_account_id, "TAX_ACCOUNT_NOT_FOUND")

        try:
            AuditLogService.record("tax_account", account.id, "delete", old_value = account.account_number)
            db.session.delete(account)
            db.session.commit()
            logger.info("Tax account %s deleted", tax_account_id)

            return {"id": tax_account_id, "message": messages.SUCCESS["TAX_ACCOUNT_DELETED"]}

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "TAX_ACCOUNT_DELETE_FAILED",
                message = messages.ERROR["TAX_ACCOUNT_DELETE_FAILED"],
                details = get_error_message(errors)
            )



    # ---------------------------------------------------------
    # Business Names
    # ---------------------------------------------------------

    def add_business_name(self, tax_account_id: int, name: str) -> dict:
        account = get_or_raise(TaxAccount, tax_account_id, "TAX_ACCOUNT_NOT_FOUND")

        try:
            business_name = BusinessName(tax_account_id = account.id, name = name.strip())
            db.session.add(business_name)
            db.session.commit()

            return serialize_business_name(business_name)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "BUSINESS_NAME_SAVE_FAILED",
                message = messages.ERROR["BUSINESS_NAME_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def update_business_name(self, business_name_id: int, name: str) -> dict:
        business_name = get_or_raise(BusinessName, business_name_id, "BUSINESS_NAME_NOT_FOUND")

        try:
            business_name.name = name.strip()
            db.session.commit()

            return serialize_business_name(business_name)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "BUSINESS_NAME_SAVE_FAILED",
                message = messages.ERROR["BUSINESS_NAME_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def delete_business_name(self, business_name_id: int) -> dict:
        business_name = get_or_raise(BusinessName, business_name_id, "BUSINESS_NAME_NOT_FOUND")

        try:
            db.session.delete(business_name)
            db.session.commit()

            return {"id": business_name_id, "message": messages.SUCCESS["BUSINESS_NAME_DELETED"]}

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "BUSINESS_NAME_SAVE_FAILED",
                message = messages.ERROR["BUSINESS_NAME_SAVE_FAILED"],
                details = get_error_message(errors)
            )
