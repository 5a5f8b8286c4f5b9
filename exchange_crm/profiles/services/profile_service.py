"""
Profile Service

Handles:
    - List / search people
    - Create / update a profile
    - Profile detail with the tax accounts it owns or co-owns
"""

# Python Packages
import logging

# SQLAlchemy
from sqlalchemy import or_

# Database
from ...config.database import db

# Models
from ...models.profile import Profile
from ...models.tax_account import TaxAccount

# Base
from ...base.lookups import get_or_raise

# Services
from ...audit_logs.services.audit_log_service import AuditLogService

# Exceptions
from ...util.exceptions import AppException, ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.formatters import format_datetime


logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("first_name", "last_name", "email", "phone", "user_id")


def serialize_profile(profile: Profile) -> dict:
    if profile is None:
        return None

    return {
        "id": profile.id,
        "first_name": profile.first_name,
        "last_name": profile.last_name,
        "full_name": profile.full_name,
        "email": profile.email,
        "phone": profile.phone,
        "user_id": profile.user_id,
        "created_at": format_datetime(profile.created_at)
    }


def _clean(value):
    if isinstance(value, str):
        value = value.strip()

    return value or None





class ProfileService:

    def list_profiles(self, search: str = None) -> dict:
        """
        Fetch profiles, newest first

        Args:
            search (str): matches first name, last name or email
        """

        query = Profile.query

        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(
                    Profile.first_name.ilike(pattern),
                    Profile.last_name.ilike(pattern),
                    Profile.email.ilike(pattern)
                )
            )

        profiles = query.order_by(Profile.created_at.desc(), Profile.id.desc()).all()

        return {
            "total": len(profiles),
            "profiles": [serialize_profile(profile) for profile in profiles]
        }


    def get_profile(self, profile_id: int) -> dict:
        """ Profile with the tax accounts where it is owner or spouse """

        profile = get_or_raise(Profile, profile_id, "PROFILE_NOT_FOUND")

        accounts = (
            TaxAccount.query
            .filter(
                or_(
                    TaxAccount.profile_id == profile_id,
                    TaxAccount.spouse_profile_id == profile_id
                )
            )
            .order_by(TaxAccount.created_at.desc(), TaxAccount.id.desc())
            .all()
        )

        data = serialize_profile(profile)
        data["tax_accounts"] = [
            {
                "id": account.id,
                "name": account.name,
                "account_number": account.account_number,
                "is_spousal": account.is_spousal,
                "role": "spouse" if account.spouse_profile_id == profile_id and account.profile_id != profile_id else "owner"
            }
            for account in accounts
        ]

        return data


    def create_profile(self, args: dict) -> dict:
        try:
            profile = Profile(**{key: _clean(args.get(key)) for key in PROFILE_FIELDS})
            db.session.add(profile)
            db.session.flush()

            AuditLogService.record("profile", profile.id, "create", new_value = profile.full_name)

            db.session.commit()
            logger.info("Profile %s created", profile.id)

            return serialize_profile(profile)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "PROFILE_SAVE_FAILED",
                message = messages.ERROR["PROFILE_SAVE_FAILED"],
                details = str(errors)
            )


    def update_profile(self, profile_id: int, args: dict) -> dict:
        """ Partial update, only keys present in the payload """

        profile = get_or_raise(Profile, profile_id, "PROFILE_NOT_FOUND")

        try:
            changes = {
                key: _clean(args.get(key))
                for key in PROFILE_FIELDS
                if key in args
            }
            AuditLogService.record_changes("profile", profile.id, profile, changes)

            db.session.commit()

            return serialize_profile(profile)

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "PROFILE_SAVE_FAILED",
                message = messages.ERROR["PROFILE_SAVE_FAILED"],
                details = str(errors)
            )
