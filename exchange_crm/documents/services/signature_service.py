"""
Signature Service

Typed signatures used when signing documents:
    - Vesting-name signatures (per tax account)
    - Admin signatures (per QI company admin)
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.document import VestingNameSignature, AdminSignature
from ...models.tax_account import TaxAccount

# Base
from ...base.lookups import get_or_raise
from ...base.request_context import current_user_id

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import format_datetime


logger = logging.getLogger(__name__)


SIGNATURE_FIELDS = (
    "signature_type",
    "signature_text",
    "signature_font",
    "printed_name",
    "entity_name",
    "by_name",
    "its_title"
)


def _serialize_signature(signature) -> dict:
    return {
        "id": signature.id,
        "signature_id": signature.signature_id,
        "signature_type": signature.signature_type,
        "signature_text": signature.signature_text,
        "signature_font": signature.signature_font,
        "printed_name": signature.printed_name,
        "entity_name": signature.entity_name,
        "by_name": signature.by_name,
        "its_title": signature.its_title,
        "created_at": format_datetime(signature.created_at)
    }


def serialize_vesting_signature(signature: VestingNameSignature) -> dict:
    data = _serialize_signature(signature)
    data.update({
        "tax_account_id": signature.tax_account_id,
        "vesting_name": signature.vesting_name
    })

    return data


def serialize_admin_signature(signature: AdminSignature) -> dict:
    data = _serialize_signature(signature)
    data.update({
        "admin_user_id": signature.admin_user_id,
        "qi_company_id": signature.qi_company_id,
        "created_by": signature.created_by
    })

    return data





class SignatureService:

    @staticmethod
    def _commit():
        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "DOCUMENT_SAVE_FAILED",
                message = messages.ERROR["DOCUMENT_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    # ── Vesting name signatures ──────────────────────────────

    def list_vesting_signatures(self, tax_account_id: int = None) -> list:
        query = VestingNameSignature.query

        if tax_account_id:
            query = query.filter(VestingNameSignature.tax_account_id == tax_account_id)

        return [
            serialize_vesting_signature(signature)
            for signature in query.order_by(VestingNameSignature.created_at.desc()).all()
        ]


    def create_vesting_signature(self, args: dict) -> dict:
        get_or_raise(TaxAccount, args["tax_account_id"], "TAX_ACCOUNT_NOT_FOUND")

        signature = VestingNameSignature(
            tax_account_id = args["tax_account_id"],
            vesting_name = args["vesting_name"],
            **{key: args.get(key) for key in SIGNATURE_FIELDS}
        )
        db.session.add(signature)
        self._commit()

        logger.info("Vesting signature %s created for tax account %s", signature.signature_id, signature.tax_account_id)

        return serialize_vesting_signature(signature)


    def update_vesting_signature(self, signature_id: int, args: dict) -> dict:
        signature = get_or_raise(VestingNameSignature, signature_id, "SIGNATURE_NOT_FOUND")

        for key in SIGNATURE_FIELDS + ("vesting_name",):
            if key in args:
                setattr(signature, key, args[key])

        self._commit()

        return serialize_vesting_signature(signature)


    def delete_vesting_signature(self, signature_id: int) -> dict:
        signature = get_or_raise(VestingNameSignature, signature_id, "SIGNATURE_NOT_FOUND")

        db.session.delete(signature)
        self._commit()

        return {"id": signature_id, "message": messages.SUCCESS["RECORD_DELETED"]}


    # ── Admin signatures ─────────────────────────────────────

    def list_admin_signatures(self, qi_company_id: str = None) -> list:
        query = AdminSignature.query

        if qi_company_id:
            query = query.filter(AdminSignature.qi_company_id == qi_company_id)

        return [
            serialize_admin_signature(signature)
            for signature in query.order_by(AdminSignature.created_at.desc()).all()
        ]


    def create_admin_signature(self, args: dict) -> dict:
        signature = AdminSignature(
            admin_user_id = args["admin_user_id"],
            qi_company_id = args.get("qi_company_id"),
            created_by = current_user_id(),
            **{key: args.get(key) for key in SIGNATURE_FIELDS}
        )
        db.session.add(signature)
        self._commit()

        return serialize_admin_signature(signature)


    def update_admin_signature(self, signature_id: int, args: dict) -> dict:
        signature = get_or_raise(AdminSignature, signature_id, "SIGNATURE_NOT_FOUND")

        for key in SIGNATURE_FIELDS + ("qi_company_id",):
            if key in args:
                setattr(signature, key, args[key])

        self._commit()

        return serialize_admin_signature(signature)


    def delete_admin_signature(self, signature_id: int) -> dict:
        signature = get_or_raise(AdminSignature, signature_id, "SIGNATURE_NOT_FOUND")

        db.session.delete(signature)
        self._commit()

        return {"id": signature_id, "message": messages.SUCCESS["RECORD_DELETED"]}
