"""
Business Card Service

Handles:
    - Lender / vendor business cards with their branches
    - Logo upload to object storage
"""

# Python Packages
import logging
import time

# SQLAlchemy
from sqlalchemy import or_

# Database
from ...config.database import db

# Models
from ...models.business_card import BusinessCard, Branch

# Base
from ...base import constants
from ...base.lookups import get_or_raise

# Vendors
from ...vendors.storage import StorageUploader

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import format_datetime
from ...util.validators import is_blank


logger = logging.getLogger(__name__)


BRANCH_FIELDS = ("branch_name", "state", "address", "email")


def serialize_branch(branch: Branch) -> dict:
    data = {"id": branch.id, "business_card_id": branch.business_card_id}
    data.update({key: getattr(branch, key) for key in BRANCH_FIELDS})

    return data


def serialize_business_card(card: BusinessCard, with_branches: bool = True) -> dict:
    data = {
        "id": card.id,
        "business_name": card.business_name,
        "email": card.email,
        "logo_url": card.logo_url,
        "created_at": format_datetime(card.created_at)
    }

    if with_branches:
        data["branches"] = [serialize_branch(branch) for branch in card.branches]

    return data


def _branches(rows) -> list:
    """ Skip entirely blank branch rows """

    branches = []

    for row in rows or []:
        if all(is_blank(row.get(key)) for key in BRANCH_FIELDS):
            continue

        branches.append(Branch(**{key: (row.get(key) or "").strip() or None for key in BRANCH_FIELDS}))

    return branches





class BusinessCardService:

    def _commit(self):
        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "BUSINESS_CARD_SAVE_FAILED",
                message = messages.ERROR["BUSINESS_CARD_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def list_cards(self, search: str = None) -> list:
        query = BusinessCard.query

        if search:
            term = f"%{search.strip()}%"
            query = query.filter(or_(BusinessCard.business_name.ilike(term), BusinessCard.email.ilike(term)))

        cards = query.order_by(BusinessCard.created_at.desc(), BusinessCard.id.desc()).all()

        return [serialize_business_card(card) for card in cards]


    def create_card(self, args: dict) -> dict:
        card = BusinessCard(business_name = args["business_name"], email = args["email"])
        card.branches.extend(_branches(args.get("branches")))

        db.session.add(card)
        self._commit()

        logger.info("Business card %s created with %s branch(es)", card.id, len(card.branches))

        return serialize_business_card(card)


    def get_card(self, card_id: int) -> dict:
        return serialize_business_card(get_or_raise(BusinessCard, card_id, "BUSINESS_CARD_NOT_FOUND"))


    def update_card(self, card_id: int, args: dict) -> dict:
        """ Branches, when given, replace the current ones """

        card = get_or_raise(BusinessCard, card_id, "BUSINESS_CARD_NOT_FOUND")

        for key in ("business_name", "email"):
            if key in args:
                setattr(card, key, args[key])

        if "branches" in args:
            card.branches = _branches(args.get("branches"))

        self._commit()

        return serialize_business_card(card)


    def delete_card(self, card_id: int) -> dict:
        card = get_or_raise(BusinessCard, card_id, "BUSINESS_CARD_NOT_FOUND")

        db.session.delete(card)
        self._commit()

        return {"id": card_id, "message": messages.SUCCESS["RECORD_DELETED"]}


    def upload_logo(self, card_id: int, file) -> dict:
        card = get_or_raise(BusinessCard, card_id, "BUSINESS_CARD_NOT_FOUND")

        ext = file.filename.rsplit(".", 1)[-1].lower()
        key = f"business-cards/{card.id}/{int(time.time() * 1000)}.{ext}"
        bucket = constants.STORAGE_DOCUMENTS_BUCKET

        uploader = StorageUploader()
        uploader.upload_file(file_obj = file, key = key, bucket = bucket)

        card.logo_url = uploader.public_url(key, bucket)
        self._commit()

        return serialize_business_card(card)
