"""
EAT Parked File Service

Handles:
    - Create parked file with exchangors, Secretary of State and lender rows
    - List / detail / update
    - One-to-one Secretary of State and lender rows
    - Exchangors
    - Selection lists for the create form
    - Totals sync from invoices and identified properties
"""

# Python Packages
import logging
import re

# Database
from ...config.database import db

# Models
from ...models.eat import (
    EATLLC,
    EATParkedFile,
    EATExchangor,
    EATSecretaryOfState,
    EATLender,
)
from ...models.business_card import BusinessCard
from ...models.tax_account import TaxAccount

# Base
from ...base.lookups import get_or_raise
from ...base.request_context import current_user_id

# Services
from .eat_llc_service import serialize_llc

# Exceptions
from ...util.exceptions import AppException, ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import ZERO, to_decimal, money, format_date, format_datetime


logger = logging.getLogger(__name__)


FILE_FIELDS = (
    "eat_name",
    "eat_llc_id",
    "status",
    "qi_company_id",
    "day_45_date",
    "day_180_date",
    "close_date",
    "total_sale_property_value",
    "improvement_start_date",
    "improvement_estimated_completion_date",
    "improvement_actual_completion_date"
)

SOS_FIELDS = (
    "transfer_type",
    "eat_transfer_to_exchangor_transaction_date",
    "eat_sos_status",
    "eat_client_touchback_date",
    "eat_sos_dissolve_transfer_date"
)

LENDER_FIELDS = (
    "loan_to_value_ratio",
    "lender_business_card_id",
    "lender_note_amount",
    "lender_note_date",
    "lender_document_path"
)

TOTAL_FIELDS = (
    "total_acquired_property_value",
    "total_invoice_value",
    "total_parked_property_value",
    "total_sale_property_value",
    "value_remaining"
)


def parked_file_number(account_name: str, state: str, year: int, sequence: int) -> str:
    """ SMI-TX-2024-002 """

    name3 = re.sub(r"[^A-Za-z0-9]", "", account_name or "")[:3].upper().ljust(3, "X")

    return f"{name3}-{state.upper()}-{year}-{sequence:03d}"


def next_parked_file_sequence(state: str, year: int) -> int:
    """
    Highest issued number for the state and formation year, plus one

    Read from eat_number, which never changes after creation.
    """

    numbers = (
        db.session.query(EATParkedFile.eat_number)
        .filter(EATParkedFile.eat_number.like(f"%-{state}-{year}-%"))
        .all()
    )

    issued = [
        int(number.rsplit("-", 1)[1])
        for (number,) in numbers
        if number.rsplit("-", 1)[1].isdigit()
    ]

    return max(issued, default = 0) + 1


def _serialize_row(row, fields: tuple) -> dict:
    data = {"id": row.id, "eat_parked_file_id": row.eat_parked_file_id}

    for key in fields:
        value = getattr(row, key)

        if hasattr(value, "isoformat"):
            value = format_date(value)
        elif key == "lender_note_amount":
            value = money(value)

        data[key] = value

    return data


def serialize_lender(lender: EATLender) -> dict:
    data = _serialize_row(lender, LENDER_FIELDS)
    card = lender.business_card

    data["business_card"] = {
        "id": card.id,
        "business_name": card.business_name,
        "email": card.email,
        "logo_url": card.logo_url
    } if card else None

    return data


def serialize_exchangor(exchangor: EATExchangor) -> dict:
    account = exchangor.tax_account

    return {
        "id": exchangor.id,
        "eat_parked_file_id": exchangor.eat_parked_file_id,
        "tax_account_id": exchangor.tax_account_id,
        "tax_account": {
            "id": account.id,
            "name": account.name,
            "account_number": account.account_number
        } if account else None
    }


def serialize_parked_file(parked_file: EATParkedFile) -> dict:
    data = {
        "id": parked_file.id,
        "eat_number": parked_file.eat_number,
        "eat_name": parked_file.eat_name,
        "eat_llc_id": parked_file.eat_llc_id,
        "status": parked_file.status,
        "state": parked_file.state,
        "qi_company_id": parked_file.qi_company_id,
        "day_45_date": format_date(parked_file.day_45_date),
        "day_180_date": format_date(parked_file.day_180_date),
        "close_date": format_date(parked_file.close_date),
        "improvement_start_date": format_date(parked_file.improvement_start_date),
        "improvement_estimated_completion_date": format_date(parked_file.improvement_estimated_completion_date),
        "improvement_actual_completion_date": format_date(parked_file.improvement_actual_completion_date),
        "created_by": parked_file.created_by,
        "created_at": format_datetime(parked_file.created_at)
    }
    data.update({key: money(getattr(parked_file, key)) for key in TOTAL_FIELDS})

    return data





class EATFileService:

    # ---------------------------------------------------------
    # Create
    # ---------------------------------------------------------

    def create_file(self, args: dict) -> dict:
        """
        Open an EAT parked file

        File, exchangors, Secretary of State row and lender row
        are written in one unit of work.
        """

        get_or_raise(EATLLC, args["eat_llc_id"], "EAT_LLC_NOT_FOUND")

        account_ids = args["exchangor_tax_account_ids"]
        first_account = get_or_raise(TaxAccount, account_ids[0], "TAX_ACCOUNT_NOT_FOUND")

        state = args["state"].upper()
        formed = args["date_of_formation"]

        try:
            sequence = next_parked_file_sequence(state, formed.year)

            parked_file = EATParkedFile(
                eat_number = parked_file_number(first_account.name, state, formed.year, sequence),
                eat_name = args["eat_name"].strip(),
                eat_llc_id = args["eat_llc_id"],
                state = state,
                status = "pending",
                close_date = formed,
                qi_company_id = args.get("qi_company_id"),
                created_by = current_user_id()
            )
            db.session.add(parked_file)
            db.session.flush()

            for account_id in account_ids:
                db.session.add(EATExchangor(eat_parked_file_id = parked_file.id, tax_account_id = account_id))

            db.session.add(EATSecretaryOfState(eat_parked_file_id = parked_file.id))
            db.session.add(EATLender(eat_parked_file_id = parked_file.id))

            db.session.commit()
            logger.info("EAT parked file %s opened", parked_file.eat_number)

            return self.get_file(parked_file.id)

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "EAT_FILE_CREATE_FAILED",
                message = messages.ERROR["EAT_FILE_CREATE_FAILED"],
                details = get_error_message(errors)
            )



    # ---------------------------------------------------------
    # Read
    # ---------------------------------------------------------

    def list_files(self, status: str = None, search: str = None) -> list:
        query = EATParkedFile.query

        if status:
            query = query.filter(EATParkedFile.status == status)

        if search:
            term = f"%{search.strip()}%"
            query = query.filter(
                db.or_(EATParkedFile.eat_number.ilike(term), EATParkedFile.eat_name.ilike(term))
            )

        files = query.order_by(EATParkedFile.created_at.desc(), EATParkedFile.id.desc()).all()

        return [serialize_parked_file(item) for item in files]


    def get_file(self, file_id: int) -> dict:
        parked_file = get_or_raise(EATParkedFile, file_id, "EAT_FILE_NOT_FOUND")

        data = serialize_parked_file(parked_file)
        data["eat_llc"] = serialize_llc(parked_file.eat_llc, with_access = False) if parked_file.eat_llc else None
        data["exchangors"] = [serialize_exchangor(item) for item in parked_file.exchangors]
        data["secretary_of_state"] = (
            _serialize_row(parked_file.secretary_of_state, SOS_FIELDS)
            if parked_file.secretary_of_state else None
        )
        data["lender"] = serialize_lender(parked_file.lender) if parked_file.lender else None

        return data



    # ---------------------------------------------------------
    # Update
    # ---------------------------------------------------------

    def _save(self, parked_file: EATParkedFile):
        try:
            db.session.commit()
            return self.get_file(parked_file.id)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "EAT_FILE_UPDATE_FAILED",
                message = messages.ERROR["EAT_FILE_UPDATE_FAILED"],
                details = get_error_message(errors)
            )


    def update_file(self, file_id: int, args: dict) -> dict:
        parked_file = get_or_raise(EATParkedFile, file_id, "EAT_FILE_NOT_FOUND")

        for key in FILE_FIELDS:
            if key in args:
                setattr(parked_file, key, args[key])

        return self._save(parked_file)


    def update_secretary_of_state(self, file_id: int, args: dict) -> dict:
        parked_file = get_or_raise(EATParkedFile, file_id, "EAT_FILE_NOT_FOUND")

        row = parked_file.secretary_of_state
        if row is None:
            row = EATSecretaryOfState(eat_parked_file_id = parked_file.id)
            db.session.add(row)

        for key in SOS_FIELDS:
            if key in args:
                setattr(row, key, args[key])

        return self._save(parked_file)


    def update_lender(self, file_id: int, args: dict) -> dict:
        parked_file = get_or_raise(EATParkedFile, file_id, "EAT_FILE_NOT_FOUND")

        row = parked_file.lender
        if row is None:
            row = EATLender(eat_parked_file_id = parked_file.id)
            db.session.add(row)

        if args.get("lender_business_card_id"):
            get_or_raise(BusinessCard, args["lender_business_card_id"], "BUSINESS_CARD_NOT_FOUND")

        for key in LENDER_FIELDS:
            if key in args:
                setattr(row, key, args[key])

        return self._save(parked_file)


    def add_exchangor(self, file_id: int, tax_account_id: int) -> dict:
        parked_file = get_or_raise(EATParkedFile, file_id, "EAT_FILE_NOT_FOUND")
        get_or_raise(TaxAccount, tax_account_id, "TAX_ACCOUNT_NOT_FOUND")

        db.session.add(EATExchangor(eat_parked_file_id = parked_file.id, tax_account_id = tax_account_id))

        return self._save(parked_file)


    def remove_exchangor(self, exchangor_id: int) -> dict:
        exchangor = get_or_raise(EATExchangor, exchangor_id, "EAT_EXCHANGOR_NOT_FOUND")
        parked_file = exchangor.eat_parked_file

        db.session.delete(exchangor)

        return self._save(parked_file)



    # ---------------------------------------------------------
    # Selections / totals
    # ---------------------------------------------------------

    def get_selections(self) -> dict:
        llcs = EATLLC.query.filter(EATLLC.status == "Active").order_by(EATLLC.company_name).all()
        cards = BusinessCard.query.order_by(BusinessCard.business_name).all()
        accounts = TaxAccount.query.order_by(TaxAccount.name).all()

        return {
            "eat_llcs": [
                {"id": llc.id, "company_name": llc.company_name, "eat_number": llc.eat_number}
                for llc in llcs
            ],
            "business_cards": [
                {"id": card.id, "business_name": card.business_name, "email": card.email}
                for card in cards
            ],
            "tax_accounts": [
                {"id": account.id, "name": account.name, "account_number": account.account_number}
                for account in accounts
            ]
        }


    def sync_totals(self, file_id: int) -> dict:
        """
        Recompute invoice, parked and acquired totals

        value_remaining = total_sale_property_value - total_acquired_property_value
        """

        parked_file = get_or_raise(EATParkedFile, file_id, "EAT_FILE_NOT_FOUND")

        invoices = sum((to_decimal(invoice.total_amount) for invoice in parked_file.invoices), ZERO)

        parked = sum(
            (to_decimal(item.value) for item in parked_file.identified_properties if item.is_parked),
            ZERO
        )

        acquired = ZERO
        for item in parked_file.identified_properties:
            if item.status != "acquired":
                continue

            acquired += to_decimal(item.value)
            acquired += sum((to_decimal(improvement.value) for improvement in item.improvements), ZERO)

        parked_file.total_invoice_value = invoices
        parked_file.total_parked_property_value = parked
        parked_file.total_acquired_property_value = acquired
        parked_file.value_remaining = to_decimal(parked_file.total_sale_property_value) - acquired

        logger.info("EAT parked file %s totals synced", parked_file.eat_number)

        return self._save(parked_file)
