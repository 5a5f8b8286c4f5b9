"""
EAT Invoice Service

Handles:
    - Invoices of a parked file with their items
    - Invoice total = sum of item amounts, recomputed on every item change
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.eat import EATParkedFile, EATInvoice, EATInvoiceItem

# Base
from ...base.lookups import get_or_raise
from ...base.request_context import current_user_id

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import ZERO, to_decimal, money, format_date, format_datetime


logger = logging.getLogger(__name__)


INVOICE_FIELDS = ("invoice_type", "paid_to", "invoice_date", "invoice_number", "invoice_document_path")


def serialize_item(item: EATInvoiceItem) -> dict:
    return {
        "id": item.id,
        "eat_invoice_id": item.eat_invoice_id,
        "property_id": item.property_id,
        "property_address": item.property.address if item.property else None,
        "description": item.description,
        "amount": money(item.amount)
    }


def serialize_invoice(invoice: EATInvoice) -> dict:
    return {
        "id": invoice.id,
        "eat_parked_file_id": invoice.eat_parked_file_id,
        "invoice_type": invoice.invoice_type,
        "paid_to": invoice.paid_to,
        "invoice_date": format_date(invoice.invoice_date),
        "invoice_number": invoice.invoice_number,
        "invoice_document_path": invoice.invoice_document_path,
        "total_amount": money(invoice.total_amount),
        "items": [serialize_item(item) for item in invoice.items],
        "created_by": invoice.created_by,
        "created_at": format_datetime(invoice.created_at)
    }


def recompute_total(invoice: EATInvoice):
    invoice.total_amount = sum((to_decimal(item.amount) for item in invoice.items), ZERO)





class EATInvoiceService:

    @staticmethod
    def _commit():
        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "EAT_INVOICE_SAVE_FAILED",
                message = messages.ERROR["EAT_INVOICE_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def list_invoices(self, file_id: int) -> list:
        get_or_raise(EATParkedFile, file_id, "EAT_FILE_NOT_FOUND")

        invoices = (
            EATInvoice.query
            .filter(EATInvoice.eat_parked_file_id == file_id)
            .order_by(EATInvoice.invoice_date.desc(), EATInvoice.id.desc())
            .all()
        )

        return [serialize_invoice(invoice) for invoice in invoices]


    def create_invoice(self, file_id: int, args: dict) -> dict:
        parked_file = get_or_raise(EATParkedFile, file_id, "EAT_FILE_NOT_FOUND")

        invoice = EATInvoice(
            eat_parked_file_id = parked_file.id,
            created_by = current_user_id(),
            **{key: args.get(key) for key in INVOICE_FIELDS}
        )

        for item in args.get("items") or []:
            invoice.items.append(EATInvoiceItem(
                description = item["description"].strip(),
                amount = item["amount"],
                property_id = item.get("property_id") or None
            ))

        recompute_total(invoice)
        db.session.add(invoice)
        self._commit()

        logger.info("Invoice %s added to EAT parked file %s", invoice.id, parked_file.eat_number)

        return serialize_invoice(invoice)


    def get_invoice(self, invoice_id: int) -> dict:
        return serialize_invoice(get_or_raise(EATInvoice, invoice_id, "EAT_INVOICE_NOT_FOUND"))


    def update_invoice(self, invoice_id: int, args: dict) -> dict:
        invoice = get_or_raise(EATInvoice, invoice_id, "EAT_INVOICE_NOT_FOUND")

        for key in INVOICE_FIELDS:
            if key in args:
                setattr(invoice, key, args[key])

        self._commit()

        return serialize_invoice(invoice)


    def delete_invoice(self, invoice_id: int) -> dict:
        invoice = get_or_raise(EATInvoice, invoice_id, "EAT_INVOICE_NOT_FOUND")

        db.session.delete(invoice)
        self._commit()

        return {"id": invoice_id, "message": messages.SUCCESS["RECORD_DELETED"]}


    def add_item(self, invoice_id: int, args: dict) -> dict:
        invoice = get_or_raise(EATInvoice, invoice_id, "EAT_INVOICE_NOT_FOUND")

        invoice.items.append(EATInvoiceItem(
            description = args["description"].strip(),
            amount = args["amount"],
            property_id = args.get("property_id") or None
        ))
        recompute_total(invoice)
        self._commit()

        return serialize_invoice(invoice)


    def delete_item(self, item_id: int) -> dict:
        item = get_or_raise(EATInvoiceItem, item_id, "EAT_INVOICE_ITEM_NOT_FOUND")
        invoice = item.invoice

        invoice.items.remove(item)
        recompute_total(invoice)
        self._commit()

        return serialize_invoice(invoice)
