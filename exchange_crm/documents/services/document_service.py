"""
Document Service

Handles:
    - Generate a document from a template (placeholders filled)
    - List / detail / update / delete documents
    - Signature requests and signing
"""

# Python Packages
import logging
from datetime import date, datetime, timezone

# SQLAlchemy
from sqlalchemy import or_

# Database
from ...config.database import db

# Models
from ...models.document import DocumentTemplate, Document, DocumentSignatureRequest
from ...models.transaction import Transaction
from ...models.property import Property, PropertyOwnership

# Base
from ...base.lookups import get_or_raise
from ...base.request_context import current_user_id

# Services
from .template_filler import fill_placeholders

# Exceptions
from ...util.exceptions import AppException, ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import format_currency, format_date, format_datetime


logger = logging.getLogger(__name__)


TARGET_KEYS = ("transaction_id", "exchange_id", "property_id", "eat_parked_file_id")

REQUEST_FIELDS = (
    "template_field_id",
    "signer_user_id",
    "signer_email",
    "signer_name",
    "admin_signature_id",
    "vesting_signature_id",
    "signing_order"
)


def document_number(today: date, sequence: int) -> str:
    """ DOC-20261019-0007 """

    return f"DOC-{today.strftime('%Y%m%d')}-{sequence:04d}"


def serialize_signature_request(request_row: DocumentSignatureRequest) -> dict:
    return {
        "id": request_row.id,
        "document_id": request_row.document_id,
        "template_field_id": request_row.template_field_id,
        "signer_user_id": request_row.signer_user_id,
        "signer_email": request_row.signer_email,
        "signer_name": request_row.signer_name,
        "admin_signature_id": request_row.admin_signature_id,
        "vesting_signature_id": request_row.vesting_signature_id,
        "status": request_row.status,
        "signing_order": request_row.signing_order,
        "signed_at": format_datetime(request_row.signed_at),
        "signature_image_url": request_row.signature_image_url,
        "ip_address": request_row.ip_address,
        "user_agent": request_row.user_agent,
        "sent_at": format_datetime(request_row.sent_at),
        "viewed_at": format_datetime(request_row.viewed_at)
    }


def serialize_document(document: Document, with_requests: bool = False) -> dict:
    data = {
        "id": document.id,
        "template_id": document.template_id,
        "template_name": document.template.name if document.template else None,
        "document_name": document.document_name,
        "document_number": document.document_number,
        "transaction_id": document.transaction_id,
        "exchange_id": document.exchange_id,
        "property_id": document.property_id,
        "eat_parked_file_id": document.eat_parked_file_id,
        "content": document.content,
        "pdf_url": document.pdf_url,
        "status": document.status,
        "qi_company_id": document.qi_company_id,
        "created_by": document.created_by,
        "completed_at": format_datetime(document.completed_at),
        "created_at": format_datetime(document.created_at)
    }

    if with_requests:
        data["signature_requests"] = [serialize_signature_request(row) for row in document.signature_requests]

    return data


def transaction_placeholder_values(transaction: Transaction) -> dict:
    """ Defaults for transaction templates """

    seller = transaction.sellers[0] if transaction.sellers else None
    buyer = transaction.buyers[0] if transaction.buyers else None

    seller_name = ""
    if seller is not None:
        seller_name = (
            seller.vesting_name
            or seller.non_exchange_name
            or (seller.tax_account.name if seller.tax_account else "")
        )

    buyer_name = ""
    if buyer is not None:
        buyer_name = buyer.non_exchange_name or (buyer.profile.full_name if buyer.profile else "")

    first_property = (
        Property.query
        .outerjoin(PropertyOwnership, PropertyOwnership.property_id == Property.id)
        .filter(
            or_(
                Property.transaction_id == transaction.id,
                PropertyOwnership.transaction_id == transaction.id
            )
        )
        .order_by(Property.id)
        .first()
    )

    return {
        "<<transaction number>>": transaction.transaction_number,
        "<<contract price>>": format_currency(transaction.contract_purchase_price),
        "<<contract date>>": format_date(transaction.contract_date) or "",
        "<<sale type>>": transaction.sale_type,
        "<<seller name>>": seller_name,
        "<<buyer name>>": buyer_name,
        "<<property address>>": first_property.address if first_property else "",
        "<<closing agent>>": transaction.closing_agent.full_name if transaction.closing_agent else ""
    }





class DocumentService:

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


    # ---------------------------------------------------------
    # Documents
    # ---------------------------------------------------------

    def list_documents(self, args: dict) -> list:
        query = Document.query

        for key in TARGET_KEYS:
            if args.get(key):
                query = query.filter(getattr(Document, key) == args[key])

        if args.get("status"):
            query = query.filter(Document.status == args["status"])

        documents = query.order_by(Document.created_at.desc(), Document.id.desc()).all()

        return [serialize_document(document) for document in documents]


    def create_document(self, args: dict) -> dict:
        """
        Fill a template for one target

        Args:
            args (dict):
                template_id, optional transaction_id / exchange_id /
                property_id / eat_parked_file_id, values {placeholder: text}

        Values given by the caller win over the transaction defaults.
        """

        template = get_or_raise(DocumentTemplate, args["template_id"], "TEMPLATE_NOT_FOUND")

        transaction = None
        if args.get("transaction_id"):
            transaction = get_or_raise(Transaction, args["transaction_id"], "TRANSACTION_NOT_FOUND")

        values = {}
        if transaction is not None:
            values.update(transaction_placeholder_values(transaction))
        values.update({key: value for key, value in (args.get("values") or {}).items() if value not in (None, "")})

        html = (template.content or {}).get("html") or ""

        try:
            today = date.today()
            prefix = f"DOC-{today.strftime('%Y%m%d')}-"
            sequence = Document.query.filter(Document.document_number.like(f"{prefix}%")).count() + 1

            document = Document(
                template_id = template.id,
                document_name = (
                    f"{template.name} - {transaction.transaction_number}" if transaction else template.name
                ),
                document_number = document_number(today, sequence),
                content = {"html": fill_placeholders(html, values)},
                status = "draft",
                qi_company_id = template.qi_company_id,
                created_by = current_user_id(),
                **{key: args.get(key) or None for key in TARGET_KEYS}
            )
            db.session.add(document)
            db.session.commit()

            logger.info("Document %s generated from template %s", document.document_number, template.id)

            return serialize_document(document, with_requests = True)

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "DOCUMENT_SAVE_FAILED",
                message = messages.ERROR["DOCUMENT_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def get_document(self, document_id: int) -> dict:
        return serialize_document(get_or_raise(Document, document_id, "DOCUMENT_NOT_FOUND"), with_requests = True)


    def update_document(self, document_id: int, args: dict) -> dict:
        document = get_or_raise(Document, document_id, "DOCUMENT_NOT_FOUND")

        for key in ("document_name", "content", "pdf_url", "status"):
            if key in args:
                setattr(document, key, args[key])

        if args.get("status") == "completed" and document.completed_at is None:
            document.completed_at = datetime.now(timezone.utc)

        self._commit()

        return serialize_document(document, with_requests = True)


    def delete_document(self, document_id: int) -> dict:
        document = get_or_raise(Document, document_id, "DOCUMENT_NOT_FOUND")

        db.session.delete(document)
        self._commit()

        return {"id": document_id, "message": messages.SUCCESS["RECORD_DELETED"]}


    # ---------------------------------------------------------
    # Signature requests
    # ---------------------------------------------------------

    def list_signature_requests(self, document_id: int) -> list:
        document = get_or_raise(Document, document_id, "DOCUMENT_NOT_FOUND")

        return [serialize_signature_request(row) for row in document.signature_requests]


    def create_signature_request(self, document_id: int, args: dict) -> dict:
        """ A draft document starts waiting for signatures """

        document = get_or_raise(Document, document_id, "DOCUMENT_NOT_FOUND")

        request_row = DocumentSignatureRequest(
            document_id = document.id,
            status = "pending",
            **{key: args[key] for key in REQUEST_FIELDS if key in args}
        )
        db.session.add(request_row)

        if document.status == "draft":
            document.status = "pending_signatures"

        self._commit()

        return serialize_signature_request(request_row)


    def sign(self, request_id: int, ip_address: str = None, user_agent: str = None) -> dict:
        """
        Mark one request signed and roll the document status forward

        All requests signed -> fully_signed, otherwise partially_signed.
        """

        request_row = get_or_raise(DocumentSignatureRequest, request_id, "SIGNATURE_REQUEST_NOT_FOUND")
        document = request_row.document

        request_row.status = "signed"
        request_row.signed_at = datetime.now(timezone.utc)
        request_row.ip_address = ip_address
        request_row.user_agent = user_agent

        all_signed = all(row.status == "signed" for row in document.signature_requests)
        document.status = "fully_signed" if all_signed else "partially_signed"

        self._commit()

        logger.info("Signature request %s signed, document %s is %s", request_id, document.document_number, document.status)

        return {
            "signature_request": serialize_signature_request(request_row),
            "document_status": document.status
        }
