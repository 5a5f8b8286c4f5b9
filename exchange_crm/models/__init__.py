"""
Models Package
Registers all SQLAlchemy ORM models so they are discoverable by Flask-SQLAlchemy.

Relationships are declared by class name, so import order only matters
for readability: parents first.
"""

from .profile import Profile
from .entity import Entity, EntityProfileAccess
from .tax_account import TaxAccount, BusinessName
from .business_card import BusinessCard, Branch

from .property import Property, PropertyOwnership
from .transaction import (
    Transaction,
    TransactionSeller,
    TransactionBuyer,
    SettlementSeller,
    SettlementBuyer,
)
from .exchange import Exchange, ExchangeTransaction, IdentifiedProperty, PropertyImprovement

from .accounting_entry import AccountingEntry
from .fee import FeeTemplate, FeeSchedule, FeeChangeHistory

from .eat import (
    USState,
    EATLLC,
    EATLLCProfileAccess,
    EATParkedFile,
    EATExchangor,
    EATSecretaryOfState,
    EATLender,
    EATIdentifiedProperty,
    EATPropertyImprovement,
    EATInvoice,
    EATInvoiceItem,
)

from .document import (
    DocumentTemplateComponent,
    DocumentTemplate,
    TemplateSignatureField,
    Document,
    DocumentSignatureRequest,
    VestingNameSignature,
    AdminSignature,
)
from .repository import DocumentRepository, DocumentFolder, DocumentFile

from .task import Task, TaskAssignment, TaskNote, TaskAttachment
from .messaging import Conversation, ConversationParticipant, Message, MessageAttachment
from .audit_log import AuditLog

__all__ = [
    "Profile",
    "Entity",
    "EntityProfileAccess",
    "TaxAccount",
    "BusinessName",
    "BusinessCard",
    "Branch",
    "Property",
    "PropertyOwnership",
    "Transaction",
    "TransactionSeller",
    "TransactionBuyer",
    "SettlementSeller",
    "SettlementBuyer",
    "Exchange",
    "ExchangeTransaction",
    "IdentifiedProperty",
    "PropertyImprovement",
    "AccountingEntry",
    "FeeTemplate",
    "FeeSchedule",
    "FeeChangeHistory",
    "USState",
    "EATLLC",
    "EATLLCProfileAccess",
    "EATParkedFile",
    "EATExchangor",
    "EATSecretaryOfState",
    "EATLender",
    "EATIdentifiedProperty",
    "EATPropertyImprovement",
    "EATInvoice",
    "EATInvoiceItem",
    "DocumentTemplateComponent",
    "DocumentTemplate",
    "TemplateSignatureField",
    "Document",
    "DocumentSignatureRequest",
    "VestingNameSignature",
    "AdminSignature",
    "DocumentRepository",
    "DocumentFolder",
    "DocumentFile",
    "Task",
    "TaskAssignment",
    "TaskNote",
    "TaskAttachment",
    "Conversation",
    "ConversationParticipant",
    "Message",
    "MessageAttachment",
    "AuditLog",
]
