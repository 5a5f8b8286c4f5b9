"""
Model: Document templates, documents and signatures
Tables: document_template_components, document_templates,
        template_signature_fields, documents, document_signature_requests,
        vesting_name_signatures, admin_signatures

Templates hold rich text HTML in content["html"] with <<placeholder>>
dynamic fields. A document is a template filled for one transaction,
exchange, property or EAT file.
"""

# Python Packages
import uuid

# Database
from ..config.database import db

# Mixins
from .mixins import TimestampMixin


def _uuid():
    return str(uuid.uuid4())





class DocumentTemplateComponent(TimestampMixin, db.Model):
    """ Reusable header / footer... """

    # Table Name
    __tablename__ = "document_template_components"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    name = db.Column(db.String(255), nullable = False)

    component_type = db.Column(db.String(10), nullable = False, doc = "header or footer.")

    content = db.Column(db.JSON, nullable = False, default = dict)

    qi_company_id = db.Column(db.String(64), nullable = True)

    created_by = db.Column(db.String(64), nullable = True)

    def __repr__(self):
        return f"<DocumentTemplateComponent {self.component_type} {self.name}>"





class DocumentTemplate(TimestampMixin, db.Model):
    """ Rich text template with dynamic fields... """

    # Table Name
    __tablename__ = "document_templates"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    name = db.Column(db.String(255), nullable = False)

    description = db.Column(db.Text, nullable = True)

    template_type = db.Column(
        db.String(20),
        nullable = False,
        doc = "transaction, exchange, property or eat."
    )

    content = db.Column(db.JSON, nullable = False, default = dict)

    header_component_id = db.Column(
        db.Integer,
        db.ForeignKey("document_template_components.id", ondelete = "SET NULL"),
        nullable = True
    )

    footer_component_id = db.Column(
        db.Integer,
        db.ForeignKey("document_template_components.id", ondelete = "SET NULL"),
        nullable = True
    )

    dynamic_fields = db.Column(
        db.JSON,
        nullable = False,
        default = list,
        doc = "Placeholders found in content, e.g. ['<<seller name>>']."
    )

    qi_company_id = db.Column(db.String(64), nullable = True)

    is_active = db.Column(db.Boolean, nullable = False, default = True)

    created_by = db.Column(db.String(64), nullable = True)

    # Relationships
    header_component = db.relationship("DocumentTemplateComponent", foreign_keys = [header_component_id])
    footer_component = db.relationship("DocumentTemplateComponent", foreign_keys = [footer_component_id])

    signature_fields = db.relationship(
        "TemplateSignatureField",
        back_populates = "template",
        cascade = "all, delete-orphan",
        order_by = "TemplateSignatureField.signing_order"
    )

    def __repr__(self):
        return f"<DocumentTemplate {self.template_type} {self.name}>"





class TemplateSignatureField(TimestampMixin, db.Model):
    """ Signature / date / text box placed on a template page... """

    # Table Name
    __tablename__ = "template_signature_fields"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    template_id = db.Column(
        db.Integer,
        db.ForeignKey("document_templates.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    field_name = db.Column(db.String(255), nullable = False)
    field_type = db.Column(db.String(20), nullable = False)

    position_x = db.Column(db.Float, nullable = False, default = 0)
    position_y = db.Column(db.Float, nullable = False, default = 0)
    page_number = db.Column(db.Integer, nullable = False, default = 1)
    width = db.Column(db.Float, nullable = False, default = 200)
    height = db.Column(db.Float, nullable = False, default = 50)

    signer_role = db.Column(db.String(100), nullable = True)
    is_required = db.Column(db.Boolean, nullable = False, default = True)
    signing_order = db.Column(db.Integer, nullable = False, default = 1)

    # Relationship
    template = db.relationship("DocumentTemplate", back_populates = "signature_fields")

    def __repr__(self):
        return f"<TemplateSignatureField {self.field_name}>"





class Document(TimestampMixin, db.Model):
    """ Filled template... """

    # Table Name
    __tablename__ = "documents"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    template_id = db.Column(
        db.Integer,
        db.ForeignKey("document_templates.id", ondelete = "SET NULL"),
        nullable = True
    )

    document_name = db.Column(db.String(255), nullable = False)

    document_number = db.Column(db.String(50), nullable = False, index = True)

    transaction_id = db.Column(db.Integer, db.ForeignKey("transactions.id", ondelete = "CASCADE"), nullable = True, index = True)
    exchange_id = db.Column(db.Integer, db.ForeignKey("exchanges.id", ondelete = "CASCADE"), nullable = True)
    property_id = db.Column(db.Integer, db.ForeignKey("properties.id", ondelete = "CASCADE"), nullable = True)
    eat_parked_file_id = db.Column(db.Integer, db.ForeignKey("eat_parked_files.id", ondelete = "CASCADE"), nullable = True)

    content = db.Column(db.JSON, nullable = False, default = dict)

    pdf_url = db.Column(db.Text, nullable = True)

    status = db.Column(db.String(30), nullable = False, default = "draft")

    qi_company_id = db.Column(db.String(64), nullable = True)

    created_by = db.Column(db.String(64), nullable = True)

    completed_at = db.Column(db.DateTime(timezone = True), nullable = True)

    # Relationships
    template = db.relationship("DocumentTemplate")

    signature_requests = db.relationship(
        "DocumentSignatureRequest",
        back_populates = "document",
        cascade = "all, delete-orphan",
        order_by = "DocumentSignatureRequest.signing_order"
    )

    def __repr__(self):
        return f"<Document {self.document_number}>"





class DocumentSignatureRequest(TimestampMixin, db.Model):
    """ One signature asked of one signer... """

    # Table Name
    __tablename__ = "document_signature_requests"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    document_id = db.Column(
        db.Integer,
        db.ForeignKey("documents.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    template_field_id = db.Column(
        db.Integer,
        db.ForeignKey("template_signature_fields.id", ondelete = "SET NULL"),
        nullable = True
    )

    signer_user_id = db.Column(db.String(64), nullable = True)
    signer_email = db.Column(db.String(255), nullable = True)
    signer_name = db.Column(db.String(255), nullable = True)

    admin_signature_id = db.Column(
        db.Integer,
        db.ForeignKey("admin_signatures.id", ondelete = "SET NULL"),
        nullable = True
    )

    vesting_signature_id = db.Column(
        db.Integer,
        db.ForeignKey("vesting_name_signatures.id", ondelete = "SET NULL"),
        nullable = True
    )

    status = db.Column(db.String(20), nullable = False, default = "pending")

    signing_order = db.Column(db.Integer, nullable = False, default = 1)

    signed_at = db.Column(db.DateTime(timezone = True), nullable = True)
    signature_image_url = db.Column(db.Text, nullable = True)
    ip_address = db.Column(db.String(64), nullable = True)
    user_agent = db.Column(db.Text, nullable = True)
    sent_at = db.Column(db.DateTime(timezone = True), nullable = True)
    viewed_at = db.Column(db.DateTime(timezone = True), nullable = True)
    reminder_sent_at = db.Column(db.DateTime(timezone = True), nullable = True)

    # Relationships
    document = db.relationship("Document", back_populates = "signature_requests")
    template_field = db.relationship("TemplateSignatureField")

    def __repr__(self):
        return f"<DocumentSignatureRequest {self.id} {self.status}>"





class VestingNameSignature(TimestampMixin, db.Model):
    """ Typed signature of a vesting name... """

    # Table Name
    __tablename__ = "vesting_name_signatures"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    tax_account_id = db.Column(
        db.Integer,
        db.ForeignKey("tax_accounts.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    vesting_name = db.Column(db.String(255), nullable = False)

    signature_type = db.Column(db.String(20), nullable = False, doc = "property or entity.")
    signature_text = db.Column(db.String(255), nullable = False)
    signature_font = db.Column(db.String(100), nullable = False)

    printed_name = db.Column(db.String(255), nullable = True)
    entity_name = db.Column(db.String(255), nullable = True)
    by_name = db.Column(db.String(255), nullable = True)
    its_title = db.Column(db.String(255), nullable = True)

    signature_id = db.Column(db.String(36), nullable = False, unique = True, default = _uuid)

    def __repr__(self):
        return f"<VestingNameSignature {self.vesting_name}>"





class AdminSignature(TimestampMixin, db.Model):
    """ Typed signature of an admin (QI officer)... """

    # Table Name
    __tablename__ = "admin_signatures"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    admin_user_id = db.Column(db.String(64), nullable = False, index = True)

    signature_type = db.Column(db.String(20), nullable = False)
    signature_text = db.Column(db.String(255), nullable = False)
    signature_font = db.Column(db.String(100), nullable = False)

    printed_name = db.Column(db.String(255), nullable = True)
    entity_name = db.Column(db.String(255), nullable = True)
    by_name = db.Column(db.String(255), nullable = True)
    its_title = db.Column(db.String(255), nullable = True)

    signature_id = db.Column(db.String(36), nullable = False, unique = True, default = _uuid)

    qi_company_id = db.Column(db.String(64), nullable = True)

    created_by = db.Column(db.String(64), nullable = True)

    def __repr__(self):
        return f"<AdminSignature {self.admin_user_id}>"
