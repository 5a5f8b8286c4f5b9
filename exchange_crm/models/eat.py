"""
Model: EAT (Exchange Accommodation Titleholder)
Tables: us_states, eat_llcs, eat_llc_profile_access, eat_parked_files,
        eat_exchangors, eat_secretary_of_state, eat_lenders,
        eat_identified_properties, eat_property_improvements,
        eat_invoices, eat_invoice_items

An EAT LLC holds title while a parked file (reverse / improvement
exchange) is open. Each parked file has exactly one Secretary of State
row and one lender row, created empty with the file.
"""

# Database
from ..config.database import db

# Mixins
from .mixins import TimestampMixin





class USState(db.Model):
    """ State lookup for LLC formation... """

    # Table Name
    __tablename__ = "us_states"

    code = db.Column(db.String(2), primary_key = True)

    name = db.Column(db.String(100), nullable = False)

    is_popular_for_llc = db.Column(db.Boolean, nullable = False, default = False)

    def __repr__(self):
        return f"<USState {self.code}>"





class EATLLC(TimestampMixin, db.Model):
    """ Titleholding LLC... """

    # Table Name
    __tablename__ = "eat_llcs"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    company_name = db.Column(db.String(255), nullable = False)

    eat_number = db.Column(db.String(50), nullable = True, index = True, doc = "EAT-{STATE}-{seq}")

    state_formation = db.Column(db.String(2), nullable = False)

    date_formation = db.Column(db.Date, nullable = False)

    licensed_in = db.Column(db.String(100), nullable = True)
    ein = db.Column(db.String(20), nullable = True)
    registered_agent = db.Column(db.String(255), nullable = True)
    registered_agent_address = db.Column(db.Text, nullable = True)
    qi_company_id = db.Column(db.String(64), nullable = True)

    status = db.Column(db.String(20), nullable = False, default = "Active")

    created_by = db.Column(db.String(64), nullable = True)

    # Relationship
    profile_accesses = db.relationship(
        "EATLLCProfileAccess",
        back_populates = "eat_llc",
        cascade = "all, delete-orphan",
        order_by = "EATLLCProfileAccess.id"
    )

    def __repr__(self):
        return f"<EATLLC {self.eat_number or self.company_name}>"





class EATLLCProfileAccess(db.Model):
    """ Admin user allowed to act for an EAT LLC... """

    # Table Name
    __tablename__ = "eat_llc_profile_access"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    eat_llc_id = db.Column(
        db.Integer,
        db.ForeignKey("eat_llcs.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    user_profile_id = db.Column(db.String(64), nullable = False)

    access_type = db.Column(db.String(20), nullable = False, default = "signer")

    granted_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = db.func.now()
    )

    granted_by = db.Column(db.String(64), nullable = True)

    # Relationship
    eat_llc = db.relationship("EATLLC", back_populates = "profile_accesses")

    def __repr__(self):
        return f"<EATLLCProfileAccess {self.eat_llc_id} {self.user_profile_id}>"





class EATParkedFile(TimestampMixin, db.Model):
    """ Parked property file... """

    # Table Name
    __tablename__ = "eat_parked_files"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    eat_number = db.Column(db.String(50), nullable = False, index = True)

    eat_name = db.Column(db.String(255), nullable = False)

    eat_llc_id = db.Column(
        db.Integer,
        db.ForeignKey("eat_llcs.id", ondelete = "SET NULL"),
        nullable = True
    )

    total_acquired_property_value = db.Column(db.Numeric(14, 2), nullable = False, default = 0)
    total_invoice_value = db.Column(db.Numeric(14, 2), nullable = False, default = 0)
    total_parked_property_value = db.Column(db.Numeric(14, 2), nullable = False, default = 0)
    total_sale_property_value = db.Column(db.Numeric(14, 2), nullable = False, default = 0)
    value_remaining = db.Column(db.Numeric(14, 2), nullable = False, default = 0)

    day_45_date = db.Column(db.Date, nullable = True)
    day_180_date = db.Column(db.Date, nullable = True)
    close_date = db.Column(db.Date, nullable = True)

    status = db.Column(db.String(20), nullable = False, default = "pending")

    state = db.Column(db.String(2), nullable = False)

    qi_company_id = db.Column(db.String(64), nullable = True)

    improvement_start_date = db.Column(db.Date, nullable = True)
    improvement_estimated_completion_date = db.Column(db.Date, nullable = True)
    improvement_actual_completion_date = db.Column(db.Date, nullable = True)

    created_by = db.Column(db.String(64), nullable = True)

    # Relationships
    eat_llc = db.relationship("EATLLC")

    exchangors = db.relationship(
        "EATExchangor",
        back_populates = "eat_parked_file",
        cascade = "all, delete-orphan",
        order_by = "EATExchangor.id"
    )

    secretary_of_state = db.relationship(
        "EATSecretaryOfState",
        uselist = False,
        cascade = "all, delete-orphan"
    )

    lender = db.relationship(
        "EATLender",
        uselist = False,
        cascade = "all, delete-orphan"
    )

    identified_properties = db.relationship(
        "EATIdentifiedProperty",
        back_populates = "eat_parked_file",
        cascade = "all, delete-orphan"
    )

    invoices = db.relationship(
        "EATInvoice",
        back_populates = "eat_parked_file",
        cascade = "all, delete-orphan"
    )

    def __repr__(self):
        return f"<EATParkedFile {self.eat_number}>"





class EATExchangor(TimestampMixin, db.Model):
    """ Tax account taking part in a parked file... """

    # Table Name
    __tablename__ = "eat_exchangors"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    eat_parked_file_id = db.Column(
        db.Integer,
        db.ForeignKey("eat_parked_files.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    tax_account_id = db.Column(
        db.Integer,
        db.ForeignKey("tax_accounts.id", ondelete = "CASCADE"),
        nullable = False
    )

    # Relationships
    eat_parked_file = db.relationship("EATParkedFile", back_populates = "exchangors")
    tax_account = db.relationship("TaxAccount")

    def __repr__(self):
        return f"<EATExchangor {self.eat_parked_file_id}:{self.tax_account_id}>"





class EATSecretaryOfState(TimestampMixin, db.Model):
    """ Secretary of State filings of a parked file... """

    # Table Name
    __tablename__ = "eat_secretary_of_state"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    eat_parked_file_id = db.Column(
        db.Integer,
        db.ForeignKey("eat_parked_files.id", ondelete = "CASCADE"),
        nullable = False,
        unique = True
    )

    transfer_type = db.Column(db.String(100), nullable = True)
    eat_transfer_to_exchangor_transaction_date = db.Column(db.Date, nullable = True)
    eat_sos_status = db.Column(db.String(100), nullable = True)
    eat_client_touchback_date = db.Column(db.Date, nullable = True)
    eat_sos_dissolve_transfer_date = db.Column(db.Date, nullable = True)

    def __repr__(self):
        return f"<EATSecretaryOfState {self.eat_parked_file_id}>"





class EATLender(TimestampMixin, db.Model):
    """ Lender financing the parked property... """

    # Table Name
    __tablename__ = "eat_lenders"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    eat_parked_file_id = db.Column(
        db.Integer,
        db.ForeignKey("eat_parked_files.id", ondelete = "CASCADE"),
        nullable = False,
        unique = True
    )

    loan_to_value_ratio = db.Column(db.String(50), nullable = True)

    lender_business_card_id = db.Column(
        db.Integer,
        db.ForeignKey("business_cards.id", ondelete = "SET NULL"),
        nullable = True
    )

    lender_note_amount = db.Column(db.Numeric(14, 2), nullable = True)
    lender_note_date = db.Column(db.Date, nullable = True)
    lender_document_path = db.Column(db.Text, nullable = True)

    # Relationship
    business_card = db.relationship("BusinessCard")

    def __repr__(self):
        return f"<EATLender {self.eat_parked_file_id}>"





class EATIdentifiedProperty(TimestampMixin, db.Model):
    """ Property identified inside a parked file... """

    # Table Name
    __tablename__ = "eat_identified_properties"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    eat_parked_file_id = db.Column(
        db.Integer,
        db.ForeignKey("eat_parked_files.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    property_id = db.Column(
        db.Integer,
        db.ForeignKey("properties.id", ondelete = "SET NULL"),
        nullable = True
    )

    identification_type = db.Column(db.String(20), nullable = False)
    property_type = db.Column(db.String(30), nullable = False)
    description = db.Column(db.Text, nullable = True)
    status = db.Column(db.String(20), nullable = False, default = "identified")
    percentage = db.Column(db.Numeric(7, 4), nullable = True)
    value = db.Column(db.Numeric(14, 2), nullable = True)
    identification_date = db.Column(db.Date, nullable = False)
    is_parked = db.Column(db.Boolean, nullable = False, default = False)
    document_storage_path = db.Column(db.Text, nullable = True)
    extra = db.Column("metadata", db.JSON, nullable = True)
    created_by = db.Column(db.String(64), nullable = True)

    # Relationships
    eat_parked_file = db.relationship("EATParkedFile", back_populates = "identified_properties")
    property = db.relationship("Property")

    improvements = db.relationship(
        "EATPropertyImprovement",
        back_populates = "eat_identified_property",
        cascade = "all, delete-orphan",
        order_by = "EATPropertyImprovement.id"
    )

    def __repr__(self):
        return f"<EATIdentifiedProperty {self.id}>"





class EATPropertyImprovement(TimestampMixin, db.Model):
    """ Improvement on a parked property... """

    # Table Name
    __tablename__ = "eat_property_improvements"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    eat_identified_property_id = db.Column(
        db.Integer,
        db.ForeignKey("eat_identified_properties.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    description = db.Column(db.Text, nullable = False)

    value = db.Column(db.Numeric(14, 2), nullable = False, default = 0)

    # Relationship
    eat_identified_property = db.relationship("EATIdentifiedProperty", back_populates = "improvements")

    def __repr__(self):
        return f"<EATPropertyImprovement {self.id}>"





class EATInvoice(TimestampMixin, db.Model):
    """ Invoice paid for a parked property... """

    # Table Name
    __tablename__ = "eat_invoices"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    eat_parked_file_id = db.Column(
        db.Integer,
        db.ForeignKey("eat_parked_files.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    invoice_type = db.Column(db.String(50), nullable = False)
    paid_to = db.Column(db.String(255), nullable = False)
    invoice_date = db.Column(db.Date, nullable = False)
    invoice_number = db.Column(db.String(100), nullable = True)
    invoice_document_path = db.Column(db.Text, nullable = True)

    total_amount = db.Column(db.Numeric(14, 2), nullable = False, default = 0)

    created_by = db.Column(db.String(64), nullable = True)

    # Relationships
    eat_parked_file = db.relationship("EATParkedFile", back_populates = "invoices")

    items = db.relationship(
        "EATInvoiceItem",
        back_populates = "invoice",
        cascade = "all, delete-orphan",
        order_by = "EATInvoiceItem.id"
    )

    def __repr__(self):
        return f"<EATInvoice {self.id} {self.total_amount}>"





class EATInvoiceItem(TimestampMixin, db.Model):
    """ Line of an EAT invoice... """

    # Table Name
    __tablename__ = "eat_invoice_items"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    eat_invoice_id = db.Column(
        db.Integer,
        db.ForeignKey("eat_invoices.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    property_id = db.Column(
        db.Integer,
        db.ForeignKey("properties.id", ondelete = "SET NULL"),
        nullable = True
    )

    description = db.Column(db.Text, nullable = False)

    amount = db.Column(db.Numeric(14, 2), nullable = False, default = 0)

    # Relationships
    invoice = db.relationship("EATInvoice", back_populates = "items")
    property = db.relationship("Property")

    def __repr__(self):
        return f"<EATInvoiceItem {self.id} {self.amount}>"
