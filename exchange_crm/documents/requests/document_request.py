"""
Document Request Definitions

Handles:
    - Component, template and signature field bodies
    - Document generation / update bodies
    - Signature request and signature bodies
"""

# Python Packages
from flask_restx import fields

# Base
from ...base.request_context import json_body





class ComponentRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("ComponentRequest", {
            "name": fields.String(required = True),
            "component_type": fields.String(required = True, description = "header or footer"),
            "content": fields.Raw(description = "{html: ...}"),
            "qi_company_id": fields.String()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class TemplateRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("TemplateRequest", {
            "name": fields.String(required = True),
            "description": fields.String(),
            "template_type": fields.String(required = True, description = "transaction, exchange, property or eat"),
            "content": fields.Raw(description = "{html: ...} with <<placeholders>>"),
            "header_component_id": fields.Integer(),
            "footer_component_id": fields.Integer(),
            "qi_company_id": fields.String(),
            "is_active": fields.Boolean()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class SignatureFieldRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("SignatureFieldRequest", {
            "field_name": fields.String(required = True),
            "field_type": fields.String(description = "signature, date or text"),
            "position_x": fields.Float(),
            "position_y": fields.Float(),
            "page_number": fields.Integer(),
            "width": fields.Float(),
            "height": fields.Float(),
            "signer_role": fields.String(),
            "is_required": fields.Boolean(),
            "signing_order": fields.Integer()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class DocumentRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for generating a document
        """

        model = namespace.model("DocumentRequest", {
            "template_id": fields.Integer(required = True),
            "transaction_id": fields.Integer(),
            "exchange_id": fields.Integer(),
            "property_id": fields.Integer(),
            "eat_parked_file_id": fields.Integer(),
            "values": fields.Raw(description = "{\"<<placeholder>>\": \"value\"}")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class DocumentUpdateRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("DocumentUpdateRequest", {
            "document_name": fields.String(),
            "content": fields.Raw(),
            "pdf_url": fields.String(),
            "status": fields.String()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class SignatureRequestRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("SignatureRequestRequest", {
            "template_field_id": fields.Integer(),
            "signer_user_id": fields.String(),
            "signer_email": fields.String(),
            "signer_name": fields.String(),
            "admin_signature_id": fields.Integer(),
            "vesting_signature_id": fields.Integer(),
            "signing_order": fields.Integer()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class SignatureRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("SignatureRequest", {
            "tax_account_id": fields.Integer(description = "Vesting signatures"),
            "vesting_name": fields.String(description = "Vesting signatures"),
            "admin_user_id": fields.String(description = "Admin signatures"),
            "qi_company_id": fields.String(description = "Admin signatures"),
            "signature_type": fields.String(required = True, description = "property or entity"),
            "signature_text": fields.String(required = True),
            "signature_font": fields.String(required = True),
            "printed_name": fields.String(),
            "entity_name": fields.String(),
            "by_name": fields.String(),
            "its_title": fields.String()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()
