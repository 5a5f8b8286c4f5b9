"""
EAT Request Definitions

Handles:
    - LLC and access bodies
    - Parked file, Secretary of State, lender and exchangor bodies
    - Invoice and invoice item bodies
"""

# Python Packages
from flask_restx import fields

# Base
from ...base.request_context import json_body





class EATLLCRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("EATLLCRequest", {
            "company_name": fields.String(required = True),
            "state_formation": fields.String(required = True, description = "Two letter state code"),
            "date_formation": fields.String(required = True, description = "YYYY-MM-DD"),
            "licensed_in": fields.String(),
            "ein": fields.String(),
            "registered_agent": fields.String(),
            "registered_agent_address": fields.String(),
            "qi_company_id": fields.String(),
            "status": fields.String(description = "Active, Inactive or Dissolved (update only)"),
            "user_profile_ids": fields.List(fields.String, description = "Signers (create only)")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class EATAccessRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("EATAccessRequest", {
            "user_profile_id": fields.String(required = True),
            "access_type": fields.String(description = "signer, viewer or manager")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class EATFileRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for a parked file (create and update)
        """

        model = namespace.model("EATFileRequest", {
            "eat_name": fields.String(required = True),
            "eat_llc_id": fields.Integer(required = True),
            "state": fields.String(required = True, description = "Two letter state code (create only)"),
            "date_of_formation": fields.String(required = True, description = "YYYY-MM-DD (create only)"),
            "exchangor_tax_account_ids": fields.List(fields.Integer, required = True, description = "Create only"),
            "qi_company_id": fields.String(),
            "status": fields.String(description = "pending, active, completed or cancelled"),
            "day_45_date": fields.String(),
            "day_180_date": fields.String(),
            "close_date": fields.String(),
            "total_sale_property_value": fields.Float(),
            "improvement_start_date": fields.String(),
            "improvement_estimated_completion_date": fields.String(),
            "improvement_actual_completion_date": fields.String()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class SecretaryOfStateRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("SecretaryOfStateRequest", {
            "transfer_type": fields.String(),
            "eat_transfer_to_exchangor_transaction_date": fields.String(),
            "eat_sos_status": fields.String(),
            "eat_client_touchback_date": fields.String(),
            "eat_sos_dissolve_transfer_date": fields.String()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class LenderRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("LenderRequest", {
            "loan_to_value_ratio": fields.String(),
            "lender_business_card_id": fields.Integer(),
            "lender_note_amount": fields.Float(),
            "lender_note_date": fields.String(),
            "lender_document_path": fields.String()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class ExchangorRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("ExchangorRequest", {
            "tax_account_id": fields.Integer(required = True)
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class InvoiceItemRequest:

    @staticmethod
    def model(namespace):
        return namespace.model("InvoiceItemRequest", {
            "description": fields.String(required = True),
            "amount": fields.Float(required = True),
            "property_id": fields.Integer()
        })


    @staticmethod
    def apply(namespace):
        return namespace.expect(InvoiceItemRequest.model(namespace))


    @staticmethod
    def get_data():
        return json_body()





class InvoiceRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("InvoiceRequest", {
            "invoice_type": fields.String(required = True),
            "paid_to": fields.String(required = True),
            "invoice_date": fields.String(required = True, description = "YYYY-MM-DD"),
            "invoice_number": fields.String(),
            "invoice_document_path": fields.String(),
            "items": fields.List(fields.Nested(InvoiceItemRequest.model(namespace)))
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()
