"""
Exchange Request Definitions

Handles:
    - Exchange status / deadline update
    - Identified property and improvement bodies
"""

# Python Packages
from flask_restx import fields

# Base
from ...base.request_context import json_body





class UpdateExchangeRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("UpdateExchangeRequest", {
            "status": fields.String(description = "active, completed or cancelled"),
            "relinquished_close_date": fields.String(description = "YYYY-MM-DD"),
            "day_45_date": fields.String(description = "YYYY-MM-DD (derived when omitted)"),
            "day_180_date": fields.String(description = "YYYY-MM-DD (derived when omitted)")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class IdentifiedPropertyRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for an identified property
        """

        model = namespace.model("IdentifiedPropertyRequest", {
            "property_id": fields.Integer(description = "Property ID"),
            "identification_type": fields.String(required = True, description = "written_form or by_contract"),
            "property_type": fields.String(required = True, description = "standard_address, dst or membership_interest"),
            "description": fields.String(),
            "status": fields.String(description = "identified, under_contract, acquired or cancelled"),
            "percentage": fields.Float(),
            "value": fields.Float(),
            "identification_date": fields.String(description = "YYYY-MM-DD (default today)"),
            "is_parked": fields.Boolean(),
            "document_storage_path": fields.String(),
            "metadata": fields.Raw()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class ImprovementRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("ImprovementRequest", {
            "description": fields.String(required = True),
            "value": fields.Float(description = "Value (>= 0)")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()
