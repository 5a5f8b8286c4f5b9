"""
Property Request Definitions
"""

# Python Packages
from flask_restx import fields

# Base
from ...base.request_context import json_body





class PropertyRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("PropertyRequest", {
            "address": fields.String(required = True, description = "Street address"),
            "city": fields.String(),
            "state": fields.String(),
            "zip": fields.String(),
            "property_type": fields.String(),
            "legal_description": fields.String()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class OwnershipRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("OwnershipRequest", {
            "tax_account_id": fields.Integer(required = True),
            "business_name_id": fields.Integer(),
            "vesting_name": fields.String()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()
