"""
Entity Request Definitions
"""

# Python Packages
from flask_restx import fields

# Base
from ...base.request_context import json_body





class EntityRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("EntityRequest", {
            "name": fields.String(required = True),
            "email": fields.String()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class EntityAccessRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("EntityAccessRequest", {
            "tax_account_id": fields.Integer(required = True),
            "relationship": fields.String(required = True, description = "Manager, Trustee, Owner/Member, Managing Member or Beneficiary"),
            "has_signing_authority": fields.Boolean(),
            "is_main_contact": fields.Boolean()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class EntityTaxAccountRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("EntityTaxAccountRequest", {
            "name": fields.String(required = True, description = "Tax account name"),
            "business_name": fields.String(description = "Vesting name"),
            "qi_company_id": fields.String()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()
