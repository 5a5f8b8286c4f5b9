"""
Tax Account Request Definitions

Handles:
    - Swagger body models for individual / spousal accounts
    - Rename and business name payloads
    - Extract JSON payload
"""

# Python Packages
from flask_restx import fields

# Base
from ...base.request_context import json_body





class CreateTaxAccountRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Individual Tax Account
        """

        model = namespace.model("CreateTaxAccountRequest", {
            "name": fields.String(required = True, description = "Tax account name"),
            "profile_id": fields.Integer(required = True, description = "Owner profile ID"),
            "business_name": fields.String(description = "Vesting name (defaults to the account name)"),
            "qi_company_id": fields.String(description = "QI company")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class CreateSpousalTaxAccountRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Spousal Tax Account
        """

        model = namespace.model("CreateSpousalTaxAccountRequest", {
            "primary_profile_id": fields.Integer(required = True),
            "spouse_profile_id": fields.Integer(required = True),
            "primary_tax_account_name": fields.String(required = True),
            "spouse_tax_account_name": fields.String(required = True),
            "primary_business_name": fields.String(),
            "spouse_business_name": fields.String(),
            "qi_company_id": fields.String()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class NameRequest:
    """ {"name": "..."} body used by rename / business name endpoints """

    @staticmethod
    def apply(namespace):
        model = namespace.model("NameRequest", {
            "name": fields.String(required = True, description = "Name")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()
