"""
Fee Request Definitions

Handles:
    - Swagger body model for fee templates
    - Swagger body model for a fee schedule price change
"""

# Python Packages
from flask_restx import fields

# Base
from ...base.request_context import json_body





class FeeTemplateRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("FeeTemplateRequest", {
            "name": fields.String(required = True, description = "Fee name"),
            "price": fields.Float(required = True, description = "Price (>= 0)"),
            "description": fields.String(description = "Description")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class FeePriceChangeRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("FeePriceChangeRequest", {
            "price": fields.Float(required = True, description = "New price (>= 0)"),
            "comment": fields.String(required = True, description = "Reason, visible to all administrators")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()
