"""
Business Card Request Definitions
"""

# Python Packages
from flask_restx import fields

# Base
from ...base.request_context import json_body





class BusinessCardRequest:

    @staticmethod
    def apply(namespace):
        branch = namespace.model("BranchInput", {
            "branch_name": fields.String(),
            "state": fields.String(),
            "address": fields.String(),
            "email": fields.String()
        })

        model = namespace.model("BusinessCardRequest", {
            "business_name": fields.String(required = True),
            "email": fields.String(required = True),
            "branches": fields.List(fields.Nested(branch))
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()
