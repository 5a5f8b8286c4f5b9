"""
Profile Request Definitions

Handles:
    - Swagger body model for create / update
    - Extract JSON payload
"""

# Python Packages
from flask_restx import fields

# Base
from ...base.request_context import json_body





class ProfileRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Profile
        """

        model = namespace.model("ProfileRequest", {
            "first_name": fields.String(required = True, description = "First name"),
            "last_name": fields.String(required = True, description = "Last name"),
            "email": fields.String(description = "Email"),
            "phone": fields.String(description = "Phone"),
            "user_id": fields.String(description = "Hosted auth user id")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        """
        Extract JSON body
        """

        return json_body()

