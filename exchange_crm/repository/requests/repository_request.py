"""
Repository Request Definitions
"""

# Python Packages
from flask_restx import fields

# Base
from ...base.request_context import json_body





class FolderRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("FolderRequest", {
            "repository_id": fields.String(description = "Create only"),
            "parent_id": fields.String(description = "Create only, empty for a root folder"),
            "name": fields.String(required = True)
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class RenameRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("RenameRequest", {
            "name": fields.String(required = True)
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()
