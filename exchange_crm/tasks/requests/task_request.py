"""
Task Request Definitions
"""

# Python Packages
from flask_restx import fields

# Base
from ...base.request_context import json_body





class TaskRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("TaskRequest", {
            "title": fields.String(required = True),
            "entity_type": fields.String(required = True, description = "Create only"),
            "entity_id": fields.Integer(required = True, description = "Create only"),
            "due_date": fields.String(description = "YYYY-MM-DD"),
            "assignee_ids": fields.List(fields.String, description = "Create only"),
            "assignee_types": fields.List(fields.String, description = "user or admin, per assignee")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class TaskStatusRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("TaskStatusRequest", {
            "status": fields.String(required = True, description = "pending or completed")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class TaskNoteRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("TaskNoteRequest", {
            "note_text": fields.String(required = True)
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()
