"""
Messaging Request Definitions

Messages accept JSON, or multipart form data when files are attached.
"""

# Python Packages
from flask import request
from flask_restx import fields

# Base
from ...base.request_context import json_body





class ConversationRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("ConversationRequest", {
            "entity_type": fields.String(required = True),
            "entity_id": fields.Integer(required = True),
            "title": fields.String()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class MessageRequest:

    @staticmethod
    def apply(namespace):
        """
        Document JSON and multipart (content, parent_message_id, files)
        """

        model = namespace.model("MessageRequest", {
            "content": fields.String(description = "Required unless files are attached"),
            "parent_message_id": fields.Integer()
        })

        def decorator(func):
            func = namespace.expect(model)(func)
            func = namespace.doc(consumes = ['application/json', 'multipart/form-data'])(func)

            return func

        return decorator


    @staticmethod
    def get_data():
        if request.files or request.form:
            args = request.form.to_dict()
            args["files"] = [file for file in request.files.getlist("files") if file]

            return args

        args = json_body()
        args["files"] = []

        return args





class MessageEditRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("MessageEditRequest", {
            "content": fields.String(required = True)
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class MessageTaskRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("MessageTaskRequest", {
            "title": fields.String(description = "Defaults to the first 100 characters of the message"),
            "due_date": fields.String(description = "YYYY-MM-DD"),
            "assignee_ids": fields.List(fields.String),
            "assignee_types": fields.List(fields.String)
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()
