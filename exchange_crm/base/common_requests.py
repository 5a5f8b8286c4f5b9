"""
Shared Request Definitions

Handles:
    - Query string filters (search, ids, status ...)
    - Single file upload (multipart "file")
"""

# Python Packages
from flask import request as flask_request

# Base
from .request_context import query_args





class QueryRequest:

    @staticmethod
    def apply(namespace, **params):
        """
        Document query parameters

        Usage:
            @QueryRequest.apply(ns, search = "Search text", status = "Status")
        """

        def decorator(func):
            for name, description in params.items():
                func = namespace.param(name, description, _in = 'query')(func)

            return func

        return decorator


    @staticmethod
    def get_data():
        """
        Extract query string (blank values dropped)
        """

        return query_args()





class FileUploadRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        def decorator(func):
            func = namespace.doc(consumes = ['multipart/form-data'])(func)
            func = namespace.param(
                'file',
                'File',
                type = 'file',
                _in = 'formData',
                required = True
            )(func)

            return func

        return decorator


    @staticmethod
    def get_data():
        """
        Extract request data
        """

        return {
            "file": flask_request.files.get("file")
        }
