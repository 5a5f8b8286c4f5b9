"""
File: Search Routes
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from ..base.common_requests import QueryRequest

# Validations
from .validations.search_validation import SearchValidation

# Controller
from .controller import SearchController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
search_namespace = Namespace('search', description = 'Global Search API')





@search_namespace.route('')
class GlobalSearch(Resource):

    @QueryRequest.apply(search_namespace, q = "At least 2 characters")
    def get(self):
        """
        Profiles, tax accounts, transactions, exchanges, properties and EAT files
        """

        try:
            # Args
            args = QueryRequest.get_data()

            # Validations
            SearchValidation().validate_query(args)

            # Controller
            result = SearchController().search(args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
