"""
File: Business Card Routes

Handles:
    - Business card CRUD with branches
    - Logo upload
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.business_card_request import BusinessCardRequest
from ..base.common_requests import QueryRequest, FileUploadRequest

# Validations
from .validations.business_card_validation import BusinessCardValidation

# Controller
from .controller import BusinessCardController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
business_card_namespace = Namespace('business-cards', description = 'Business Card APIs')





@business_card_namespace.route('')
class BusinessCardList(Resource):

    @QueryRequest.apply(business_card_namespace, search = "Business name or email")
    def get(self):
        try:
            result = BusinessCardController().list_cards(QueryRequest.get_data())

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @BusinessCardRequest.apply(business_card_namespace)
    def post(self):
        """
        Create a business card with optional branches
        """

        try:
            # Args
            args = BusinessCardRequest.get_data()

            # Validations
            BusinessCardValidation().validate_card(args)

            # Controller
            result = BusinessCardController().create_card(args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@business_card_namespace.route('/<int:card_id>')
class BusinessCardDetail(Resource):

    def get(self, card_id):
        try:
            result = BusinessCardController().get_card(card_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @BusinessCardRequest.apply(business_card_namespace)
    def put(self, card_id):
        try:
            args = BusinessCardRequest.get_data()
            BusinessCardValidation().validate_card(args, creating = False)

            result = BusinessCardController().update_card(card_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, card_id):
        try:
            result = BusinessCardController().delete_card(card_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@business_card_namespace.route('/<int:card_id>/logo')
class BusinessCardLogo(Resource):

    @FileUploadRequest.apply(business_card_namespace)
    def post(self, card_id):
        """
        Upload the card logo
        """

        try:
            args = FileUploadRequest.get_data()
            BusinessCardValidation().validate_logo(args)

            result = BusinessCardController().upload_logo(card_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
