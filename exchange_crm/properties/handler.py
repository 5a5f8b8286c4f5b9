"""
File: Property Routes

Handles:
    - Search / Create / Detail / Update properties
    - Assign and remove ownership
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.property_request import PropertyRequest, OwnershipRequest
from ..base.common_requests import QueryRequest

# Validations
from .validations.property_validation import PropertyValidation

# Controller
from .controller import PropertyController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
property_namespace = Namespace('properties', description = 'Property & Ownership APIs')





@property_namespace.route('')
class PropertyList(Resource):

    @QueryRequest.apply(property_namespace, search = "Address")
    def get(self):
        """
        Search properties by address
        """

        try:
            result = PropertyController().list_properties(QueryRequest.get_data())

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @PropertyRequest.apply(property_namespace)
    def post(self):
        """
        Create a property
        """

        try:
            # Args
            args = PropertyRequest.get_data()

            # Validations
            PropertyValidation().validate_create(args)

            # Controller
            result = PropertyController().create_property(args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@property_namespace.route('/<int:property_id>')
class PropertyDetail(Resource):

    def get(self, property_id):
        """
        Property with ownership history
        """

        try:
            result = PropertyController().get_property(property_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @PropertyRequest.apply(property_namespace)
    def put(self, property_id):
        try:
            args = PropertyRequest.get_data()
            PropertyValidation().validate_update(args)

            result = PropertyController().update_property(property_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── Ownership ────────────────────────────────────────────────────────────────

@property_namespace.route('/<int:property_id>/ownership')
class PropertyOwnershipList(Resource):

    @OwnershipRequest.apply(property_namespace)
    def post(self, property_id):
        """
        Assign the property to a tax account
        """

        try:
            args = OwnershipRequest.get_data()
            PropertyValidation().validate_ownership(args)

            result = PropertyController().assign_ownership(property_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@property_namespace.route('/<int:property_id>/ownership/<int:tax_account_id>')
class PropertyOwnershipDetail(Resource):

    def delete(self, property_id, tax_account_id):
        """
        Move the account's current ownership to prior
        """

        try:
            result = PropertyController().remove_ownership(property_id, tax_account_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
