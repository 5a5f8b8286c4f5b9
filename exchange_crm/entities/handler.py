"""
File: Entity Routes

Handles:
    - Entity CRUD
    - Access rows
    - Entity tax accounts, properties and transactions
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.entity_request import EntityRequest, EntityAccessRequest, EntityTaxAccountRequest
from ..base.common_requests import QueryRequest

# Validations
from .validations.entity_validation import EntityValidation
from ..tax_accounts.validations.tax_account_validation import TaxAccountValidation

# Controller
from .controller import EntityController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
entity_namespace = Namespace('entities', description = 'Entity APIs')





@entity_namespace.route('')
class EntityList(Resource):

    @QueryRequest.apply(entity_namespace, search = "Entity name")
    def get(self):
        try:
            result = EntityController().list_entities(QueryRequest.get_data())

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @EntityRequest.apply(entity_namespace)
    def post(self):
        """
        Create an entity
        """

        try:
            # Args
            args = EntityRequest.get_data()

            # Validations
            EntityValidation().validate_entity(args)

            # Controller
            result = EntityController().create_entity(args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@entity_namespace.route('/<int:entity_id>')
class EntityDetail(Resource):

    def get(self, entity_id):
        """
        Entity with its access rows
        """

        try:
            result = EntityController().get_entity(entity_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @EntityRequest.apply(entity_namespace)
    def put(self, entity_id):
        try:
            args = EntityRequest.get_data()
            EntityValidation().validate_entity(args, creating = False)

            result = EntityController().update_entity(entity_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, entity_id):
        try:
            result = EntityController().delete_entity(entity_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── Access ───────────────────────────────────────────────────────────────────

@entity_namespace.route('/<int:entity_id>/access')
class EntityAccessList(Resource):

    @EntityAccessRequest.apply(entity_namespace)
    def post(self, entity_id):
        try:
            args = EntityAccessRequest.get_data()
            EntityValidation().validate_access(args)

            result = EntityController().add_access(entity_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@entity_namespace.route('/access/<int:access_id>')
class EntityAccessDetail(Resource):

    @EntityAccessRequest.apply(entity_namespace)
    def put(self, access_id):
        try:
            args = EntityAccessRequest.get_data()
            EntityValidation().validate_access(args, creating = False)

            result = EntityController().update_access(access_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, access_id):
        try:
            result = EntityController().delete_access(access_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── Related records ──────────────────────────────────────────────────────────

@entity_namespace.route('/<int:entity_id>/tax-accounts')
class EntityTaxAccounts(Resource):

    def get(self, entity_id):
        try:
            result = EntityController().list_tax_accounts(entity_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @EntityTaxAccountRequest.apply(entity_namespace)
    def post(self, entity_id):
        """
        Open a tax account held by the entity
        """

        try:
            args = EntityTaxAccountRequest.get_data()
            TaxAccountValidation().validate_create_for_entity(args)

            result = EntityController().create_tax_account(entity_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@entity_namespace.route('/<int:entity_id>/properties')
class EntityProperties(Resource):

    def get(self, entity_id):
        try:
            result = EntityController().list_properties(entity_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@entity_namespace.route('/<int:entity_id>/transactions')
class EntityTransactions(Resource):

    def get(self, entity_id):
        try:
            result = EntityController().list_transactions(entity_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
