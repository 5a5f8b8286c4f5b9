"""
File: Exchange Routes

Handles:
    - List / Detail / Update exchanges
    - Financial figures, sync and balance
    - Identified properties and improvements
    - Identification rule status
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.exchange_request import (
    UpdateExchangeRequest,
    IdentifiedPropertyRequest,
    ImprovementRequest,
)
from ..base.common_requests import QueryRequest

# Validations
from .validations.exchange_validation import ExchangeValidation
from .validations.identified_property_validation import IdentifiedPropertyValidation

# Controller
from .controller import ExchangeController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
exchange_namespace = Namespace('exchanges', description = '1031 Exchange APIs')





@exchange_namespace.route('')
class ExchangeList(Resource):

    @QueryRequest.apply(exchange_namespace, search = "Exchange number or tax account name", status = "active, completed or cancelled")
    def get(self):
        """
        List exchanges with their tax account names
        """

        try:
            result = ExchangeController().list_exchanges(QueryRequest.get_data())

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@exchange_namespace.route('/<int:exchange_id>')
class ExchangeDetail(Resource):

    def get(self, exchange_id):
        """
        Exchange with tax account, owner and linked transactions
        """

        try:
            result = ExchangeController().get_exchange(exchange_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @UpdateExchangeRequest.apply(exchange_namespace)
    def put(self, exchange_id):
        """
        Update status and deadlines
        """

        try:
            # Args
            args = UpdateExchangeRequest.get_data()

            # Validations
            ExchangeValidation().validate_update(args)

            # Controller
            result = ExchangeController().update_exchange(exchange_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── Financials ───────────────────────────────────────────────────────────────

@exchange_namespace.route('/<int:exchange_id>/financials')
class ExchangeFinancials(Resource):

    def get(self, exchange_id):
        """
        Sale value, replacement value and value remaining
        """

        try:
            result = ExchangeController().get_financials(exchange_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@exchange_namespace.route('/<int:exchange_id>/financials/sync')
class ExchangeFinancialsSync(Resource):

    def post(self, exchange_id):
        """
        Store the computed figures on the exchange
        """

        try:
            result = ExchangeController().sync_financials(exchange_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@exchange_namespace.route('/<int:exchange_id>/balance')
class ExchangeBalance(Resource):

    def get(self, exchange_id):
        """
        Credits in minus debits out
        """

        try:
            result = ExchangeController().get_balance(exchange_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── Identified Properties ────────────────────────────────────────────────────

@exchange_namespace.route('/<int:exchange_id>/identified-properties')
class IdentifiedPropertyList(Resource):

    def get(self, exchange_id):
        """
        Identified properties with improvements
        """

        try:
            result = ExchangeController().list_identified_properties(exchange_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @IdentifiedPropertyRequest.apply(exchange_namespace)
    def post(self, exchange_id):
        """
        Identify a replacement property (rule pre-check applies)
        """

        try:
            # Args
            args = IdentifiedPropertyRequest.get_data()

            # Validations
            IdentifiedPropertyValidation().validate_create(args)

            # Controller
            result = ExchangeController().add_identified_property(exchange_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@exchange_namespace.route('/identified-properties/<int:identified_property_id>')
class IdentifiedPropertyDetail(Resource):

    @IdentifiedPropertyRequest.apply(exchange_namespace)
    def put(self, identified_property_id):
        """
        Update status, value, percentage, description, parked flag, date
        """

        try:
            args = IdentifiedPropertyRequest.get_data()

            IdentifiedPropertyValidation().validate_update(args)

            result = ExchangeController().update_identified_property(identified_property_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, identified_property_id):
        """
        Remove identified property
        """

        try:
            result = ExchangeController().delete_identified_property(identified_property_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@exchange_namespace.route('/identified-properties/<int:identified_property_id>/improvements')
class ImprovementList(Resource):

    @ImprovementRequest.apply(exchange_namespace)
    def post(self, identified_property_id):
        """
        Add improvement to an identified property
        """

        try:
            args = ImprovementRequest.get_data()

            IdentifiedPropertyValidation().validate_improvement(args)

            result = ExchangeController().add_improvement(identified_property_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@exchange_namespace.route('/improvements/<int:improvement_id>')
class ImprovementDetail(Resource):

    def delete(self, improvement_id):
        """
        Remove improvement
        """

        try:
            result = ExchangeController().delete_improvement(improvement_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@exchange_namespace.route('/<int:exchange_id>/rule')
class ExchangeRule(Resource):

    def get(self, exchange_id):
        """
        Active identification rule, violations and warnings
        """

        try:
            result = ExchangeController().get_rule_status(exchange_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
