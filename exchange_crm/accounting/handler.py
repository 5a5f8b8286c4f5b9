"""
File: Accounting Routes

Handles:
    - Ledger entries (list with totals, create, update, delete)
    - Take fee
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.accounting_request import EntryRequest, TakeFeeRequest
from ..base.common_requests import QueryRequest

# Validations
from .validations.accounting_validation import AccountingValidation

# Controller
from .controller import AccountingController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
accounting_namespace = Namespace('accounting', description = 'Exchange Ledger APIs')





@accounting_namespace.route('/entries')
class EntryList(Resource):

    @QueryRequest.apply(accounting_namespace, transaction_id = "Transaction ID", exchange_id = "Exchange ID (either side)")
    def get(self):
        """
        Ledger entries with credit / debit totals
        """

        try:
            args = QueryRequest.get_data()
            AccountingValidation().validate_filter(args)

            result = AccountingController().list_entries(args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @EntryRequest.apply(accounting_namespace)
    def post(self):
        """
        Create a ledger entry
        """

        try:
            # Args
            args = EntryRequest.get_data()

            # Validations
            AccountingValidation().validate_create(args)

            # Controller
            result = AccountingController().create_entry(args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@accounting_namespace.route('/entries/<int:entry_id>')
class EntryDetail(Resource):

    @EntryRequest.apply(accounting_namespace)
    def put(self, entry_id):
        try:
            args = EntryRequest.get_data()
            AccountingValidation().validate_update(args)

            result = AccountingController().update_entry(entry_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, entry_id):
        try:
            result = AccountingController().delete_entry(entry_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@accounting_namespace.route('/take-fee')
class TakeFee(Resource):

    @TakeFeeRequest.apply(accounting_namespace)
    def post(self):
        """
        Debit a scheduled fee from an exchange
        """

        try:
            args = TakeFeeRequest.get_data()
            AccountingValidation().validate_take_fee(args)

            result = AccountingController().take_fee(args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
