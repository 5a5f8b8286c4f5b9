"""
File: Transaction Routes

Handles:
    - Create / List / Detail / Update transactions
    - Contract PDF upload
    - Settlement statement (seller and buyer sides)
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.transaction_request import (
    CreateTransactionRequest,
    UpdateTransactionRequest,
    SettlementSellerRequest,
    SettlementBuyerRequest,
)
from ..base.common_requests import QueryRequest, FileUploadRequest

# Validations
from .validations.transaction_validation import TransactionValidation, SettlementValidation

# Controller
from .controller import TransactionController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
transaction_namespace = Namespace('transactions', description = 'Sale Contract APIs')





@transaction_namespace.route('')
class TransactionList(Resource):

    @QueryRequest.apply(transaction_namespace, search = "Transaction number", sale_type = "Property or Entity")
    def get(self):
        """
        List transactions, newest first
        """

        try:
            result = TransactionController().list_transactions(QueryRequest.get_data())

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @CreateTransactionRequest.apply(transaction_namespace)
    def post(self):
        """
        Create a transaction with sellers and buyers

        Opens an exchange per exchange seller and links buyer exchanges.
        """

        try:
            # Args
            args = CreateTransactionRequest.get_data()

            # Validations
            TransactionValidation().validate_create(args)

            # Controller
            result = TransactionController().create_transaction(args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@transaction_namespace.route('/<int:transaction_id>')
class TransactionDetail(Resource):

    def get(self, transaction_id):
        """
        Transaction with sellers, buyers, properties and exchange links
        """

        try:
            result = TransactionController().get_transaction(transaction_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @UpdateTransactionRequest.apply(transaction_namespace)
    def put(self, transaction_id):
        """
        Update status, close dates and contract figures
        """

        try:
            # Args
            args = UpdateTransactionRequest.get_data()

            # Validations
            TransactionValidation().validate_update(args)

            # Controller
            result = TransactionController().update_transaction(transaction_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@transaction_namespace.route('/<int:transaction_id>/contract')
class TransactionContract(Resource):

    @FileUploadRequest.apply(transaction_namespace)
    def post(self, transaction_id):
        """
        Upload the contract PDF
        """

        try:
            args = FileUploadRequest.get_data()
            TransactionValidation().validate_contract(args)

            result = TransactionController().upload_contract(transaction_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── Settlement statement ─────────────────────────────────────────────────────

@transaction_namespace.route('/<int:transaction_id>/settlement')
class TransactionSettlement(Resource):

    def get(self, transaction_id):
        """
        Seller side and buyer side rows
        """

        try:
            result = TransactionController().get_settlement(transaction_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@transaction_namespace.route('/<int:transaction_id>/settlement-sellers')
class SettlementSellerList(Resource):

    @SettlementSellerRequest.apply(transaction_namespace)
    def post(self, transaction_id):
        try:
            args = SettlementSellerRequest.get_data()
            SettlementValidation().validate_seller_row(args)

            result = TransactionController().create_settlement_seller(transaction_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@transaction_namespace.route('/settlement-sellers/<string:row_id>')
class SettlementSellerDetail(Resource):

    @SettlementSellerRequest.apply(transaction_namespace)
    def put(self, row_id):
        try:
            args = SettlementSellerRequest.get_data()
            SettlementValidation().validate_seller_row(args, creating = False)

            result = TransactionController().update_settlement_seller(row_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@transaction_namespace.route('/<int:transaction_id>/settlement-buyers')
class SettlementBuyerList(Resource):

    @SettlementBuyerRequest.apply(transaction_namespace)
    def post(self, transaction_id):
        try:
            args = SettlementBuyerRequest.get_data()
            SettlementValidation().validate_buyer_row(args)

            result = TransactionController().create_settlement_buyer(transaction_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@transaction_namespace.route('/settlement-buyers/<string:row_id>')
class SettlementBuyerDetail(Resource):

    @SettlementBuyerRequest.apply(transaction_namespace)
    def put(self, row_id):
        try:
            args = SettlementBuyerRequest.get_data()
            SettlementValidation().validate_buyer_row(args, creating = False)

            result = TransactionController().update_settlement_buyer(row_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
