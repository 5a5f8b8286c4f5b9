"""
File: Tax Account Routes

Handles:
    - List / Add individual and spousal tax accounts
    - Detail / Rename / Delete
    - Business names
    - Exchanges rollup, transactions by exchange, year to date review
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.tax_account_request import (
    CreateTaxAccountRequest,
    CreateSpousalTaxAccountRequest,
    NameRequest,
)
from ..base.common_requests import QueryRequest

# Validations
from .validations.tax_account_validation import TaxAccountValidation

# Controller
from .controller import TaxAccountController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
tax_account_namespace = Namespace('tax-accounts', description = 'Tax Account APIs')





@tax_account_namespace.route('')
class TaxAccountList(Resource):

    @QueryRequest.apply(tax_account_namespace, search = "Name or account number")
    def get(self):
        """
        List tax accounts with owner names
        """

        try:
            search = QueryRequest.get_data().get("search")
            result = TaxAccountController().list_tax_accounts(search)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @CreateTaxAccountRequest.apply(tax_account_namespace)
    def post(self):
        """
        Create individual tax account
        (account number, business name and fee schedule included)
        """

        try:
            # Args
            args = CreateTaxAccountRequest.get_data()

            # Validations
            TaxAccountValidation().validate_create(args)

            # Controller
            result = TaxAccountController().create_tax_account(args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@tax_account_namespace.route('/spousal')
class SpousalTaxAccount(Resource):

    @CreateSpousalTaxAccountRequest.apply(tax_account_namespace)
    def post(self):
        """
        Create spousal tax account
        """

        try:
            # Args
            args = CreateSpousalTaxAccountRequest.get_data()

            # Validations
            TaxAccountValidation().validate_create_spousal(args)

            # Controller
            result = TaxAccountController().create_spousal_tax_account(args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@tax_account_namespace.route('/<int:tax_account_id>')
class TaxAccountDetail(Resource):

    def get(self, tax_account_id):
        """
        Tax account with business names, properties and spouse
        """

        try:
            result = TaxAccountController().get_tax_account(tax_account_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @NameRequest.apply(tax_account_namespace)
    def put(self, tax_account_id):
        """
        Rename tax account
        """

        try:
            args = NameRequest.get_data()

            TaxAccountValidation().validate_update(args)

            result = TaxAccountController().update_tax_account(tax_account_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, tax_account_id):
        """
        Delete tax account
        """

        try:
            result = TaxAccountController().delete_tax_account(tax_account_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@tax_account_namespace.route('/<int:tax_account_id>/business-names')
class BusinessNameList(Resource):

    @NameRequest.apply(tax_account_namespace)
    def post(self, tax_account_id):
        """
        Add business name (vesting name)
        """

        try:
            args = NameRequest.get_data()

            TaxAccountValidation().validate_business_name(args)

            result = TaxAccountController().add_business_name(tax_account_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@tax_account_namespace.route('/business-names/<int:business_name_id>')
class BusinessNameDetail(Resource):

    @NameRequest.apply(tax_account_namespace)
    def put(self, business_name_id):
        """
        Rename business name
        """

        try:
            args = NameRequest.get_data()

            TaxAccountValidation().validate_business_name(args)

            result = TaxAccountController().update_business_name(business_name_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, business_name_id):
        """
        Delete business name
        """

        try:
            result = TaxAccountController().delete_business_name(business_name_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── Summaries ────────────────────────────────────────────────────────────────

@tax_account_namespace.route('/<int:tax_account_id>/exchanges')
class TaxAccountExchanges(Resource):

    def get(self, tax_account_id):
        """
        Exchanges of the account with their key figures
        """

        try:
            result = TaxAccountController().get_exchanges(tax_account_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@tax_account_namespace.route('/<int:tax_account_id>/transactions')
class TaxAccountTransactions(Resource):

    def get(self, tax_account_id):
        """
        Sales and purchases grouped by exchange
        """

        try:
            result = TaxAccountController().get_transactions(tax_account_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@tax_account_namespace.route('/<int:tax_account_id>/ytd')
class TaxAccountYearToDate(Resource):

    @QueryRequest.apply(
        tax_account_namespace,
        start_date = "YYYY-MM-DD (default Jan 1 of this year)",
        end_date = "YYYY-MM-DD (default Dec 31 of this year)",
        year = "Calendar year, overrides start / end"
    )
    def get(self, tax_account_id):
        """
        Year to date review
        """

        try:
            args = QueryRequest.get_data()

            period = TaxAccountValidation().validate_period(args)

            result = TaxAccountController().get_ytd(tax_account_id, period)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
