"""
File: EAT Routes

Handles:
    - US states
    - EAT LLCs and profile access
    - Parked files, Secretary of State, lender, exchangors, selections, totals
    - Parked file identified properties and improvements
    - Invoices and invoice items
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.eat_request import (
    EATLLCRequest,
    EATAccessRequest,
    EATFileRequest,
    SecretaryOfStateRequest,
    LenderRequest,
    ExchangorRequest,
    InvoiceRequest,
    InvoiceItemRequest,
)
from ..exchanges.requests.exchange_request import IdentifiedPropertyRequest, ImprovementRequest
from ..base.common_requests import QueryRequest

# Validations
from .validations.eat_validation import EATValidation
from ..exchanges.validations.identified_property_validation import IdentifiedPropertyValidation

# Controller
from .controller import EATController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
eat_namespace = Namespace('eat', description = 'Exchange Accommodation Titleholder APIs')





@eat_namespace.route('/states')
class StateList(Resource):

    @QueryRequest.apply(eat_namespace, popular = "true to list popular LLC states only")
    def get(self):
        """
        US states, ordered by name
        """

        try:
            result = EATController().list_states(QueryRequest.get_data())

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── LLCs ─────────────────────────────────────────────────────────────────────

@eat_namespace.route('/llcs')
class LLCList(Resource):

    def get(self):
        """
        EAT LLCs, newest first
        """

        try:
            result = EATController().list_llcs()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @EATLLCRequest.apply(eat_namespace)
    def post(self):
        """
        Form an EAT LLC (EAT-{STATE}-{seq})
        """

        try:
            # Args
            args = EATLLCRequest.get_data()

            # Validations
            EATValidation().validate_llc_create(args)

            # Controller
            result = EATController().create_llc(args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/llcs/<int:llc_id>')
class LLCDetail(Resource):

    def get(self, llc_id):
        try:
            result = EATController().get_llc(llc_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @EATLLCRequest.apply(eat_namespace)
    def put(self, llc_id):
        try:
            args = EATLLCRequest.get_data()
            EATValidation().validate_llc_update(args)

            result = EATController().update_llc(llc_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/llcs/<int:llc_id>/access')
class LLCAccessList(Resource):

    @EATAccessRequest.apply(eat_namespace)
    def post(self, llc_id):
        try:
            args = EATAccessRequest.get_data()
            EATValidation().validate_access(args)

            result = EATController().grant_access(llc_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/llcs/access/<int:access_id>')
class LLCAccessDetail(Resource):

    def delete(self, access_id):
        try:
            result = EATController().revoke_access(access_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── Parked files ─────────────────────────────────────────────────────────────

@eat_namespace.route('/files')
class ParkedFileList(Resource):

    @QueryRequest.apply(eat_namespace, status = "pending, active, completed or cancelled", search = "EAT number or name")
    def get(self):
        try:
            result = EATController().list_files(QueryRequest.get_data())

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @EATFileRequest.apply(eat_namespace)
    def post(self):
        """
        Open a parked file with its exchangors
        """

        try:
            # Args
            args = EATFileRequest.get_data()

            # Validations
            EATValidation().validate_file_create(args)

            # Controller
            result = EATController().create_file(args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/files/<int:file_id>')
class ParkedFileDetail(Resource):

    def get(self, file_id):
        """
        Parked file with LLC, exchangors, Secretary of State and lender
        """

        try:
            result = EATController().get_file(file_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @EATFileRequest.apply(eat_namespace)
    def put(self, file_id):
        try:
            args = EATFileRequest.get_data()
            EATValidation().validate_file_update(args)

            result = EATController().update_file(file_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/files/<int:file_id>/secretary-of-state')
class ParkedFileSecretaryOfState(Resource):

    @SecretaryOfStateRequest.apply(eat_namespace)
    def put(self, file_id):
        try:
            args = SecretaryOfStateRequest.get_data()
            EATValidation().validate_secretary_of_state(args)

            result = EATController().update_secretary_of_state(file_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/files/<int:file_id>/lender')
class ParkedFileLender(Resource):

    @LenderRequest.apply(eat_namespace)
    def put(self, file_id):
        try:
            args = LenderRequest.get_data()
            EATValidation().validate_lender(args)

            result = EATController().update_lender(file_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/files/<int:file_id>/exchangors')
class ExchangorList(Resource):

    @ExchangorRequest.apply(eat_namespace)
    def post(self, file_id):
        try:
            args = ExchangorRequest.get_data()
            EATValidation().validate_exchangor(args)

            result = EATController().add_exchangor(file_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/exchangors/<int:exchangor_id>')
class ExchangorDetail(Resource):

    def delete(self, exchangor_id):
        try:
            result = EATController().remove_exchangor(exchangor_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/selections')
class Selections(Resource):

    def get(self):
        """
        Active LLCs, business cards and tax accounts for the create form
        """

        try:
            result = EATController().get_selections()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/files/<int:file_id>/totals/sync')
class ParkedFileTotals(Resource):

    def post(self, file_id):
        """
        Recompute invoice, parked and acquired totals
        """

        try:
            result = EATController().sync_totals(file_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── Identified properties ────────────────────────────────────────────────────

@eat_namespace.route('/files/<int:file_id>/properties')
class EATPropertyList(Resource):

    def get(self, file_id):
        try:
            result = EATController().list_properties(file_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @IdentifiedPropertyRequest.apply(eat_namespace)
    def post(self, file_id):
        try:
            args = IdentifiedPropertyRequest.get_data()
            IdentifiedPropertyValidation().validate_create(args)

            result = EATController().add_property(file_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/properties/<int:property_id>')
class EATPropertyDetail(Resource):

    @IdentifiedPropertyRequest.apply(eat_namespace)
    def put(self, property_id):
        try:
            args = IdentifiedPropertyRequest.get_data()
            IdentifiedPropertyValidation().validate_update(args)

            result = EATController().update_property(property_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, property_id):
        try:
            result = EATController().delete_property(property_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/properties/<int:property_id>/improvements')
class EATImprovementList(Resource):

    @ImprovementRequest.apply(eat_namespace)
    def post(self, property_id):
        try:
            args = ImprovementRequest.get_data()
            IdentifiedPropertyValidation().validate_improvement(args)

            result = EATController().add_improvement(property_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/improvements/<int:improvement_id>')
class EATImprovementDetail(Resource):

    def delete(self, improvement_id):
        try:
            result = EATController().delete_improvement(improvement_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── Invoices ─────────────────────────────────────────────────────────────────

@eat_namespace.route('/files/<int:file_id>/invoices')
class InvoiceList(Resource):

    def get(self, file_id):
        """
        Invoices with items, latest invoice date first
        """

        try:
            result = EATController().list_invoices(file_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @InvoiceRequest.apply(eat_namespace)
    def post(self, file_id):
        try:
            args = InvoiceRequest.get_data()
            EATValidation().validate_invoice(args)

            result = EATController().create_invoice(file_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/invoices/<int:invoice_id>')
class InvoiceDetail(Resource):

    def get(self, invoice_id):
        try:
            result = EATController().get_invoice(invoice_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @InvoiceRequest.apply(eat_namespace)
    def put(self, invoice_id):
        try:
            args = InvoiceRequest.get_data()
            args.pop("items", None)
            EATValidation().validate_invoice(args, creating = False)

            result = EATController().update_invoice(invoice_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, invoice_id):
        try:
            result = EATController().delete_invoice(invoice_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/invoices/<int:invoice_id>/items')
class InvoiceItemList(Resource):

    @InvoiceItemRequest.apply(eat_namespace)
    def post(self, invoice_id):
        try:
            args = InvoiceItemRequest.get_data()
            EATValidation().validate_invoice_item(args)

            result = EATController().add_invoice_item(invoice_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@eat_namespace.route('/invoice-items/<int:item_id>')
class InvoiceItemDetail(Resource):

    def delete(self, item_id):
        try:
            result = EATController().delete_invoice_item(item_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
