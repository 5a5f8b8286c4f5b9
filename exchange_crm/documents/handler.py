"""
File: Document Routes

Handles:
    - Header / footer components and templates
    - Placeholder definitions and signature fields
    - Documents generated from templates, signature requests, signing
    - Vesting-name and admin signatures
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Request
from .requests.document_request import (
    ComponentRequest,
    TemplateRequest,
    SignatureFieldRequest,
    DocumentRequest,
    DocumentUpdateRequest,
    SignatureRequestRequest,
    SignatureRequest,
)
from ..base.common_requests import QueryRequest

# Validations
from .validations.document_validation import DocumentValidation

# Controller
from .controller import DocumentController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
document_namespace = Namespace('documents', description = 'Document Template, Document and Signature APIs')





# ── Components ──────────────────────────────────────────────

@document_namespace.route('/components')
class ComponentList(Resource):

    @QueryRequest.apply(document_namespace, qi_company_id = "QI company")
    def get(self):
        try:
            result = DocumentController().list_components(QueryRequest.get_data())

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @ComponentRequest.apply(document_namespace)
    def post(self):
        try:
            args = ComponentRequest.get_data()
            DocumentValidation().validate_component(args)

            result = DocumentController().create_component(args)

            return {"status": "success", "data": result}, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@document_namespace.route('/components/<int:component_id>')
class ComponentDetail(Resource):

    @ComponentRequest.apply(document_namespace)
    def put(self, component_id):
        try:
            args = ComponentRequest.get_data()
            DocumentValidation().validate_component(args, creating = False)

            result = DocumentController().update_component(component_id, args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, component_id):
        try:
            result = DocumentController().delete_component(component_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code





# ── Templates ───────────────────────────────────────────────

@document_namespace.route('/templates')
class TemplateList(Resource):

    @QueryRequest.apply(document_namespace, template_type = "Template type", qi_company_id = "QI company")
    def get(self):
        try:
            result = DocumentController().list_templates(QueryRequest.get_data())

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @TemplateRequest.apply(document_namespace)
    def post(self):
        """
        Create a template, dynamic fields are read from content.html
        """

        try:
            # Args
            args = TemplateRequest.get_data()

            # Validations
            DocumentValidation().validate_template(args)

            # Controller
            result = DocumentController().create_template(args)

            return {"status": "success", "data": result}, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@document_namespace.route('/templates/<int:template_id>')
class TemplateDetail(Resource):

    def get(self, template_id):
        try:
            result = DocumentController().get_template(template_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @TemplateRequest.apply(document_namespace)
    def put(self, template_id):
        try:
            args = TemplateRequest.get_data()
            DocumentValidation().validate_template(args, creating = False)

            result = DocumentController().update_template(template_id, args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, template_id):
        try:
            result = DocumentController().delete_template(template_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@document_namespace.route('/dynamic-fields/<string:template_type>')
class DynamicFieldList(Resource):

    def get(self, template_type):
        try:
            DocumentValidation().validate_template_type(template_type)

            result = DocumentController().get_dynamic_fields(template_type)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code





# ── Signature fields ────────────────────────────────────────

@document_namespace.route('/templates/<int:template_id>/fields')
class SignatureFieldList(Resource):

    def get(self, template_id):
        try:
            result = DocumentController().list_signature_fields(template_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @SignatureFieldRequest.apply(document_namespace)
    def post(self, template_id):
        try:
            args = SignatureFieldRequest.get_data()
            DocumentValidation().validate_signature_field(args)

            result = DocumentController().create_signature_field(template_id, args)

            return {"status": "success", "data": result}, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@document_namespace.route('/fields/<int:field_id>')
class SignatureFieldDetail(Resource):

    @SignatureFieldRequest.apply(document_namespace)
    def put(self, field_id):
        try:
            args = SignatureFieldRequest.get_data()
            DocumentValidation().validate_signature_field(args, creating = False)

            result = DocumentController().update_signature_field(field_id, args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, field_id):
        try:
            result = DocumentController().delete_signature_field(field_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code





# ── Documents ───────────────────────────────────────────────

@document_namespace.route('')
class DocumentList(Resource):

    @QueryRequest.apply(
        document_namespace,
        transaction_id = "Transaction",
        exchange_id = "Exchange",
        property_id = "Property",
        eat_parked_file_id = "EAT parked file",
        status = "Document status"
    )
    def get(self):
        try:
            args = QueryRequest.get_data()
            DocumentValidation().validate_filter(args)

            result = DocumentController().list_documents(args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @DocumentRequest.apply(document_namespace)
    def post(self):
        """
        Generate a document from a template
        """

        try:
            # Args
            args = DocumentRequest.get_data()

            # Validations
            DocumentValidation().validate_create(args)

            # Controller
            result = DocumentController().create_document(args)

            return {"status": "success", "data": result}, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@document_namespace.route('/<int:document_id>')
class DocumentDetail(Resource):

    def get(self, document_id):
        try:
            result = DocumentController().get_document(document_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @DocumentUpdateRequest.apply(document_namespace)
    def put(self, document_id):
        try:
            args = DocumentUpdateRequest.get_data()
            DocumentValidation().validate_update(args)

            result = DocumentController().update_document(document_id, args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, document_id):
        try:
            result = DocumentController().delete_document(document_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code





# ── Signature requests ──────────────────────────────────────

@document_namespace.route('/<int:document_id>/signature-requests')
class SignatureRequestList(Resource):

    def get(self, document_id):
        try:
            result = DocumentController().list_signature_requests(document_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @SignatureRequestRequest.apply(document_namespace)
    def post(self, document_id):
        try:
            args = SignatureRequestRequest.get_data()
            DocumentValidation().validate_signature_request(args)

            result = DocumentController().create_signature_request(document_id, args)

            return {"status": "success", "data": result}, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@document_namespace.route('/signature-requests/<int:request_id>/sign')
class SignatureRequestSign(Resource):

    def post(self, request_id):
        """
        Sign one request, the caller's address and agent are kept
        """

        try:
            result = DocumentController().sign(
                request_id,
                request.remote_addr,
                request.headers.get("User-Agent")
            )

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code





# ── Signatures ──────────────────────────────────────────────

@document_namespace.route('/signatures/vesting')
class VestingSignatureList(Resource):

    @QueryRequest.apply(document_namespace, tax_account_id = "Tax account")
    def get(self):
        try:
            result = DocumentController().list_vesting_signatures(QueryRequest.get_data())

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @SignatureRequest.apply(document_namespace)
    def post(self):
        try:
            args = SignatureRequest.get_data()
            DocumentValidation().validate_vesting_signature(args)

            result = DocumentController().create_vesting_signature(args)

            return {"status": "success", "data": result}, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@document_namespace.route('/signatures/vesting/<int:signature_id>')
class VestingSignatureDetail(Resource):

    @SignatureRequest.apply(document_namespace)
    def put(self, signature_id):
        try:
            args = SignatureRequest.get_data()
            DocumentValidation().validate_vesting_signature(args, creating = False)

            result = DocumentController().update_vesting_signature(signature_id, args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, signature_id):
        try:
            result = DocumentController().delete_vesting_signature(signature_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@document_namespace.route('/signatures/admin')
class AdminSignatureList(Resource):

    @QueryRequest.apply(document_namespace, qi_company_id = "QI company")
    def get(self):
        try:
            result = DocumentController().list_admin_signatures(QueryRequest.get_data())

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @SignatureRequest.apply(document_namespace)
    def post(self):
        try:
            args = SignatureRequest.get_data()
            DocumentValidation().validate_admin_signature(args)

            result = DocumentController().create_admin_signature(args)

            return {"status": "success", "data": result}, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@document_namespace.route('/signatures/admin/<int:signature_id>')
class AdminSignatureDetail(Resource):

    @SignatureRequest.apply(document_namespace)
    def put(self, signature_id):
        try:
            args = SignatureRequest.get_data()
            DocumentValidation().validate_admin_signature(args, creating = False)

            result = DocumentController().update_admin_signature(signature_id, args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, signature_id):
        try:
            result = DocumentController().delete_admin_signature(signature_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
