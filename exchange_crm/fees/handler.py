"""
File: Fee Routes

Handles:
    - Fee templates (global price list)
    - Fee schedules per tax account, price changes and their history
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.fee_request import FeeTemplateRequest, FeePriceChangeRequest
from ..base.common_requests import QueryRequest

# Validations
from .validations.fee_validation import FeeValidation

# Controller
from .controller import FeeController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
fee_namespace = Namespace('fees', description = 'Fee Template and Fee Schedule APIs')





# ── Templates ────────────────────────────────────────────────────────────────

@fee_namespace.route('/templates')
class FeeTemplateList(Resource):

    def get(self):
        """
        Fee templates, newest first
        """

        try:
            result = FeeController().list_templates()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @FeeTemplateRequest.apply(fee_namespace)
    def post(self):
        """
        Create fee template
        """

        try:
            args = FeeTemplateRequest.get_data()

            FeeValidation().validate_template(args)

            result = FeeController().create_template(args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@fee_namespace.route('/templates/<int:template_id>')
class FeeTemplateDetail(Resource):

    @FeeTemplateRequest.apply(fee_namespace)
    def put(self, template_id):
        """
        Edit fee template
        """

        try:
            args = FeeTemplateRequest.get_data()

            FeeValidation().validate_template(args)

            result = FeeController().update_template(template_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, template_id):
        """
        Delete fee template
        """

        try:
            result = FeeController().delete_template(template_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@fee_namespace.route('/templates/<int:template_id>/toggle')
class FeeTemplateToggle(Resource):

    def post(self, template_id):
        """
        Activate / deactivate fee template
        """

        try:
            result = FeeController().toggle_template(template_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── Schedules ────────────────────────────────────────────────────────────────

@fee_namespace.route('/schedules')
class FeeScheduleList(Resource):

    @QueryRequest.apply(fee_namespace, tax_account_id = "Tax account ID (required)")
    def get(self):
        """
        Fee schedule of a tax account, oldest first
        """

        try:
            args = QueryRequest.get_data()

            FeeValidation().validate_schedule_filter(args)

            result = FeeController().list_schedules(args["tax_account_id"])

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@fee_namespace.route('/schedules/<int:schedule_id>')
class FeeScheduleDetail(Resource):

    @FeePriceChangeRequest.apply(fee_namespace)
    def put(self, schedule_id):
        """
        Change price of a fee (comment required, history kept)
        """

        try:
            args = FeePriceChangeRequest.get_data()

            FeeValidation().validate_price_change(args)

            result = FeeController().update_schedule_price(schedule_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@fee_namespace.route('/schedules/<int:schedule_id>/history')
class FeeScheduleHistory(Resource):

    def get(self, schedule_id):
        """
        Price change history, newest first
        """

        try:
            result = FeeController().get_schedule_history(schedule_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
