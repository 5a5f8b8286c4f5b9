"""
Accounting Request Definitions
"""

# Python Packages
from flask_restx import fields

# Base
from ...base.request_context import json_body





class EntryRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for a ledger entry
        """

        model = namespace.model("EntryRequest", {
            "date": fields.String(description = "YYYY-MM-DD (default today)"),
            "credit": fields.Float(description = "Money into to_exchange"),
            "debit": fields.Float(description = "Money out of from_exchange"),
            "description": fields.String(),
            "entry_type": fields.String(description = "sale_proceeds, purchase_funds, fees, earnest_money, wire_in, wire_out or manual"),
            "from_exchange_id": fields.Integer(),
            "to_exchange_id": fields.Integer(),
            "transaction_id": fields.Integer(),
            "task_id": fields.Integer(),
            "settlement_seller_id": fields.String(),
            "settlement_buyer_id": fields.String(),
            "settlement_type": fields.String(description = "seller or buyer"),
            "metadata": fields.Raw()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class TakeFeeRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("TakeFeeRequest", {
            "exchange_id": fields.Integer(required = True),
            "fee_schedule_id": fields.Integer(required = True)
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()
