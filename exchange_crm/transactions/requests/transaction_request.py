"""
Transaction Request Definitions

Handles:
    - Create transaction (sellers / buyers)
    - Update transaction
    - Settlement statement rows
"""

# Python Packages
from flask_restx import fields

# Base
from ...base.request_context import json_body





class CreateTransactionRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for a new transaction
        """

        seller = namespace.model("TransactionSellerInput", {
            "tax_account_id": fields.Integer(description = "Exchange seller tax account"),
            "vesting_name": fields.String(description = "Vesting name (exchange seller)"),
            "contract_percent": fields.Float(required = True, description = "Share of the contract (> 0)"),
            "is_non_exchange": fields.Boolean(description = "Seller is not exchanging"),
            "non_exchange_name": fields.String(description = "Name of a non-exchange seller")
        })

        buyer = namespace.model("TransactionBuyerInput", {
            "profile_id": fields.Integer(description = "Exchange buyer profile"),
            "exchange_id": fields.Integer(description = "Exchange the purchase belongs to"),
            "contract_percent": fields.Float(required = True, description = "Share of the contract (> 0)"),
            "is_non_exchange": fields.Boolean(description = "Buyer is not exchanging"),
            "non_exchange_name": fields.String(description = "Name of a non-exchange buyer")
        })

        model = namespace.model("CreateTransactionRequest", {
            "contract_purchase_price": fields.Float(required = True),
            "contract_date": fields.String(required = True, description = "YYYY-MM-DD"),
            "sale_type": fields.String(required = True, description = "Property or Entity"),
            "property_id": fields.Integer(description = "Required for Property sales"),
            "closing_agent_profile_id": fields.Integer(),
            "sellers": fields.List(fields.Nested(seller), required = True),
            "buyers": fields.List(fields.Nested(buyer), required = True)
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class UpdateTransactionRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("UpdateTransactionRequest", {
            "status": fields.String(description = "Pending, On-Hold, Closed or Canceled"),
            "estimated_close_date": fields.String(description = "YYYY-MM-DD"),
            "actual_close_date": fields.String(description = "YYYY-MM-DD"),
            "contract_purchase_price": fields.Float(),
            "contract_date": fields.String(description = "YYYY-MM-DD")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class SettlementSellerRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("SettlementSellerRequest", {
            "seller_id": fields.Integer(description = "Transaction seller"),
            "current_exchange_id": fields.Integer(),
            "balance": fields.Float(),
            "closing_cost": fields.Float(),
            "debt_payoff": fields.Float(),
            "funds_to_exchange": fields.Float(),
            "funds_to_exchanger": fields.Float(),
            "sale_price": fields.Float(),
            "date_writing_instructions": fields.String(description = "YYYY-MM-DD")
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()





class SettlementBuyerRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("SettlementBuyerRequest", {
            "buyer_id": fields.Integer(description = "Transaction buyer"),
            "selected_exchange_id": fields.Integer(),
            "closing_cost": fields.Float(),
            "deposit_from_exchange": fields.Float(),
            "deposit_from_exchanger": fields.Float(),
            "funds_from_exchange": fields.Float(),
            "loan_amount": fields.Float(),
            "replacement_of_deposit": fields.Float(),
            "sale_price": fields.Float()
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return json_body()
