"""
Transaction Controller

Handles:
    - Orchestration between handler and service layer
"""

# Services
from .services.transaction_service import TransactionService
from .services.settlement_service import SettlementService





class TransactionController:

    def __init__(self):
        """ Initialize controller with service instances... """

        self.transaction_service = TransactionService()
        self.settlement_service = SettlementService()


    def list_transactions(self, args: dict) -> dict:
        return self.transaction_service.list_transactions(args.get("search"), args.get("sale_type"))


    def create_transaction(self, args: dict) -> dict:
        return self.transaction_service.create_transaction(args)


    def get_transaction(self, transaction_id: int) -> dict:
        return self.transaction_service.get_transaction(transaction_id)


    def update_transaction(self, transaction_id: int, args: dict) -> dict:
        return self.transaction_service.update_transaction(transaction_id, args)


    def upload_contract(self, transaction_id: int, args: dict) -> dict:
        return self.transaction_service.upload_contract(transaction_id, args["file"])


    def get_settlement(self, transaction_id: int) -> dict:
        return self.settlement_service.get_settlement(transaction_id)


    def create_settlement_seller(self, transaction_id: int, args: dict) -> dict:
        return self.settlement_service.create_seller_row(transaction_id, args)


    def update_settlement_seller(self, row_id: str, args: dict) -> dict:
        return self.settlement_service.update_seller_row(row_id, args)


    def create_settlement_buyer(self, transaction_id: int, args: dict) -> dict:
        return self.settlement_service.create_buyer_row(transaction_id, args)


    def update_settlement_buyer(self, row_id: str, args: dict) -> dict:
        return self.settlement_service.update_buyer_row(row_id, args)
