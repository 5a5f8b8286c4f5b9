"""
Accounting Controller
"""

# Services
from .services.accounting_service import AccountingService





class AccountingController:

    def __init__(self):
        self.accounting_service = AccountingService()


    def list_entries(self, args: dict) -> dict:
        return self.accounting_service.list_entries(
            transaction_id = args.get("transaction_id"),
            exchange_id = args.get("exchange_id")
        )


    def create_entry(self, args: dict) -> dict:
        return self.accounting_service.create_entry(args)


    def update_entry(self, entry_id: int, args: dict) -> dict:
        return self.accounting_service.update_entry(entry_id, args)


    def delete_entry(self, entry_id: int) -> dict:
        return self.accounting_service.delete_entry(entry_id)


    def take_fee(self, args: dict) -> dict:
        return self.accounting_service.take_fee(args["exchange_id"], args["fee_schedule_id"])
