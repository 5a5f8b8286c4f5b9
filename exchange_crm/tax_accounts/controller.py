"""
Tax Account Controller

Handles:
    - Orchestration between handler and service layer
"""

# Services
from .services.tax_account_service import TaxAccountService
from .services.tax_account_summary_service import TaxAccountSummaryService





class TaxAccountController:

    def __init__(self):
        """ Initialize controller with service instances... """

        self.service = TaxAccountService()
        self.summary_service = TaxAccountSummaryService()


    def create_tax_account(self, args: dict) -> dict:
        return self.service.create_tax_account(args)


    def create_spousal_tax_account(self, args: dict) -> dict:
        return self.service.create_spousal_tax_account(args)


    def list_tax_accounts(self, search: str = None) -> dict:
        return self.service.list_tax_accounts(search)


    def get_tax_account(self, tax_account_id: int) -> dict:
        return self.service.get_tax_account(tax_account_id)


    def update_tax_account(self, tax_account_id: int, args: dict) -> dict:
        return self.service.update_tax_account(tax_account_id, args)


    def delete_tax_account(self, tax_account_id: int) -> dict:
        return self.service.delete_tax_account(tax_account_id)


    def add_business_name(self, tax_account_id: int, args: dict) -> dict:
        return self.service.add_business_name(tax_account_id, args["name"])


    def update_business_name(self, business_name_id: int, args: dict) -> dict:
        return self.service.update_business_name(business_name_id, args["name"])


    def delete_business_name(self, business_name_id: int) -> dict:
        return self.service.delete_business_name(business_name_id)


    def get_exchanges(self, tax_account_id: int) -> list:
        """
        Exchanges rollup of the account

        Returns:
            list: one summary per exchange, newest first
        """

        return self.summary_service.get_exchanges_rollup(tax_account_id)


    def get_transactions(self, tax_account_id: int) -> dict:
        return self.summary_service.get_transactions_by_exchange(tax_account_id)


    def get_ytd(self, tax_account_id: int, period: tuple) -> dict:
        start_date, end_date = period
        return self.summary_service.get_ytd_metrics(tax_account_id, start_date, end_date)
