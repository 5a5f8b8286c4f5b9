"""
Exchange Controller

Handles:
    - Orchestration between handler and service layer
"""

# Services
from .services.exchange_service import ExchangeService
from .services.identified_property_service import IdentifiedPropertyService





class ExchangeController:

    def __init__(self):
        """ Initialize controller with service instances... """

        self.exchange_service = ExchangeService()
        self.identified_service = IdentifiedPropertyService()


    def list_exchanges(self, args: dict) -> dict:
        return self.exchange_service.list_exchanges(args.get("search"), args.get("status"))


    def get_exchange(self, exchange_id: int) -> dict:
        return self.exchange_service.get_exchange(exchange_id)


    def update_exchange(self, exchange_id: int, args: dict) -> dict:
        return self.exchange_service.update_exchange(exchange_id, args)


    def get_financials(self, exchange_id: int) -> dict:
        return self.exchange_service.get_financials(exchange_id)


    def sync_financials(self, exchange_id: int) -> dict:
        return self.exchange_service.sync_financials(exchange_id)


    def get_balance(self, exchange_id: int) -> dict:
        return self.exchange_service.get_balance(exchange_id)


    def list_identified_properties(self, exchange_id: int) -> list:
        return self.identified_service.list_properties(exchange_id)


    def add_identified_property(self, exchange_id: int, args: dict) -> dict:
        return self.identified_service.add_property(exchange_id, args)


    def update_identified_property(self, identified_property_id: int, args: dict) -> dict:
        return self.identified_service.update_property(identified_property_id, args)


    def delete_identified_property(self, identified_property_id: int) -> dict:
        return self.identified_service.delete_property(identified_property_id)


    def add_improvement(self, identified_property_id: int, args: dict) -> dict:
        return self.identified_service.add_improvement(identified_property_id, args)


    def delete_improvement(self, improvement_id: int) -> dict:
        return self.identified_service.delete_improvement(improvement_id)


    def get_rule_status(self, exchange_id: int) -> dict:
        return self.identified_service.get_rule_status(exchange_id)
