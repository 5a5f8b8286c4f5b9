"""
Entity Controller
"""

# Services
from .services.entity_service import EntityService
from ..tax_accounts.services.tax_account_service import TaxAccountService





class EntityController:

    def __init__(self):
        self.entity_service = EntityService()
        self.tax_account_service = TaxAccountService()


    def list_entities(self, args: dict) -> list:
        return self.entity_service.list_entities(args.get("search"))


    def create_entity(self, args: dict) -> dict:
        return self.entity_service.create_entity(args)


    def get_entity(self, entity_id: int) -> dict:
        return self.entity_service.get_entity(entity_id)


    def update_entity(self, entity_id: int, args: dict) -> dict:
        return self.entity_service.update_entity(entity_id, args)


    def delete_entity(self, entity_id: int) -> dict:
        return self.entity_service.delete_entity(entity_id)


    def add_access(self, entity_id: int, args: dict) -> dict:
        return self.entity_service.add_access(entity_id, args)


    def update_access(self, access_id: int, args: dict) -> dict:
        return self.entity_service.update_access(access_id, args)


    def delete_access(self, access_id: int) -> dict:
        return self.entity_service.delete_access(access_id)


    def list_tax_accounts(self, entity_id: int) -> list:
        return self.entity_service.list_tax_accounts(entity_id)


    def create_tax_account(self, entity_id: int, args: dict) -> dict:
        return self.tax_account_service.create_entity_tax_account(entity_id, args)


    def list_properties(self, entity_id: int) -> list:
        return self.entity_service.list_properties(entity_id)


    def list_transactions(self, entity_id: int) -> list:
        return self.entity_service.list_transactions(entity_id)
