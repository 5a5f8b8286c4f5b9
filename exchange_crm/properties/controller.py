"""
Property Controller
"""

# Services
from .services.property_service import PropertyService





class PropertyController:

    def __init__(self):
        self.property_service = PropertyService()


    def list_properties(self, args: dict) -> dict:
        return self.property_service.list_properties(args.get("search"))


    def create_property(self, args: dict) -> dict:
        return self.property_service.create_property(args)


    def get_property(self, property_id: int) -> dict:
        return self.property_service.get_property(property_id)


    def update_property(self, property_id: int, args: dict) -> dict:
        return self.property_service.update_property(property_id, args)


    def assign_ownership(self, property_id: int, args: dict) -> dict:
        return self.property_service.assign_ownership(property_id, args)


    def remove_ownership(self, property_id: int, tax_account_id: int) -> dict:
        return self.property_service.remove_ownership(property_id, tax_account_id)
