"""
Business Card Controller
"""

# Services
from .services.business_card_service import BusinessCardService





class BusinessCardController:

    def __init__(self):
        self.business_card_service = BusinessCardService()


    def list_cards(self, args: dict) -> list:
        return self.business_card_service.list_cards(args.get("search"))


    def create_card(self, args: dict) -> dict:
        return self.business_card_service.create_card(args)


    def get_card(self, card_id: int) -> dict:
        return self.business_card_service.get_card(card_id)


    def update_card(self, card_id: int, args: dict) -> dict:
        return self.business_card_service.update_card(card_id, args)


    def delete_card(self, card_id: int) -> dict:
        return self.business_card_service.delete_card(card_id)


    def upload_logo(self, card_id: int, args: dict) -> dict:
        return self.business_card_service.upload_logo(card_id, args["file"])
