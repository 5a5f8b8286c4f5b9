"""
Messaging Controller
"""

# Base
from ..base.request_context import current_user_id

# Services
from .services.messaging_service import MessagingService





class MessagingController:

    def __init__(self):
        self.messaging_service = MessagingService()


    def list_conversations(self, args: dict) -> list:
        return self.messaging_service.list_conversations(args)


    def create_conversation(self, args: dict) -> dict:
        return self.messaging_service.create_conversation(args, current_user_id())


    def get_conversation(self, conversation_id: int) -> dict:
        return self.messaging_service.get_conversation(conversation_id)


    def post_message(self, conversation_id: int, args: dict) -> dict:
        return self.messaging_service.post_message(conversation_id, args)


    def edit_message(self, message_id: int, args: dict) -> dict:
        return self.messaging_service.edit_message(message_id, args["content"])


    def delete_message(self, message_id: int) -> dict:
        return self.messaging_service.delete_message(message_id)


    def toggle_pin(self, conversation_id: int) -> dict:
        return self.messaging_service.toggle_pin(conversation_id)


    def mark_read(self, conversation_id: int) -> dict:
        return self.messaging_service.mark_read(conversation_id, current_user_id())


    def create_task(self, message_id: int, args: dict) -> dict:
        return self.messaging_service.create_task_from_message(message_id, args)
