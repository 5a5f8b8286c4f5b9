"""
File: Messaging Routes

Handles:
    - Conversations of a CRM record
    - Messages (JSON or multipart with files), edit, soft delete
    - Pin, read marker, message -> task
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.messaging_request import (
    ConversationRequest,
    MessageRequest,
    MessageEditRequest,
    MessageTaskRequest,
)
from ..base.common_requests import QueryRequest
from ..base.request_context import current_user_id

# Validations
from .validations.messaging_validation import MessagingValidation

# Controller
from .controller import MessagingController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
messaging_namespace = Namespace('messaging', description = 'Conversation and Message APIs')





@messaging_namespace.route('/conversations')
class ConversationList(Resource):

    @QueryRequest.apply(messaging_namespace, entity_type = "Entity type", entity_id = "Entity id", user_id = "Unread counts for")
    def get(self):
        try:
            args = QueryRequest.get_data()
            MessagingValidation().validate_filter(args)

            result = MessagingController().list_conversations(args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @ConversationRequest.apply(messaging_namespace)
    def post(self):
        """
        Open a conversation, the acting user joins as admin
        """

        try:
            # Args
            args = ConversationRequest.get_data()

            # Validations
            MessagingValidation().validate_user(current_user_id())
            MessagingValidation().validate_conversation(args)

            # Controller
            result = MessagingController().create_conversation(args)

            return {"status": "success", "data": result}, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@messaging_namespace.route('/conversations/<int:conversation_id>')
class ConversationDetail(Resource):

    def get(self, conversation_id):
        try:
            result = MessagingController().get_conversation(conversation_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@messaging_namespace.route('/conversations/<int:conversation_id>/messages')
class ConversationMessages(Resource):

    @MessageRequest.apply(messaging_namespace)
    def post(self, conversation_id):
        try:
            args = MessageRequest.get_data()
            MessagingValidation().validate_message(args)

            result = MessagingController().post_message(conversation_id, args)

            return {"status": "success", "data": result}, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@messaging_namespace.route('/conversations/<int:conversation_id>/pin')
class ConversationPin(Resource):

    def post(self, conversation_id):
        try:
            result = MessagingController().toggle_pin(conversation_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@messaging_namespace.route('/conversations/<int:conversation_id>/read')
class ConversationRead(Resource):

    def post(self, conversation_id):
        try:
            MessagingValidation().validate_user(current_user_id())

            result = MessagingController().mark_read(conversation_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@messaging_namespace.route('/messages/<int:message_id>')
class MessageDetail(Resource):

    @MessageEditRequest.apply(messaging_namespace)
    def put(self, message_id):
        try:
            args = MessageEditRequest.get_data()
            MessagingValidation().validate_edit(args)

            result = MessagingController().edit_message(message_id, args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, message_id):
        try:
            result = MessagingController().delete_message(message_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@messaging_namespace.route('/messages/<int:message_id>/task')
class MessageTask(Resource):

    @MessageTaskRequest.apply(messaging_namespace)
    def post(self, message_id):
        try:
            args = MessageTaskRequest.get_data()
            MessagingValidation().validate_task(args)

            result = MessagingController().create_task(message_id, args)

            return {"status": "success", "data": result}, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
