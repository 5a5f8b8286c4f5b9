"""
Messaging Service

Handles:
    - Conversations attached to a CRM record (pinned first, unread counts)
    - Threaded messages with file attachments
    - Edit / soft delete, pin, read marker
    - Turning a message into a task
"""

# Python Packages
import logging
from datetime import datetime, timezone

# SQLAlchemy
from sqlalchemy import func

# Database
from ...config.database import db

# Models
from ...models.messaging import Conversation, ConversationParticipant, Message, MessageAttachment

# Base
from ...base import constants
from ...base.lookups import get_or_raise
from ...base.request_context import current_user_id

# Services
from ...tasks.services.task_service import TaskService, serialize_task

# Vendors
from ...vendors.storage import StorageUploader

# Exceptions
from ...util.exceptions import AppException, ServiceException, ValidationException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import format_datetime


logger = logging.getLogger(__name__)

TASK_TITLE_LENGTH = 100


def _now():
    return datetime.now(timezone.utc)


def serialize_attachment(attachment: MessageAttachment) -> dict:
    return {
        "id": attachment.id,
        "file_name": attachment.file_name,
        "file_size": attachment.file_size,
        "file_type": attachment.file_type,
        "storage_path": attachment.storage_path,
        "url": StorageUploader.public_url(attachment.storage_path, constants.STORAGE_DOCUMENTS_BUCKET),
        "uploaded_by": attachment.uploaded_by
    }


def serialize_message(message: Message) -> dict:
    return {
        "id": message.id,
        "conversation_id": message.conversation_id,
        "parent_message_id": message.parent_message_id,
        "content": "" if message.is_deleted else message.content,
        "created_task_id": message.created_task_id,
        "is_system_message": message.is_system_message,
        "is_deleted": message.is_deleted,
        "created_by": message.created_by,
        "edited_at": format_datetime(message.edited_at),
        "created_at": format_datetime(message.created_at),
        "attachments": [serialize_attachment(attachment) for attachment in message.attachments]
    }


def serialize_participant(participant: ConversationParticipant) -> dict:
    return {
        "id": participant.id,
        "user_id": participant.user_id,
        "is_admin": participant.is_admin,
        "joined_at": format_datetime(participant.joined_at),
        "last_read_at": format_datetime(participant.last_read_at)
    }


def serialize_conversation(conversation: Conversation) -> dict:
    return {
        "id": conversation.id,
        "entity_type": conversation.entity_type,
        "entity_id": conversation.entity_id,
        "title": conversation.title,
        "is_pinned": conversation.is_pinned,
        "last_message_at": format_datetime(conversation.last_message_at),
        "created_by": conversation.created_by,
        "created_at": format_datetime(conversation.created_at)
    }


def thread(messages_list: list) -> list:
    """ Top level messages with their replies, oldest first """

    top_level = []
    replies = {}

    for message in messages_list:
        if message.parent_message_id is None:
            top_level.append(message)
        else:
            replies.setdefault(message.parent_message_id, []).append(message)

    result = []
    for message in top_level:
        data = serialize_message(message)
        data["replies"] = [serialize_message(reply) for reply in replies.get(message.id, [])]
        result.append(data)

    return result





class MessagingService:

    @staticmethod
    def _commit():
        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "MESSAGE_SAVE_FAILED",
                message = messages.ERROR["MESSAGE_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    @staticmethod
    def _participant(conversation_id: int, user_id: str) -> ConversationParticipant:
        return ConversationParticipant.query.filter_by(
            conversation_id = conversation_id,
            user_id = user_id
        ).first()


    def unread_count(self, conversation_id: int, user_id: str) -> int:
        """ Messages of others since the user's last read """

        query = Message.query.filter(
            Message.conversation_id == conversation_id,
            Message.is_deleted.is_(False),
            func.coalesce(Message.created_by, "") != user_id
        )

        participant = self._participant(conversation_id, user_id)
        if participant is not None and participant.last_read_at is not None:
            query = query.filter(Message.created_at > participant.last_read_at)

        return query.count()


    # ---------------------------------------------------------
    # Conversations
    # ---------------------------------------------------------

    def list_conversations(self, args: dict) -> list:
        query = Conversation.query

        if args.get("entity_type"):
            query = query.filter(Conversation.entity_type == args["entity_type"])

        if args.get("entity_id") is not None:
            query = query.filter(Conversation.entity_id == args["entity_id"])

        conversations = query.order_by(
            Conversation.is_pinned.desc(),
            Conversation.last_message_at.is_(None),
            Conversation.last_message_at.desc(),
            Conversation.id.desc()
        ).all()

        user_id = args.get("user_id") or current_user_id()

        result = []
        for conversation in conversations:
            data = serialize_conversation(conversation)
            data["unread_count"] = self.unread_count(conversation.id, user_id) if user_id else 0
            result.append(data)

        return result


    def create_conversation(self, args: dict, user_id: str) -> dict:
        conversation = Conversation(
            entity_type = args["entity_type"],
            entity_id = args["entity_id"],
            title = args.get("title"),
            created_by = user_id
        )
        conversation.participants.append(ConversationParticipant(user_id = user_id, is_admin = True))

        db.session.add(conversation)
        self._commit()

        logger.info("Conversation %s opened on %s %s", conversation.id, conversation.entity_type, conversation.entity_id)

        return serialize_conversation(conversation)


    def get_conversation(self, conversation_id: int) -> dict:
        conversation = get_or_raise(Conversation, conversation_id, "CONVERSATION_NOT_FOUND")

        data = serialize_conversation(conversation)
        data["participants"] = [serialize_participant(participant) for participant in conversation.participants]
        data["messages"] = thread(conversation.messages)

        return data


    def toggle_pin(self, conversation_id: int) -> dict:
        conversation = get_or_raise(Conversation, conversation_id, "CONVERSATION_NOT_FOUND")

        conversation.is_pinned = not conversation.is_pinned
        self._commit()

        return serialize_conversation(conversation)


    def mark_read(self, conversation_id: int, user_id: str) -> dict:
        conversation = get_or_raise(Conversation, conversation_id, "CONVERSATION_NOT_FOUND")

        participant = self._participant(conversation.id, user_id)
        if participant is None:
            participant = ConversationParticipant(conversation_id = conversation.id, user_id = user_id)
            db.session.add(participant)

        participant.last_read_at = _now()
        self._commit()

        return serialize_participant(participant)


    # ---------------------------------------------------------
    # Messages
    # ---------------------------------------------------------

    def post_message(self, conversation_id: int, args: dict) -> dict:
        """
        Post a message, attachments are uploaded under
        messages/{conversation_id}/{message_id}/{filename}

        Args:
            args (dict): content, parent_message_id, files
        """

        conversation = get_or_raise(Conversation, conversation_id, "CONVERSATION_NOT_FOUND")
        user_id = current_user_id()

        parent_id = args.get("parent_message_id")
        if parent_id is not None:
            parent = get_or_raise(Message, parent_id, "MESSAGE_NOT_FOUND")

            if parent.conversation_id != conversation.id:
                raise ValidationException(message = messages.ERROR["MESSAGE_NOT_FOUND"])

        try:
            message = Message(
                conversation_id = conversation.id,
                content = args.get("content") or "",
                parent_message_id = parent_id,
                created_by = user_id
            )
            db.session.add(message)
            db.session.flush()

            uploader = StorageUploader() if args.get("files") else None
            for file in args.get("files") or []:
                key = f"messages/{conversation.id}/{message.id}/{file.filename}"
                uploader.upload_file(file_obj = file, key = key, bucket = constants.STORAGE_DOCUMENTS_BUCKET)

                message.attachments.append(MessageAttachment(
                    file_name = file.filename,
                    file_size = getattr(file, "content_length", None) or None,
                    file_type = getattr(file, "mimetype", None),
                    storage_path = key,
                    uploaded_by = user_id
                ))

            if user_id and self._participant(conversation.id, user_id) is None:
                db.session.add(ConversationParticipant(conversation_id = conversation.id, user_id = user_id))

            conversation.last_message_at = _now()
            db.session.commit()

            return serialize_message(message)

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "MESSAGE_SAVE_FAILED",
                message = messages.ERROR["MESSAGE_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def edit_message(self, message_id: int, content: str) -> dict:
        message = get_or_raise(Message, message_id, "MESSAGE_NOT_FOUND")

        message.content = content
        message.edited_at = _now()
        self._commit()

        return serialize_message(message)


    def delete_message(self, message_id: int) -> dict:
        message = get_or_raise(Message, message_id, "MESSAGE_NOT_FOUND")

        message.is_deleted = True
        self._commit()

        return {"id": message_id, "message": messages.SUCCESS["MESSAGE_DELETED"]}


    def create_task_from_message(self, message_id: int, args: dict) -> dict:
        """ Task on the conversation's record, titled from the message when no title is given """

        message = get_or_raise(Message, message_id, "MESSAGE_NOT_FOUND")
        conversation = message.conversation

        title = (args.get("title") or "").strip() or message.content[:TASK_TITLE_LENGTH]

        if not title:
            raise ValidationException(message = messages.ERROR["TASK_FIELDS_REQUIRED"])

        task = TaskService().create_task({
            "title": title,
            "entity_type": conversation.entity_type,
            "entity_id": conversation.entity_id,
            "due_date": args.get("due_date"),
            "assignee_ids": args.get("assignee_ids"),
            "assignee_types": args.get("assignee_types")
        }, commit = False)

        message.created_task_id = task.id
        self._commit()

        logger.info("Message %s turned into task %s", message.id, task.id)

        return {
            "message_id": message.id,
            "task": serialize_task(task)
        }
