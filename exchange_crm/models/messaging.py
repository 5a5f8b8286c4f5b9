"""
Model: Conversation, ConversationParticipant, Message, MessageAttachment
Tables: conversations, conversation_participants, messages,
        message_attachments

Conversations hang off a CRM record (entity_type + entity_id). Messages
thread through parent_message_id and are soft deleted.
"""

# Database
from ..config.database import db

# Mixins
from .mixins import TimestampMixin





class Conversation(TimestampMixin, db.Model):
    """ Discussion thread on a CRM record... """

    # Table Name
    __tablename__ = "conversations"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    entity_type = db.Column(db.String(20), nullable = False)

    entity_id = db.Column(db.Integer, nullable = False)

    title = db.Column(db.String(255), nullable = True)

    is_pinned = db.Column(db.Boolean, nullable = False, default = False)

    last_message_at = db.Column(db.DateTime(timezone = True), nullable = True)

    created_by = db.Column(db.String(64), nullable = True)

    # Relationships
    participants = db.relationship(
        "ConversationParticipant",
        back_populates = "conversation",
        cascade = "all, delete-orphan",
        order_by = "ConversationParticipant.id"
    )

    messages = db.relationship(
        "Message",
        back_populates = "conversation",
        cascade = "all, delete-orphan",
        order_by = "Message.id"
    )

    def __repr__(self):
        return f"<Conversation {self.entity_type}:{self.entity_id}>"





class ConversationParticipant(db.Model):
    """ Member of a conversation... """

    # Table Name
    __tablename__ = "conversation_participants"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    conversation_id = db.Column(
        db.Integer,
        db.ForeignKey("conversations.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    user_id = db.Column(db.String(64), nullable = False)

    joined_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = db.func.now()
    )

    last_read_at = db.Column(db.DateTime(timezone = True), nullable = True)

    is_admin = db.Column(db.Boolean, nullable = False, default = False)

    # Relationship
    conversation = db.relationship("Conversation", back_populates = "participants")

    def __repr__(self):
        return f"<ConversationParticipant {self.conversation_id}:{self.user_id}>"





class Message(TimestampMixin, db.Model):
    """ One message (or reply)... """

    # Table Name
    __tablename__ = "messages"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    conversation_id = db.Column(
        db.Integer,
        db.ForeignKey("conversations.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    content = db.Column(db.Text, nullable = False, default = "")

    parent_message_id = db.Column(
        db.Integer,
        db.ForeignKey("messages.id", ondelete = "SET NULL"),
        nullable = True
    )

    created_task_id = db.Column(
        db.Integer,
        db.ForeignKey("tasks.id", ondelete = "SET NULL"),
        nullable = True
    )

    is_system_message = db.Column(db.Boolean, nullable = False, default = False)

    extra = db.Column("metadata", db.JSON, nullable = True)

    created_by = db.Column(db.String(64), nullable = True)

    edited_at = db.Column(db.DateTime(timezone = True), nullable = True)

    is_deleted = db.Column(db.Boolean, nullable = False, default = False)

    # Relationships
    conversation = db.relationship("Conversation", back_populates = "messages")
    created_task = db.relationship("Task")

    attachments = db.relationship(
        "MessageAttachment",
        back_populates = "message",
        cascade = "all, delete-orphan",
        order_by = "MessageAttachment.id"
    )

    def __repr__(self):
        return f"<Message {self.id} conversation={self.conversation_id}>"





class MessageAttachment(db.Model):
    """ File attached to a message... """

    # Table Name
    __tablename__ = "message_attachments"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    message_id = db.Column(
        db.Integer,
        db.ForeignKey("messages.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    file_name = db.Column(db.String(255), nullable = False)
    file_size = db.Column(db.Integer, nullable = True)
    file_type = db.Column(db.String(100), nullable = True)
    storage_path = db.Column(db.Text, nullable = False)

    uploaded_by = db.Column(db.String(64), nullable = True)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = db.func.now()
    )

    # Relationship
    message = db.relationship("Message", back_populates = "attachments")

    def __repr__(self):
        return f"<MessageAttachment {self.file_name}>"
