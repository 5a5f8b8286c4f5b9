"""
Model: Task, TaskAssignment, TaskNote, TaskAttachment
Tables: tasks, task_assignments, task_notes, task_attachments

Work items attached to a CRM record and assigned to users or admins.
"""

# Database
from ..config.database import db

# Mixins
from .mixins import TimestampMixin





class Task(TimestampMixin, db.Model):
    """ Work queue item... """

    # Table Name
    __tablename__ = "tasks"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    title = db.Column(db.String(255), nullable = False)

    entity_type = db.Column(db.String(20), nullable = False)

    entity_id = db.Column(db.Integer, nullable = False)

    status = db.Column(db.String(20), nullable = False, default = "pending")

    due_date = db.Column(db.Date, nullable = True)

    created_by = db.Column(db.String(64), nullable = True)

    # Relationships
    assignments = db.relationship(
        "TaskAssignment",
        back_populates = "task",
        cascade = "all, delete-orphan",
        order_by = "TaskAssignment.id"
    )

    notes = db.relationship(
        "TaskNote",
        back_populates = "task",
        cascade = "all, delete-orphan",
        order_by = "TaskNote.id"
    )

    attachments = db.relationship(
        "TaskAttachment",
        back_populates = "task",
        cascade = "all, delete-orphan",
        order_by = "TaskAttachment.id"
    )

    def __repr__(self):
        return f"<Task {self.id} {self.status}>"





class TaskAssignment(db.Model):
    """ Assignee of a task... """

    # Table Name
    __tablename__ = "task_assignments"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    task_id = db.Column(
        db.Integer,
        db.ForeignKey("tasks.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    assignee_type = db.Column(db.String(10), nullable = False, default = "user")

    assignee_id = db.Column(db.String(64), nullable = False, index = True)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = db.func.now()
    )

    # Relationship
    task = db.relationship("Task", back_populates = "assignments")

    def __repr__(self):
        return f"<TaskAssignment {self.task_id}:{self.assignee_id}>"





class TaskNote(TimestampMixin, db.Model):
    """ Note on a task... """

    # Table Name
    __tablename__ = "task_notes"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    task_id = db.Column(
        db.Integer,
        db.ForeignKey("tasks.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    note_text = db.Column(db.Text, nullable = False)

    created_by = db.Column(db.String(64), nullable = True)

    # Relationship
    task = db.relationship("Task", back_populates = "notes")

    def __repr__(self):
        return f"<TaskNote {self.id}>"





class TaskAttachment(db.Model):
    """ File attached to a task... """

    # Table Name
    __tablename__ = "task_attachments"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    task_id = db.Column(
        db.Integer,
        db.ForeignKey("tasks.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    file_path = db.Column(db.Text, nullable = False)
    file_name = db.Column(db.String(255), nullable = False)
    file_size = db.Column(db.Integer, nullable = True)
    file_type = db.Column(db.String(100), nullable = True)

    uploaded_by = db.Column(db.String(64), nullable = True)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = db.func.now()
    )

    # Relationship
    task = db.relationship("Task", back_populates = "attachments")

    def __repr__(self):
        return f"<TaskAttachment {self.file_name}>"
