"""
Task Service

Handles:
    - Tasks attached to a CRM record, with assignees and notes
    - Work queue of one assignee
    - Audit rows for task creation, edits and status changes
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.task import Task, TaskAssignment, TaskNote

# Base
from ...base.lookups import get_or_raise
from ...base.request_context import current_user_id

# Services
from ...audit_logs.services.audit_log_service import AuditLogService

# Exceptions
from ...util.exceptions import AppException, ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import format_date, format_datetime


logger = logging.getLogger(__name__)


def serialize_assignment(assignment: TaskAssignment) -> dict:
    return {
        "id": assignment.id,
        "assignee_type": assignment.assignee_type,
        "assignee_id": assignment.assignee_id
    }


def serialize_note(note: TaskNote) -> dict:
    return {
        "id": note.id,
        "task_id": note.task_id,
        "note_text": note.note_text,
        "created_by": note.created_by,
        "created_at": format_datetime(note.created_at)
    }


def serialize_task(task: Task) -> dict:
    return {
        "id": task.id,
        "title": task.title,
        "entity_type": task.entity_type,
        "entity_id": task.entity_id,
        "status": task.status,
        "due_date": format_date(task.due_date),
        "created_by": task.created_by,
        "created_at": format_datetime(task.created_at),
        "assignments": [serialize_assignment(assignment) for assignment in task.assignments],
        "notes": [serialize_note(note) for note in task.notes]
    }





class TaskService:

    @staticmethod
    def _commit():
        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "TASK_SAVE_FAILED",
                message = messages.ERROR["TASK_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def list_tasks(self, args: dict) -> list:
        query = Task.query

        if args.get("entity_type"):
            query = query.filter(Task.entity_type == args["entity_type"])

        if args.get("entity_id") is not None:
            query = query.filter(Task.entity_id == args["entity_id"])

        if args.get("status"):
            query = query.filter(Task.status == args["status"])

        tasks = query.order_by(Task.created_at.desc(), Task.id.desc()).all()

        return [serialize_task(task) for task in tasks]


    def work_queue(self, assignee_id: str = None) -> list:
        """ Pending tasks, earliest due date first (no due date last) """

        query = Task.query.filter(Task.status == "pending")

        if assignee_id:
            query = query.join(TaskAssignment, TaskAssignment.task_id == Task.id).filter(
                TaskAssignment.assignee_id == assignee_id
            )

        tasks = query.order_by(
            Task.due_date.is_(None),
            Task.due_date.asc(),
            Task.created_at.asc(),
            Task.id.asc()
        ).all()

        return [serialize_task(task) for task in tasks]


    def create_task(self, args: dict, commit: bool = True) -> Task:
        """
        New task with its assignees

        commit=False leaves the unit of work open for callers that
        save other rows with the task (message -> task).
        """

        try:
            task = Task(
                title = args["title"],
                entity_type = args["entity_type"],
                entity_id = args["entity_id"],
                status = "pending",
                due_date = args.get("due_date"),
                created_by = current_user_id()
            )
            db.session.add(task)
            db.session.flush()

            assignee_types = args.get("assignee_types") or []
            for index, assignee_id in enumerate(args.get("assignee_ids") or []):
                assignee_type = assignee_types[index] if index < len(assignee_types) else "user"

                db.session.add(TaskAssignment(
                    task_id = task.id,
                    assignee_type = assignee_type or "user",
                    assignee_id = str(assignee_id)
                ))

            AuditLogService.record("task", task.id, "create", new_value = task.title)
            AuditLogService.record(
                entity_type = task.entity_type,
                entity_id = task.entity_id,
                action_type = "update",
                field_name = "task",
                new_value = task.title,
                metadata = {"task_id": task.id}
            )

            if commit:
                db.session.commit()
                logger.info("Task %s created on %s %s", task.id, task.entity_type, task.entity_id)

            return task

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "TASK_SAVE_FAILED",
                message = messages.ERROR["TASK_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def get_task(self, task_id: int) -> dict:
        return serialize_task(get_or_raise(Task, task_id, "TASK_NOT_FOUND"))


    def update_task(self, task_id: int, args: dict) -> dict:
        task = get_or_raise(Task, task_id, "TASK_NOT_FOUND")

        changes = {key: args[key] for key in ("title", "due_date") if key in args}
        AuditLogService.record_changes("task", task.id, task, changes)

        self._commit()

        return serialize_task(task)


    def update_status(self, task_id: int, status: str) -> dict:
        task = get_or_raise(Task, task_id, "TASK_NOT_FOUND")

        AuditLogService.record_changes("task", task.id, task, {"status": status})

        self._commit()

        return serialize_task(task)


    def add_note(self, task_id: int, note_text: str) -> dict:
        task = get_or_raise(Task, task_id, "TASK_NOT_FOUND")

        note = TaskNote(task_id = task.id, note_text = note_text, created_by = current_user_id())
        db.session.add(note)
        self._commit()

        return serialize_note(note)
