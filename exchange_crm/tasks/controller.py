"""
Task Controller
"""

# Services
from .services.task_service import TaskService, serialize_task





class TaskController:

    def __init__(self):
        self.task_service = TaskService()


    def list_tasks(self, args: dict) -> list:
        return self.task_service.list_tasks(args)


    def work_queue(self, args: dict) -> list:
        return self.task_service.work_queue(args.get("assignee_id"))


    def create_task(self, args: dict) -> dict:
        return serialize_task(self.task_service.create_task(args))


    def get_task(self, task_id: int) -> dict:
        return self.task_service.get_task(task_id)


    def update_task(self, task_id: int, args: dict) -> dict:
        return self.task_service.update_task(task_id, args)


    def update_status(self, task_id: int, args: dict) -> dict:
        return self.task_service.update_status(task_id, args["status"])


    def add_note(self, task_id: int, args: dict) -> dict:
        return self.task_service.add_note(task_id, args["note_text"])
