"""
File: Task Routes

Handles:
    - Tasks of a CRM record and the work queue
    - Task edits, status changes and notes
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.task_request import TaskRequest, TaskStatusRequest, TaskNoteRequest
from ..base.common_requests import QueryRequest

# Validations
from .validations.task_validation import TaskValidation

# Controller
from .controller import TaskController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
task_namespace = Namespace('tasks', description = 'Task APIs')





@task_namespace.route('')
class TaskList(Resource):

    @QueryRequest.apply(task_namespace, entity_type = "Entity type", entity_id = "Entity id", status = "pending or completed")
    def get(self):
        try:
            args = QueryRequest.get_data()
            TaskValidation().validate_filter(args)

            result = TaskController().list_tasks(args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @TaskRequest.apply(task_namespace)
    def post(self):
        """
        Create a task on a CRM record
        """

        try:
            # Args
            args = TaskRequest.get_data()

            # Validations
            TaskValidation().validate_create(args)

            # Controller
            result = TaskController().create_task(args)

            return {"status": "success", "data": result}, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@task_namespace.route('/work-queue')
class TaskWorkQueue(Resource):

    @QueryRequest.apply(task_namespace, assignee_id = "Assignee user id")
    def get(self):
        try:
            result = TaskController().work_queue(QueryRequest.get_data())

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@task_namespace.route('/<int:task_id>')
class TaskDetail(Resource):

    def get(self, task_id):
        try:
            result = TaskController().get_task(task_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @TaskRequest.apply(task_namespace)
    def put(self, task_id):
        try:
            args = TaskRequest.get_data()
            TaskValidation().validate_update(args)

            result = TaskController().update_task(task_id, args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@task_namespace.route('/<int:task_id>/status')
class TaskStatus(Resource):

    @TaskStatusRequest.apply(task_namespace)
    def put(self, task_id):
        try:
            args = TaskStatusRequest.get_data()
            TaskValidation().validate_status(args)

            result = TaskController().update_status(task_id, args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@task_namespace.route('/<int:task_id>/notes')
class TaskNotes(Resource):

    @TaskNoteRequest.apply(task_namespace)
    def post(self, task_id):
        try:
            args = TaskNoteRequest.get_data()
            TaskValidation().validate_note(args)

            result = TaskController().add_note(task_id, args)

            return {"status": "success", "data": result}, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
