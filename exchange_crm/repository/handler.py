"""
File: Document Repository Routes

Handles:
    - Folder tree of a CRM record (created on first access)
    - Folder create / rename / delete
    - File upload / rename / delete
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.repository_request import FolderRequest, RenameRequest
from ..base.common_requests import FileUploadRequest

# Validations
from .validations.repository_validation import RepositoryValidation

# Controller
from .controller import RepositoryController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
repository_namespace = Namespace('repository', description = 'Document Repository APIs')





@repository_namespace.route('/<string:entity_type>/<string:entity_id>')
class RepositoryTree(Resource):

    def get(self, entity_type, entity_id):
        """
        Folder tree of a record, the repository is created when missing
        """

        try:
            RepositoryValidation().validate_entity(entity_type, entity_id)

            result = RepositoryController().get_tree(entity_type, entity_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@repository_namespace.route('/folders')
class FolderList(Resource):

    @FolderRequest.apply(repository_namespace)
    def post(self):
        try:
            # Args
            args = FolderRequest.get_data()

            # Validations
            RepositoryValidation().validate_folder_create(args)

            # Controller
            result = RepositoryController().create_folder(args)

            return {"status": "success", "data": result}, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@repository_namespace.route('/folders/<string:folder_id>')
class FolderDetail(Resource):

    @RenameRequest.apply(repository_namespace)
    def put(self, folder_id):
        try:
            args = RenameRequest.get_data()
            RepositoryValidation().validate_folder_name(args)

            result = RepositoryController().rename_folder(folder_id, args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, folder_id):
        try:
            result = RepositoryController().delete_folder(folder_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@repository_namespace.route('/folders/<string:folder_id>/files')
class FolderUpload(Resource):

    @FileUploadRequest.apply(repository_namespace)
    def post(self, folder_id):
        try:
            args = FileUploadRequest.get_data()
            RepositoryValidation().validate_upload(args)

            result = RepositoryController().upload_file(folder_id, args)

            return {"status": "success", "data": result}, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@repository_namespace.route('/files/<string:file_id>')
class FileDetail(Resource):

    @RenameRequest.apply(repository_namespace)
    def put(self, file_id):
        try:
            args = RenameRequest.get_data()
            RepositoryValidation().validate_file_name(args)

            result = RepositoryController().rename_file(file_id, args)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, file_id):
        try:
            result = RepositoryController().delete_file(file_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
