"""
Document Repository Service

Handles:
    - Lazy creation of the repository of a CRM record (with default folders)
    - Folder tree
    - Folder create / rename / delete (stored objects removed too)
    - File upload / rename / delete
"""

# Python Packages
import logging
import time
from datetime import datetime, timedelta, timezone

# Database
from ...config.database import db

# Models
from ...models.repository import DocumentRepository, DocumentFolder, DocumentFile

# Base
from ...base import constants
from ...base.lookups import get_or_raise

# Vendors
from ...vendors.storage import StorageUploader, StorageDeleteService

# Exceptions
from ...util.exceptions import ServiceException, ValidationException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import format_datetime


logger = logging.getLogger(__name__)


def default_folder_names(entity_type: str) -> tuple:
    if entity_type == "transaction":
        return constants.REPOSITORY_TRANSACTION_FOLDERS

    return (constants.REPOSITORY_DEFAULT_FOLDER,)


def serialize_file(document_file: DocumentFile) -> dict:
    return {
        "id": document_file.id,
        "folder_id": document_file.folder_id,
        "name": document_file.name,
        "storage_path": document_file.storage_path,
        "url": StorageUploader.public_url(document_file.storage_path, constants.STORAGE_DOCUMENTS_BUCKET),
        "created_at": format_datetime(document_file.created_at)
    }


def serialize_folder(folder: DocumentFolder) -> dict:
    """ Folder with nested children and files, creation order """

    return {
        "id": folder.id,
        "repository_id": folder.repository_id,
        "parent_id": folder.parent_id,
        "name": folder.name,
        "created_at": format_datetime(folder.created_at),
        "children": [serialize_folder(child) for child in _ordered(folder.children)],
        "files": [serialize_file(document_file) for document_file in _ordered(folder.files)]
    }


def _ordered(rows):
    return sorted(rows, key = lambda row: (row.created_at is None, row.created_at, row.id))


def _descendants(folder: DocumentFolder) -> list:
    folders = [folder]
    for child in folder.children:
        folders.extend(_descendants(child))

    return folders





class RepositoryService:

    @staticmethod
    def _commit():
        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "REPOSITORY_SAVE_FAILED",
                message = messages.ERROR["REPOSITORY_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    # ---------------------------------------------------------
    # Repository
    # ---------------------------------------------------------

    def ensure_repository(self, entity_type: str, entity_id) -> DocumentRepository:
        """
        Repository of a record, created on first access

        A transaction gets its four working folders, every other
        record a single "Documents" folder.
        """

        entity_id = str(entity_id)

        repository = DocumentRepository.query.filter_by(entity_type = entity_type, entity_id = entity_id).first()

        if repository is not None:
            return repository

        repository = DocumentRepository(entity_type = entity_type, entity_id = entity_id)
        db.session.add(repository)
        db.session.flush()

        created_at = datetime.now(timezone.utc)
        for position, name in enumerate(default_folder_names(entity_type)):
            db.session.add(DocumentFolder(
                repository_id = repository.id,
                name = name,
                created_at = created_at + timedelta(microseconds = position)
            ))

        self._commit()

        logger.info("Document repository created for %s %s", entity_type, entity_id)

        return repository


    def get_tree(self, entity_type: str, entity_id) -> dict:
        repository = self.ensure_repository(entity_type, entity_id)

        root_folders = DocumentFolder.query.filter(
            DocumentFolder.repository_id == repository.id,
            DocumentFolder.parent_id.is_(None)
        ).all()

        return {
            "repository_id": repository.id,
            "root_folders": [serialize_folder(folder) for folder in _ordered(root_folders)]
        }


    # ---------------------------------------------------------
    # Folders
    # ---------------------------------------------------------

    def create_folder(self, args: dict) -> dict:
        repository = get_or_raise(DocumentRepository, args["repository_id"], "REPOSITORY_NOT_FOUND")

        parent_id = args.get("parent_id") or None
        if parent_id is not None:
            parent = get_or_raise(DocumentFolder, parent_id, "FOLDER_NOT_FOUND")

            if parent.repository_id != repository.id:
                raise ValidationException(message = messages.ERROR["FOLDER_NOT_FOUND"])

        folder = DocumentFolder(repository_id = repository.id, parent_id = parent_id, name = args["name"])
        db.session.add(folder)
        self._commit()

        return serialize_folder(folder)


    def rename_folder(self, folder_id: str, name: str) -> dict:
        folder = get_or_raise(DocumentFolder, folder_id, "FOLDER_NOT_FOUND")

        folder.name = name
        self._commit()

        return serialize_folder(folder)


    def delete_folder(self, folder_id: str) -> dict:
        """ Stored objects of the folder and its sub folders go first """

        folder = get_or_raise(DocumentFolder, folder_id, "FOLDER_NOT_FOUND")

        storage = StorageDeleteService()
        removed = 0
        for each in _descendants(folder):
            removed += storage.delete_folder(f"{each.repository_id}/{each.id}/", constants.STORAGE_DOCUMENTS_BUCKET)

        db.session.delete(folder)
        self._commit()

        logger.info("Folder %s deleted with %s stored object(s)", folder_id, removed)

        return {"id": folder_id, "message": messages.SUCCESS["FOLDER_DELETED"]}


    # ---------------------------------------------------------
    # Files
    # ---------------------------------------------------------

    def upload_file(self, folder_id: str, file) -> dict:
        folder = get_or_raise(DocumentFolder, folder_id, "FOLDER_NOT_FOUND")

        key = f"{folder.repository_id}/{folder.id}/{int(time.time() * 1000)}-{file.filename}"

        StorageUploader().upload_file(file_obj = file, key = key, bucket = constants.STORAGE_DOCUMENTS_BUCKET)

        document_file = DocumentFile(folder_id = folder.id, name = file.filename, storage_path = key)
        db.session.add(document_file)
        self._commit()

        return serialize_file(document_file)


    def rename_file(self, file_id: str, name: str) -> dict:
        document_file = get_or_raise(DocumentFile, file_id, "FILE_NOT_FOUND")

        document_file.name = name
        self._commit()

        return serialize_file(document_file)


    def delete_file(self, file_id: str) -> dict:
        document_file = get_or_raise(DocumentFile, file_id, "FILE_NOT_FOUND")

        StorageDeleteService().delete_file(document_file.storage_path, constants.STORAGE_DOCUMENTS_BUCKET)

        db.session.delete(document_file)
        self._commit()

        return {"id": file_id, "message": messages.SUCCESS["FILE_DELETED"]}
