"""
Repository Controller
"""

# Services
from .services.repository_service import RepositoryService





class RepositoryController:

    def __init__(self):
        self.repository_service = RepositoryService()


    def get_tree(self, entity_type: str, entity_id: str) -> dict:
        return self.repository_service.get_tree(entity_type, entity_id)


    def create_folder(self, args: dict) -> dict:
        return self.repository_service.create_folder(args)


    def rename_folder(self, folder_id: str, args: dict) -> dict:
        return self.repository_service.rename_folder(folder_id, args["name"])


    def delete_folder(self, folder_id: str) -> dict:
        return self.repository_service.delete_folder(folder_id)


    def upload_file(self, folder_id: str, args: dict) -> dict:
        return self.repository_service.upload_file(folder_id, args["file"])


    def rename_file(self, file_id: str, args: dict) -> dict:
        return self.repository_service.rename_file(file_id, args["name"])


    def delete_file(self, file_id: str) -> dict:
        return self.repository_service.delete_file(file_id)
