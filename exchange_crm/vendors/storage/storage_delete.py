"""
Storage Delete Service

Handles:
    - Delete single object
    - Delete entire folder (prefix)
    - Pagination (more than 1000 objects)
"""

# Python Packages
import logging

from botocore.exceptions import BotoCoreError, ClientError

# Client
from .storage_client import get_storage_client

# Exceptions
from ...util.exceptions import StorageException

# App Messages
from ...util import messages


logger = logging.getLogger(__name__)





class StorageDeleteService:
    """
    Bucket delete operations
    """

    def __init__(self):
        self.client = get_storage_client()


    # ---------------------------------------------------------
    # Delete Single File
    # ---------------------------------------------------------
    def delete_file(self, key: str, bucket: str):
        """
        Delete a single object

        Args:
            key (str): Object key inside the bucket
            bucket (str): Bucket name
        """

        try:
            self.client.delete_object(Bucket = bucket, Key = key)

        except (BotoCoreError, ClientError) as error:
            raise StorageException(
                message = messages.ERROR["STORAGE_DELETE_FAILED"],
                details = str(error)
            )

        logger.info("Deleted %s/%s", bucket, key)


    # ---------------------------------------------------------
    # Delete Folder (Prefix)
    # ---------------------------------------------------------
    def delete_folder(self, prefix: str, bucket: str) -> int:
        """
        Delete all objects under a prefix

        Returns:
            int: number of deleted objects
        """

        deleted = 0
        request_args = {"Bucket": bucket, "Prefix": prefix}

        try:
            while True:
                response = self.client.list_objects_v2(**request_args)

                if "Contents" not in response:
                    break

                objects_to_delete = [
                    {"Key": obj["Key"]}
                    for obj in response["Contents"]
                ]

                self.client.delete_objects(
                    Bucket = bucket,
                    Delete = {"Objects": objects_to_delete}
                )
                deleted += len(objects_to_delete)

                if response.get("IsTruncated"):
                    request_args["ContinuationToken"] = response.get("NextContinuationToken")
                else:
                    break

        except (BotoCoreError, ClientError) as error:
            raise StorageException(
                message = messages.ERROR["STORAGE_DELETE_FAILED"],
                details = str(error)
            )

        logger.info("Deleted %s objects under %s/%s", deleted, bucket, prefix)

        return deleted
