""" File: Storage Uploader Service """

# Python Packages
import logging

from botocore.exceptions import BotoCoreError, ClientError

# Constants
from ...base import constants

# Client
from .storage_client import get_storage_client

# Exceptions
from ...util.exceptions import StorageException

# App Messages
from ...util import messages


logger = logging.getLogger(__name__)





class StorageUploader:

    def __init__(self):
        self.client = get_storage_client()

    def upload_file(self, file_obj, key: str, bucket: str) -> str:
        """
        Upload file object to a bucket

        Returns:
            str: storage path "bucket/key"
        """

        extra_args = {}
        content_type = getattr(file_obj, "mimetype", None) or getattr(file_obj, "content_type", None)
        if content_type:
            extra_args["ContentType"] = content_type

        try:
            self.client.upload_fileobj(
                Fileobj = getattr(file_obj, "stream", file_obj),
                Bucket = bucket,
                Key = key,
                ExtraArgs = extra_args or None
            )

        except (BotoCoreError, ClientError) as error:
            logger.error("Upload failed for %s/%s: %s", bucket, key, error)
            raise StorageException(
                message = messages.ERROR["STORAGE_UPLOAD_FAILED"],
                details = str(error)
            )

        logger.info("Uploaded %s/%s", bucket, key)

        return f"{bucket}/{key}"


    @staticmethod
    def public_url(key: str, bucket: str) -> str:
        """
        Public object URL

        Uses STORAGE_PUBLIC_URL (e.g. https://<ref>.supabase.co/storage/v1/object/public)
        when set, otherwise the endpoint style path.
        """

        base_url = constants.STORAGE_PUBLIC_URL or constants.STORAGE_ENDPOINT_URL or \
            f"https://s3.{constants.STORAGE_REGION}.amazonaws.com"

        return f"{base_url.rstrip('/')}/{bucket}/{key}"
