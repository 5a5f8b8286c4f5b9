""" File: Storage client builder """

# Python Packages
import boto3

# Constants
from ...base import constants





def get_storage_client():
    """
    boto3 S3 client pointed at the configured endpoint

    STORAGE_ENDPOINT_URL is None for plain AWS.
    """

    return boto3.client(
        "s3",
        endpoint_url = constants.STORAGE_ENDPOINT_URL,
        aws_access_key_id = constants.STORAGE_ACCESS_KEY_ID,
        aws_secret_access_key = constants.STORAGE_SECRET_ACCESS_KEY,
        region_name = constants.STORAGE_REGION
    )
