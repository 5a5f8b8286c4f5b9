"""
vendors/storage
===============
S3 compatible object storage (Supabase storage buckets, MinIO, AWS S3).

    from ...vendors.storage import StorageUploader, StorageDeleteService
"""

from .storage_uploader import StorageUploader
from .storage_delete import StorageDeleteService
