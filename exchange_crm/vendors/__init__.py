"""
vendors
=======
Third party service clients.

    from ...vendors.storage import StorageUploader, StorageDeleteService
"""
