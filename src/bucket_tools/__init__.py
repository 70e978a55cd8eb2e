"""Paginated scan-and-act tools for S3-compatible object storage.

This package walks every object of a bucket, page by page, and applies one
action to each object: report it, copy it into another bucket, or delete it.
A serverless handler lists the first page of a bucket as text.

Recommended Usage:

    >>> from bucket_tools import ScanConfig, list_bucket_objects
    >>> summary = list_bucket_objects(ScanConfig(bucket_name="my-bucket"))

Advanced Usage:
    Drive the scan loop directly with a custom action:

    >>> from bucket_tools.objectstorage import BucketScanner, S3ObjectStore
"""

__version__ = "0.1.0"

from .objectstorage import (
    ActionOutcome,
    BucketScanner,
    S3ClientConfig,
    S3ObjectStore,
    ScanSummary,
    StoredObject,
    copy_bucket_objects,
    delete_bucket_objects,
    list_bucket_objects,
    summarize_bucket,
)
from .schemas import CopyConfig, ScanConfig

__all__ = [
    # Configuration
    "CopyConfig",
    "S3ClientConfig",
    "ScanConfig",
    # Operations
    "copy_bucket_objects",
    "delete_bucket_objects",
    "list_bucket_objects",
    "summarize_bucket",
    # Scan loop
    "ActionOutcome",
    "BucketScanner",
    "S3ObjectStore",
    "ScanSummary",
    "StoredObject",
]
