"""Object storage operations for S3-compatible services."""

from .clients import S3ClientConfig, S3ClientManager
from .gateway import S3ObjectStore
from .models import (
    ActionOutcome,
    ObjectPage,
    OperationResult,
    ScanRequest,
    ScanSummary,
    StorageFailure,
    StoredObject,
)
from .s3_operations import (
    copy_bucket_objects,
    delete_bucket_objects,
    list_bucket_objects,
    summarize_bucket,
)
from .scanning import BucketScanner, ScanState

__all__ = [
    "ActionOutcome",
    "BucketScanner",
    "ObjectPage",
    "OperationResult",
    "S3ClientConfig",
    "S3ClientManager",
    "S3ObjectStore",
    "ScanRequest",
    "ScanState",
    "ScanSummary",
    "StorageFailure",
    "StoredObject",
    "copy_bucket_objects",
    "delete_bucket_objects",
    "list_bucket_objects",
    "summarize_bucket",
]
