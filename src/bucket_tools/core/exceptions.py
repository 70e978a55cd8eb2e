"""Exception hierarchy for bucket-tools."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bucket_tools.objectstorage.models import StorageFailure


class BucketToolsError(Exception):
    """Base exception for all bucket-tools errors."""

    pass


class ValidationError(BucketToolsError):
    """Raised when validation fails."""

    pass


class ConfigurationError(BucketToolsError):
    """Raised when required configuration is missing."""

    pass


class StorageOperationError(BucketToolsError):
    """Raised when a call to the object store fails.

    The ``failure`` attribute keeps the operation name, bucket and key of the
    call that failed.
    """

    def __init__(self, failure: "StorageFailure"):
        super().__init__(failure.describe())
        self.failure = failure
