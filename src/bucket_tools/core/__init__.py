"""Core utilities and shared components for bucket-tools."""

from .config import settings
from .exceptions import (
    BucketToolsError,
    ConfigurationError,
    StorageOperationError,
    ValidationError,
)
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "BucketToolsError",
    "ConfigurationError",
    "StorageOperationError",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
