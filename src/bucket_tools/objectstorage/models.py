"""Value types exchanged between the object store gateway and the scan loop."""

from collections import Counter
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Generic, Mapping, Optional, TypeVar

from bucket_tools.core.exceptions import StorageOperationError

T = TypeVar("T")


@dataclass(frozen=True)
class StoredObject:
    """One object as returned by a listing page.

    Attributes:
        key: Object key, unique within its bucket
        size: Object size in bytes
    """

    key: str
    size: int


@dataclass(frozen=True)
class ObjectPage:
    """One page of a bucket listing."""

    items: tuple[StoredObject, ...]
    truncated: bool
    continuation_token: Optional[str] = None


@dataclass(frozen=True)
class ScanRequest:
    """Parameters of a single listing request."""

    bucket: str
    continuation_token: Optional[str] = None
    page_size: Optional[int] = None

    def next_page(self, continuation_token: str) -> "ScanRequest":
        """Request for the page following the one this request returned."""
        return replace(self, continuation_token=continuation_token)


class ActionOutcome(str, Enum):
    """Result of applying an action to one object."""

    COPIED = "copied"
    DELETED = "deleted"
    INSPECTED = "inspected"


@dataclass(frozen=True)
class StorageFailure:
    """Context of a failed object store call."""

    operation: str
    bucket: str
    message: str
    key: Optional[str] = None
    error_code: Optional[str] = None
    destination: Optional[str] = None

    def describe(self) -> str:
        target = f"s3://{self.bucket}/{self.key}" if self.key else f"s3://{self.bucket}"
        code = f" [{self.error_code}]" if self.error_code else ""
        if self.destination:
            target = f"{target} -> {self.destination}"
        return f"{self.operation} failed for {target}{code}: {self.message}"


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Success or failure of one object store call."""

    value: Optional[T] = None
    failure: Optional[StorageFailure] = None

    @classmethod
    def success(cls, value: T) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failed(cls, failure: StorageFailure) -> "OperationResult[T]":
        return cls(failure=failure)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> T:
        """Return the value, or raise StorageOperationError for a failure."""
        if self.failure is not None:
            raise StorageOperationError(self.failure)
        return self.value  # type: ignore[return-value]


@dataclass(frozen=True)
class ScanSummary:
    """Totals for a completed scan."""

    bucket: str
    page_count: int = 0
    item_count: int = 0
    total_bytes: int = 0
    outcomes: Mapping[ActionOutcome, int] = field(default_factory=Counter)
