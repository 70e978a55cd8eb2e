"""Paginated bucket scan: enumerate every object and act on each one."""

from collections import Counter
from enum import Enum
from typing import Callable, Iterator, Optional, Protocol

from bucket_tools.core import get_logger, get_tracer
from bucket_tools.core.exceptions import StorageOperationError
from bucket_tools.objectstorage.models import (
    ActionOutcome,
    ObjectPage,
    OperationResult,
    ScanRequest,
    ScanSummary,
    StorageFailure,
    StoredObject,
)
from bucket_tools.schemas import ScanConfig

logger = get_logger(__name__)
tracer = get_tracer(__name__)

ObjectAction = Callable[[StoredObject], Optional[ActionOutcome]]


class PageSource(Protocol):
    """Anything that can fetch one listing page."""

    def list_page(self, request: ScanRequest) -> OperationResult[ObjectPage]:
        ...


class ScanState(str, Enum):
    HAS_MORE = "has_more"
    DONE = "done"


class BucketScanner:
    """Walks a bucket page by page and applies an action to each object.

    Pages are fetched lazily and strictly in sequence: the request for page
    N+1 is only issued once every object of page N has been handed to the
    caller. A listing failure raises StorageOperationError and ends the scan;
    nothing is retried or skipped. There is no cap on the number of pages.
    """

    def __init__(self, store: PageSource, config: ScanConfig):
        """Initialize bucket scanner.

        Args:
            store: Object store gateway used for listing requests
            config: Bucket and page size to scan with
        """
        self.store = store
        self.config = config

    def iter_pages(self) -> Iterator[ObjectPage]:
        """Yield every page of the bucket, starting from a fresh request."""
        request = ScanRequest(
            bucket=self.config.bucket_name, page_size=self.config.page_size
        )
        state = ScanState.HAS_MORE

        while state is ScanState.HAS_MORE:
            page = self.store.list_page(request).unwrap()
            yield page

            if not page.truncated:
                state = ScanState.DONE
            elif page.continuation_token is None:
                raise StorageOperationError(
                    StorageFailure(
                        operation="list_objects_v2",
                        bucket=request.bucket,
                        message="page is truncated but has no continuation token",
                    )
                )
            else:
                request = request.next_page(page.continuation_token)

    def iter_objects(self) -> Iterator[StoredObject]:
        """Yield every object of the bucket in listing order."""
        for page in self.iter_pages():
            yield from page.items

    def scan(self, action: ObjectAction) -> ScanSummary:
        """Apply ``action`` once to every object in listing order.

        Exceptions raised by ``action`` propagate and abort the scan.

        Returns:
            ScanSummary with page, object and byte totals and outcome counts
        """
        bucket = self.config.bucket_name
        page_count = 0
        item_count = 0
        total_bytes = 0
        outcomes: Counter = Counter()

        logger.info("Starting bucket scan", bucket=bucket)
        with tracer.start_as_current_span("bucket_scan") as span:
            span.set_attribute("bucket", bucket)

            for page in self.iter_pages():
                page_count += 1
                for item in page.items:
                    outcome = action(item)
                    item_count += 1
                    total_bytes += item.size
                    if outcome is not None:
                        outcomes[outcome] += 1

            span.set_attribute("page_count", page_count)
            span.set_attribute("item_count", item_count)

        summary = ScanSummary(
            bucket=bucket,
            page_count=page_count,
            item_count=item_count,
            total_bytes=total_bytes,
            outcomes=outcomes,
        )
        logger.info(
            "Bucket scan completed",
            bucket=bucket,
            page_count=page_count,
            item_count=item_count,
            total_bytes=total_bytes,
        )
        return summary
