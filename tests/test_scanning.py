"""Tests for the paginated bucket scan loop."""

import pytest

from bucket_tools.core.exceptions import StorageOperationError
from bucket_tools.objectstorage.models import (
    ActionOutcome,
    ObjectPage,
    OperationResult,
    StorageFailure,
    StoredObject,
)
from bucket_tools.objectstorage.scanning import BucketScanner
from bucket_tools.schemas import ScanConfig


class FakeStore:
    """Serves fixed pages and records every listing request."""

    def __init__(self, pages, fail_on_page=None, events=None):
        self.pages = pages
        self.fail_on_page = fail_on_page
        self.requests = []
        self.events = events if events is not None else []
        self.failure = StorageFailure(
            operation="list_objects_v2",
            bucket="bucket",
            message="Access Denied",
            error_code="AccessDenied",
        )

    def list_page(self, request):
        self.requests.append(request)
        self.events.append(f"list:{request.continuation_token}")
        index = 0
        if request.continuation_token is not None:
            index = int(request.continuation_token.split("-")[1])

        if index == self.fail_on_page:
            return OperationResult.failed(self.failure)

        items = tuple(StoredObject(key=key, size=len(key)) for key in self.pages[index])
        truncated = index + 1 < len(self.pages)
        token = f"token-{index + 1}" if truncated else None
        return OperationResult.success(ObjectPage(items, truncated, token))


def recording_action(events):
    def action(item):
        events.append(f"act:{item.key}")
        return ActionOutcome.INSPECTED

    return action


class TestBucketScanner:
    """Test the scan-and-act loop against an in-memory page source."""

    def test_visits_every_item_in_order(self):
        """Test every item is acted on once, in listing order."""
        store = FakeStore([["a", "b"], ["c", "d"], ["e"]])
        events = []

        summary = BucketScanner(store, ScanConfig(bucket_name="bucket")).scan(
            recording_action(events)
        )

        assert events == ["act:a", "act:b", "act:c", "act:d", "act:e"]
        assert summary.item_count == 5
        assert summary.page_count == 3
        assert summary.total_bytes == 5
        assert summary.outcomes[ActionOutcome.INSPECTED] == 5

    def test_requests_chain_continuation_tokens(self):
        """Test each follow-up request carries exactly the previous token."""
        store = FakeStore([["a"], ["b"], ["c"]])

        BucketScanner(store, ScanConfig(bucket_name="bucket", page_size=1)).scan(
            lambda item: None
        )

        tokens = [request.continuation_token for request in store.requests]
        assert tokens == [None, "token-1", "token-2"]
        assert all(request.bucket == "bucket" for request in store.requests)
        assert all(request.page_size == 1 for request in store.requests)

    def test_stops_on_untruncated_page(self):
        """Test no request follows a page that is not truncated."""
        store = FakeStore([["a", "b"]])

        BucketScanner(store, ScanConfig(bucket_name="bucket")).scan(lambda item: None)

        assert len(store.requests) == 1

    def test_page_items_processed_before_next_request(self):
        """Test page N+1 is not requested before page N is fully processed."""
        events = []
        store = FakeStore([["a", "b"], ["c"]], events=events)

        BucketScanner(store, ScanConfig(bucket_name="bucket")).scan(
            recording_action(events)
        )

        assert events == ["list:None", "act:a", "act:b", "list:token-1", "act:c"]

    def test_empty_bucket(self):
        """Test an empty bucket completes without invoking the action."""
        store = FakeStore([[]])
        events = []

        summary = BucketScanner(store, ScanConfig(bucket_name="bucket")).scan(
            recording_action(events)
        )

        assert events == []
        assert summary.item_count == 0
        assert summary.page_count == 1

    def test_listing_failure_halts_scan(self):
        """Test a failed listing on page 2 stops the scan after page 1."""
        store = FakeStore([["a", "b"], ["c"], ["d"]], fail_on_page=1)
        events = []

        with pytest.raises(StorageOperationError) as exc_info:
            BucketScanner(store, ScanConfig(bucket_name="bucket")).scan(
                recording_action(events)
            )

        assert events == ["act:a", "act:b"]
        assert exc_info.value.failure is store.failure
        assert len(store.requests) == 2

    def test_listing_failure_on_first_page(self):
        """Test a failed first listing never invokes the action."""
        store = FakeStore([["a"]], fail_on_page=0)
        events = []

        with pytest.raises(StorageOperationError, match="AccessDenied"):
            BucketScanner(store, ScanConfig(bucket_name="bucket")).scan(
                recording_action(events)
            )

        assert events == []

    def test_action_failure_aborts_scan(self):
        """Test an exception from the action propagates and ends the scan."""
        store = FakeStore([["a", "b"], ["c"]])
        seen = []

        def action(item):
            seen.append(item.key)
            if item.key == "b":
                raise RuntimeError("copy failed")
            return ActionOutcome.COPIED

        with pytest.raises(RuntimeError, match="copy failed"):
            BucketScanner(store, ScanConfig(bucket_name="bucket")).scan(action)

        assert seen == ["a", "b"]
        assert len(store.requests) == 1

    def test_truncated_page_without_token(self):
        """Test a truncated page with no continuation token is an error."""

        class BrokenStore:
            def list_page(self, request):
                return OperationResult.success(
                    ObjectPage((StoredObject("a", 1),), truncated=True)
                )

        scanner = BucketScanner(BrokenStore(), ScanConfig(bucket_name="bucket"))

        with pytest.raises(StorageOperationError, match="no continuation token"):
            list(scanner.iter_objects())

    def test_iter_pages_restarts_from_first_page(self):
        """Test a second iteration issues a fresh initial request."""
        store = FakeStore([["a"], ["b"]])
        scanner = BucketScanner(store, ScanConfig(bucket_name="bucket"))

        first = [item.key for item in scanner.iter_objects()]
        second = [item.key for item in scanner.iter_objects()]

        assert first == second == ["a", "b"]
        tokens = [request.continuation_token for request in store.requests]
        assert tokens == [None, "token-1", None, "token-1"]

    def test_iter_pages_is_lazy(self):
        """Test no request is issued until the first page is consumed."""
        store = FakeStore([["a"], ["b"]])
        pages = BucketScanner(store, ScanConfig(bucket_name="bucket")).iter_pages()

        assert store.requests == []
        next(pages)
        assert len(store.requests) == 1
