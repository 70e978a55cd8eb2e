"""Per-object actions for the bucket scanner.

Each factory returns a callable that takes one StoredObject, performs its
effect, prints progress through ``echo`` and returns an ActionOutcome.
Failed copy and delete calls raise StorageOperationError, which aborts the
scan that invoked them.
"""

from typing import Callable, Optional

from bucket_tools.core import get_logger
from bucket_tools.objectstorage.gateway import S3ObjectStore
from bucket_tools.objectstorage.models import ActionOutcome, StoredObject

logger = get_logger(__name__)

Echo = Callable[[str], None]
KeyMapper = Callable[[str], str]


def _same_key(key: str) -> str:
    return key


def report_action(echo: Echo = print) -> Callable[[StoredObject], ActionOutcome]:
    """Print each object's key and size."""

    def report(item: StoredObject) -> ActionOutcome:
        echo(f"Object key: {item.key}")
        echo(f"Object size: {item.size}")
        return ActionOutcome.INSPECTED

    return report


def copy_action(
    store: S3ObjectStore,
    source_bucket: str,
    destination_bucket: str,
    key_mapper: KeyMapper = _same_key,
    echo: Echo = print,
    skip_prefix: Optional[str] = None,
) -> Callable[[StoredObject], Optional[ActionOutcome]]:
    """Copy each object into ``destination_bucket``.

    Args:
        store: Object store gateway
        source_bucket: Bucket the scanned objects live in
        destination_bucket: Bucket to copy into
        key_mapper: Maps a source key to its destination key (identity by default)
        echo: Progress output
        skip_prefix: Objects whose key starts with this prefix are left alone.
            Used for copies within one bucket, where copies written earlier in
            the scan appear in later listing pages.
    """

    def copy(item: StoredObject) -> Optional[ActionOutcome]:
        if skip_prefix and item.key.startswith(skip_prefix):
            logger.debug("Skipping copied object", key=item.key)
            return None

        echo(f"Copying object: {item.key}")
        destination_key = key_mapper(item.key)
        outcome = store.copy_object(
            source_bucket, item.key, destination_bucket, destination_key
        ).unwrap()
        echo(f"Copied object: {item.key}")
        return outcome

    return copy


def delete_action(
    store: S3ObjectStore,
    bucket: str,
    echo: Echo = print,
) -> Callable[[StoredObject], ActionOutcome]:
    """Delete each object from ``bucket``."""

    def delete(item: StoredObject) -> ActionOutcome:
        echo(f"Deleting object: {item.key}")
        outcome = store.delete_object(bucket, item.key).unwrap()
        echo(f"Deleted object: {item.key}")
        return outcome

    return delete
