"""Bucket operations: list, copy and delete every object, or summarize one page.

Each operation acquires one S3 client, runs to completion or to the first
failure, and releases the client before returning or raising.
"""

from typing import Optional

from bucket_tools.core import get_logger
from bucket_tools.core.exceptions import ValidationError
from bucket_tools.objectstorage.actions import (
    Echo,
    KeyMapper,
    copy_action,
    delete_action,
    report_action,
)
from bucket_tools.objectstorage.clients import S3ClientConfig, S3ClientManager
from bucket_tools.objectstorage.gateway import S3ObjectStore
from bucket_tools.objectstorage.models import ScanSummary
from bucket_tools.objectstorage.scanning import BucketScanner
from bucket_tools.schemas import CopyConfig, ScanConfig

logger = get_logger(__name__)


def list_bucket_objects(
    scan_config: ScanConfig,
    client_config: Optional[S3ClientConfig] = None,
    echo: Echo = print,
) -> ScanSummary:
    """Print the key and size of every object in a bucket."""
    logger.info("Listing bucket objects", bucket=scan_config.bucket_name)

    with S3ClientManager(client_config or S3ClientConfig()) as manager:
        scanner = BucketScanner(S3ObjectStore(manager.client), scan_config)
        return scanner.scan(report_action(echo))


def copy_bucket_objects(
    copy_config: CopyConfig,
    client_config: Optional[S3ClientConfig] = None,
    echo: Echo = print,
    key_mapper: Optional[KeyMapper] = None,
) -> ScanSummary:
    """Copy every object of the source bucket into the destination bucket.

    Within a single bucket, objects already under the destination prefix are
    skipped, so copies written during the scan are not copied again.

    Args:
        copy_config: Source, destination and optional destination key prefix
        client_config: S3 client configuration (settings defaults if omitted)
        echo: Progress output
        key_mapper: Explicit key remapping; overrides the destination prefix.
            Only allowed between two different buckets.

    Returns:
        ScanSummary of the source bucket scan

    Raises:
        ValidationError: If a key mapper is given for a copy within one bucket
        StorageOperationError: On the first failed listing or copy call
    """
    same_bucket = copy_config.source_bucket == copy_config.destination_bucket
    if same_bucket and key_mapper is not None:
        raise ValidationError(
            "A key mapper cannot be used to copy within one bucket; "
            "use a destination prefix instead"
        )

    logger.info(
        "Copying bucket objects",
        source_bucket=copy_config.source_bucket,
        destination_bucket=copy_config.destination_bucket,
        destination_prefix=copy_config.destination_prefix,
    )

    with S3ClientManager(client_config or S3ClientConfig()) as manager:
        store = S3ObjectStore(manager.client)
        action = copy_action(
            store,
            source_bucket=copy_config.source_bucket,
            destination_bucket=copy_config.destination_bucket,
            key_mapper=key_mapper or copy_config.destination_key,
            echo=echo,
            skip_prefix=copy_config.destination_prefix if same_bucket else None,
        )
        return BucketScanner(store, copy_config.scan_config()).scan(action)


def delete_bucket_objects(
    scan_config: ScanConfig,
    client_config: Optional[S3ClientConfig] = None,
    echo: Echo = print,
) -> ScanSummary:
    """Delete every object in a bucket.

    Raises:
        StorageOperationError: On the first failed listing or delete call
    """
    logger.info("Deleting bucket objects", bucket=scan_config.bucket_name)

    with S3ClientManager(client_config or S3ClientConfig()) as manager:
        store = S3ObjectStore(manager.client)
        action = delete_action(store, scan_config.bucket_name, echo=echo)
        return BucketScanner(store, scan_config).scan(action)


def summarize_bucket(
    bucket_name: str,
    client_config: Optional[S3ClientConfig] = None,
) -> str:
    """Text summary of the first listing page of a bucket.

    Issues exactly one listing request, even when the page is truncated.
    """
    with S3ClientManager(client_config or S3ClientConfig()) as manager:
        page = S3ObjectStore(manager.client).list_first_page(bucket_name).unwrap()

    if page.truncated:
        logger.info(
            "Bucket summary covers the first page only",
            bucket=bucket_name,
            item_count=len(page.items),
        )

    lines = [f"Objects in bucket {bucket_name}:\n"]
    lines.extend(f"{item.key}\n" for item in page.items)
    return "".join(lines)
