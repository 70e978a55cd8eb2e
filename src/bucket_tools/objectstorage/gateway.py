"""Object store gateway: the only place that talks to the S3 API.

Every call returns an OperationResult instead of raising, so callers decide
whether a failure aborts their work. botocore errors are converted into a
StorageFailure naming the operation, bucket and key; anything else propagates.
"""

from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from bucket_tools.core import get_logger
from bucket_tools.objectstorage.models import (
    ActionOutcome,
    ObjectPage,
    OperationResult,
    ScanRequest,
    StorageFailure,
    StoredObject,
)

logger = get_logger(__name__)


def _failure(
    operation: str,
    bucket: str,
    error: Exception,
    key: Optional[str] = None,
    destination: Optional[str] = None,
) -> StorageFailure:
    error_code = None
    message = str(error)
    if isinstance(error, ClientError):
        details = error.response.get("Error", {})
        error_code = details.get("Code")
        message = details.get("Message") or message
    failure = StorageFailure(
        operation=operation,
        bucket=bucket,
        key=key,
        message=message,
        error_code=error_code,
        destination=destination,
    )
    logger.error(
        "Object store call failed",
        operation=operation,
        bucket=bucket,
        key=key,
        destination=destination,
        error_code=error_code,
        error=message,
    )
    return failure


def _page_items(response: dict) -> tuple[StoredObject, ...]:
    return tuple(
        StoredObject(key=obj["Key"], size=obj.get("Size", 0))
        for obj in response.get("Contents", [])
    )


class S3ObjectStore:
    """List, copy and delete objects through a boto3 S3 client."""

    def __init__(self, client: Any):
        self.client = client

    def list_page(self, request: ScanRequest) -> OperationResult[ObjectPage]:
        """Fetch one page with ListObjectsV2.

        Only the bucket, the continuation token (when the request carries one)
        and the page size (when configured) are sent.
        """
        params: dict[str, Any] = {"Bucket": request.bucket}
        if request.continuation_token is not None:
            params["ContinuationToken"] = request.continuation_token
        if request.page_size is not None:
            params["MaxKeys"] = request.page_size

        try:
            response = self.client.list_objects_v2(**params)
        except (ClientError, BotoCoreError) as e:
            return OperationResult.failed(_failure("list_objects_v2", request.bucket, e))

        truncated = bool(response.get("IsTruncated", False))
        page = ObjectPage(
            items=_page_items(response),
            truncated=truncated,
            continuation_token=(
                response.get("NextContinuationToken") if truncated else None
            ),
        )
        logger.debug(
            "Listing page fetched",
            bucket=request.bucket,
            item_count=len(page.items),
            truncated=page.truncated,
        )
        return OperationResult.success(page)

    def list_first_page(self, bucket: str) -> OperationResult[ObjectPage]:
        """Fetch only the first page with the legacy ListObjects call."""
        try:
            response = self.client.list_objects(Bucket=bucket)
        except (ClientError, BotoCoreError) as e:
            return OperationResult.failed(_failure("list_objects", bucket, e))

        return OperationResult.success(
            ObjectPage(
                items=_page_items(response),
                truncated=bool(response.get("IsTruncated", False)),
            )
        )

    def copy_object(
        self,
        source_bucket: str,
        source_key: str,
        destination_bucket: str,
        destination_key: str,
    ) -> OperationResult[ActionOutcome]:
        """Server-side copy of one object. The source is left in place."""
        try:
            self.client.copy_object(
                Bucket=destination_bucket,
                Key=destination_key,
                CopySource={"Bucket": source_bucket, "Key": source_key},
            )
        except (ClientError, BotoCoreError) as e:
            return OperationResult.failed(
                _failure(
                    "copy_object",
                    source_bucket,
                    e,
                    key=source_key,
                    destination=f"s3://{destination_bucket}/{destination_key}",
                )
            )

        logger.info(
            "Object copied",
            source_bucket=source_bucket,
            source_key=source_key,
            destination_bucket=destination_bucket,
            destination_key=destination_key,
        )
        return OperationResult.success(ActionOutcome.COPIED)

    def delete_object(self, bucket: str, key: str) -> OperationResult[ActionOutcome]:
        try:
            self.client.delete_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            return OperationResult.failed(_failure("delete_object", bucket, e, key=key))

        logger.info("Object deleted", bucket=bucket, key=key)
        return OperationResult.success(ActionOutcome.DELETED)
