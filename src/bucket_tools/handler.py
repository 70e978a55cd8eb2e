"""Serverless trigger entry point.

Lists the first page of the configured bucket and returns it as text. The
bucket and region come from BUCKET_TOOLS_BUCKET_NAME and
BUCKET_TOOLS_REGION_NAME; the incoming event is ignored.
"""

from typing import Any

from bucket_tools.core import get_logger, settings
from bucket_tools.core.exceptions import ConfigurationError
from bucket_tools.objectstorage import S3ClientConfig, summarize_bucket

logger = get_logger(__name__)


def lambda_handler(event: Any, context: Any) -> str:
    """Return the first listing page of the configured bucket as text."""
    try:
        if not settings.bucket_name:
            raise ConfigurationError("BUCKET_TOOLS_BUCKET_NAME is not set")

        return summarize_bucket(
            settings.bucket_name,
            S3ClientConfig(region_name=settings.region_name),
        )
    except Exception as e:
        logger.error("Bucket summary failed", error=str(e))
        return f"Error: {e}"
