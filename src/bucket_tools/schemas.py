"""Scan configuration schemas for bucket-tools."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ScanConfig(BaseModel):
    """Configuration for one paginated scan of a bucket."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    bucket_name: str = Field(..., min_length=1, description="Bucket to scan")
    page_size: Optional[int] = Field(
        default=None,
        ge=1,
        le=1000,
        description="Maximum objects per listing page (service default if unset)",
    )


class CopyConfig(BaseModel):
    """Configuration for copying every object of one bucket into another."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_bucket: str = Field(..., min_length=1, description="Bucket to copy from")
    destination_bucket: str = Field(
        ..., min_length=1, description="Bucket to copy into"
    )
    destination_prefix: str = Field(
        default="", description="Prefix prepended to every destination key"
    )
    page_size: Optional[int] = Field(default=None, ge=1, le=1000)

    @model_validator(mode="after")
    def _check_not_onto_itself(self) -> "CopyConfig":
        if (
            self.source_bucket == self.destination_bucket
            and not self.destination_prefix
        ):
            raise ValueError(
                "Source and destination are the same bucket with no "
                "destination prefix; every object would be copied onto itself"
            )
        return self

    def scan_config(self) -> ScanConfig:
        """Scan configuration for the source side of the copy."""
        return ScanConfig(bucket_name=self.source_bucket, page_size=self.page_size)

    def destination_key(self, key: str) -> str:
        """Destination key for a source key."""
        return f"{self.destination_prefix}{key}"
