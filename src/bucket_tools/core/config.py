"""Configuration management for bucket-tools."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "bucket-tools"

    region_name: str = "us-east-1"
    bucket_name: Optional[str] = None
    source_bucket: Optional[str] = None
    destination_bucket: Optional[str] = None
    page_size: Optional[int] = None

    model_config = {
        "env_prefix": "BUCKET_TOOLS_",
        "case_sensitive": False,
    }


settings = Settings()
