"""Test configuration and fixtures for bucket-tools."""

import boto3
import pytest
from moto import mock_aws

from bucket_tools.objectstorage import S3ClientConfig


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Keep tests away from real AWS credentials."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture
def client_config():
    """S3 client configuration with explicit test credentials."""
    return S3ClientConfig(
        access_key_id="test_key",
        secret_access_key="test_secret",
        region_name="us-east-1",
    )


@pytest.fixture
def s3():
    """Mocked S3 with a populated bucket named test-bucket."""
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket="test-bucket")
        client.put_object(Bucket="test-bucket", Key="a/b.txt", Body=b"content1")
        client.put_object(Bucket="test-bucket", Key="data/file1.txt", Body=b"12345")
        client.put_object(Bucket="test-bucket", Key="data/file2.txt", Body=b"")
        yield client

