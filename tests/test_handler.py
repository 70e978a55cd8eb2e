"""Tests for the serverless trigger handler."""

import boto3
from moto import mock_aws

from bucket_tools import handler
from bucket_tools.handler import lambda_handler


class TestLambdaHandler:
    """Test the single-page listing handler."""

    def test_returns_first_page_text(self, monkeypatch):
        """Test the handler returns a header and one key per line."""
        monkeypatch.setattr(handler.settings, "bucket_name", "letters")
        monkeypatch.setattr(handler.settings, "region_name", "us-east-1")

        with mock_aws():
            client = boto3.client("s3", region_name="us-east-1")
            client.create_bucket(Bucket="letters")
            for key in ["x", "y", "z"]:
                client.put_object(Bucket="letters", Key=key, Body=b"1")

            result = lambda_handler("ignored input", None)

        assert result == "Objects in bucket letters:\nx\ny\nz\n"

    def test_missing_bucket_returns_error_text(self, monkeypatch):
        """Test a listing failure is returned as the output text."""
        monkeypatch.setattr(handler.settings, "bucket_name", "missing-bucket")

        with mock_aws():
            result = lambda_handler({}, None)

        assert result.startswith("Error: list_objects failed for s3://missing-bucket")
        assert "NoSuchBucket" in result

    def test_unconfigured_bucket_returns_error_text(self, monkeypatch):
        """Test a missing bucket setting is reported, not raised."""
        monkeypatch.setattr(handler.settings, "bucket_name", None)

        result = lambda_handler({}, None)

        assert result == "Error: BUCKET_TOOLS_BUCKET_NAME is not set"

    def test_client_construction_error_returns_error_text(self, monkeypatch):
        """Test an invalid region is reported as output, not raised."""
        monkeypatch.setattr(handler.settings, "bucket_name", "letters")
        monkeypatch.setattr(handler.settings, "region_name", "not a region!")

        result = lambda_handler({}, None)

        assert result.startswith("Error: ")
        assert "not a region!" in result
