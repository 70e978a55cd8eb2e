"""Command-line interface for bucket-tools.

Commands:
    - list: Print the key and size of every object in a bucket
    - copy: Copy every object of one bucket into another
    - delete: Delete every object in a bucket

Bucket names and region default to the BUCKET_TOOLS_* environment settings,
so each command can run without arguments.
"""

from typing import Annotated, NoReturn, Optional

import typer

from . import __version__
from .cli_params import (
    AccessKeyOption,
    AwsProfileOption,
    BucketOption,
    DestinationBucketOption,
    DestinationPrefixOption,
    EndpointUrlOption,
    PageSizeOption,
    RegionOption,
    SecretKeyOption,
    SessionTokenOption,
    SourceBucketOption,
    YesOption,
)
from .core import get_logger, settings
from .core.exceptions import ConfigurationError
from .objectstorage import (
    S3ClientConfig,
    copy_bucket_objects,
    delete_bucket_objects,
    list_bucket_objects,
)
from .schemas import CopyConfig, ScanConfig

logger = get_logger(__name__)

app = typer.Typer(
    name="bucket-tools",
    help="List, copy and delete every object in an S3 bucket.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"bucket-tools {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    Bucket-Tools: paginated bucket scans for S3-compatible object storage.
    """
    pass


def _require(value: Optional[str], fallback: Optional[str], option: str) -> str:
    """Return the option value, else the settings value, else fail."""
    resolved = value or fallback
    if not resolved:
        raise ConfigurationError(
            f"Missing {option}: pass it on the command line or set it in the "
            f"BUCKET_TOOLS_* environment"
        )
    return resolved


def _client_config(
    access_key_id: Optional[str],
    secret_access_key: Optional[str],
    session_token: Optional[str],
    region_name: Optional[str],
    endpoint_url: Optional[str],
    aws_profile: Optional[str],
) -> S3ClientConfig:
    return S3ClientConfig(
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        session_token=session_token,
        region_name=region_name or settings.region_name,
        endpoint_url=endpoint_url,
        aws_profile=aws_profile,
    )


def _fail(error: Exception) -> NoReturn:
    logger.error("Command failed", error=str(error))
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


@app.command("list")
def list_cmd(
    bucket: BucketOption = None,
    page_size: PageSizeOption = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    session_token: SessionTokenOption = None,
    region_name: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: AwsProfileOption = None,
) -> None:
    """
    Print the key and size of every object in a bucket.

    Examples:
        bucket-tools list --bucket my-bucket --region eu-west-1
        BUCKET_TOOLS_BUCKET_NAME=my-bucket bucket-tools list
    """
    try:
        scan_config = ScanConfig(
            bucket_name=_require(bucket, settings.bucket_name, "--bucket"),
            page_size=page_size or settings.page_size,
        )
        client_config = _client_config(
            access_key_id,
            secret_access_key,
            session_token,
            region_name,
            endpoint_url,
            aws_profile,
        )
        list_bucket_objects(scan_config, client_config, echo=typer.echo)

    except Exception as e:
        _fail(e)


@app.command("copy")
def copy_cmd(
    source_bucket: SourceBucketOption = None,
    destination_bucket: DestinationBucketOption = None,
    destination_prefix: DestinationPrefixOption = "",
    page_size: PageSizeOption = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    session_token: SessionTokenOption = None,
    region_name: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: AwsProfileOption = None,
) -> None:
    """
    Copy every object of the source bucket into the destination bucket.

    Objects keep their key unless --destination-prefix is given. Source
    objects are left in place. The first failed copy stops the command.

    Examples:
        bucket-tools copy --source-bucket raw --destination-bucket archive
        bucket-tools copy --source-bucket raw --destination-bucket raw \
            --destination-prefix backup/
    """
    try:
        copy_config = CopyConfig(
            source_bucket=_require(
                source_bucket, settings.source_bucket, "--source-bucket"
            ),
            destination_bucket=_require(
                destination_bucket, settings.destination_bucket, "--destination-bucket"
            ),
            destination_prefix=destination_prefix,
            page_size=page_size or settings.page_size,
        )
        client_config = _client_config(
            access_key_id,
            secret_access_key,
            session_token,
            region_name,
            endpoint_url,
            aws_profile,
        )
        copy_bucket_objects(copy_config, client_config, echo=typer.echo)

    except Exception as e:
        _fail(e)


@app.command("delete")
def delete_cmd(
    bucket: BucketOption = None,
    yes: YesOption = False,
    page_size: PageSizeOption = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    session_token: SessionTokenOption = None,
    region_name: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: AwsProfileOption = None,
) -> None:
    """
    Delete every object in a bucket.

    Asks for confirmation unless --yes is given. The first failed delete
    stops the command; objects deleted before it stay deleted.

    Examples:
        bucket-tools delete --bucket scratch --yes
    """
    try:
        scan_config = ScanConfig(
            bucket_name=_require(bucket, settings.bucket_name, "--bucket"),
            page_size=page_size or settings.page_size,
        )
        client_config = _client_config(
            access_key_id,
            secret_access_key,
            session_token,
            region_name,
            endpoint_url,
            aws_profile,
        )
    except Exception as e:
        _fail(e)

    if not yes:
        typer.confirm(
            f"Delete every object in bucket {scan_config.bucket_name}?", abort=True
        )

    try:
        delete_bucket_objects(scan_config, client_config, echo=typer.echo)
    except Exception as e:
        _fail(e)


if __name__ == "__main__":
    app()
