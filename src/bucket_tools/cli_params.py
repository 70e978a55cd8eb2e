"""Shared CLI parameter definitions.

Annotated option types reused by every command so that option names, types
and help text stay consistent:

    @app.command()
    def my_command(region_name: RegionOption = None):
        ...

Options left unset fall back to the BUCKET_TOOLS_* settings.
"""

from typing import Annotated, Optional

import typer

BucketOption = Annotated[
    Optional[str],
    typer.Option(
        "--bucket", "-b", help="Bucket name (default: BUCKET_TOOLS_BUCKET_NAME)"
    ),
]

SourceBucketOption = Annotated[
    Optional[str],
    typer.Option(
        "--source-bucket",
        help="Bucket to copy from (default: BUCKET_TOOLS_SOURCE_BUCKET)",
    ),
]

DestinationBucketOption = Annotated[
    Optional[str],
    typer.Option(
        "--destination-bucket",
        help="Bucket to copy into (default: BUCKET_TOOLS_DESTINATION_BUCKET)",
    ),
]

DestinationPrefixOption = Annotated[
    str,
    typer.Option(
        "--destination-prefix", help="Prefix prepended to every destination key"
    ),
]

PageSizeOption = Annotated[
    Optional[int],
    typer.Option(
        "--page-size",
        min=1,
        max=1000,
        help="Maximum objects per listing request (default: service maximum)",
    ),
]

AccessKeyOption = Annotated[
    Optional[str],
    typer.Option("--access-key-id", help="AWS access key ID"),
]

SecretKeyOption = Annotated[
    Optional[str],
    typer.Option("--secret-access-key", help="AWS secret access key"),
]

SessionTokenOption = Annotated[
    Optional[str],
    typer.Option("--session-token", help="AWS session token"),
]

RegionOption = Annotated[
    Optional[str],
    typer.Option("--region", help="AWS region name (default: BUCKET_TOOLS_REGION_NAME)"),
]

EndpointUrlOption = Annotated[
    Optional[str],
    typer.Option("--endpoint-url", help="Custom S3 endpoint URL"),
]

AwsProfileOption = Annotated[
    Optional[str],
    typer.Option("--aws-profile", help="AWS CLI profile name"),
]

YesOption = Annotated[
    bool,
    typer.Option("--yes", "-y", help="Do not ask for confirmation"),
]
