"""
AWS client construction
Builds the S3, CloudFront and STS clients for a deployment from one session.
"""

from dataclasses import dataclass
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ProfileNotFound

from sitedeploy.exceptions import ConfigurationError
from sitedeploy.utils.config import Settings
from sitedeploy.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AWSClients:
    """Low-level boto3 clients used by the services"""

    s3: Any
    cloudfront: Any
    sts: Any
    region: str


def create_aws_clients(
    region: str,
    profile: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> AWSClients:
    """
    Create the AWS clients for a deployment run.

    Explicit keys from settings take precedence over the shared profile.

    Args:
        region:   Region for the S3 client (and the session default)
        profile:  Shared credentials profile name
        settings: Optional Settings holding explicit keys

    Returns:
        AWSClients container

    Raises:
        ConfigurationError: If the profile does not exist or the session cannot be built
    """
    session_kwargs = {"region_name": region}

    if settings is not None and settings.has_explicit_credentials():
        logger.debug("Using explicit AWS credentials from settings")
        session_kwargs["aws_access_key_id"] = settings.aws_access_key_id
        session_kwargs["aws_secret_access_key"] = settings.aws_secret_access_key
    elif profile:
        session_kwargs["profile_name"] = profile

    try:
        session = boto3.Session(**session_kwargs)
        clients = AWSClients(
            s3=session.client("s3"),
            cloudfront=session.client("cloudfront"),
            sts=session.client("sts"),
            region=region,
        )
    except ProfileNotFound as e:
        raise ConfigurationError(f"AWS profile not found: {profile}") from e
    except BotoCoreError as e:
        raise ConfigurationError(f"Failed to initialize AWS clients: {e}") from e

    logger.info(f"AWS clients initialized (region={region}, profile={session_kwargs.get('profile_name', '-')})")
    return clients
