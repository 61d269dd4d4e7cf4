"""
AWS CloudFront Service
Handles origin access control and distribution creation for serving a
private S3 bucket over HTTPS, in basic or single-page-application mode.
"""

import time
from typing import Dict, Any, Optional

from botocore.exceptions import BotoCoreError, ClientError, WaiterError

from sitedeploy.exceptions import CloudFrontServiceError
from sitedeploy.models import SiteMode
from sitedeploy.utils.logger import get_logger

logger = get_logger(__name__)

ORIGIN_ID = "S3Origin"
DEFAULT_ROOT_OBJECT = "index.html"

# Managed-CachingOptimized
CACHE_POLICY_ID = "658327ea-f89d-4fab-a63d-7e88639e58f6"

SPA_FALLBACK_PATH = "/index.html"
SPA_FALLBACK_ERROR_CODES = (403, 404)
SPA_ERROR_CACHING_MIN_TTL = 15

# CloudFront deploys in minutes, no need to hammer
DEFAULT_POLL_INTERVAL = 60


def _wrap_error(operation: str, error: Exception) -> CloudFrontServiceError:
    error_code = None
    if isinstance(error, ClientError):
        error_code = error.response.get("Error", {}).get("Code")
    return CloudFrontServiceError(f"{operation} failed: {error}", operation=operation, error_code=error_code)


def s3_regional_endpoint(bucket_name: str, region: str) -> str:
    """Regional REST endpoint of a bucket"""
    return f"{bucket_name}.s3.{region}.amazonaws.com"


def build_distribution_config(
    bucket_name: str,
    region: str,
    description: str,
    mode: SiteMode,
    origin_access_control_id: Optional[str] = None,
    caller_reference: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the DistributionConfig for a bucket-backed site.

    Both modes serve ``index.html`` as the default root object over
    HTTPS-redirected, compressed, IPv6-enabled requests with the managed
    caching policy. SPA mode also rewrites 403 and 404 to ``/index.html``
    with a 200 so client-side routes resolve.

    Args:
        bucket_name:              Origin bucket
        region:                   Bucket region (for the regional endpoint)
        description:              Distribution comment
        mode:                     SiteMode.BASIC or SiteMode.SPA
        origin_access_control_id: OAC the origin signs requests with
        caller_reference:         Idempotency key (defaults to one derived from the current time)

    Returns:
        DistributionConfig dict accepted by create_distribution
    """
    mode = SiteMode(mode)

    origin: Dict[str, Any] = {
        "Id": ORIGIN_ID,
        "DomainName": s3_regional_endpoint(bucket_name, region),
        "S3OriginConfig": {"OriginAccessIdentity": ""},
    }
    if origin_access_control_id:
        origin["OriginAccessControlId"] = origin_access_control_id

    distribution_config: Dict[str, Any] = {
        "CallerReference": caller_reference or f"site-deploy-{time.time()}",
        "Comment": description,
        "Enabled": True,
        "IsIPV6Enabled": True,
        "DefaultRootObject": DEFAULT_ROOT_OBJECT,
        "Origins": {"Quantity": 1, "Items": [origin]},
        "DefaultCacheBehavior": {
            "TargetOriginId": ORIGIN_ID,
            "ViewerProtocolPolicy": "redirect-to-https",
            "Compress": True,
            "CachePolicyId": CACHE_POLICY_ID,
        },
    }

    if mode is SiteMode.SPA:
        distribution_config["CustomErrorResponses"] = {
            "Quantity": len(SPA_FALLBACK_ERROR_CODES),
            "Items": [
                {
                    "ErrorCode": error_code,
                    "ResponsePagePath": SPA_FALLBACK_PATH,
                    "ResponseCode": "200",
                    "ErrorCachingMinTTL": SPA_ERROR_CACHING_MIN_TTL,
                }
                for error_code in SPA_FALLBACK_ERROR_CODES
            ],
        }

    return distribution_config


class CloudFrontService:
    """
    AWS CloudFront Service.

    Handles:
    - Origin access control creation for a private S3 origin
    - Distribution creation for basic and SPA sites
    - Polling until distributions are fully deployed
    """

    def __init__(self, client, bucket_name: str, region: str):
        """
        Args:
            client:      boto3 CloudFront client
            bucket_name: Origin bucket
            region:      Region of the origin bucket
        """
        self.client = client
        self.bucket_name = bucket_name
        self.region = region

    def create_origin_access_control(self) -> str:
        """
        Create an origin access control that signs every request to the bucket.

        Returns:
            Origin access control id

        Raises:
            CloudFrontServiceError: On CloudFront API failure
        """
        name = f"{self.bucket_name}-origin-access-control"
        logger.info(f"Creating origin access control: {name}")

        try:
            response = self.client.create_origin_access_control(
                OriginAccessControlConfig={
                    "Name": name,
                    "Description": f"Origin access control for {self.bucket_name}",
                    "OriginAccessControlOriginType": "s3",
                    "SigningBehavior": "always",
                    "SigningProtocol": "sigv4",
                }
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Origin access control creation failed: {e}")
            raise _wrap_error("create_origin_access_control", e) from e

        oac_id = response["OriginAccessControl"]["Id"]
        logger.info(f"✅ Origin access control created: {oac_id}")
        return oac_id

    def create_distribution(
        self,
        description: str,
        mode: SiteMode,
        origin_access_control_id: str,
    ) -> Dict[str, Any]:
        """
        Create a distribution in front of the bucket.

        Args:
            description:              Distribution comment
            mode:                     Site mode
            origin_access_control_id: OAC from create_origin_access_control()

        Returns:
            Dict with keys:
              - distribution_id     (str)
              - distribution_domain (str, e.g. "d123.cloudfront.net")
              - status              (str, initially "InProgress")
              - arn                 (str)

        Raises:
            CloudFrontServiceError: On CloudFront API failure
        """
        distribution_config = build_distribution_config(
            bucket_name=self.bucket_name,
            region=self.region,
            description=description,
            mode=mode,
            origin_access_control_id=origin_access_control_id,
        )
        logger.info(f"Creating CloudFront distribution: bucket={self.bucket_name}, mode={SiteMode(mode).value}")

        try:
            response = self.client.create_distribution(DistributionConfig=distribution_config)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"CloudFront creation failed: {e}")
            raise _wrap_error("create_distribution", e) from e

        dist = response["Distribution"]
        logger.info(f"✅ Distribution created: {dist['Id']}")

        return {
            "distribution_id": dist["Id"],
            "distribution_domain": dist["DomainName"],
            "status": dist.get("Status"),
            "arn": dist.get("ARN"),
        }

    def wait_for_distribution(
        self, distribution_id: str, timeout_minutes: int = 30, poll_interval: int = DEFAULT_POLL_INTERVAL
    ) -> None:
        """
        Block until the distribution reaches "Deployed", using the
        CloudFront distribution_deployed waiter.

        Args:
            distribution_id: CloudFront distribution ID (e.g. "E1ABCXYZ")
            timeout_minutes: Max wait time (default 30 min)
            poll_interval:   Seconds between status checks

        Raises:
            CloudFrontServiceError: If not deployed within timeout, or a status check fails
        """
        max_attempts = max(1, (timeout_minutes * 60) // max(1, poll_interval))
        logger.info(
            f"⏳ Waiting for distribution {distribution_id} to deploy "
            f"(checking every {poll_interval}s, up to {timeout_minutes} min)…"
        )

        waiter = self.client.get_waiter("distribution_deployed")
        try:
            waiter.wait(
                Id=distribution_id,
                WaiterConfig={"Delay": poll_interval, "MaxAttempts": max_attempts},
            )
        except WaiterError as e:
            if e.last_response and "Error" in e.last_response:
                raise CloudFrontServiceError(
                    f"get_distribution failed: {e}",
                    operation="get_distribution",
                    error_code=e.last_response["Error"].get("Code"),
                ) from e
            raise CloudFrontServiceError(
                f"Distribution {distribution_id} not deployed within {timeout_minutes} minutes",
                operation="get_distribution",
            ) from e
        except (ClientError, BotoCoreError) as e:
            raise _wrap_error("get_distribution", e) from e

        logger.info("✅ Distribution is Deployed")
