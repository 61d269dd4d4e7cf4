"""
AWS S3 Service
Bucket creation with public access blocked, object uploads and bucket policy attachment.
"""

from typing import Dict, Any

from botocore.exceptions import BotoCoreError, ClientError

from sitedeploy.exceptions import S3ServiceError
from sitedeploy.services.bucket_policy import build_bucket_policy, serialize_policy
from sitedeploy.utils.logger import get_logger

logger = get_logger(__name__)

# us-east-1 rejects an explicit LocationConstraint
DEFAULT_REGION = "us-east-1"

CACHE_CONTROL = "public, max-age=31536000, s-maxage=31536000"

PUBLIC_ACCESS_BLOCK = {
    "BlockPublicAcls": True,
    "IgnorePublicAcls": True,
    "BlockPublicPolicy": True,
    "RestrictPublicBuckets": True,
}


def _wrap_error(operation: str, error: Exception) -> S3ServiceError:
    error_code = None
    if isinstance(error, ClientError):
        error_code = error.response.get("Error", {}).get("Code")
    return S3ServiceError(f"{operation} failed: {error}", operation=operation, error_code=error_code)


def build_create_bucket_request(bucket_name: str, region: str) -> Dict[str, Any]:
    """
    Build the create_bucket arguments.

    The LocationConstraint is omitted for the default region and set to the
    region string for every other region.
    """
    request: Dict[str, Any] = {"Bucket": bucket_name}
    if region != DEFAULT_REGION:
        request["CreateBucketConfiguration"] = {"LocationConstraint": region}
    return request


class S3Service:
    """
    S3 operations for one bucket in one region.
    """

    def __init__(self, client, bucket_name: str, region: str):
        """
        Args:
            client:      boto3 S3 client
            bucket_name: Target bucket
            region:      Region the bucket lives in
        """
        self.client = client
        self.bucket_name = bucket_name
        self.region = region

    def create_bucket(self) -> None:
        """
        Create the bucket and immediately block all public access on it.

        Raises:
            S3ServiceError: If either call fails (an existing bucket is a failure too)
        """
        logger.info(f"Creating bucket {self.bucket_name} in {self.region}")

        try:
            self.client.create_bucket(**build_create_bucket_request(self.bucket_name, self.region))
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Bucket creation failed: {e}")
            raise _wrap_error("create_bucket", e) from e

        self.block_public_access()
        logger.info(f"✅ Bucket created: {self.bucket_name}")

    def block_public_access(self) -> None:
        """Apply the block-all-public-access configuration"""
        try:
            self.client.put_public_access_block(
                Bucket=self.bucket_name,
                PublicAccessBlockConfiguration=dict(PUBLIC_ACCESS_BLOCK),
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Blocking public access failed: {e}")
            raise _wrap_error("put_public_access_block", e) from e

        logger.debug(f"Public access blocked on {self.bucket_name}")

    def put_object(
        self,
        key: str,
        body: bytes,
        content_type: str,
        cache_control: str = CACHE_CONTROL,
    ) -> None:
        """
        Upload a single object.

        Raises:
            S3ServiceError: On S3 API failure
        """
        try:
            self.client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=body,
                ContentType=content_type,
                CacheControl=cache_control,
            )
        except (ClientError, BotoCoreError) as e:
            raise _wrap_error("put_object", e) from e

    def attach_bucket_policy(
        self,
        account_id: str,
        distribution_id: str,
        partition: str = "aws",
    ) -> Dict[str, Any]:
        """
        Attach the CloudFront-only read policy to the bucket.

        Args:
            account_id:      Account owning the distribution
            distribution_id: Distribution allowed to read
            partition:       ARN partition

        Returns:
            The policy document that was attached

        Raises:
            S3ServiceError: On S3 API failure
        """
        policy = build_bucket_policy(self.bucket_name, account_id, distribution_id, partition)
        logger.info(f"Attaching bucket policy for distribution {distribution_id}")

        try:
            self.client.put_bucket_policy(Bucket=self.bucket_name, Policy=serialize_policy(policy))
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Attaching bucket policy failed: {e}")
            raise _wrap_error("put_bucket_policy", e) from e

        logger.info("✅ Bucket policy attached")
        return policy
