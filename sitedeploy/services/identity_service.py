"""
AWS Identity Service
Resolves the caller's account id from STS.
"""

from typing import Tuple

from botocore.exceptions import BotoCoreError, ClientError

from sitedeploy.exceptions import IdentityServiceError
from sitedeploy.utils.logger import get_logger

logger = get_logger(__name__)


def parse_principal_arn(arn: str) -> Tuple[str, str]:
    """
    Split a principal ARN such as ``arn:aws:iam::123456789012:user/alice``.

    Returns:
        (partition, account_id)

    Raises:
        IdentityServiceError: If the ARN has fewer than 5 colon-delimited segments
    """
    parts = (arn or "").split(":")
    if len(parts) < 5:
        raise IdentityServiceError(f"Invalid ARN format: {arn!r}", operation="get_caller_identity")
    return parts[1], parts[4]


class IdentityService:
    """Caller identity lookups"""

    def __init__(self, client):
        self.client = client

    def get_caller_arn(self) -> str:
        try:
            response = self.client.get_caller_identity()
        except (ClientError, BotoCoreError) as e:
            logger.error(f"get_caller_identity failed: {e}")
            error_code = e.response.get("Error", {}).get("Code") if isinstance(e, ClientError) else None
            raise IdentityServiceError(
                f"Failed to get caller identity: {e}",
                operation="get_caller_identity",
                error_code=error_code,
            ) from e
        return response.get("Arn", "")

    def get_account_id(self) -> str:
        """Account id of the credentials in use"""
        return self.get_partition_and_account()[1]

    def get_partition_and_account(self) -> Tuple[str, str]:
        """
        Returns:
            (partition, account_id) parsed from the caller ARN
        """
        partition, account_id = parse_principal_arn(self.get_caller_arn())
        logger.info(f"Resolved AWS account: {account_id}")
        return partition, account_id
