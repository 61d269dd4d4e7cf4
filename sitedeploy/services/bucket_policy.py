"""
Bucket policy construction
The policy lets exactly one CloudFront distribution read objects from the bucket.
"""

import json
from typing import Dict, Any

CLOUDFRONT_SERVICE_PRINCIPAL = "cloudfront.amazonaws.com"
POLICY_VERSION = "2012-10-17"


def distribution_arn(account_id: str, distribution_id: str, partition: str = "aws") -> str:
    """ARN of a CloudFront distribution"""
    return f"arn:{partition}:cloudfront::{account_id}:distribution/{distribution_id}"


def build_bucket_policy(
    bucket_name: str,
    account_id: str,
    distribution_id: str,
    partition: str = "aws",
) -> Dict[str, Any]:
    """
    Build the least-privilege bucket policy for CloudFront origin access control.

    The single statement allows s3:GetObject on ``<bucket>/*`` to the CloudFront
    service principal, and only when the request comes from the given
    distribution (``AWS:SourceArn`` must match exactly).

    Args:
        bucket_name:     Bucket the policy is attached to
        account_id:      Account owning the distribution
        distribution_id: Distribution allowed to read
        partition:       ARN partition (default "aws")

    Returns:
        Policy document as a dict
    """
    return {
        "Version": POLICY_VERSION,
        "Statement": [
            {
                "Effect": "Allow",
                "Principal": {"Service": CLOUDFRONT_SERVICE_PRINCIPAL},
                "Action": "s3:GetObject",
                "Resource": f"arn:{partition}:s3:::{bucket_name}/*",
                "Condition": {
                    "StringEquals": {
                        "AWS:SourceArn": distribution_arn(account_id, distribution_id, partition),
                    }
                },
            }
        ],
    }


def serialize_policy(policy: Dict[str, Any]) -> str:
    return json.dumps(policy, separators=(",", ":"))
