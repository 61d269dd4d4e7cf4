"""
Business logic and service layer
"""

from sitedeploy.services.aws_clients import AWSClients, create_aws_clients
from sitedeploy.services.bucket_policy import build_bucket_policy
from sitedeploy.services.cloudfront_service import CloudFrontService, build_distribution_config
from sitedeploy.services.identity_service import IdentityService
from sitedeploy.services.s3_service import S3Service
from sitedeploy.services.upload_service import FileUploadService
from sitedeploy.services.deployment_orchestrator import DeploymentOrchestrator

__all__ = [
    # Clients
    "AWSClients",
    "create_aws_clients",
    # AWS services
    "S3Service",
    "CloudFrontService",
    "IdentityService",
    # Builders
    "build_bucket_policy",
    "build_distribution_config",
    # Upload pipeline
    "FileUploadService",
    # Pipeline orchestrator
    "DeploymentOrchestrator",
]
