"""
Deployment Orchestrator
Runs the provisioning steps that take a local website folder to a private
S3 bucket served through CloudFront.
"""

from typing import Callable, Optional

from sitedeploy.exceptions import OrchestratorError
from sitedeploy.models import DeploymentConfig, ProvisionedResources
from sitedeploy.services.aws_clients import AWSClients, create_aws_clients
from sitedeploy.services.cloudfront_service import CloudFrontService
from sitedeploy.services.identity_service import IdentityService
from sitedeploy.services.s3_service import S3Service
from sitedeploy.services.upload_service import FileUploadService
from sitedeploy.utils.config import Settings, get_settings
from sitedeploy.utils.logger import get_logger

logger = get_logger(__name__)

STEP_CREATE_BUCKET = "create_bucket"
STEP_UPLOAD_FILES = "upload_files"
STEP_CREATE_ORIGIN_ACCESS_CONTROL = "create_origin_access_control"
STEP_CREATE_DISTRIBUTION = "create_distribution"
STEP_RESOLVE_ACCOUNT_ID = "resolve_account_id"
STEP_ATTACH_BUCKET_POLICY = "attach_bucket_policy"

TOTAL_STEPS = 5


class DeploymentOrchestrator:
    """
    End-to-end provisioning pipeline.

    Runs, strictly in order and without retries:

    1. Create bucket and block public access  — S3
    2. Upload website files                    — S3 put_object per file
    3. Create origin access control            — CloudFront
    4. Create distribution                     — CloudFront (basic or SPA)
    5. Resolve account id, attach policy       — STS + S3 bucket policy

    The first failure stops the run. Nothing created before it is removed.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clients_factory: Callable[..., AWSClients] = create_aws_clients,
    ):
        """
        Args:
            settings:        Optional Settings object. Defaults to get_settings().
            clients_factory: Builds AWSClients from (region, profile, settings)
        """
        self.settings = settings or get_settings()
        self.clients_factory = clients_factory

    def run(self, config: DeploymentConfig) -> ProvisionedResources:
        """
        Run the complete deployment pipeline.

        Args:
            config: Validated DeploymentConfig

        Returns:
            ProvisionedResources with bucket name, OAC id, distribution id
            and domain, and the account id

        Raises:
            OrchestratorError: Naming the failed step, with the original error as cause
        """
        logger.info(f"🚀 Starting deployment of {config.source_dir} ({config.mode.label})")
        logger.info(f"   Bucket: {config.bucket_name}")
        logger.info(f"   Region: {config.region}")

        resources = ProvisionedResources()

        clients = self.clients_factory(config.region, config.profile, self.settings)
        s3_service = S3Service(clients.s3, config.bucket_name, config.region)
        cf_service = CloudFrontService(clients.cloudfront, config.bucket_name, config.region)
        identity_service = IdentityService(clients.sts)
        upload_service = FileUploadService(s3_service)

        step = STEP_CREATE_BUCKET
        try:
            # ── Step 1: Create bucket ────────────────────────────────────────
            logger.info(f"── Step 1/{TOTAL_STEPS}: 📦 Creating S3 bucket '{config.bucket_name}'")
            s3_service.create_bucket()
            resources.bucket_name = config.bucket_name

            # ── Step 2: Upload website files ─────────────────────────────────
            step = STEP_UPLOAD_FILES
            logger.info(f"── Step 2/{TOTAL_STEPS}: 📤 Uploading website files")
            file_count = upload_service.upload(config.source_dir)
            logger.info(f"  {file_count} files uploaded")

            # ── Step 3: Origin access control ────────────────────────────────
            step = STEP_CREATE_ORIGIN_ACCESS_CONTROL
            logger.info(f"── Step 3/{TOTAL_STEPS}: 🔒 Creating origin access control")
            resources.origin_access_control_id = cf_service.create_origin_access_control()

            # ── Step 4: Distribution ─────────────────────────────────────────
            step = STEP_CREATE_DISTRIBUTION
            logger.info(f"── Step 4/{TOTAL_STEPS}: ☁️  Creating CloudFront distribution")
            distribution = cf_service.create_distribution(
                description=config.description,
                mode=config.mode,
                origin_access_control_id=resources.origin_access_control_id,
            )
            resources.distribution_id = distribution["distribution_id"]
            resources.distribution_domain = distribution["distribution_domain"]

            # ── Step 5: Account id + bucket policy ───────────────────────────
            step = STEP_RESOLVE_ACCOUNT_ID
            logger.info(f"── Step 5/{TOTAL_STEPS}: 📜 Attaching bucket policy")
            partition, account_id = identity_service.get_partition_and_account()
            resources.account_id = account_id

            step = STEP_ATTACH_BUCKET_POLICY
            s3_service.attach_bucket_policy(
                account_id=account_id,
                distribution_id=resources.distribution_id,
                partition=partition,
            )

        except Exception as exc:
            logger.error(f"❌ Deployment pipeline failed at {step}: {exc}")
            raise OrchestratorError(step, exc) from exc

        logger.info(f"🎉 Deployment complete: {resources.url}")
        return resources
