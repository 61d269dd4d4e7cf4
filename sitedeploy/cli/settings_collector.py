"""
Environment / .env configuration collector
"""

from typing import Optional

from sitedeploy.cli.base_collector import BaseConfigCollector, default_description
from sitedeploy.models import DeploymentConfig, build_deployment_config
from sitedeploy.utils.config import Settings, get_settings
from sitedeploy.utils.validators import require_value


class SettingsConfigCollector(BaseConfigCollector):
    """Builds the configuration from SITE_* / AWS_* settings, without prompting"""

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or get_settings()

    def collect(self) -> DeploymentConfig:
        bucket_name = require_value(self.config.site_bucket_name, "SITE_BUCKET_NAME")
        source_dir = require_value(self.config.site_source_dir, "SITE_SOURCE_DIR")

        return build_deployment_config(
            mode=self.config.site_mode,
            bucket_name=bucket_name,
            source_dir=source_dir,
            description=self.config.site_description.strip() or default_description(bucket_name),
            region=self.config.aws_region,
            profile=self.config.aws_profile,
        )
