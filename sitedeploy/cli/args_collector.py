"""
Flag-based configuration collector
"""

from argparse import Namespace
from typing import Optional

from sitedeploy.cli.base_collector import BaseConfigCollector, default_description
from sitedeploy.models import DeploymentConfig, build_deployment_config
from sitedeploy.utils.config import Settings, get_settings
from sitedeploy.utils.validators import require_value


class ArgsConfigCollector(BaseConfigCollector):
    """Builds the configuration from parsed command-line flags"""

    def __init__(self, args: Namespace, config: Optional[Settings] = None):
        self.args = args
        self.config = config or get_settings()

    def collect(self) -> DeploymentConfig:
        bucket_name = require_value(getattr(self.args, "bucket", None), "Bucket name")
        source_dir = require_value(getattr(self.args, "source", None), "Website folder path")

        description = (getattr(self.args, "description", None) or "").strip()

        return build_deployment_config(
            mode=getattr(self.args, "mode", None) or self.config.site_mode,
            bucket_name=bucket_name,
            source_dir=source_dir,
            description=description or default_description(bucket_name),
            region=getattr(self.args, "region", None) or self.config.aws_region,
            profile=getattr(self.args, "profile", None) or self.config.aws_profile,
        )
