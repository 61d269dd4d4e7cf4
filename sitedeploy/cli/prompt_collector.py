"""
Interactive configuration collector
Asks for every deployment setting on the terminal using rich prompts.
"""

from typing import Optional

from rich.console import Console
from rich.prompt import Prompt

from sitedeploy.cli.base_collector import BaseConfigCollector, default_description
from sitedeploy.exceptions import ConfigurationError
from sitedeploy.models import DeploymentConfig, SiteMode, build_deployment_config
from sitedeploy.utils.config import Settings, get_settings

SUPPORTED_REGIONS = [
    "us-east-1", "us-east-2", "us-west-1", "us-west-2",
    "eu-west-1", "eu-west-2", "eu-central-1",
    "ap-southeast-1", "ap-southeast-2", "ap-northeast-1",
]

MODE_CHOICES = {
    "1": SiteMode.BASIC,
    "2": SiteMode.SPA,
}


class PromptConfigCollector(BaseConfigCollector):
    """Prompts the operator for each setting"""

    def __init__(self, config: Optional[Settings] = None, console: Optional[Console] = None):
        self.config = config or get_settings()
        self.console = console or Console()

    def _ask_required(self, label: str, default: Optional[str] = None) -> str:
        while True:
            kwargs = {"console": self.console}
            if default:
                kwargs["default"] = default
            answer = (Prompt.ask(label, **kwargs) or "").strip()
            if answer:
                return answer
            self.console.print(f"[red]{label} cannot be empty[/red]")

    def ask_mode(self) -> SiteMode:
        self.console.print("[cyan]Select deployment type[/cyan]")
        for key, mode in MODE_CHOICES.items():
            self.console.print(f"  {key}. {mode.label}")

        default_key = "2" if self.config.site_mode == SiteMode.SPA.value else "1"
        choice = Prompt.ask(
            "⚙️  Deployment type",
            choices=list(MODE_CHOICES),
            default=default_key,
            console=self.console,
        )
        return MODE_CHOICES[choice]

    def ask_region(self) -> str:
        default_region = self.config.aws_region if self.config.aws_region in SUPPORTED_REGIONS else SUPPORTED_REGIONS[0]
        return Prompt.ask(
            "🌐 AWS Region",
            choices=SUPPORTED_REGIONS,
            default=default_region,
            console=self.console,
        )

    def collect(self) -> DeploymentConfig:
        try:
            mode = self.ask_mode()
            profile = self._ask_required("🔑 AWS Profile", default=self.config.aws_profile or "default")
            bucket_name = self._ask_required("🪣 S3 Bucket Name", default=self.config.site_bucket_name or None)
            source_dir = self._ask_required("📂 Website Folder Path", default=self.config.site_source_dir or None)
            description = self._ask_required(
                "💬 CloudFront Distribution Description",
                default=self.config.site_description or default_description(bucket_name),
            )
            region = self.ask_region()
        except (EOFError, KeyboardInterrupt) as e:
            raise ConfigurationError("Prompt aborted") from e

        return build_deployment_config(
            mode=mode,
            bucket_name=bucket_name,
            source_dir=source_dir,
            description=description,
            region=region,
            profile=profile,
        )
