"""
Configuration collection - interchangeable sources for a DeploymentConfig
"""

from sitedeploy.cli.base_collector import BaseConfigCollector
from sitedeploy.cli.args_collector import ArgsConfigCollector
from sitedeploy.cli.prompt_collector import PromptConfigCollector
from sitedeploy.cli.settings_collector import SettingsConfigCollector
from sitedeploy.cli.collector_factory import get_config_collector
from sitedeploy.cli.summary import display_config_summary, display_deployment_summary

__all__ = [
    "BaseConfigCollector",
    "ArgsConfigCollector",
    "PromptConfigCollector",
    "SettingsConfigCollector",
    "get_config_collector",
    "display_config_summary",
    "display_deployment_summary",
]
