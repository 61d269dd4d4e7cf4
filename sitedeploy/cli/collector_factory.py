"""
Config Collector Factory
Creates the configuration collector for the requested source
"""

from argparse import Namespace
from typing import Optional

from sitedeploy.cli.base_collector import BaseConfigCollector
from sitedeploy.cli.args_collector import ArgsConfigCollector
from sitedeploy.cli.prompt_collector import PromptConfigCollector
from sitedeploy.cli.settings_collector import SettingsConfigCollector
from sitedeploy.utils.config import get_settings, Settings
from sitedeploy.utils.logger import get_logger

logger = get_logger(__name__)

SOURCES = ("ARGS", "PROMPT", "ENV")


def get_config_collector(
    source: str,
    args: Optional[Namespace] = None,
    config: Optional[Settings] = None
) -> BaseConfigCollector:
    """
    Factory function to create configuration collectors.

    Args:
        source: "ARGS", "PROMPT" or "ENV"
        args:   Parsed flags (required for "ARGS")
        config: Optional Settings instance. Uses default if None.

    Returns:
        Config collector instance

    Raises:
        ValueError: If source is invalid
    """
    if config is None:
        config = get_settings()

    source = source.upper()
    logger.debug(f"Creating config collector: {source}")

    if source == "ARGS":
        if args is None:
            raise ValueError("Parsed arguments are required for the ARGS collector")
        return ArgsConfigCollector(args, config)

    elif source == "PROMPT":
        return PromptConfigCollector(config)

    elif source == "ENV":
        return SettingsConfigCollector(config)

    else:
        raise ValueError(
            f"Unknown config source: {source}. "
            f"Valid options are: {', '.join(SOURCES)}"
        )
