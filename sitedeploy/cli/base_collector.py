"""
Base Config Collector Interface
Abstract base class for the sources a DeploymentConfig can come from
"""

from abc import ABC, abstractmethod

from sitedeploy.models import DeploymentConfig


def default_description(bucket_name: str) -> str:
    return f"Distribution for {bucket_name}"


class BaseConfigCollector(ABC):
    """
    Abstract base class for configuration collectors.
    Every collector produces a fully validated DeploymentConfig.
    """

    @abstractmethod
    def collect(self) -> DeploymentConfig:
        """
        Gather and validate the deployment configuration.

        Returns:
            DeploymentConfig

        Raises:
            ConfigurationError: If a required value is missing or invalid
        """
        pass
