"""
Data models for a deployment run
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sitedeploy.exceptions import ConfigurationError
from sitedeploy.utils.validators import validate_bucket_name, validate_region


class SiteMode(str, Enum):
    """Kind of site being deployed"""

    BASIC = "basic"
    SPA = "spa"

    @property
    def label(self) -> str:
        if self is SiteMode.SPA:
            return "Single Page Application (SPA)"
        return "Static Website (Basic)"


class DeploymentConfig(BaseModel):
    """
    Everything a deployment run needs. Immutable once built.
    """

    model_config = ConfigDict(frozen=True)

    mode: SiteMode = SiteMode.BASIC
    bucket_name: str
    source_dir: str
    description: str
    region: str = "us-east-1"
    profile: str = "default"

    @field_validator("bucket_name")
    @classmethod
    def check_bucket_name(cls, v: str) -> str:
        try:
            return validate_bucket_name(v)
        except ConfigurationError as e:
            raise ValueError(str(e)) from e

    @field_validator("region")
    @classmethod
    def check_region(cls, v: str) -> str:
        try:
            return validate_region(v)
        except ConfigurationError as e:
            raise ValueError(str(e)) from e


def build_deployment_config(**fields) -> DeploymentConfig:
    """
    Build a DeploymentConfig, turning pydantic validation failures
    into ConfigurationError.

    Raises:
        ConfigurationError: If any field is missing or invalid
    """
    try:
        return DeploymentConfig(**fields)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(f"Invalid deployment configuration: {problems}") from e


class ProvisionedResources(BaseModel):
    """
    Resources created by a run. Filled step by step; each field can only be set once.
    """

    bucket_name: Optional[str] = None
    origin_access_control_id: Optional[str] = None
    distribution_id: Optional[str] = None
    distribution_domain: Optional[str] = None
    account_id: Optional[str] = None

    def __setattr__(self, name, value):
        if getattr(self, name, None) is not None:
            raise AttributeError(f"{name} is already set on ProvisionedResources")
        super().__setattr__(name, value)

    @property
    def url(self) -> Optional[str]:
        if not self.distribution_domain:
            return None
        return f"https://{self.distribution_domain}"


class FileUploadRecord(BaseModel):
    """One uploaded file"""

    key: str
    content_type: str
    size: int = Field(ge=0)
