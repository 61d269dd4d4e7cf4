"""
Configuration management using Pydantic Settings
Loads and validates environment variables from an optional .env file
"""

from typing import Optional
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sitedeploy.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Everything has a default so the CLI works without a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    # AWS Configuration
    aws_profile: str = Field(
        default="default",
        description="Shared credentials profile used for the deployment"
    )
    aws_region: str = Field(
        default="us-east-1",
        description="AWS region the bucket is created in"
    )
    aws_access_key_id: str = Field(
        default="",
        description="Optional explicit AWS Access Key ID (overrides the profile)"
    )
    aws_secret_access_key: str = Field(
        default="",
        description="Optional explicit AWS Secret Access Key (overrides the profile)"
    )

    # Site defaults, used when deploying with --from-env
    site_mode: str = Field(
        default="basic",
        description="Site mode: basic or spa"
    )
    site_bucket_name: str = Field(
        default="",
        description="S3 bucket name to create"
    )
    site_source_dir: str = Field(
        default="",
        description="Local folder holding the built website"
    )
    site_description: str = Field(
        default="",
        description="CloudFront distribution description (defaults to 'Distribution for <bucket>')"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("site_mode")
    @classmethod
    def validate_site_mode(cls, v: str) -> str:
        v_lower = v.strip().lower()
        if v_lower not in ("basic", "spa"):
            raise ValueError("site_mode must be one of ['basic', 'spa']")
        return v_lower

    def has_explicit_credentials(self) -> bool:
        """Check if explicit AWS keys are configured"""
        return bool(self.aws_access_key_id and self.aws_secret_access_key)


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get or create the settings singleton instance.
    Loads configuration from the environment (and .env if present) on first call.

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If environment variables are invalid
    """
    global _settings

    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            )
            raise ConfigurationError(f"Invalid settings: {problems}") from e

    return _settings


def reset_settings():
    """
    Reset the settings singleton (useful for testing)
    """
    global _settings
    _settings = None
