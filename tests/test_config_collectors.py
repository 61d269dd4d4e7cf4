"""
Tests for settings, validators, the deployment models and the config collectors.

Run:
    python -m pytest tests/test_config_collectors.py -v
"""

import io
from argparse import Namespace

import pytest
from pydantic import ValidationError as PydanticValidationError
from unittest.mock import patch
from rich.console import Console

from sitedeploy.exceptions import ConfigurationError
from sitedeploy.models import (
    DeploymentConfig,
    FileUploadRecord,
    ProvisionedResources,
    SiteMode,
    build_deployment_config,
)
from sitedeploy.utils.config import Settings
from sitedeploy.utils.validators import validate_bucket_name, validate_region, ValidationError


def _settings(**overrides) -> Settings:
    values = {
        "aws_profile": "default",
        "aws_region": "us-east-1",
        "site_mode": "basic",
        "site_bucket_name": "",
        "site_source_dir": "",
        "site_description": "",
        "aws_access_key_id": "",
        "aws_secret_access_key": "",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def _args(**overrides) -> Namespace:
    values = {
        "mode": None,
        "bucket": "my-site-bucket",
        "source": "./public",
        "description": None,
        "region": None,
        "profile": None,
    }
    values.update(overrides)
    return Namespace(**values)


# ===========================================================================
# 1. Validators
# ===========================================================================

class TestValidators:

    @pytest.mark.parametrize("name", ["abc", "my-site-bucket", "site.example.com", "a" * 63])
    def test_valid_bucket_names(self, name):
        assert validate_bucket_name(name) == name

    @pytest.mark.parametrize("name", ["", "ab", "a" * 64, "My-Bucket", "-bucket", "bucket-", "my..bucket", "192.168.1.1", "has space"])
    def test_invalid_bucket_names(self, name):
        with pytest.raises(ValidationError):
            validate_bucket_name(name)

    def test_region(self):
        assert validate_region(" EU-West-1 ") == "eu-west-1"
        with pytest.raises(ValidationError):
            validate_region("mars")


# ===========================================================================
# 2. Models
# ===========================================================================

class TestModels:

    def test_config_is_immutable(self):
        config = build_deployment_config(bucket_name="my-site", source_dir=".", description="d")

        with pytest.raises(PydanticValidationError):
            config.bucket_name = "other-site"

    def test_config_defaults(self):
        config = build_deployment_config(bucket_name="my-site", source_dir=".", description="d")

        assert config.mode is SiteMode.BASIC
        assert config.region == "us-east-1"
        assert config.profile == "default"

    def test_invalid_bucket_is_configuration_error(self):
        with pytest.raises(ConfigurationError, match="bucket_name"):
            build_deployment_config(bucket_name="ab", source_dir=".", description="d")

    def test_missing_field_is_configuration_error(self):
        with pytest.raises(ConfigurationError, match="source_dir"):
            build_deployment_config(bucket_name="my-site", description="d")

    def test_mode_from_string(self):
        config = DeploymentConfig(mode="spa", bucket_name="my-site", source_dir=".", description="d")
        assert config.mode is SiteMode.SPA

    def test_provisioned_resources_are_write_once(self):
        resources = ProvisionedResources()
        resources.distribution_id = "E1"

        with pytest.raises(AttributeError):
            resources.distribution_id = "E2"

        assert resources.distribution_id == "E1"

    def test_provisioned_resources_url(self):
        resources = ProvisionedResources()
        assert resources.url is None
        resources.distribution_domain = "d1.cloudfront.net"
        assert resources.url == "https://d1.cloudfront.net"

    def test_upload_record_rejects_negative_size(self):
        with pytest.raises(PydanticValidationError):
            FileUploadRecord(key="a", content_type="text/plain", size=-1)


# ===========================================================================
# 3. Settings
# ===========================================================================

class TestSettings:

    def test_log_level_is_uppercased(self):
        assert _settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(PydanticValidationError):
            _settings(log_level="LOUD")

    def test_invalid_site_mode(self):
        with pytest.raises(PydanticValidationError):
            _settings(site_mode="wiki")

    def test_explicit_credentials(self):
        assert not _settings().has_explicit_credentials()
        assert _settings(aws_access_key_id="AKIA", aws_secret_access_key="s").has_explicit_credentials()


# ===========================================================================
# 4. Collectors
# ===========================================================================

class TestArgsConfigCollector:

    def test_defaults_from_settings(self):
        from sitedeploy.cli.args_collector import ArgsConfigCollector

        config = ArgsConfigCollector(_args(), _settings(aws_region="eu-west-2", aws_profile="ops")).collect()

        assert config.mode is SiteMode.BASIC
        assert config.bucket_name == "my-site-bucket"
        assert config.description == "Distribution for my-site-bucket"
        assert config.region == "eu-west-2"
        assert config.profile == "ops"

    def test_flags_override_settings(self):
        from sitedeploy.cli.args_collector import ArgsConfigCollector

        args = _args(mode="spa", description="My app", region="ap-southeast-1", profile="prod")
        config = ArgsConfigCollector(args, _settings()).collect()

        assert config.mode is SiteMode.SPA
        assert config.description == "My app"
        assert config.region == "ap-southeast-1"
        assert config.profile == "prod"

    @pytest.mark.parametrize("missing", ["bucket", "source"])
    def test_required_flags(self, missing):
        from sitedeploy.cli.args_collector import ArgsConfigCollector

        with pytest.raises(ConfigurationError, match="cannot be empty"):
            ArgsConfigCollector(_args(**{missing: "  "}), _settings()).collect()


class TestSettingsConfigCollector:

    def test_collects_from_settings(self):
        from sitedeploy.cli.settings_collector import SettingsConfigCollector

        settings = _settings(site_mode="spa", site_bucket_name="env-bucket", site_source_dir="./dist")
        config = SettingsConfigCollector(settings).collect()

        assert config.mode is SiteMode.SPA
        assert config.bucket_name == "env-bucket"
        assert config.description == "Distribution for env-bucket"

    def test_missing_bucket(self):
        from sitedeploy.cli.settings_collector import SettingsConfigCollector

        with pytest.raises(ConfigurationError, match="SITE_BUCKET_NAME"):
            SettingsConfigCollector(_settings(site_source_dir="./dist")).collect()


class TestPromptConfigCollector:

    def _collector(self):
        from sitedeploy.cli.prompt_collector import PromptConfigCollector
        return PromptConfigCollector(_settings(), console=Console(file=io.StringIO()))

    def test_collects_answers(self):
        answers = ["2", "dev", "my-spa-bucket", "./dist", "My SPA", "eu-west-1"]

        with patch("sitedeploy.cli.prompt_collector.Prompt.ask", side_effect=answers):
            config = self._collector().collect()

        assert config.mode is SiteMode.SPA
        assert config.profile == "dev"
        assert config.bucket_name == "my-spa-bucket"
        assert config.source_dir == "./dist"
        assert config.description == "My SPA"
        assert config.region == "eu-west-1"

    def test_blank_answer_is_asked_again(self):
        answers = ["1", "default", "", "my-bucket", "./site", "Distribution for my-bucket", "us-east-1"]

        with patch("sitedeploy.cli.prompt_collector.Prompt.ask", side_effect=answers) as mock_ask:
            config = self._collector().collect()

        assert config.bucket_name == "my-bucket"
        assert mock_ask.call_count == len(answers)

    def test_description_defaults_to_bucket(self):
        answers = ["1", "default", "my-bucket", "./site", "Distribution for my-bucket", "us-east-1"]

        with patch("sitedeploy.cli.prompt_collector.Prompt.ask", side_effect=answers) as mock_ask:
            self._collector().collect()

        description_call = mock_ask.call_args_list[4]
        assert description_call[1]["default"] == "Distribution for my-bucket"

    def test_abort_is_configuration_error(self):
        with patch("sitedeploy.cli.prompt_collector.Prompt.ask", side_effect=KeyboardInterrupt):
            with pytest.raises(ConfigurationError, match="aborted"):
                self._collector().collect()


class TestCollectorFactory:

    def test_known_sources(self):
        from sitedeploy.cli import (
            ArgsConfigCollector,
            PromptConfigCollector,
            SettingsConfigCollector,
            get_config_collector,
        )

        settings = _settings()
        assert isinstance(get_config_collector("args", args=_args(), config=settings), ArgsConfigCollector)
        assert isinstance(get_config_collector("PROMPT", config=settings), PromptConfigCollector)
        assert isinstance(get_config_collector("env", config=settings), SettingsConfigCollector)

    def test_unknown_source(self):
        from sitedeploy.cli import get_config_collector

        with pytest.raises(ValueError, match="Unknown config source"):
            get_config_collector("YAML", config=_settings())

    def test_args_source_needs_args(self):
        from sitedeploy.cli import get_config_collector

        with pytest.raises(ValueError):
            get_config_collector("ARGS", config=_settings())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
