"""
Input validation utilities for bucket names, regions and other user input
"""

import re

from sitedeploy.exceptions import ConfigurationError

# Validation failures are configuration errors
ValidationError = ConfigurationError


class BucketNameValidator:
    """Validator for S3 bucket names"""

    # Lowercase letters, digits, dots and hyphens; must start and end alphanumeric
    BUCKET_REGEX = re.compile(r'^[a-z0-9][a-z0-9.-]*[a-z0-9]$')
    IP_ADDRESS_REGEX = re.compile(r'^\d{1,3}(\.\d{1,3}){3}$')

    MIN_LENGTH = 3
    MAX_LENGTH = 63

    @classmethod
    def validate(cls, bucket_name: str) -> str:
        """
        Validate an S3 bucket name.

        Args:
            bucket_name: Bucket name to validate

        Returns:
            Cleaned bucket name (stripped)

        Raises:
            ValidationError: If the bucket name is invalid
        """
        if not bucket_name or not bucket_name.strip():
            raise ValidationError("Bucket name cannot be empty")

        bucket_name = bucket_name.strip()

        if not cls.MIN_LENGTH <= len(bucket_name) <= cls.MAX_LENGTH:
            raise ValidationError(
                f"Invalid bucket name length: {len(bucket_name)} "
                f"(must be between {cls.MIN_LENGTH} and {cls.MAX_LENGTH} characters)"
            )

        if not cls.BUCKET_REGEX.match(bucket_name):
            raise ValidationError(
                f"Invalid bucket name: {bucket_name}. "
                "Use lowercase letters, numbers, dots and hyphens; "
                "start and end with a letter or number."
            )

        if ".." in bucket_name:
            raise ValidationError(f"Invalid bucket name: {bucket_name}. Adjacent dots are not allowed.")

        if cls.IP_ADDRESS_REGEX.match(bucket_name):
            raise ValidationError(f"Invalid bucket name: {bucket_name}. Must not be formatted as an IP address.")

        return bucket_name


class RegionValidator:
    """Validator for AWS region codes"""

    REGION_REGEX = re.compile(r'^[a-z]{2}(-[a-z]+)+-\d$')

    @classmethod
    def validate(cls, region: str) -> str:
        if not region or not region.strip():
            raise ValidationError("Region cannot be empty")

        region = region.strip().lower()

        if not cls.REGION_REGEX.match(region):
            raise ValidationError(f"Invalid AWS region: {region}")

        return region


def require_value(value: str, field_name: str) -> str:
    """Raise if a required text field is blank, otherwise return it stripped"""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} cannot be empty")
    return str(value).strip()


def validate_bucket_name(bucket_name: str) -> str:
    """Convenience function for bucket name validation"""
    return BucketNameValidator.validate(bucket_name)


def validate_region(region: str) -> str:
    """Convenience function for region validation"""
    return RegionValidator.validate(region)
