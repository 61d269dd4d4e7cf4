"""
Custom exceptions for site deployment operations
"""

from typing import Optional


class SiteDeployError(Exception):
    """Base exception for all sitedeploy errors"""
    pass


class ConfigurationError(SiteDeployError):
    """Raised when deployment configuration is missing or invalid"""
    pass


class AWSServiceError(SiteDeployError):
    """Base exception for failed AWS calls"""

    def __init__(self, message: str, operation: Optional[str] = None, error_code: Optional[str] = None):
        self.message = message
        self.operation = operation
        self.error_code = error_code
        super().__init__(self.message)

    def __str__(self):
        if self.error_code:
            return f"{self.message} ({self.error_code})"
        return self.message


class S3ServiceError(AWSServiceError):
    """Raised when an S3 operation fails"""
    pass


class CloudFrontServiceError(AWSServiceError):
    """Raised when a CloudFront operation fails"""
    pass


class IdentityServiceError(AWSServiceError):
    """Raised when the caller identity cannot be resolved"""
    pass


class UploadError(SiteDeployError):
    """Raised when the website upload fails"""

    def __init__(self, message: str, key: Optional[str] = None):
        self.message = message
        self.key = key
        super().__init__(self.message)


class OrchestratorError(SiteDeployError):
    """Raised when any step of the deployment pipeline fails"""

    def __init__(self, step: str, cause: Exception):
        self.step = step
        self.cause = cause
        super().__init__(f"Step '{step}' failed: {cause}")
