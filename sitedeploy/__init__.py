"""
sitedeploy - provision a private S3 bucket behind CloudFront and publish a static site to it
"""

__version__ = "0.1.0"
