"""
Console summaries printed before and after a deployment run
"""

from sitedeploy.models import DeploymentConfig, ProvisionedResources


def display_config_summary(config: DeploymentConfig) -> None:
    print(f"\n{'='*60}")
    print(f" CONFIGURATION SUMMARY")
    print(f"{'='*60}")
    print(f"  ⚙️  Deployment Type:   {config.mode.label}")
    print(f"  🔑 AWS Profile:       {config.profile}")
    print(f"  🪣 S3 Bucket:         {config.bucket_name}")
    print(f"  📂 Website Path:      {config.source_dir}")
    print(f"  💬 Description:       {config.description}")
    print(f"  🌐 Region:            {config.region}")
    print(f"{'='*60}\n")


def display_deployment_summary(resources: ProvisionedResources) -> None:
    print(f"\n{'='*60}")
    print(f" 🎉 DEPLOYMENT COMPLETED")
    print(f"{'='*60}")
    print(f"  Bucket Name:       {resources.bucket_name}")
    print(f"  Distribution ID:   {resources.distribution_id}")
    print(f"  Distribution URL:  {resources.url}")
    print(f"{'='*60}")
    print("\n⏳ Note: It may take up to 15 minutes for the CloudFront distribution to be fully deployed\n")
