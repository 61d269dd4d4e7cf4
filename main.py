"""
Main CLI Entry Point
Command-line interface for:
- Deploying a static website or SPA to a private S3 bucket behind CloudFront
- Inspecting the content types files would be uploaded with
"""

import sys
import argparse

from sitedeploy.cli import get_config_collector, display_config_summary, display_deployment_summary
from sitedeploy.exceptions import ConfigurationError, OrchestratorError, SiteDeployError
from sitedeploy.services import DeploymentOrchestrator, CloudFrontService, create_aws_clients
from sitedeploy.utils.config import get_settings
from sitedeploy.utils.content_types import resolve_content_type
from sitedeploy.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def _config_source(args) -> str:
    if args.interactive:
        return "PROMPT"
    if args.from_env:
        return "ENV"
    return "ARGS"


def cmd_deploy(args):
    """Provision bucket + CloudFront and upload the website"""
    settings = get_settings()

    try:
        collector = get_config_collector(_config_source(args), args=args, config=settings)
        config = collector.collect()
    except ConfigurationError as e:
        logger.error(f"❌ Invalid configuration: {str(e)}")
        sys.exit(1)

    display_config_summary(config)

    try:
        orchestrator = DeploymentOrchestrator(settings=settings)
        resources = orchestrator.run(config)
    except OrchestratorError as e:
        logger.error(f"❌ Deployment failed at step '{e.step}': {e.cause}")
        logger.error("Resources created before the failure were left in place; remove them manually before retrying.")
        sys.exit(1)
    except ConfigurationError as e:
        logger.error(f"❌ Deployment failed: {str(e)}")
        sys.exit(1)

    display_deployment_summary(resources)

    if args.wait:
        try:
            clients = create_aws_clients(config.region, config.profile, settings)
            cf_service = CloudFrontService(clients.cloudfront, config.bucket_name, config.region)
            cf_service.wait_for_distribution(
                distribution_id=resources.distribution_id,
                timeout_minutes=args.wait_timeout,
                poll_interval=args.poll_interval,
            )
        except SiteDeployError as e:
            logger.error(f"❌ {str(e)}")
            sys.exit(1)

        print(f"✅ Your site is live at {resources.url}\n")


def cmd_content_type(args):
    """Print the content type each path would be uploaded with"""
    print(f"\n{'='*60}")
    print(f" CONTENT TYPES")
    print(f"{'='*60}")
    for path in args.paths:
        print(f"  {path:<40} {resolve_content_type(path)}")
    print(f"{'='*60}\n")


def main():
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="Static website deployment to S3 + CloudFront",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Answer prompts for every setting
  python main.py deploy --interactive

  # Deploy a plain multi-page site
  python main.py deploy --bucket my-site-bucket --source ./public --region eu-west-1

  # Deploy a single page application and wait for CloudFront
  python main.py deploy --mode spa --bucket my-app-bucket --source ./dist --wait

  # Deploy using SITE_* / AWS_* settings from the environment or .env
  python main.py deploy --from-env

  # Check content types
  python main.py content-type index.html app.js logo.svg
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ==================== DEPLOY COMMAND ====================
    deploy_parser = subparsers.add_parser("deploy", help="Create bucket + CloudFront and upload the site")
    source_group = deploy_parser.add_mutually_exclusive_group()
    source_group.add_argument("--interactive", action="store_true", help="Prompt for every setting")
    source_group.add_argument("--from-env", action="store_true", help="Read settings from the environment / .env")

    deploy_parser.add_argument("--mode", choices=["basic", "spa"], help="Site mode (default: basic)")
    deploy_parser.add_argument("--bucket", help="S3 bucket name to create")
    deploy_parser.add_argument("--source", help="Local folder holding the built website")
    deploy_parser.add_argument("--description", help="CloudFront distribution description")
    deploy_parser.add_argument("--region", help="AWS region (default: from config, us-east-1)")
    deploy_parser.add_argument("--profile", help="AWS credentials profile (default: from config, 'default')")
    deploy_parser.add_argument("--wait", action="store_true", help="Wait for the distribution to finish deploying")
    deploy_parser.add_argument("--wait-timeout", type=int, default=30, help="Max minutes to wait (default: 30)")
    deploy_parser.add_argument("--poll-interval", type=int, default=60, help="Seconds between status checks while waiting (default: 60)")
    deploy_parser.set_defaults(func=cmd_deploy)

    # ==================== CONTENT-TYPE COMMAND ====================
    ct_parser = subparsers.add_parser("content-type", help="Show the content type used for files")
    ct_parser.add_argument("paths", nargs="+", help="File paths or extensions")
    ct_parser.set_defaults(func=cmd_content_type)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(0)

    try:
        settings = get_settings()
    except ConfigurationError as e:
        configure_logging()
        logger.error(f"❌ {str(e)}")
        sys.exit(1)

    configure_logging(settings.log_level)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
