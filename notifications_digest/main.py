"""Main entry point for the notifications digest."""

import asyncio
import sys

import click
from loguru import logger
from pydantic import ValidationError

from notifications_digest.actions import set_failed
from notifications_digest.agent import NotificationDigestAgent
from notifications_digest.analyzers import format_notifications
from notifications_digest.config import Settings, get_settings
from notifications_digest.errors import DigestError
from notifications_digest.retrievers import NotificationRetriever

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO", log_file: str = "") -> None:
    """Send logs to stderr, and to a daily-rotated file if one is configured."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())
    if log_file:
        logger.add(log_file, rotation="1 day", retention="30 days", level="DEBUG")


def _load_settings(hours_back: int | None) -> Settings:
    overrides = {"hours_back": hours_back} if hours_back is not None else {}
    settings = get_settings(**overrides)
    configure_logging(settings.log_level, settings.log_file)
    return settings


@click.group()
def cli() -> None:
    """Summarize your GitHub notifications and deliver the digest."""
    configure_logging()


@cli.command()
@click.option("--hours-back", type=int, default=None, help="Size of the time window in hours")
def run(hours_back: int | None) -> None:
    """Run the digest once and deliver it."""
    try:
        settings = _load_settings(hours_back)
        agent = NotificationDigestAgent(settings)
        outputs = asyncio.run(agent.run())
    except (DigestError, ValidationError) as e:
        set_failed(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected failure")
        set_failed(str(e) or type(e).__name__)
        sys.exit(1)

    click.echo(f"✅ Processed {outputs.notification_count} notifications")
    if agent.last_ack and agent.last_ack.url:
        click.echo(f"   {agent.last_ack.url}")


@cli.command()
@click.option("--hours-back", type=int, default=None, help="Size of the time window in hours")
def preview(hours_back: int | None) -> None:
    """Print the digest that would be summarized, without calling the model."""
    try:
        settings = _load_settings(hours_back)
        retriever = NotificationRetriever(token=settings.github_token, api_url=settings.github_api_url)
        notifications = asyncio.run(retriever.fetch(settings.hours_back))
    except (DigestError, ValidationError) as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    click.echo(format_notifications(notifications))


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
