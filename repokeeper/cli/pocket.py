"""cli command to clone the GitHub repositories saved in Pocket"""

import sys

import click

from repokeeper.cli.utils.context import get_orchestrator, get_settings
from repokeeper.cli.utils.logging import log_error, logger
from repokeeper.config import get_config_file
from repokeeper.exceptions import FeedError, IOFailure
from repokeeper.feeds import PocketFeed


@click.command(name="pocket")
@click.option(
    "-u",
    "--update",
    help="Update local repository if cloned already.",
    is_flag=True,
    default=False,
)
@click.pass_context
def pocket(ctx, update: bool):
    """Get all github.com entries in Pocket."""
    settings = get_settings(ctx)
    if not settings.pocket_consumer_key or not settings.pocket_access_token:
        log_error(
            "Pocket is not authorized; set consumer_key and access_token "
            f"under [pocket] in {get_config_file()}"
        )
        sys.exit(1)

    feed = PocketFeed(settings.pocket_consumer_key, settings.pocket_access_token)

    try:
        summary = get_orchestrator(ctx).get_many(
            (item.reference for item in feed), update
        )
    except (FeedError, IOFailure) as e:
        log_error(str(e))
        sys.exit(1)

    logger.debug(f"{summary.total} Pocket entries processed")
