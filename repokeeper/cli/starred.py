"""cli command to clone the starred repositories of a GitHub user"""

import sys

import click

from repokeeper.cli.utils.context import get_orchestrator, get_settings
from repokeeper.cli.utils.logging import log_error, logger
from repokeeper.exceptions import FeedError, IOFailure
from repokeeper.feeds import GitHubStarredFeed


@click.command(name="starred")
@click.argument("user")
@click.option(
    "-u",
    "--update",
    help="Update local repository if cloned already.",
    is_flag=True,
    default=False,
)
@click.pass_context
def starred(ctx, user: str, update: bool):
    """Get all starred GitHub repositories of USER."""
    settings = get_settings(ctx)
    feed = GitHubStarredFeed(user, token=settings.github_token)

    try:
        summary = get_orchestrator(ctx).get_many(
            (item.reference for item in feed), update
        )
    except (FeedError, IOFailure) as e:
        log_error(str(e))
        sys.exit(1)

    logger.debug(f"{summary.total} starred repositories processed")
