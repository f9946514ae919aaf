"""cli command to clone or update a single repository"""

import sys

import click

from repokeeper.cli.utils.context import get_orchestrator
from repokeeper.cli.utils.logging import log_error
from repokeeper.exceptions import RepoKeeperError


@click.command(name="get")
@click.argument("reference")
@click.option(
    "-u",
    "--update",
    help="Update local repository if cloned already.",
    is_flag=True,
    default=False,
)
@click.pass_context
def get(ctx, reference: str, update: bool):
    """Clone/sync with a remote repository.

    REFERENCE is a repository URL or <user>/<project> on GitHub.

    Example:

      rk get motemen/ghq
    """
    orchestrator = get_orchestrator(ctx)
    try:
        orchestrator.get_reference(reference, update)
    except RepoKeeperError as e:
        log_error(str(e))
        sys.exit(1)
