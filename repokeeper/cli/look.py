"""cli command to enter a local repository"""

import os
from pathlib import Path

import click

from repokeeper.cli.utils.context import get_settings
from repokeeper.cli.utils.logging import log_error
from repokeeper.exceptions import AmbiguousMatch, NoMatch
from repokeeper.local import walk_local_repositories
from repokeeper.match import RepositoryIndex


@click.command(name="look")
@click.argument("name")
@click.option(
    "--print-path",
    help="Print the repository path instead of starting a shell in it.",
    is_flag=True,
    default=False,
)
@click.pass_context
def look(ctx, name: str, print_path: bool):
    """Look into a local repository.

    NAME is <project>, <user>/<project> or <host>/<user>/<project>. A shell
    ($SHELL, or /bin/sh) is started inside the repository when exactly one
    matches.
    """
    settings = get_settings(ctx)
    index = RepositoryIndex(walk_local_repositories(settings.roots))

    try:
        repo = index.look(name)
    except NoMatch:
        log_error("No repository found")
        return
    except AmbiguousMatch as e:
        log_error("More than one repository found; try a more precise name")
        for candidate in e.candidates:
            log_error(f"- {candidate}")
        return

    if print_path:
        click.echo(str(repo.full_path))
        return

    spawn_shell(repo.full_path)


def spawn_shell(path: Path) -> None:
    """Replace the current process with an interactive shell in `path`."""
    shell = os.environ.get("SHELL") or "/bin/sh"
    os.chdir(path)
    os.execvp(shell, [shell])
