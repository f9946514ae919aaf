"""cli command to list local repositories"""

from typing import Optional

import click

from repokeeper.cli.utils.context import get_settings
from repokeeper.local import walk_local_repositories
from repokeeper.match import RepositoryIndex, select_repositories


@click.command(name="list")
@click.argument("query", required=False)
@click.option(
    "-e", "--exact", help="Perform an exact match.", is_flag=True, default=False
)
@click.option(
    "-p", "--full-path", help="Print full paths.", is_flag=True, default=False
)
@click.option(
    "--unique", help="Print unique subpaths.", is_flag=True, default=False
)
@click.pass_context
def list_repositories(
    ctx, query: Optional[str], exact: bool, full_path: bool, unique: bool
):
    """List local repositories.

    Without QUERY every repository is listed. QUERY is matched as a substring
    of <user>/<project>, or with --exact as a whole trailing subpath.
    """
    settings = get_settings(ctx)
    repos = select_repositories(walk_local_repositories(settings.roots), query, exact)

    if unique:
        for subpath in RepositoryIndex(repos).unique_subpaths():
            click.echo(subpath)
        return

    for repo in repos:
        click.echo(str(repo.full_path) if full_path else repo.rel_path.as_posix())
