"""repokeeper CLI"""

import click

from repokeeper import __version__
from repokeeper.cli.get import get
from repokeeper.cli.list import list_repositories
from repokeeper.cli.look import look
from repokeeper.cli.pocket import pocket
from repokeeper.cli.starred import starred

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="repokeeper")
@click.pass_context
def cli(ctx):
    """
    Manage local clones of remote repositories under <root>/<host>/<user>/<project>.
    """
    ctx.ensure_object(dict)


cli.add_command(add_debug_option(get))
cli.add_command(add_debug_option(list_repositories))
cli.add_command(add_debug_option(look))
cli.add_command(add_debug_option(starred))
cli.add_command(add_debug_option(pocket))

add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
