import click

from .utils.logging import configure_logging


def add_debug_option(cmd: click.Command) -> click.Command:
    """Give a command or group a --debug flag.

    The flag may appear on the group or on the subcommand; once set anywhere
    it stays on for the rest of the invocation.
    """
    if not any(param.name == "debug" for param in cmd.params):
        cmd.params.insert(
            0,
            click.Option(
                ["--debug/--no-debug"],
                default=False,
                is_eager=True,
                expose_value=False,
                callback=_set_debug,
                help="Show VCS commands and other debug output.",
            ),
        )
    return cmd


def _set_debug(ctx: click.Context, param: click.Parameter, value: bool) -> bool:
    root_ctx = ctx.find_root()
    root_ctx.ensure_object(dict)
    if value:
        root_ctx.obj["DEBUG"] = True

    debug = root_ctx.obj.get("DEBUG", False)
    configure_logging(debug)
    return debug
