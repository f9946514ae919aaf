"""Objects shared by all commands through the click context"""

import click

from repokeeper.config import Settings, load_settings
from repokeeper.get import GetOrchestrator


def get_settings(ctx: click.Context) -> Settings:
    """Settings for this invocation, loaded once and kept on the root context."""
    root_ctx = ctx.find_root()
    root_ctx.ensure_object(dict)
    if "SETTINGS" not in root_ctx.obj:
        root_ctx.obj["SETTINGS"] = load_settings()
    return root_ctx.obj["SETTINGS"]


def get_orchestrator(ctx: click.Context) -> GetOrchestrator:
    root_ctx = ctx.find_root()
    root_ctx.ensure_object(dict)
    return GetOrchestrator(get_settings(ctx), runner=root_ctx.obj.get("RUNNER"))
