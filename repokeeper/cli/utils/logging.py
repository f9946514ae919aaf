import logging
import sys

import click

from repokeeper.utils import ACTION_WIDTH

logger = logging.getLogger("repokeeper")


def configure_logging(debug: bool):
    """
    Send repokeeper log lines to stderr, keeping stdout for command output.
    """
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if not logger.hasHandlers():
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)


def log_error(message: str) -> None:
    """Log an error line with a red `error` label."""
    label = click.style(f"{'error':>{ACTION_WIDTH}}", fg="red", bold=True)
    logger.error(f"{label} {message}")
