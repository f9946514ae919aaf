"""Configuration for local repository roots, host overrides and feed credentials"""

import configparser
import logging
import os
import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

APP_NAME = "repokeeper"

ROOT_ENV_VAR = "REPOKEEPER_ROOT"

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

default_cfg = {"core": {"roots": f"~/.{APP_NAME}"}}

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/repokeeper").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))

logger = logging.getLogger(__name__)


def get_config_file() -> Path:
    return config_dir / f"{APP_NAME}.cfg"


class ConfigAccessor:
    """
    A dict-like accessor for the repokeeper configuration file.

    Missing sections or keys are handled gracefully, so an absent file behaves
    like an empty configuration.

    Usage:
        config = ConfigAccessor()
        roots = config.get("core", "roots", default="~/.repokeeper")
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize a ConfigAccessor with an optional config file path.

        Args:
            config_path: Path to the configuration file. If None, uses the default path.
        """
        if config_path is None:
            self.config_path = get_config_file()
        else:
            self.config_path = config_path

        self.config = configparser.ConfigParser()
        if self.config_path.exists():
            self.config.read(self.config_path)

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the specified section and key.

        Args:
            section: The configuration section
            key: The configuration key
            default: Value to return if the section or key doesn't exist

        Returns:
            The configuration value if it exists, otherwise the default value
        """
        try:
            return self.config[section][key]
        except (KeyError, configparser.NoSectionError, configparser.NoOptionError):
            return default

    def options(self, section: str) -> list:
        """
        Get all options (keys) in a section.

        Returns:
            List of options in the section or empty list if section doesn't exist
        """
        try:
            return self.config.options(section)
        except configparser.NoSectionError:
            return []

    def items(self, section: str) -> Dict[str, str]:
        return {key: self.config[section][key] for key in self.options(section)}


@dataclass(frozen=True)
class Settings:
    """Resolved configuration handed to the resolver, walker and orchestrator."""

    roots: Tuple[Path, ...]
    host_vcs: Mapping[str, str] = field(default_factory=dict)
    github_token: Optional[str] = None
    pocket_consumer_key: Optional[str] = None
    pocket_access_token: Optional[str] = None

    def __post_init__(self):
        if not self.roots:
            raise ValueError("At least one repository root must be configured")

    @property
    def primary_root(self) -> Path:
        """The root new clones are placed under."""
        return self.roots[0]


def parse_roots(value: str) -> Tuple[Path, ...]:
    """Split an os.pathsep separated list of roots, expanding `~`."""
    return tuple(
        Path(entry.strip()).expanduser() for entry in value.split(os.pathsep) if entry.strip()
    )


def load_settings(
    accessor: Optional[ConfigAccessor] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Build a Settings value from the config file and the environment.

    The REPOKEEPER_ROOT environment variable takes precedence over the
    `[core] roots` config key.

    Args:
        accessor: Config accessor to read from (defaults to the user config file)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Settings with at least one root
    """
    if accessor is None:
        accessor = ConfigAccessor()
    if environ is None:
        environ = os.environ

    roots_value = environ.get(ROOT_ENV_VAR) or accessor.get(
        "core", "roots", default_cfg["core"]["roots"]
    )
    roots = parse_roots(roots_value) or parse_roots(default_cfg["core"]["roots"])

    host_vcs = {
        host.lower(): kind.strip().lower()
        for host, kind in accessor.items("hosts").items()
    }

    settings = Settings(
        roots=roots,
        host_vcs=host_vcs,
        github_token=accessor.get("github", "token"),
        pocket_consumer_key=accessor.get("pocket", "consumer_key"),
        pocket_access_token=accessor.get("pocket", "access_token"),
    )
    logger.debug(f"Repository roots: {', '.join(str(r) for r in settings.roots)}")
    return settings
