"""VCS kinds, their capability table, working-copy detection and the driver"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from repokeeper.exceptions import CloneFailed, IOFailure, NotAWorkingCopy, UpdateFailed

from .runner import ProcessRunner

logger = logging.getLogger(__name__)


class VcsKind(str, Enum):
    """Version control systems repokeeper can drive."""

    git = "git"
    mercurial = "mercurial"
    subversion = "subversion"


@dataclass(frozen=True)
class VcsCapability:
    """How one VCS is detected on disk and driven from the command line."""

    marker: str
    executable: str
    clone_command: Tuple[str, ...]
    update_command: Tuple[str, ...]
    # Project-name suffix some transports append, e.g. "foo.git"
    url_suffix: Optional[str] = None

    def clone_args(self, remote_url: str, destination: Path) -> List[str]:
        return [self.executable, *self.clone_command, remote_url, str(destination)]

    def update_args(self) -> List[str]:
        return [self.executable, *self.update_command]


CAPABILITIES: Dict[VcsKind, VcsCapability] = {
    VcsKind.git: VcsCapability(
        marker=".git",
        executable="git",
        clone_command=("clone",),
        update_command=("pull", "--ff-only"),
        url_suffix=".git",
    ),
    VcsKind.mercurial: VcsCapability(
        marker=".hg",
        executable="hg",
        clone_command=("clone",),
        update_command=("pull", "--update"),
    ),
    VcsKind.subversion: VcsCapability(
        marker=".svn",
        executable="svn",
        clone_command=("checkout",),
        update_command=("update",),
    ),
}

DETECTION_ORDER: Tuple[VcsKind, ...] = (
    VcsKind.git,
    VcsKind.mercurial,
    VcsKind.subversion,
)


def detect_kind(path: Path) -> Optional[VcsKind]:
    """
    Detect which VCS controls a directory by looking for its metadata marker.

    Markers are checked in a fixed order (git, mercurial, subversion) and the
    first one present wins. `.git` may be a file (worktrees, submodules).

    Args:
        path: Directory to inspect

    Returns:
        The detected VcsKind, or None if the directory is not a working copy
    """
    for kind in DETECTION_ORDER:
        if (path / CAPABILITIES[kind].marker).exists():
            return kind
    return None


class VcsDriver:
    """Clone and update operations for a single VCS kind."""

    def __init__(self, kind: VcsKind, runner: Optional[ProcessRunner] = None):
        self.kind = kind
        self.capability = CAPABILITIES[kind]
        self.runner = runner or ProcessRunner()

    def __repr__(self) -> str:
        return f"VcsDriver({self.kind.value})"

    def clone(self, remote_url: str, destination: Path) -> None:
        """
        Clone `remote_url` into `destination`, creating parent directories.

        Raises:
            IOFailure: If the parent directories cannot be created
            CloneFailed: If the external tool exits non-zero
        """
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IOFailure(destination.parent, str(e)) from e

        result = self.runner.run(self.capability.clone_args(remote_url, destination))
        if not result.ok:
            raise CloneFailed(result.args, result.exit_code, result.stderr)

    def update(self, local_path: Path) -> None:
        """
        Pull and update an existing working copy in place.

        Raises:
            NotAWorkingCopy: If `local_path` holds no metadata for this VCS
            UpdateFailed: If the external tool exits non-zero
        """
        if not (local_path / self.capability.marker).exists():
            raise NotAWorkingCopy(local_path)

        result = self.runner.run(self.capability.update_args(), cwd=local_path)
        if not result.ok:
            raise UpdateFailed(result.args, result.exit_code, result.stderr)


def driver_for(kind: VcsKind, runner: Optional[ProcessRunner] = None) -> VcsDriver:
    return VcsDriver(kind, runner)
