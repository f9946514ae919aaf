"""
Local working copies and their place on disk.

Layout under every configured root:

    <root>/
    ├── github.com/
    │   ├── alice/
    │   │   └── foo/            # working copy (.git)
    │   └── bob/
    │       └── foo/            # working copy (.git)
    └── gitlab.com/
        └── group/
            └── sub/
                └── project/    # working copy, nested namespace

`to_local_path` and `from_discovered_path` map between descriptors and this
layout; `walk_local_repositories` rediscovers it from the filesystem on every
call. Nothing is cached between runs.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from repokeeper.remote import RemoteRepository
from repokeeper.vcs import CAPABILITIES, VcsKind, detect_kind

logger = logging.getLogger(__name__)

# host / owner / project
MIN_PATH_PARTS = 3

_MARKERS = frozenset(c.marker for c in CAPABILITIES.values())


@dataclass(frozen=True)
class LocalRepository:
    """A (possibly not yet cloned) working copy below one of the roots."""

    root: Path
    path_parts: Tuple[str, ...]

    def __post_init__(self):
        if len(self.path_parts) < MIN_PATH_PARTS:
            raise ValueError(
                f"Expected at least host/owner/project, got {'/'.join(self.path_parts)}"
            )

    @property
    def full_path(self) -> Path:
        return self.root.joinpath(*self.path_parts)

    @property
    def rel_path(self) -> Path:
        return Path(*self.path_parts)

    @property
    def host(self) -> str:
        return self.path_parts[0]

    @property
    def non_host_path(self) -> str:
        return "/".join(self.path_parts[1:])

    def subpaths(self) -> List[str]:
        """
        All trailing slices of the path, shortest first.

        github.com/alice/foo -> ["foo", "alice/foo", "github.com/alice/foo"]
        """
        n = len(self.path_parts)
        return ["/".join(self.path_parts[n - i - 1 :]) for i in range(n)]

    def matches(self, query: str) -> bool:
        """
        Exact match against the full path or any trailing subpath.

        Only this repository's own subpaths are considered; whether the query
        also names other repositories is decided by RepositoryIndex.
        """
        return query in self.subpaths()

    def vcs_kind(self) -> Optional[VcsKind]:
        return detect_kind(self.full_path)

    def __str__(self) -> str:
        return "/".join(self.path_parts)


def to_local_path(root: Path, remote: RemoteRepository) -> LocalRepository:
    """Where a remote repository lives below `root`."""
    return LocalRepository(root, remote.path_parts)


def from_discovered_path(root: Path, path: Path) -> Optional[LocalRepository]:
    """
    Recover a LocalRepository from a directory found below `root`.

    Returns:
        The repository, or None if `path` is outside `root` or too shallow to
        be a host/owner/project directory
    """
    try:
        rel = path.relative_to(root)
    except ValueError:
        return None

    parts = rel.parts
    if len(parts) < MIN_PATH_PARTS:
        return None
    return LocalRepository(root, tuple(parts))


def _warn_unreadable(error: OSError) -> None:
    logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror}")


def walk_local_repositories(roots: Iterable[Path]) -> Iterator[LocalRepository]:
    """
    Yield every working copy found below the given roots.

    Traversal is depth-first in lexical order. A directory holding a VCS
    marker is yielded and never descended into, so nothing inside a working
    copy is reported as a repository of its own. Symbolic links are not
    followed.

    Args:
        roots: Root directories to scan, in order

    Yields:
        LocalRepository for each discovered working copy
    """
    for root in roots:
        if not root.is_dir():
            logger.debug(f"Root {root} does not exist, skipping")
            continue

        for dirpath, dirnames, _ in os.walk(root, onerror=_warn_unreadable):
            current = Path(dirpath)
            if current != root and detect_kind(current) is not None:
                dirnames[:] = []
                repo = from_discovered_path(root, current)
                if repo is None:
                    logger.debug(f"Ignoring working copy outside host/owner/project: {current}")
                    continue
                yield repo
                continue

            dirnames[:] = sorted(d for d in dirnames if d not in _MARKERS)
