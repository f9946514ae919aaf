"""
Clone-or-update of remote repositories into the local layout.

get() is idempotent when not updating: a working copy that already exists
under any root is left untouched, so calling it twice clones once.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from repokeeper.config import Settings
from repokeeper.exceptions import (
    InvalidReference,
    IOFailure,
    NotAWorkingCopy,
    VcsCommandError,
)
from repokeeper.local import LocalRepository, to_local_path
from repokeeper.remote import RemoteRepository, RemoteResolver
from repokeeper.utils import format_action
from repokeeper.vcs import ProcessRunner, driver_for

logger = logging.getLogger(__name__)


class GetAction(str, Enum):
    """What get() did for a repository."""

    cloned = "cloned"
    updated = "updated"
    exists = "exists"


@dataclass
class BatchSummary:
    cloned: int = 0
    updated: int = 0
    existing: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.cloned + self.updated + self.existing + self.failed

    def record(self, action: GetAction) -> None:
        if action is GetAction.cloned:
            self.cloned += 1
        elif action is GetAction.updated:
            self.updated += 1
        else:
            self.existing += 1


def path_exists(path: Path) -> bool:
    """
    Check whether `path` exists, distinguishing absence from I/O trouble.

    Raises:
        IOFailure: For any error other than the path not existing
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError as e:
        raise IOFailure(path, str(e)) from e
    return True


class GetOrchestrator:
    """Resolves references, maps them below the roots and drives the VCS."""

    def __init__(
        self,
        settings: Settings,
        resolver: Optional[RemoteResolver] = None,
        runner: Optional[ProcessRunner] = None,
    ):
        self.settings = settings
        self.resolver = resolver or RemoteResolver(settings)
        self.runner = runner or ProcessRunner()

    def locate(self, remote: RemoteRepository) -> LocalRepository:
        """
        The working copy for `remote`: an existing one under any root, or
        the not-yet-cloned location under the primary root.
        """
        for root in self.settings.roots:
            local = to_local_path(root, remote)
            if path_exists(local.full_path):
                return local
        return to_local_path(self.settings.primary_root, remote)

    def get(self, remote: RemoteRepository, update: bool = False) -> GetAction:
        """
        Clone `remote` if absent; update it if present and `update` is set.

        Raises:
            IOFailure: If the local path cannot be checked or prepared
            CloneFailed, UpdateFailed: If the VCS tool exits non-zero
            NotAWorkingCopy: If updating a directory without VCS metadata
        """
        local = self.locate(remote)
        path = local.full_path

        if not path_exists(path):
            logger.info(format_action("clone", f"{remote.clone_url} -> {path}"))
            driver_for(remote.vcs_kind, self.runner).clone(remote.clone_url, path)
            return GetAction.cloned

        if not update:
            logger.info(format_action("exists", str(path)))
            return GetAction.exists

        # Update with whatever VCS the working copy actually uses
        kind = local.vcs_kind()
        if kind is None:
            raise NotAWorkingCopy(path)
        logger.info(format_action("update", str(path)))
        driver_for(kind, self.runner).update(path)
        return GetAction.updated

    def get_reference(self, reference: str, update: bool = False) -> GetAction:
        return self.get(self.resolver.resolve(reference), update)

    def get_many(self, references: Iterable[str], update: bool = False) -> BatchSummary:
        """
        Get each reference in turn, in source order.

        Invalid references and VCS failures are logged and skipped; IOFailure
        aborts the whole batch.
        """
        summary = BatchSummary()
        for reference in references:
            try:
                action = self.get_reference(reference, update)
            except (InvalidReference, VcsCommandError, NotAWorkingCopy) as e:
                logger.error(format_action("error", str(e)))
                summary.failed += 1
                continue
            summary.record(action)

        logger.debug(
            f"Processed {summary.total} references: {summary.cloned} cloned, "
            f"{summary.updated} updated, {summary.existing} existing, {summary.failed} failed"
        )
        return summary
