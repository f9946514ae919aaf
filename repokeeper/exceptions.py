"""
Exception classes for repokeeper.
"""

from pathlib import Path
from typing import Sequence


class RepoKeeperError(Exception):
    """Base exception for all repokeeper errors."""

    pass


class InvalidReference(RepoKeeperError):
    """Raised when a remote reference cannot be resolved to a repository."""

    def __init__(self, reference: str, reason: str = ""):
        self.reference = reference
        self.reason = reason
        if reason:
            super().__init__(f"Not a valid repository: {reference} ({reason})")
        else:
            super().__init__(f"Not a valid repository: {reference}")


class UnknownHost(InvalidReference):
    """Raised when the host part of a reference is missing or malformed."""

    pass


class UnknownVcsKind(InvalidReference):
    """Raised when the VCS kind served by a host cannot be determined."""

    pass


class IOFailure(RepoKeeperError):
    """Raised when the local filesystem cannot be inspected or prepared."""

    def __init__(self, path: Path, message: str = ""):
        self.path = path
        if message:
            super().__init__(f"I/O error at {path}: {message}")
        else:
            super().__init__(f"I/O error at {path}")


class VcsCommandError(RepoKeeperError):
    """Raised when an external VCS command exits with a non-zero status."""

    action = "command"

    def __init__(self, command: Sequence[str], exit_code: int, stderr: str = ""):
        self.command = list(command)
        self.exit_code = exit_code
        self.stderr = stderr
        message = f"{self.action} failed with exit code {exit_code}: {' '.join(self.command)}"
        if stderr.strip():
            message += f"\n{stderr.strip()}"
        super().__init__(message)


class CloneFailed(VcsCommandError):
    action = "clone"


class UpdateFailed(VcsCommandError):
    action = "update"


class NotAWorkingCopy(RepoKeeperError):
    """Raised when updating a directory that holds no VCS metadata."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Not a working copy: {path}")


class AmbiguousMatch(RepoKeeperError):
    """Raised when more than one local repository matches a query."""

    def __init__(self, query: str, candidates: Sequence):
        self.query = query
        self.candidates = list(candidates)
        super().__init__(
            f"More than one repository matches '{query}'; try a more precise name"
        )


class NoMatch(RepoKeeperError):
    """Raised when no local repository matches a query."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"No repository found for '{query}'")


class FeedError(RepoKeeperError):
    """Raised when an upstream feed cannot be retrieved."""

    pass
