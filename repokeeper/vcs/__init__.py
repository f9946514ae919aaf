"""
Version-control drivers.

Clone and update are delegated to the installed `git`, `hg` and `svn`
executables through a ProcessRunner, so tests can substitute a fake runner.
"""

from .backends import (
    CAPABILITIES,
    DETECTION_ORDER,
    VcsCapability,
    VcsDriver,
    VcsKind,
    detect_kind,
    driver_for,
)
from .runner import ProcessResult, ProcessRunner

__all__ = [
    "CAPABILITIES",
    "DETECTION_ORDER",
    "ProcessResult",
    "ProcessRunner",
    "VcsCapability",
    "VcsDriver",
    "VcsKind",
    "detect_kind",
    "driver_for",
]
