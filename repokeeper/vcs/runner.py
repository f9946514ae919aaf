"""Narrow wrapper around subprocess for external VCS tools"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# Exit status reported when the executable itself cannot be found, as a shell would
COMMAND_NOT_FOUND = 127


@dataclass(frozen=True)
class ProcessResult:
    args: Tuple[str, ...]
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class ProcessRunner:
    """Runs a command to completion and captures its output.

    No timeout and no retries: the caller blocks until the process exits and
    decides what a non-zero status means.
    """

    def run(self, args: Sequence[str], cwd: Optional[Path] = None) -> ProcessResult:
        args = tuple(str(a) for a in args)
        logger.debug(f"Running {' '.join(args)}" + (f" in {cwd}" if cwd else ""))
        try:
            completed = subprocess.run(
                args,
                cwd=cwd,
                encoding="utf-8",
                errors="replace",
                capture_output=True,
                check=False,
            )
        except FileNotFoundError as e:
            return ProcessResult(args, COMMAND_NOT_FOUND, "", str(e))

        if completed.stdout:
            logger.debug(completed.stdout.rstrip())
        return ProcessResult(args, completed.returncode, completed.stdout, completed.stderr)
