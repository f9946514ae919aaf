from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pytest

from repokeeper.config import Settings
from repokeeper.vcs import ProcessResult

MARKERS = {"git": ".git", "hg": ".hg", "svn": ".svn"}


class FakeRunner:
    """Records commands instead of running them.

    A successful clone/checkout creates the destination with the matching
    metadata directory, so later existence checks behave like after a real
    clone.
    """

    def __init__(self, exit_code: int = 0, stderr: str = "", create_destination: bool = True):
        self.exit_code = exit_code
        self.stderr = stderr
        self.create_destination = create_destination
        self.calls: List[Tuple[Tuple[str, ...], Optional[Path]]] = []

    def run(self, args: Sequence[str], cwd: Optional[Path] = None) -> ProcessResult:
        args = tuple(str(a) for a in args)
        self.calls.append((args, cwd))
        if (
            self.exit_code == 0
            and self.create_destination
            and args[1] in ("clone", "checkout")
        ):
            destination = Path(args[-1])
            destination.mkdir(parents=True)
            (destination / MARKERS[args[0]]).mkdir()
        return ProcessResult(args, self.exit_code, "", self.stderr)

    @property
    def commands(self) -> List[Tuple[str, ...]]:
        return [args for args, _ in self.calls]


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def root(tmp_path) -> Path:
    root = tmp_path / "root"
    root.mkdir()
    return root


@pytest.fixture
def settings(root) -> Settings:
    return Settings(roots=(root,))


@pytest.fixture
def make_working_copy():
    """Factory creating <root>/<rel_path> with a VCS marker directory inside."""

    def _make(root: Path, rel_path: str, marker: str = ".git") -> Path:
        path = root.joinpath(*rel_path.split("/"))
        (path / marker).mkdir(parents=True)
        return path

    return _make

