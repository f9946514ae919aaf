import pytest
from click.testing import CliRunner

from repokeeper.cli.main import cli


@pytest.fixture
def populated(root, make_working_copy):
    make_working_copy(root, "github.com/alice/foo")
    make_working_copy(root, "github.com/bob/foo")
    make_working_copy(root, "github.com/alice/bar", ".hg")
    return root


@pytest.fixture
def invoke(settings):
    def _invoke(*args):
        return CliRunner().invoke(cli, list(args), obj={"SETTINGS": settings})

    return _invoke
