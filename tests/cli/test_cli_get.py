"""Tests for the get command."""

import pytest
from click.testing import CliRunner

from repokeeper import __version__
from repokeeper.cli.main import cli


@pytest.fixture
def invoke(settings, fake_runner):
    def _invoke(*args):
        runner = CliRunner()
        return runner.invoke(
            cli, list(args), obj={"SETTINGS": settings, "RUNNER": fake_runner}
        )

    return _invoke


@pytest.mark.short
def test_get_clones(invoke, fake_runner, root, caplog):
    result = invoke("get", "alice/foo")

    assert result.exit_code == 0, result.output
    assert fake_runner.commands == [
        (
            "git",
            "clone",
            "https://github.com/alice/foo",
            str(root / "github.com" / "alice" / "foo"),
        )
    ]
    assert "clone https://github.com/alice/foo" in caplog.text


@pytest.mark.short
def test_get_existing_without_update(invoke, fake_runner, root, make_working_copy):
    make_working_copy(root, "github.com/alice/foo")

    result = invoke("get", "https://github.com/alice/foo")

    assert result.exit_code == 0
    assert fake_runner.calls == []


@pytest.mark.short
def test_get_update(invoke, fake_runner, root, make_working_copy):
    path = make_working_copy(root, "github.com/alice/foo")

    result = invoke("get", "-u", "alice/foo")

    assert result.exit_code == 0
    assert fake_runner.calls == [(("git", "pull", "--ff-only"), path)]


@pytest.mark.short
@pytest.mark.parametrize(
    "reference", ["https://github.com/onlyowner", "https://[::1/alice/foo"]
)
def test_get_invalid_reference(invoke, fake_runner, caplog, reference):
    result = invoke("get", reference)

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert fake_runner.calls == []
    assert "Not a valid repository" in caplog.text


@pytest.mark.short
def test_get_clone_failure(invoke, fake_runner, caplog):
    fake_runner.exit_code = 128
    fake_runner.stderr = "fatal: repository not found"

    result = invoke("get", "alice/missing")

    assert result.exit_code == 1
    assert "repository not found" in caplog.text


@pytest.mark.short
def test_get_requires_reference(invoke):
    result = invoke("get")

    assert result.exit_code != 0
    assert "REFERENCE" in result.output


@pytest.mark.short
def test_debug_option_accepted(invoke):
    result = invoke("get", "--debug", "alice/foo")

    assert result.exit_code == 0


@pytest.mark.short
def test_version(invoke):
    result = invoke("--version")

    assert result.exit_code == 0
    assert __version__ in result.output
