"""Tests for the starred and pocket batch commands."""

import pytest
from click.testing import CliRunner

from repokeeper.cli.main import cli
from repokeeper.config import Settings
from repokeeper.exceptions import FeedError
from repokeeper.feeds import FeedItem


class FakeFeed:
    def __init__(self, references, error=None):
        self.references = references
        self.error = error

    def __iter__(self):
        for ref in self.references:
            yield FeedItem(ref)
        if self.error:
            raise self.error


def _invoke(settings, fake_runner, *args):
    return CliRunner().invoke(
        cli, list(args), obj={"SETTINGS": settings, "RUNNER": fake_runner}
    )


class TestStarred:
    @pytest.mark.short
    def test_clones_each_starred_repository(
        self, settings, fake_runner, monkeypatch, caplog
    ):
        created = {}

        def feed(user, token=None):
            created["user"] = user
            return FakeFeed(
                [
                    "https://github.com/alice/foo",
                    "https://github.com/blog/post",
                    "https://github.com/bob/bar",
                ]
            )

        monkeypatch.setattr("repokeeper.cli.starred.GitHubStarredFeed", feed)

        result = _invoke(settings, fake_runner, "starred", "alice")

        assert result.exit_code == 0
        assert created["user"] == "alice"
        assert [args[2] for args in fake_runner.commands] == [
            "https://github.com/alice/foo",
            "https://github.com/bob/bar",
        ]
        assert "Not a valid repository: https://github.com/blog/post" in caplog.text

    @pytest.mark.short
    def test_feed_error_is_fatal(self, settings, fake_runner, monkeypatch):
        monkeypatch.setattr(
            "repokeeper.cli.starred.GitHubStarredFeed",
            lambda user, token=None: FakeFeed(
                ["alice/foo"], error=FeedError("rate limited")
            ),
        )

        result = _invoke(settings, fake_runner, "starred", "alice")

        assert result.exit_code == 1
        assert len(fake_runner.calls) == 1


class TestPocket:
    @pytest.mark.short
    def test_requires_credentials(self, settings, fake_runner, caplog):
        result = _invoke(settings, fake_runner, "pocket")

        assert result.exit_code == 1
        assert "[pocket]" in caplog.text

    @pytest.mark.short
    def test_clones_entries(self, root, fake_runner, monkeypatch):
        settings = Settings(
            roots=(root,), pocket_consumer_key="ck", pocket_access_token="at"
        )
        monkeypatch.setattr(
            "repokeeper.cli.pocket.PocketFeed",
            lambda key, token: FakeFeed(["https://github.com/alice/foo"]),
        )

        result = _invoke(settings, fake_runner, "pocket", "-u")

        assert result.exit_code == 0
        assert fake_runner.commands[0][:3] == (
            "git",
            "clone",
            "https://github.com/alice/foo",
        )
