"""
Unit tests for the ConfigAccessor class and settings loading.
"""

from pathlib import Path

import pytest

from repokeeper.config import (
    ConfigAccessor,
    Settings,
    load_settings,
    parse_roots,
)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "repokeeper.cfg"
    path.write_text(
        """
[core]
roots = /srv/src:~/work

[hosts]
Bitbucket.org = Mercurial
svn.example.org = subversion

[github]
token = ghp_secret

[pocket]
consumer_key = ck
access_token = at
"""
    )
    return path


@pytest.mark.short
def test_config_accessor_get_existing(config_file):
    config = ConfigAccessor(config_file)

    assert config.get("core", "roots") == "/srv/src:~/work"
    assert config.get("github", "token") == "ghp_secret"


@pytest.mark.short
def test_config_accessor_get_missing_with_default(config_file):
    config = ConfigAccessor(config_file)

    assert config.get("core", "missing", default="x") == "x"
    assert config.get("missing_section", "key") is None


@pytest.mark.short
def test_config_accessor_missing_file(tmp_path):
    config = ConfigAccessor(tmp_path / "absent.cfg")

    assert config.options("core") == []
    assert config.items("hosts") == {}


@pytest.mark.short
def test_load_settings_from_file(config_file, monkeypatch):
    monkeypatch.setenv("HOME", "/home/alice")

    settings = load_settings(ConfigAccessor(config_file), environ={})

    assert settings.roots == (Path("/srv/src"), Path("/home/alice/work"))
    assert settings.primary_root == Path("/srv/src")
    assert settings.host_vcs == {
        "bitbucket.org": "mercurial",
        "svn.example.org": "subversion",
    }
    assert settings.github_token == "ghp_secret"
    assert settings.pocket_consumer_key == "ck"
    assert settings.pocket_access_token == "at"


@pytest.mark.short
def test_environment_overrides_roots(config_file):
    settings = load_settings(
        ConfigAccessor(config_file), environ={"REPOKEEPER_ROOT": "/tmp/a:/tmp/b"}
    )

    assert settings.roots == (Path("/tmp/a"), Path("/tmp/b"))


@pytest.mark.short
def test_default_root(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", "/home/alice")

    settings = load_settings(ConfigAccessor(tmp_path / "absent.cfg"), environ={})

    assert settings.roots == (Path("/home/alice/.repokeeper"),)
    assert settings.host_vcs == {}
    assert settings.github_token is None


@pytest.mark.short
def test_parse_roots_skips_empty_entries():
    assert parse_roots("/a::/b:") == (Path("/a"), Path("/b"))


@pytest.mark.short
def test_settings_require_a_root():
    with pytest.raises(ValueError):
        Settings(roots=())
