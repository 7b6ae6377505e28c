"""Tests for the url and repos CLI commands."""

import pytest
from typer.testing import CliRunner

from searchfox_api.cli.app import app

runner = CliRunner()


def test_url_with_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SEARCHFOX_BASE_URL", raising=False)
    monkeypatch.delenv("SEARCHFOX_REPO", raising=False)

    result = runner.invoke(app, ["url", "BrowserChild"])

    assert result.exit_code == 0
    assert "https://searchfox.org/mozilla-central/search?q=BrowserChild&case=false&regex=false&path=" in result.output


def test_url_with_options(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEARCHFOX_BASE_URL", "http://sf.test")

    result = runner.invoke(app, ["url", "Foo", "--repo", "Beta", "--case-sensitive", "--regex", "--path", "dom"])

    assert result.exit_code == 0
    assert "http://sf.test/mozilla-beta/search?q=Foo&case=true&regex=true&path=dom" in result.output


def test_url_default_repo_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEARCHFOX_REPO", "esr60")

    result = runner.invoke(app, ["url", "nsIWidget"])

    assert result.exit_code == 0
    assert "/mozilla-esr60/search?" in result.output


def test_url_rejects_short_query() -> None:
    result = runner.invoke(app, ["url", "ab"])
    assert result.exit_code == 2


def test_url_rejects_unknown_repo() -> None:
    result = runner.invoke(app, ["url", "abc", "--repo", "mozilla"])
    assert result.exit_code == 2


def test_repos_lists_aliases() -> None:
    result = runner.invoke(app, ["repos"])

    assert result.exit_code == 0
    assert "mozilla-central" in result.output
    assert "m-c" in result.output
    assert "(8 repositories)" in result.output


def test_verbose_flag_is_accepted() -> None:
    result = runner.invoke(app, ["-v", "repos"])
    assert result.exit_code == 0


def test_unknown_log_level_does_not_break_commands(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEARCHFOX_LOG_LEVEL", "FOO")

    result = runner.invoke(app, ["repos"])

    assert result.exit_code == 0
    assert "(8 repositories)" in result.output
