"""Tests for the modsource CLI."""

import json

import pytest
from click.testing import CliRunner

from modsource.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.unit
class TestResolveCommand:
    """Tests for the resolve command."""

    def test_resolve_github(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", "github.com/org/repo/sub", "v1.2.3"])
        assert result.exit_code == 0, result.output
        assert "Repository: https://github.com/org/repo" in result.output
        assert "Directory:  sub" in result.output
        assert "Commit:     sub/v1.2.3" in result.output
        assert "https://github.com/org/repo/tree/sub/v1.2.3/sub" in result.output

    def test_resolve_json_with_file_and_line(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["resolve", "github.com/org/repo", "v1.0.0", "--file", "main.go", "--line", "7", "--json"],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["commit"] == "v1.0.0"
        assert data["has_templates"] is True
        assert data["file_url"] == "https://github.com/org/repo/blob/v1.0.0/main.go"
        assert data["line_url"] == "https://github.com/org/repo/blob/v1.0.0/main.go#L7"

    def test_resolve_directory(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", "std", "v1.13.0", "--dir", "net/http", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["directory_url"] == "https://github.com/golang/go/tree/go1.13/src/net/http"

    def test_resolve_without_templates(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", "example.com/repo.git", "v1.0.0"])
        assert result.exit_code == 0, result.output
        assert "No URL templates known for this repository." in result.output

    def test_line_requires_file(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", "github.com/org/repo", "v1.0.0", "--line", "3"])
        assert result.exit_code == 2
        assert "--line requires --file" in result.output

    def test_resolution_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["resolve", "std", "not-a-version"])
        assert result.exit_code == 1
        assert "Error: requested version is not a valid semantic version" in result.output


@pytest.mark.unit
class TestPatternsCommand:
    """Tests for the patterns command."""

    def test_lists_patterns(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["patterns"])
        assert result.exit_code == 0, result.output
        assert "1. ^(?P<repo>github\\.com/" in result.output
        assert "{repo}/blob/{commit}/{file}#L{line}" in result.output
        assert "(no URL templates)" in result.output
