"""Tests for ``coderunner languages`` and ``coderunner template``."""

from __future__ import annotations

import json

from click.testing import CliRunner

from coderunner.cli import main


class TestLanguagesCommand:
    def test_table(self) -> None:
        result = CliRunner().invoke(main, ["languages"])

        assert result.exit_code == 0
        assert "Supported Languages" in result.output
        assert "javascript" in result.output
        assert "markdown" in result.output

    def test_json(self) -> None:
        result = CliRunner().invoke(main, ["languages", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [item["id"] for item in data][:3] == ["javascript", "typescript", "python"]
        assert data[5]["version"] == "RFC 7159"


class TestTemplateCommand:
    def test_known(self) -> None:
        result = CliRunner().invoke(main, ["template", "python"])

        assert result.exit_code == 0
        assert "Python Class" in result.output
        assert "class Calculator:" in result.output

    def test_missing(self) -> None:
        result = CliRunner().invoke(main, ["template", "css"])

        assert result.exit_code == 1
        assert "No template registered" in result.output


class TestMainGroup:
    def test_version(self) -> None:
        result = CliRunner().invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(main, ["--help"])

        assert result.exit_code == 0
        for name in ("run", "validate", "format", "languages", "template"):
            assert name in result.output
