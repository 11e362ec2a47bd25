"""Tests for ``coderunner run`` CLI command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from click.testing import CliRunner

from coderunner.cli import main
from coderunner.languages.python import NOT_IMPLEMENTED_NOTICE

if TYPE_CHECKING:
    from pathlib import Path


class TestRunCommand:
    def test_json_file(self, tmp_path: Path) -> None:
        f = tmp_path / "data.json"
        f.write_text('{"a":1}')

        result = CliRunner().invoke(main, ["run", str(f)])

        assert result.exit_code == 0
        assert "Valid JSON:" in result.output
        assert '"a": 1' in result.output
        assert "finished in" in result.output

    def test_python_stub_with_input(self, tmp_path: Path) -> None:
        f = tmp_path / "script.py"
        f.write_text("print(input())")

        result = CliRunner().invoke(main, ["run", str(f), "--input", "hello"])

        assert result.exit_code == 0
        assert NOT_IMPLEMENTED_NOTICE in result.output
        assert "Input received: hello" in result.output

    def test_stdin_needs_language(self) -> None:
        result = CliRunner().invoke(main, ["run", "-"], input="{}")

        assert result.exit_code != 0
        assert "--language" in result.output

    def test_stdin_with_language(self) -> None:
        result = CliRunner().invoke(main, ["run", "-", "-l", "markdown"], input="# Hi")

        assert result.exit_code == 0
        assert "Markdown Preview:" in result.output

    def test_failure_exit_code(self, tmp_path: Path) -> None:
        f = tmp_path / "bad.json"
        f.write_text("{")

        result = CliRunner().invoke(main, ["run", str(f)])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_unsupported_language(self, tmp_path: Path) -> None:
        f = tmp_path / "prog.txt"
        f.write_text("x")

        result = CliRunner().invoke(main, ["run", str(f), "-l", "cobol"])

        assert result.exit_code == 1
        assert "Unsupported language: cobol" in result.output

    def test_json_output(self, tmp_path: Path) -> None:
        f = tmp_path / "page.html"
        f.write_text("<p>x</p>")

        result = CliRunner().invoke(main, ["run", str(f), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["success"] is True
        assert data["language"] == "html"
        assert data["output"].startswith("HTML Preview:")

    def test_config_file(self, tmp_path: Path) -> None:
        cfg = tmp_path / "runner.yaml"
        cfg.write_text("max_code_length: 3\n")
        f = tmp_path / "long.py"
        f.write_text("1234")

        result = CliRunner().invoke(main, ["--config", str(cfg), "run", str(f)])

        assert result.exit_code == 1
        assert "Code too long" in result.output

    def test_invalid_config_file(self, tmp_path: Path) -> None:
        cfg = tmp_path / "runner.yaml"
        cfg.write_text("- not\n- a mapping\n")
        f = tmp_path / "a.py"
        f.write_text("1")

        result = CliRunner().invoke(main, ["--config", str(cfg), "run", str(f)])

        assert result.exit_code == 1
        assert "Configuration error" in result.output
