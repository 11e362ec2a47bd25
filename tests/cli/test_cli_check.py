"""Tests for ``coderunner validate`` and ``coderunner format``."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from click.testing import CliRunner

from coderunner.cli import main

if TYPE_CHECKING:
    from pathlib import Path


class TestValidateCommand:
    def test_valid(self, tmp_path: Path) -> None:
        f = tmp_path / "ok.json"
        f.write_text("[1, 2]")

        result = CliRunner().invoke(main, ["validate", str(f)])

        assert result.exit_code == 0
        assert "Valid" in result.output

    def test_invalid(self, tmp_path: Path) -> None:
        f = tmp_path / "bad.json"
        f.write_text("{")

        result = CliRunner().invoke(main, ["validate", str(f)])

        assert result.exit_code == 1
        assert "Invalid" in result.output
        assert "error:" in result.output

    def test_warnings_do_not_fail(self, tmp_path: Path) -> None:
        f = tmp_path / "frag.html"
        f.write_text("<p>hi</p>")

        result = CliRunner().invoke(main, ["validate", str(f)])

        assert result.exit_code == 0
        assert "Missing HTML structure tags" in result.output

    def test_json_output(self, tmp_path: Path) -> None:
        f = tmp_path / "style.css"
        f.write_text("color: red;")

        result = CliRunner().invoke(main, ["validate", str(f), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {"is_valid": True, "errors": [], "warnings": ["Missing CSS braces"]}


class TestFormatCommand:
    def test_prints_formatted_code(self, tmp_path: Path) -> None:
        f = tmp_path / "data.json"
        f.write_text('{"b":1,"a":2}')

        result = CliRunner().invoke(main, ["format", str(f)])

        assert result.exit_code == 0
        assert '{\n  "b": 1,\n  "a": 2\n}' in result.output
        assert f.read_text() == '{"b":1,"a":2}'

    def test_write_in_place(self, tmp_path: Path) -> None:
        f = tmp_path / "style.css"
        f.write_text("a{color:red;}")

        result = CliRunner().invoke(main, ["format", str(f), "--write"])

        assert result.exit_code == 0
        assert f.read_text() == "a {\n  color:red;\n}"

    def test_write_rejects_stdin(self) -> None:
        result = CliRunner().invoke(main, ["format", "-", "-l", "json", "--write"], input="{}")

        assert result.exit_code == 2

    def test_parse_failure(self, tmp_path: Path) -> None:
        f = tmp_path / "bad.json"
        f.write_text("{")

        result = CliRunner().invoke(main, ["format", str(f)])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_unsupported_language(self, tmp_path: Path) -> None:
        f = tmp_path / "x.txt"
        f.write_text("x")

        result = CliRunner().invoke(main, ["format", str(f), "-l", "cobol"])

        assert result.exit_code == 1
        assert "Unsupported language" in result.output
