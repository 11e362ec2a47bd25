"""JSON strategy — strict parsing and canonical indented re-serialisation."""

from __future__ import annotations

import json
from typing import Any

from coderunner.errors import ParseFailureError, RuntimeFaultError
from coderunner.models import FormatResult, ValidationResult
from coderunner.sandbox.capture import OutputCapture


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name} in JSON")


def parse_strict(text: str) -> Any:
    """Parse *text* as RFC 7159 JSON.

    Unlike :func:`json.loads` on its own, ``NaN`` and ``Infinity`` are
    rejected.

    Raises:
        ValueError: With the parser's message if *text* is not valid JSON.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except RecursionError as exc:
        raise ValueError("JSON nesting too deep") from exc


def dump_pretty(value: Any) -> str:
    """Serialise with two-space indentation, keeping key order."""
    return json.dumps(value, indent=2, ensure_ascii=False)


class JsonExecutor:
    """Parses the document and echoes its canonical form."""

    async def execute(self, code: str, capture: OutputCapture, *, input_text: str = "") -> None:
        try:
            parsed = parse_strict(code)
        except ValueError as exc:
            raise RuntimeFaultError(f"Invalid JSON: {exc}") from exc
        capture.extend(["Valid JSON:", "```json", dump_pretty(parsed), "```"])


class JsonValidator:
    async def validate(self, code: str) -> ValidationResult:
        try:
            parse_strict(code)
        except ValueError as exc:
            return ValidationResult.failed(str(exc))
        return ValidationResult()


class JsonFormatter:
    def format(self, code: str) -> FormatResult:
        try:
            parsed = parse_strict(code)
        except ValueError as exc:
            raise ParseFailureError(f"Invalid JSON: {exc}") from exc

        formatted = dump_pretty(parsed)
        if formatted == code:
            return FormatResult(code=code)
        return FormatResult(code=formatted, changes=["Formatted JSON with proper indentation"])
