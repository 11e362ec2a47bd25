"""TypeScript strategy — best-effort type stripping on top of JavaScript.

This is *not* a type checker.  Type syntax is removed with a handful of
regular expressions and the remainder is handed to the JavaScript sandbox.
Constructs the expressions do not anticipate (ternaries, enums, ``as``
casts, decorators) may be mangled or survive and then fail to parse.
"""

from __future__ import annotations

import re

from coderunner.errors import RuntimeFaultError
from coderunner.languages.javascript import JavaScriptExecutor
from coderunner.models import ValidationResult
from coderunner.sandbox.capture import OutputCapture
from coderunner.sandbox.node import NodeSandbox

_TYPE_ANNOTATION_RE = re.compile(r":\s*[a-zA-Z<>\[\]{}|&]+")
_INTERFACE_RE = re.compile(r"interface\s+\w+\s*\{[^}]*\}")
_TYPE_ALIAS_RE = re.compile(r"type\s+\w+\s*=\s*[^;]+;")
_GENERIC_RE = re.compile(r"<[^>]*>")
_INTERFACE_OPEN_RE = re.compile(r"interface\s+\w+\s*\{")


def strip_type_syntax(code: str) -> str:
    """Remove annotations, interfaces, type aliases and generic parameters."""
    stripped = _TYPE_ANNOTATION_RE.sub("", code)
    stripped = _INTERFACE_RE.sub("", stripped)
    stripped = _TYPE_ALIAS_RE.sub("", stripped)
    return _GENERIC_RE.sub("", stripped)


def _mentions_type_syntax(code: str) -> bool:
    return "interface" in code or "type" in code or ":" in code


class TypeScriptExecutor:
    """Strips type syntax, then runs the result as JavaScript."""

    def __init__(self, javascript: JavaScriptExecutor) -> None:
        self._javascript = javascript

    async def execute(self, code: str, capture: OutputCapture, *, input_text: str = "") -> None:
        source = strip_type_syntax(code) if _mentions_type_syntax(code) else code
        try:
            await self._javascript.execute(source, capture, input_text=input_text)
        except RuntimeFaultError as exc:
            raise RuntimeFaultError(f"TypeScript execution failed: {exc.detail}") from exc


class TypeScriptValidator:
    """Brace-balance check for interfaces plus a JavaScript parse of the stripped code."""

    def __init__(self, sandbox: NodeSandbox) -> None:
        self._sandbox = sandbox

    async def validate(self, code: str) -> ValidationResult:
        errors: list[str] = []

        if _INTERFACE_OPEN_RE.search(code) and code.count("{") != code.count("}"):
            errors.append("Mismatched braces in TypeScript code")

        message = await self._sandbox.check(strip_type_syntax(code))
        if message is not None:
            errors.append(f"Transpiled JavaScript is invalid: {message}")

        return ValidationResult(is_valid=not errors, errors=errors)
