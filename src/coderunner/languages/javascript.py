"""JavaScript strategy — sandboxed execution and compile-only validation."""

from __future__ import annotations

from coderunner.models import FormatResult, ValidationResult
from coderunner.sandbox.capture import OutputCapture
from coderunner.sandbox.node import NodeSandbox


class JavaScriptExecutor:
    """Runs code inside a fresh :class:`NodeSandbox` context."""

    def __init__(self, sandbox: NodeSandbox, timeout_ms: int | None = None) -> None:
        self._sandbox = sandbox
        self._timeout_ms = timeout_ms

    async def execute(self, code: str, capture: OutputCapture, *, input_text: str = "") -> None:
        await self._sandbox.run(code, capture, input_text=input_text, timeout_ms=self._timeout_ms)


class JavaScriptValidator:
    """Parses the code as a function body; nothing is executed."""

    def __init__(self, sandbox: NodeSandbox) -> None:
        self._sandbox = sandbox

    async def validate(self, code: str) -> ValidationResult:
        message = await self._sandbox.check(code)
        if message is not None:
            return ValidationResult.failed(message)
        return ValidationResult()


class JavaScriptFormatter:
    """Terminates the final statement when it is left open."""

    def format(self, code: str) -> FormatResult:
        trimmed = code.strip()
        if not trimmed or trimmed.endswith((";", "}")):
            return FormatResult(code=code)
        return FormatResult(code=code + ";", changes=["Added missing semicolon"])
