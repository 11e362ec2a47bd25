"""Tests for the TypeScript strategy."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from coderunner.errors import ExecutionTimeoutError, RuntimeFaultError
from coderunner.languages.typescript import TypeScriptExecutor, TypeScriptValidator, strip_type_syntax
from coderunner.sandbox.capture import OutputCapture


class TestStripTypeSyntax:
    def test_annotations(self) -> None:
        assert strip_type_syntax("let n: number = 1;") == "let n = 1;"

    def test_function_signature(self) -> None:
        code = "function greet(name: string): string { return name; }"
        assert strip_type_syntax(code) == "function greet(name) { return name; }"

    def test_interface_removed(self) -> None:
        code = "interface User { name: string; }\nconst u = 1;"
        assert strip_type_syntax(code).strip() == "const u = 1;"

    def test_type_alias_removed(self) -> None:
        assert strip_type_syntax("type Id = number;\nlet x = 1;").strip() == "let x = 1;"

    def test_generics_removed(self) -> None:
        assert strip_type_syntax("const xs = new Array<number>();") == "const xs = new Array();"

    def test_plain_javascript_untouched(self) -> None:
        assert strip_type_syntax("console.log(1 + 2);") == "console.log(1 + 2);"


class TestTypeScriptExecutor:
    async def test_runs_stripped_code(self) -> None:
        js = MagicMock()
        js.execute = AsyncMock()
        capture = OutputCapture()
        await TypeScriptExecutor(js).execute("let n: number = 1; n", capture, input_text="i")
        js.execute.assert_awaited_once_with("let n = 1; n", capture, input_text="i")

    async def test_wraps_faults(self) -> None:
        js = MagicMock()
        js.execute = AsyncMock(side_effect=RuntimeFaultError("x is not defined"))
        with pytest.raises(RuntimeFaultError) as exc_info:
            await TypeScriptExecutor(js).execute("x", OutputCapture())
        assert exc_info.value.detail == "TypeScript execution failed: x is not defined"

    async def test_timeouts_pass_through(self) -> None:
        js = MagicMock()
        js.execute = AsyncMock(side_effect=ExecutionTimeoutError(10))
        with pytest.raises(ExecutionTimeoutError):
            await TypeScriptExecutor(js).execute("for(;;){}", OutputCapture())


class TestTypeScriptValidator:
    def _sandbox(self, message: str | None = None) -> MagicMock:
        sandbox = MagicMock()
        sandbox.check = AsyncMock(return_value=message)
        return sandbox

    async def test_valid(self) -> None:
        sandbox = self._sandbox()
        result = await TypeScriptValidator(sandbox).validate("interface A { x: number; }\nlet a: A;")
        assert result.is_valid
        sandbox.check.assert_awaited_once()

    async def test_mismatched_braces(self) -> None:
        result = await TypeScriptValidator(self._sandbox()).validate("interface A { x: number;")
        assert not result.is_valid
        assert "Mismatched braces in TypeScript code" in result.errors

    async def test_invalid_transpiled_code(self) -> None:
        result = await TypeScriptValidator(self._sandbox("Unexpected end of input")).validate("let a = (")
        assert result.errors == ["Transpiled JavaScript is invalid: Unexpected end of input"]
