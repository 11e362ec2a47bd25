"""Tests for the pydantic data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from coderunner.models import (
    CodeTemplate,
    ExecutionRequest,
    ExecutionResult,
    FormatResult,
    Language,
    LanguageInfo,
    ValidationResult,
)


class TestLanguage:
    def test_values(self) -> None:
        assert [lang.value for lang in Language] == [
            "javascript",
            "typescript",
            "python",
            "html",
            "css",
            "json",
            "markdown",
        ]

    def test_is_str(self) -> None:
        assert Language("json") == "json"

    def test_unknown(self) -> None:
        with pytest.raises(ValueError):
            Language("cobol")


class TestExecutionRequest:
    def test_defaults(self) -> None:
        req = ExecutionRequest(code="1", language="javascript")
        assert req.input == ""

    def test_code_required(self) -> None:
        with pytest.raises(ValidationError):
            ExecutionRequest(language="javascript")  # type: ignore[call-arg]


class TestExecutionResult:
    def test_success(self) -> None:
        result = ExecutionResult(output="hi", execution_time_ms=12, language="javascript", success=True)
        assert result.error is None
        assert result.execution_time == "12ms"

    def test_failure(self) -> None:
        result = ExecutionResult(error="boom", language="javascript", success=False)
        assert result.output == ""
        assert result.execution_time == "0ms"

    def test_success_must_match_error(self) -> None:
        with pytest.raises(ValidationError):
            ExecutionResult(error="boom", language="javascript", success=True)
        with pytest.raises(ValidationError):
            ExecutionResult(language="javascript", success=False)

    def test_negative_time_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ExecutionResult(execution_time_ms=-1, language="json", success=True)

    def test_dump_includes_display_time(self) -> None:
        data = ExecutionResult(execution_time_ms=5, language="json", success=True).model_dump()
        assert data["execution_time"] == "5ms"


class TestValidationResult:
    def test_defaults(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    def test_failed(self) -> None:
        result = ValidationResult.failed("a", "b")
        assert not result.is_valid
        assert result.errors == ["a", "b"]

    def test_errors_imply_invalid(self) -> None:
        with pytest.raises(ValidationError):
            ValidationResult(is_valid=True, errors=["bad"])

    def test_warnings_allowed_when_valid(self) -> None:
        result = ValidationResult(warnings=["hmm"])
        assert result.is_valid


class TestOtherModels:
    def test_format_result(self) -> None:
        result = FormatResult(code="x")
        assert result.changes == []

    def test_language_info(self) -> None:
        info = LanguageInfo(id="json", name="JSON", version="RFC 7159", icon="📄")
        assert info.id is Language.JSON

    def test_code_template(self) -> None:
        tpl = CodeTemplate(name="T", code="x")
        assert tpl.description == ""
