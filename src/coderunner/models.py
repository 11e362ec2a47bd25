"""Data models for the code runner."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field, model_validator


class Language(str, Enum):
    """Languages the runner has a strategy for."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    PYTHON = "python"
    HTML = "html"
    CSS = "css"
    JSON = "json"
    MARKDOWN = "markdown"


class ExecutionRequest(BaseModel):
    """A request to run a piece of source code."""

    code: str = Field(..., description="Source text to run.")
    language: str = Field(..., description="Language identifier, e.g. 'javascript'.")
    input: str = Field(default="", description="Value pre-bound as `input` inside the sandbox.")


class ExecutionResult(BaseModel):
    """Outcome of a single Execute call."""

    output: str = Field(default="", description="Captured output lines joined with newlines.")
    error: str | None = Field(default=None, description="Failure message, if any.")
    execution_time_ms: int = Field(default=0, ge=0, description="Wall-clock time of the call.")
    language: str = Field(..., description="Language identifier as requested.")
    success: bool = Field(..., description="True exactly when `error` is None.")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def execution_time(self) -> str:
        return f"{self.execution_time_ms}ms"

    @model_validator(mode="after")
    def _check_success(self) -> ExecutionResult:
        if self.success != (self.error is None):
            msg = "success must be True exactly when error is None"
            raise ValueError(msg)
        return self


class ValidationResult(BaseModel):
    """Outcome of a static syntax check."""

    is_valid: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_errors(self) -> ValidationResult:
        if self.errors and self.is_valid:
            msg = "a result with errors cannot be valid"
            raise ValueError(msg)
        return self

    @classmethod
    def failed(cls, *errors: str) -> ValidationResult:
        return cls(is_valid=False, errors=list(errors))


class FormatResult(BaseModel):
    """Formatted source plus a human-readable audit trail."""

    code: str
    changes: list[str] = Field(default_factory=list)


class LanguageInfo(BaseModel):
    """Display metadata for a supported language."""

    id: Language
    name: str
    version: str
    icon: str


class CodeTemplate(BaseModel):
    """A canned starter snippet for a language."""

    name: str
    code: str
    description: str = ""
