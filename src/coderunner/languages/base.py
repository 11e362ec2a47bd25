"""Strategy protocols — the executor/validator/formatter triple per language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from coderunner.models import FormatResult, Language, ValidationResult
    from coderunner.sandbox.capture import OutputCapture


@runtime_checkable
class Executor(Protocol):
    """Runs source code and writes what it prints into a capture buffer.

    Failures are raised as :class:`~coderunner.errors.SandboxError`
    subclasses; whatever was captured before the failure stays in the
    buffer.
    """

    async def execute(self, code: str, capture: OutputCapture, *, input_text: str = "") -> None:
        """Run *code*, appending output lines to *capture*."""
        ...


@runtime_checkable
class Validator(Protocol):
    """Checks source code without running it."""

    async def validate(self, code: str) -> ValidationResult:
        """Return the syntax check result for *code*."""
        ...


@runtime_checkable
class Formatter(Protocol):
    """Applies deterministic, idempotent style normalisation."""

    def format(self, code: str) -> FormatResult:
        """Return the formatted code and the list of changes applied."""
        ...


@dataclass(frozen=True)
class LanguageStrategy:
    """The capability triple registered for one language."""

    language: Language
    executor: Executor
    validator: Validator
    formatter: Formatter
