"""Building blocks shared by several language strategies."""

from __future__ import annotations

from coderunner.models import FormatResult, ValidationResult
from coderunner.sandbox.capture import OutputCapture


class IdentityFormatter:
    """Returns the code untouched with no recorded changes."""

    def format(self, code: str) -> FormatResult:
        return FormatResult(code=code)


class PassthroughValidator:
    """Accepts any input, optionally attaching fixed advisory warnings."""

    def __init__(self, *warnings: str) -> None:
        self._warnings = list(warnings)

    async def validate(self, code: str) -> ValidationResult:
        return ValidationResult(is_valid=True, warnings=list(self._warnings))


class PreviewExecutor:
    """Answers Execute for non-executable languages with a fenced preview.

    Markup, style and documentation languages have no run semantics; the
    result is the source wrapped in a fenced block plus a usage note, and it
    always succeeds.
    """

    def __init__(self, heading: str, fence: str, note: str) -> None:
        self._heading = heading
        self._fence = fence
        self._note = note

    async def execute(self, code: str, capture: OutputCapture, *, input_text: str = "") -> None:
        capture.extend([
            self._heading,
            f"```{self._fence}",
            code,
            "```",
            "",
            self._note,
        ])
