"""OutputCapture — the ordered, append-only log of one execution."""

from __future__ import annotations

from typing import Any

from coderunner.errors import OutputLimitExceededError
from coderunner.sandbox.values import format_value, format_values

CONSOLE_LEVELS = ("log", "error", "warn", "info", "debug")


class OutputCapture:
    """Collects formatted output lines for a single job.

    A capture is owned by exactly one call and never shared.  Lines logged
    at any level other than ``log`` carry an upper-case level prefix
    (``ERROR: ...``).  Appending past ``max_bytes`` raises
    :class:`~coderunner.errors.OutputLimitExceededError`; the lines captured
    so far are kept.
    """

    def __init__(self, max_bytes: int | None = None) -> None:
        self._lines: list[str] = []
        self._size = 0
        self._max_bytes = max_bytes

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def size(self) -> int:
        """UTF-8 byte size of everything captured so far."""
        return self._size

    def append(self, line: str) -> None:
        """Append one raw line."""
        size = len(line.encode("utf-8", errors="replace")) + 1
        if self._max_bytes is not None and self._size + size > self._max_bytes:
            raise OutputLimitExceededError(self._max_bytes)
        self._lines.append(line)
        self._size += size

    def extend(self, lines: list[str]) -> None:
        for line in lines:
            self.append(line)

    def console(self, level: str, values: list[Any]) -> None:
        """Record a console call with its already-decoded arguments."""
        message = format_values(values)
        if level != "log" and level in CONSOLE_LEVELS:
            message = f"{level.upper()}: {message}"
        self.append(message)

    def result(self, value: Any) -> None:
        """Record the completion value of a script."""
        self.append(format_value(value))

    def render(self) -> str:
        return "\n".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)
