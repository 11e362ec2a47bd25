"""Python strategy — a documented stub.

There is no safe in-process runtime for untrusted Python here, so Execute
echoes the submission back with ``success=True`` and Validate passes with a
warning.  Callers rely on this contract; nothing is ever run.
"""

from __future__ import annotations

from coderunner.languages.common import PassthroughValidator
from coderunner.sandbox.capture import OutputCapture

NOT_IMPLEMENTED_NOTICE = "Python execution is not yet implemented in this demo version."


class PythonStubExecutor:
    async def execute(self, code: str, capture: OutputCapture, *, input_text: str = "") -> None:
        capture.extend([
            NOT_IMPLEMENTED_NOTICE,
            "Code received:",
            code,
            f"Input received: {input_text}",
        ])


def python_validator() -> PassthroughValidator:
    return PassthroughValidator("Python validation not yet implemented")
