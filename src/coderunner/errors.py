"""Shared error types for the code runner."""


class CodeRunnerError(Exception):
    """Base error for all code runner failures."""


class UnsupportedLanguageError(CodeRunnerError):
    """The requested language has no registered strategy."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"Unsupported language: {language}")


class CodeTooLongError(CodeRunnerError):
    """Submitted source exceeds the configured maximum length."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"Code too long. Maximum allowed: {limit} characters")


class TemplateNotFoundError(CodeRunnerError):
    """No starter template is registered for the language."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"No template registered for language: {language}")


class ParseFailureError(CodeRunnerError):
    """A validator or formatter rejected malformed input."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class ConfigError(CodeRunnerError):
    """A configuration file could not be read or validated."""


class SandboxError(CodeRunnerError):
    """A sandbox operation failed (startup, execution, or teardown).

    ``detail`` is the user-facing message reported in results.
    """

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Sandbox error" + (f": {detail}" if detail else ""))


class RuntimeUnavailableError(SandboxError):
    """The language runtime executable could not be found or started."""

    def __init__(self, binary: str) -> None:
        self.binary = binary
        super().__init__(f"JavaScript runtime not available: {binary}")


class ExecutionTimeoutError(SandboxError):
    """Sandbox execution exceeded the wall-clock budget."""

    def __init__(self, timeout_ms: int) -> None:
        self.timeout_ms = timeout_ms
        super().__init__("execution timed out")


class RuntimeFaultError(SandboxError):
    """The submitted code raised an exception while running."""


class OutputLimitExceededError(RuntimeFaultError):
    """The submitted code produced more output than allowed."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__("output limit exceeded")
