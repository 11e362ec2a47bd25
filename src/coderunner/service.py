"""CodeRunner — the public entry point for execute/validate/format.

Wraps the :class:`~coderunner.registry.StrategyRegistry` the way a request
layer needs it:

1. **Execute** enforces the source length limit, dispatches to the
   language's executor and folds every failure into an
   :class:`~coderunner.models.ExecutionResult`.
2. **Validate** dispatches to the validator and folds failures into a
   :class:`~coderunner.models.ValidationResult`.
3. **Format** dispatches to the formatter and lets malformed-input errors
   propagate.

Neither Execute nor Validate ever raises.
"""

from __future__ import annotations

import logging
import time

from coderunner import catalog
from coderunner.config import RunnerSettings
from coderunner.errors import CodeRunnerError, CodeTooLongError, SandboxError
from coderunner.models import (
    CodeTemplate,
    ExecutionRequest,
    ExecutionResult,
    FormatResult,
    LanguageInfo,
    ValidationResult,
)
from coderunner.registry import StrategyRegistry, build_default_registry
from coderunner.sandbox.capture import OutputCapture
from coderunner.telemetry import (
    ATTR_CODE_LENGTH,
    ATTR_DURATION_MS,
    ATTR_ERROR_COUNT,
    ATTR_LANGUAGE,
    ATTR_SUCCESS,
    ATTR_WARNING_COUNT,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

_INTERNAL_ERROR = "Internal error while running code"


class CodeRunner:
    """Sandboxed multi-language code execution service."""

    def __init__(
        self,
        settings: RunnerSettings | None = None,
        *,
        registry: StrategyRegistry | None = None,
    ) -> None:
        self._settings = settings or RunnerSettings()
        self._registry = registry or build_default_registry(self._settings)

    @property
    def settings(self) -> RunnerSettings:
        return self._settings

    @property
    def registry(self) -> StrategyRegistry:
        return self._registry

    async def execute(self, code: str, language: str, input_text: str = "") -> ExecutionResult:
        """Run *code* and return its captured output.

        Never raises: unsupported languages, oversize code, timeouts and
        faults raised by the code are all reported through ``error``.
        """
        started = time.perf_counter()
        capture = OutputCapture(self._settings.max_output_bytes)
        error: str | None = None

        with _tracer.start_as_current_span("coderunner.execute") as span:
            span.set_attribute(ATTR_LANGUAGE, language)
            span.set_attribute(ATTR_CODE_LENGTH, len(code))

            try:
                self._check_length(code)
                strategy = self._registry.get(language)
                await strategy.executor.execute(code, capture, input_text=input_text)
            except SandboxError as exc:
                error = exc.detail
            except CodeRunnerError as exc:
                error = str(exc)
            except Exception:
                logger.exception("Unexpected failure executing %s code", language)
                error = _INTERNAL_ERROR

            elapsed_ms = int((time.perf_counter() - started) * 1000)
            result = ExecutionResult(
                output=capture.render(),
                error=error,
                execution_time_ms=elapsed_ms,
                language=language,
                success=error is None,
            )
            span.set_attribute(ATTR_SUCCESS, result.success)
            span.set_attribute(ATTR_DURATION_MS, elapsed_ms)

        logger.info(
            "Executed %s code (%d chars) in %dms: %s",
            language,
            len(code),
            elapsed_ms,
            "ok" if result.success else error,
        )
        return result

    async def execute_request(self, request: ExecutionRequest) -> ExecutionResult:
        """Run an :class:`~coderunner.models.ExecutionRequest`; see :meth:`execute`."""
        return await self.execute(request.code, request.language, request.input)

    async def validate(self, code: str, language: str) -> ValidationResult:
        """Check *code* without running it.  Never raises."""
        with _tracer.start_as_current_span("coderunner.validate") as span:
            span.set_attribute(ATTR_LANGUAGE, language)
            try:
                strategy = self._registry.get(language)
                result = await strategy.validator.validate(code)
            except SandboxError as exc:
                result = ValidationResult.failed(exc.detail)
            except CodeRunnerError as exc:
                result = ValidationResult.failed(str(exc))
            except Exception:
                logger.exception("Unexpected failure validating %s code", language)
                result = ValidationResult.failed(_INTERNAL_ERROR)

            span.set_attribute(ATTR_ERROR_COUNT, len(result.errors))
            span.set_attribute(ATTR_WARNING_COUNT, len(result.warnings))

        return result

    def format(self, code: str, language: str) -> FormatResult:
        """Format *code*.

        Raises:
            UnsupportedLanguageError: If *language* is unknown.
            ParseFailureError: If the code cannot be parsed (JSON).
        """
        with _tracer.start_as_current_span("coderunner.format") as span:
            span.set_attribute(ATTR_LANGUAGE, language)
            strategy = self._registry.get(language)
            return strategy.formatter.format(code)

    def list_languages(self) -> list[LanguageInfo]:
        return catalog.list_languages()

    def get_template(self, language: str) -> CodeTemplate:
        """Return the starter snippet for *language*.

        Raises:
            TemplateNotFoundError: If no template is registered.
        """
        return catalog.get_template(language)

    def _check_length(self, code: str) -> None:
        limit = self._settings.max_code_length
        if len(code) > limit:
            raise CodeTooLongError(len(code), limit)
