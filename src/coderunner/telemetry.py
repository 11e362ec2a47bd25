"""OpenTelemetry tracing for execute/validate/format calls.

Modules grab a tracer with ``get_tracer(__name__)``; until
:func:`configure_telemetry` runs, the API hands out no-op spans, so tracing
costs nothing by default.  ``coderunner --telemetry`` turns on span export
to stderr (requires ``pip install coderunner[otel]``), which keeps stdout
free for command output such as ``--json``.
"""

from __future__ import annotations

import sys

from opentelemetry import trace

from coderunner import __version__

ATTR_LANGUAGE = "coderunner.language"
ATTR_CODE_LENGTH = "coderunner.code.length"
ATTR_SUCCESS = "coderunner.success"
ATTR_DURATION_MS = "coderunner.duration_ms"
ATTR_ERROR_COUNT = "coderunner.validation.errors"
ATTR_WARNING_COUNT = "coderunner.validation.warnings"

_INSTRUMENTATION_NAME = "coderunner"


def get_tracer(name: str | None = None) -> trace.Tracer:
    return trace.get_tracer(name or _INSTRUMENTATION_NAME, __version__)


def configure_telemetry(service_name: str = "coderunner") -> None:
    """Install an SDK tracer provider that prints finished spans to stderr.

    Raises:
        ImportError: If ``opentelemetry-sdk`` is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor
    except ImportError as exc:
        msg = "opentelemetry-sdk is required for --telemetry. Install it with: pip install coderunner[otel]"
        raise ImportError(msg) from exc

    resource = Resource.create({"service.name": service_name, "service.version": __version__})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr)))
    trace.set_tracer_provider(provider)
