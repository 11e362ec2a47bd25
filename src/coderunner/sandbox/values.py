"""Value formatting — turns runtime values into deterministic printable text.

Values produced inside the JavaScript sandbox cross the process boundary as
small JSON descriptors (see ``harness.js``) and are decoded back into Python
values by :func:`decode_value` before being formatted.  Objects arrive already
serialised by the runtime and are printed verbatim.
"""

from __future__ import annotations

import json
from typing import Any


class _Undefined:
    """Sentinel for JavaScript ``undefined`` (distinct from ``None``/``null``)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


def format_value(value: Any) -> str:
    """Return the printable form of *value*.

    Never raises: structured values that cannot be serialised fall back to
    plain string coercion, and a failing ``__str__`` falls back to the
    default object representation.
    """
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        try:
            return json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError, RecursionError):
            return _coerce(value)
    return _coerce(value)


def format_values(values: list[Any]) -> str:
    """Format several values the way a console call prints its arguments."""
    return " ".join(format_value(v) for v in values)


def decode_value(descriptor: Any) -> Any:
    """Decode a value descriptor emitted by the sandbox harness.

    Descriptor kinds:

    * ``{"kind": "null"}`` / ``{"kind": "undefined"}``
    * ``{"kind": "json", "json": "<JSON.stringify(value, null, 2) output>"}``
      for objects
    * ``{"kind": "text", "text": "<String(value)>"}`` for everything else

    Object descriptors are returned as the runtime's own indented JSON text,
    so numbers keep their JavaScript spelling (``1e-7``, not ``1e-07``).
    """
    if not isinstance(descriptor, dict):
        return str(descriptor)

    kind = descriptor.get("kind")
    if kind == "null":
        return None
    if kind == "undefined":
        return UNDEFINED
    if kind == "json":
        return str(descriptor.get("json", ""))
    return str(descriptor.get("text", ""))


def _coerce(value: Any) -> str:
    try:
        return str(value)
    except Exception:  # noqa: BLE001 - formatting must be total
        return object.__repr__(value)
