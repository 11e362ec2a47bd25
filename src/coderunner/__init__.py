"""coderunner — sandboxed multi-language code execution."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from coderunner.config import RunnerSettings as RunnerSettings
    from coderunner.service import CodeRunner as CodeRunner

_LAZY_EXPORTS = {
    "CodeRunner": "coderunner.service",
    "RunnerSettings": "coderunner.config",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'coderunner' has no attribute {name!r}")
