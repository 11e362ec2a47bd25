"""Language strategy registry.

Maps every :class:`~coderunner.models.Language` to its
:class:`~coderunner.languages.base.LanguageStrategy`.  The registry is
built once and never mutated afterwards, so concurrent readers need no
locking.
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from coderunner.config import RunnerSettings
from coderunner.errors import UnsupportedLanguageError
from coderunner.languages.base import LanguageStrategy
from coderunner.languages.common import IdentityFormatter, PassthroughValidator
from coderunner.languages.javascript import JavaScriptExecutor, JavaScriptFormatter, JavaScriptValidator
from coderunner.languages.jsondata import JsonExecutor, JsonFormatter, JsonValidator
from coderunner.languages.markup import (
    CssFormatter,
    CssValidator,
    HtmlFormatter,
    HtmlValidator,
    css_preview,
    html_preview,
    markdown_preview,
)
from coderunner.languages.python import PythonStubExecutor, python_validator
from coderunner.languages.typescript import TypeScriptExecutor, TypeScriptValidator
from coderunner.models import Language
from coderunner.sandbox.node import NodeSandbox


class StrategyRegistry:
    """Immutable lookup from language identifier to strategy."""

    def __init__(self, strategies: Iterable[LanguageStrategy]) -> None:
        table = {s.language: s for s in strategies}
        missing = [lang.value for lang in Language if lang not in table]
        if missing:
            msg = f"No strategy registered for: {', '.join(missing)}"
            raise ValueError(msg)
        self._strategies = MappingProxyType(table)

    def get(self, language: str | Language) -> LanguageStrategy:
        """Return the strategy for *language*.

        Raises:
            UnsupportedLanguageError: If *language* is not a known identifier.
        """
        try:
            key = Language(language)
        except ValueError:
            raise UnsupportedLanguageError(str(language)) from None
        return self._strategies[key]

    def languages(self) -> list[Language]:
        return list(self._strategies)

    def __contains__(self, language: object) -> bool:
        try:
            return Language(language) in self._strategies
        except ValueError:
            return False


def build_default_registry(
    settings: RunnerSettings | None = None,
    *,
    sandbox: NodeSandbox | None = None,
) -> StrategyRegistry:
    """Return a registry covering every supported language."""
    settings = settings or RunnerSettings()
    sandbox = sandbox or NodeSandbox(settings)
    javascript = JavaScriptExecutor(sandbox, settings.execution_timeout_ms)

    return StrategyRegistry([
        LanguageStrategy(
            Language.JAVASCRIPT,
            executor=javascript,
            validator=JavaScriptValidator(sandbox),
            formatter=JavaScriptFormatter(),
        ),
        LanguageStrategy(
            Language.TYPESCRIPT,
            executor=TypeScriptExecutor(javascript),
            validator=TypeScriptValidator(sandbox),
            formatter=IdentityFormatter(),
        ),
        LanguageStrategy(
            Language.PYTHON,
            executor=PythonStubExecutor(),
            validator=python_validator(),
            formatter=IdentityFormatter(),
        ),
        LanguageStrategy(
            Language.HTML,
            executor=html_preview(),
            validator=HtmlValidator(),
            formatter=HtmlFormatter(),
        ),
        LanguageStrategy(
            Language.CSS,
            executor=css_preview(),
            validator=CssValidator(),
            formatter=CssFormatter(),
        ),
        LanguageStrategy(
            Language.JSON,
            executor=JsonExecutor(),
            validator=JsonValidator(),
            formatter=JsonFormatter(),
        ),
        LanguageStrategy(
            Language.MARKDOWN,
            executor=markdown_preview(),
            validator=PassthroughValidator(),
            formatter=IdentityFormatter(),
        ),
    ])
