"""Tests for StrategyRegistry."""

from __future__ import annotations

import pytest

from coderunner.errors import UnsupportedLanguageError
from coderunner.languages import Executor, Formatter, LanguageStrategy, Validator
from coderunner.languages.common import IdentityFormatter, PassthroughValidator
from coderunner.languages.python import PythonStubExecutor
from coderunner.models import Language
from coderunner.registry import StrategyRegistry, build_default_registry


class TestDefaultRegistry:
    def test_covers_every_language(self) -> None:
        registry = build_default_registry()
        assert set(registry.languages()) == set(Language)

    def test_strategies_satisfy_protocols(self) -> None:
        registry = build_default_registry()
        for language in Language:
            strategy = registry.get(language)
            assert strategy.language is language
            assert isinstance(strategy.executor, Executor)
            assert isinstance(strategy.validator, Validator)
            assert isinstance(strategy.formatter, Formatter)

    def test_lookup_by_string(self) -> None:
        registry = build_default_registry()
        assert registry.get("json").language is Language.JSON

    def test_unknown_language(self) -> None:
        registry = build_default_registry()
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            registry.get("cobol")
        assert exc_info.value.language == "cobol"

    def test_lookup_is_case_sensitive(self) -> None:
        with pytest.raises(UnsupportedLanguageError):
            build_default_registry().get("JSON")

    def test_contains(self) -> None:
        registry = build_default_registry()
        assert "markdown" in registry
        assert "cobol" not in registry


class TestStrategyRegistry:
    def test_incomplete_registry_rejected(self) -> None:
        strategy = LanguageStrategy(
            Language.PYTHON,
            executor=PythonStubExecutor(),
            validator=PassthroughValidator(),
            formatter=IdentityFormatter(),
        )
        with pytest.raises(ValueError, match="No strategy registered"):
            StrategyRegistry([strategy])

    def test_strategy_is_frozen(self) -> None:
        strategy = build_default_registry().get("python")
        with pytest.raises(AttributeError):
            strategy.language = Language.JSON  # type: ignore[misc]
