"""Per-language strategies."""

from coderunner.languages.base import Executor, Formatter, LanguageStrategy, Validator
from coderunner.languages.common import IdentityFormatter, PassthroughValidator, PreviewExecutor
from coderunner.languages.javascript import JavaScriptExecutor, JavaScriptFormatter, JavaScriptValidator
from coderunner.languages.jsondata import JsonExecutor, JsonFormatter, JsonValidator
from coderunner.languages.markup import CssFormatter, CssValidator, HtmlFormatter, HtmlValidator
from coderunner.languages.python import PythonStubExecutor
from coderunner.languages.typescript import TypeScriptExecutor, TypeScriptValidator, strip_type_syntax

__all__ = [
    "CssFormatter",
    "CssValidator",
    "Executor",
    "Formatter",
    "HtmlFormatter",
    "HtmlValidator",
    "IdentityFormatter",
    "JavaScriptExecutor",
    "JavaScriptFormatter",
    "JavaScriptValidator",
    "JsonExecutor",
    "JsonFormatter",
    "JsonValidator",
    "LanguageStrategy",
    "PassthroughValidator",
    "PreviewExecutor",
    "PythonStubExecutor",
    "TypeScriptExecutor",
    "TypeScriptValidator",
    "Validator",
    "strip_type_syntax",
]
