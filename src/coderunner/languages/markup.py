"""HTML, CSS and Markdown strategies.

None of these languages can be executed; Execute returns a preview.
Validation is heuristic and only ever produces advisory warnings.
"""

from __future__ import annotations

import re

from coderunner.languages.common import PreviewExecutor
from coderunner.models import FormatResult, ValidationResult

# Elements that never take a closing tag.
_VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})

_OPEN_TAG_RE = re.compile(r"<([A-Za-z][\w:-]*)[^>]*>")
_CLOSE_TAG_RE = re.compile(r"</[^>]*>")
_BETWEEN_TAGS_RE = re.compile(r">\s*<")
_CSS_OPEN_RE = re.compile(r"\s*\{\s*")
_CSS_CLOSE_RE = re.compile(r";\s*\}")


def html_preview() -> PreviewExecutor:
    return PreviewExecutor(
        "HTML Preview:",
        "html",
        "Note: This is a preview. To see the rendered result, copy the HTML to a file "
        "and open it in a browser.",
    )


def css_preview() -> PreviewExecutor:
    return PreviewExecutor(
        "CSS Code:",
        "css",
        "Note: This is a preview. To see the rendered result, copy the CSS to a file "
        "and link it to an HTML document.",
    )


def markdown_preview() -> PreviewExecutor:
    return PreviewExecutor(
        "Markdown Preview:",
        "markdown",
        "Note: This is a preview. To see the rendered result, copy the markdown to a file "
        "and open it in a markdown viewer.",
    )


def count_opening_tags(code: str) -> int:
    """Count tags that expect a matching close.

    Declarations (``<!DOCTYPE>``, comments), self-closed tags and void
    elements are skipped.
    """
    count = 0
    for match in _OPEN_TAG_RE.finditer(code):
        if match.group(0).endswith("/>"):
            continue
        if match.group(1).lower() in _VOID_ELEMENTS:
            continue
        count += 1
    return count


class HtmlValidator:
    async def validate(self, code: str) -> ValidationResult:
        warnings: list[str] = []

        if "<html" not in code and "<body" not in code:
            warnings.append("Missing HTML structure tags")

        if count_opening_tags(code) != len(_CLOSE_TAG_RE.findall(code)):
            warnings.append("Possible unclosed HTML tags")

        return ValidationResult(is_valid=True, warnings=warnings)


class HtmlFormatter:
    """Puts adjacent tags on separate lines."""

    def format(self, code: str) -> FormatResult:
        formatted = _BETWEEN_TAGS_RE.sub(">\n<", code)
        if formatted == code:
            return FormatResult(code=code)
        return FormatResult(code=formatted, changes=["Added line breaks between HTML tags"])


class CssValidator:
    async def validate(self, code: str) -> ValidationResult:
        if "{" not in code or "}" not in code:
            return ValidationResult(is_valid=True, warnings=["Missing CSS braces"])
        return ValidationResult()


class CssFormatter:
    """Normalises spacing around rule braces."""

    def format(self, code: str) -> FormatResult:
        formatted = _CSS_OPEN_RE.sub(" {\n  ", code)
        formatted = _CSS_CLOSE_RE.sub(";\n}", formatted)
        if formatted == code:
            return FormatResult(code=code)
        return FormatResult(code=formatted, changes=["Added proper CSS formatting"])
