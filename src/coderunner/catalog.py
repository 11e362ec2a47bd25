"""Static language catalog — display metadata and starter templates."""

from __future__ import annotations

from coderunner.errors import TemplateNotFoundError
from coderunner.models import CodeTemplate, Language, LanguageInfo

# ---------------------------------------------------------------------------
# Display metadata, in presentation order
# ---------------------------------------------------------------------------

LANGUAGES: tuple[LanguageInfo, ...] = (
    LanguageInfo(id=Language.JAVASCRIPT, name="JavaScript", version="ES2020", icon="⚡"),
    LanguageInfo(id=Language.TYPESCRIPT, name="TypeScript", version="4.9", icon="🔷"),
    LanguageInfo(id=Language.PYTHON, name="Python", version="3.9", icon="🐍"),
    LanguageInfo(id=Language.HTML, name="HTML", version="5", icon="🌐"),
    LanguageInfo(id=Language.CSS, name="CSS", version="3", icon="🎨"),
    LanguageInfo(id=Language.JSON, name="JSON", version="RFC 7159", icon="📄"),
    LanguageInfo(id=Language.MARKDOWN, name="Markdown", version="CommonMark", icon="📝"),
)

# ---------------------------------------------------------------------------
# Starter templates
# ---------------------------------------------------------------------------

TEMPLATES: dict[Language, CodeTemplate] = {
    Language.JAVASCRIPT: CodeTemplate(
        name="JavaScript Function",
        code=(
            "function greet(name) {\n"
            "  return `Hello, ${name}!`;\n"
            "}\n"
            "\n"
            'console.log(greet("World"));'
        ),
        description="Basic JavaScript function template",
    ),
    Language.TYPESCRIPT: CodeTemplate(
        name="TypeScript Interface",
        code=(
            "interface User {\n"
            "  name: string;\n"
            "  age: number;\n"
            "}\n"
            "\n"
            "function greetUser(user: User): string {\n"
            "  return `Hello, ${user.name}! You are ${user.age} years old.`;\n"
            "}"
        ),
        description="TypeScript interface and function template",
    ),
    Language.PYTHON: CodeTemplate(
        name="Python Class",
        code=(
            "class Calculator:\n"
            "    def __init__(self):\n"
            "        self.result = 0\n"
            "\n"
            "    def add(self, x):\n"
            "        self.result += x\n"
            "        return self.result\n"
            "\n"
            "calc = Calculator()\n"
            "print(calc.add(5))"
        ),
        description="Python class template",
    ),
    Language.HTML: CodeTemplate(
        name="HTML Page",
        code=(
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            "<head>\n"
            '    <meta charset="UTF-8">\n'
            '    <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
            "    <title>My Page</title>\n"
            "</head>\n"
            "<body>\n"
            "    <h1>Hello World!</h1>\n"
            "    <p>Welcome to my page.</p>\n"
            "</body>\n"
            "</html>"
        ),
        description="Basic HTML page template",
    ),
}


def list_languages() -> list[LanguageInfo]:
    return [info.model_copy() for info in LANGUAGES]


def get_template(language: str) -> CodeTemplate:
    """Return the starter template for *language*.

    Raises:
        TemplateNotFoundError: If the language is unknown or has no template.
    """
    try:
        return TEMPLATES[Language(language)].model_copy()
    except (ValueError, KeyError):
        raise TemplateNotFoundError(language) from None
