"""Shared CLI helpers and output formatters."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import IO, TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from coderunner.models import ExecutionResult, FormatResult, LanguageInfo, ValidationResult

if TYPE_CHECKING:
    from coderunner.service import CodeRunner

console = Console()
err_console = Console(stderr=True)

SUFFIX_LANGUAGES: dict[str, str] = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".py": "python",
    ".html": "html",
    ".htm": "html",
    ".css": "css",
    ".json": "json",
    ".md": "markdown",
    ".markdown": "markdown",
}


def resolve_language(source: IO[str], language: str | None) -> str:
    """Return *language*, or infer it from the source file's suffix."""
    if language:
        return language
    name = getattr(source, "name", "") or ""
    inferred = SUFFIX_LANGUAGES.get(Path(str(name)).suffix.lower())
    if inferred is None:
        raise click.UsageError("Cannot infer the language; pass --language.")
    return inferred


def build_runner(ctx: click.Context) -> CodeRunner:
    """Create a :class:`CodeRunner` from the group's ``--config`` option."""
    from coderunner.config import load_settings
    from coderunner.errors import ConfigError
    from coderunner.service import CodeRunner

    config_path = (ctx.obj or {}).get("config_path")
    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        sys.exit(1)
    return CodeRunner(settings)


def print_execution_result(result: ExecutionResult, *, as_json: bool = False) -> None:
    """Print captured output followed by a one-line status."""
    if as_json:
        console.print_json(result.model_dump_json())
        return

    if result.output:
        console.out(result.output, highlight=False)
    if result.success:
        console.print(f"[green]✓[/green] {result.language} finished in {result.execution_time}")
    else:
        console.print(f"[red]✗ Error:[/red] {escape(result.error or '')}", highlight=False)
        console.print(f"  {result.language} stopped after {result.execution_time}")


def print_validation_result(result: ValidationResult, *, as_json: bool = False) -> None:
    if as_json:
        console.print_json(result.model_dump_json())
        return

    if result.is_valid:
        console.print("[green]Valid[/green]")
    else:
        console.print("[red]Invalid[/red]")
    for message in result.errors:
        console.print(f"  [red]error:[/red] {escape(message)}", highlight=False)
    for message in result.warnings:
        console.print(f"  [yellow]warning:[/yellow] {escape(message)}", highlight=False)


def print_format_changes(result: FormatResult) -> None:
    if not result.changes:
        err_console.print("[dim]No changes.[/dim]")
        return
    for change in result.changes:
        err_console.print(f"[cyan]•[/cyan] {escape(change)}")


def print_languages_table(languages: list[LanguageInfo]) -> None:
    """Pretty-print supported languages as a table."""
    table = Table(title="Supported Languages")
    table.add_column("Id", style="cyan")
    table.add_column("Name")
    table.add_column("Version")
    table.add_column("Icon")

    for info in languages:
        table.add_row(info.id.value, info.name, info.version, info.icon)

    console.print(table)
