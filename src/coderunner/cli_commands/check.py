"""``coderunner validate`` and ``coderunner format``."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import IO

import click
from rich.markup import escape

from coderunner.cli_commands._output import (
    build_runner,
    console,
    print_format_changes,
    print_validation_result,
    resolve_language,
)
from coderunner.errors import CodeRunnerError


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--language", "-l", default=None, help="Language id; inferred from the file suffix if omitted.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_context
def validate(ctx: click.Context, source: IO[str], language: str | None, as_json: bool) -> None:
    """Check SOURCE for syntax problems without running it."""
    lang = resolve_language(source, language)
    runner = build_runner(ctx)

    result = asyncio.run(runner.validate(source.read(), lang))

    print_validation_result(result, as_json=as_json)
    if not result.is_valid:
        sys.exit(1)


@click.command("format")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--language", "-l", default=None, help="Language id; inferred from the file suffix if omitted.")
@click.option("--write", "-w", is_flag=True, help="Rewrite SOURCE in place instead of printing.")
@click.pass_context
def format_cmd(ctx: click.Context, source: IO[str], language: str | None, write: bool) -> None:
    """Format SOURCE and print the result."""
    lang = resolve_language(source, language)
    runner = build_runner(ctx)

    try:
        result = runner.format(source.read(), lang)
    except CodeRunnerError as exc:
        console.print(f"[red]Format error:[/red] {escape(str(exc))}", highlight=False)
        sys.exit(1)

    if write:
        if getattr(source, "name", "-") in ("-", "<stdin>"):
            raise click.UsageError("--write needs a file path, not stdin.")
        Path(source.name).write_text(result.code, encoding="utf-8")
    else:
        console.out(result.code, highlight=False)
    print_format_changes(result)
