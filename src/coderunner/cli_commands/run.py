"""``coderunner run``: execute a source file in the sandbox."""

from __future__ import annotations

import asyncio
import sys
from typing import IO

import click

from coderunner.cli_commands._output import build_runner, print_execution_result, resolve_language
from coderunner.models import ExecutionRequest


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--language", "-l", default=None, help="Language id; inferred from the file suffix if omitted.")
@click.option("--input", "input_text", default="", help="Value bound to `input` inside the sandbox.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_context
def run(
    ctx: click.Context,
    source: IO[str],
    language: str | None,
    input_text: str,
    as_json: bool,
) -> None:
    """Execute SOURCE (a file path, or - for stdin)."""
    lang = resolve_language(source, language)
    request = ExecutionRequest(code=source.read(), language=lang, input=input_text)
    runner = build_runner(ctx)

    result = asyncio.run(runner.execute_request(request))

    print_execution_result(result, as_json=as_json)
    if not result.success:
        sys.exit(1)
