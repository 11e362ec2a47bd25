"""``coderunner languages`` and ``coderunner template``."""

from __future__ import annotations

import json
import sys

import click
from rich.markup import escape

from coderunner import catalog
from coderunner.cli_commands._output import console, print_languages_table
from coderunner.errors import TemplateNotFoundError


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print the list as JSON.")
def languages(as_json: bool) -> None:
    """List supported languages."""
    infos = catalog.list_languages()
    if as_json:
        console.print_json(json.dumps([info.model_dump(mode="json") for info in infos]))
        return
    print_languages_table(infos)


@click.command()
@click.argument("language")
def template(language: str) -> None:
    """Print the starter template for LANGUAGE."""
    try:
        tpl = catalog.get_template(language)
    except TemplateNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        sys.exit(1)

    console.print(f"[bold]{escape(tpl.name)}[/bold]: {escape(tpl.description)}", highlight=False)
    console.out(tpl.code, highlight=False)
