"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from coderunner.cli_commands.catalog import languages, template
    from coderunner.cli_commands.check import format_cmd, validate
    from coderunner.cli_commands.run import run

    cli.add_command(run)
    cli.add_command(validate)
    cli.add_command(format_cmd)
    cli.add_command(languages)
    cli.add_command(template)
