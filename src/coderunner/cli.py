"""coderunner CLI entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.logging import RichHandler

from coderunner import __version__
from coderunner.cli_commands._output import err_console


@click.group()
@click.version_option(version=__version__, prog_name="coderunner")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file with runner settings.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--telemetry", is_flag=True, help="Print trace spans to stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool, telemetry: bool) -> None:
    """coderunner — run, check and format code in a sandbox."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )

    if telemetry:
        from coderunner.telemetry import configure_telemetry

        try:
            configure_telemetry()
        except ImportError as exc:
            raise click.ClickException(str(exc)) from exc

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


# Register subcommands
from coderunner.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
