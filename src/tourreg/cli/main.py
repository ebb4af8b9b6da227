"""CLI entry point for tourreg.

Invoked as::

    tourreg [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m tourreg.cli.main

Commands
--------
shell       Interactive registry shell
run         Execute a file of shell commands
locations   List the known locations
version     Show version information

The registry lives for one invocation: ``shell`` and ``run`` each start
from an empty registry.
"""
from __future__ import annotations

import logging
import sys
from typing import TextIO

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from tourreg.config import LOG_LEVELS, Settings

console = Console(highlight=False)
err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    """Send ``tourreg`` log records to stderr through Rich."""
    logger = logging.getLogger("tourreg")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(
        RichHandler(console=err_console, show_path=False, rich_tracebacks=True)
    )
    logger.setLevel(level)


def _settings(ctx: click.Context) -> Settings:
    settings = ctx.find_object(Settings)
    return settings if settings is not None else Settings.from_env()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="tourreg")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level for diagnostics on stderr (default: $TOURREG_LOG_LEVEL or WARNING).",
)
@click.option("--no-color", is_flag=True, default=False, help="Print output without styles")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, no_color: bool) -> None:
    """Activity operator registry: operators, activities and their reviews."""
    settings = Settings.from_env().override(
        log_level=log_level, color=False if no_color else None
    )
    _configure_logging(settings.log_level)
    ctx.obj = settings


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from tourreg import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]tourreg[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# locations command
# ---------------------------------------------------------------------------


@cli.command(name="locations")
def locations_command() -> None:
    """List every location an operator can be created at."""
    from tourreg.model.places import Location

    table = Table(title="Locations")
    table.add_column("Abbreviation", style="bold")
    table.add_column("Te reo Māori")
    table.add_column("English")
    for location in Location:
        table.add_row(location.abbreviation, location.te_reo_name, location.english_name)
    console.print(table)


# ---------------------------------------------------------------------------
# shell command
# ---------------------------------------------------------------------------


@cli.command(name="shell")
@click.pass_context
def shell_command(ctx: click.Context) -> None:
    """Start an interactive shell on an empty registry.

    Type 'help' for the list of commands and 'exit' (or end of input) to leave.
    """
    from tourreg.cli.session import Session

    settings = _settings(ctx)
    session = Session(console, settings=settings)
    console.print(Text("Type 'help' to list the available commands.", style="dim"))

    while not session.finished:
        try:
            line = console.input(settings.prompt)
        except EOFError:
            break
        except KeyboardInterrupt:
            console.print()
            break
        session.execute(line)


# ---------------------------------------------------------------------------
# run command
# ---------------------------------------------------------------------------


@cli.command(name="run")
@click.argument("script", type=click.File("r", encoding="utf-8"))
@click.option("--echo", is_flag=True, default=False, help="Print each command before its output")
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with status 1 if any line was an unknown or malformed command",
)
@click.pass_context
def run_command(ctx: click.Context, script: TextIO, echo: bool, strict: bool) -> None:
    """Execute shell commands from a file against one registry.

    SCRIPT is the path to a command file, or '-' to read standard input.

    Examples:

    \b
        tourreg run demo.txt
        tourreg run --echo --strict demo.txt
    """
    from tourreg.cli.session import Session

    settings = _settings(ctx)
    session = Session(console, settings=settings)

    for raw_line in script:
        line = raw_line.rstrip("\n")
        if echo and line.strip():
            console.print(Text(f"{settings.prompt}{line}", style="dim"), soft_wrap=True)
        session.execute(line)
        if session.finished:
            break

    if strict and session.error_count:
        err_console.print(
            f"[red]Error:[/red] {session.error_count} command line(s) could not be run"
        )
        sys.exit(1)


if __name__ == "__main__":
    cli()
