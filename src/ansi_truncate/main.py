"""Main entry point for ansi-truncate."""

import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from ansi_truncate import __version__
from ansi_truncate.core.truncator import Truncator
from ansi_truncate.exceptions import UnsupportedPositionError
from ansi_truncate.storage.config import ConfigStorage
from ansi_truncate.utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="ansi-truncate",
    help="Truncate text to a display width, keeping ANSI styling intact",
    add_completion=False,
    no_args_is_help=True,
)
config_app = typer.Typer(help="Manage the configuration file", no_args_is_help=True)

# Register subcommands
app.add_typer(config_app, name="config")

console = Console(stderr=True)
logger = get_logger(__name__)


def config_option():
    return typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (default: $XDG_CONFIG_HOME/ansi-truncate/config.yaml)",
    )


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold cyan]ansi-truncate[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


def parse_position(value: str) -> object:
    """Convert a numeric position option to an int offset."""
    return int(value) if value.isdigit() else value


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Console log level"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write debug logs to a file"),
) -> None:
    """ansi-truncate: width-aware text truncation.

    Use 'ansi-truncate truncate "text" -l 20' to truncate a string.
    Use 'ansi-truncate config show' to inspect the configuration.
    """
    setup_logging(level=log_level, log_file=log_file, console=console)


@app.command("truncate")
def truncate_command(
    text: Optional[str] = typer.Argument(
        None, help="Text to truncate; reads lines from stdin when omitted or '-'"
    ),
    length: Optional[int] = typer.Option(
        None, "--length", "-l", min=0, help="Display width to truncate at"
    ),
    position: Optional[str] = typer.Option(
        None, "--position", "-p", help="start, end, middle, ends or a column offset"
    ),
    separator: Optional[str] = typer.Option(
        None, "--separator", "-s", help="Regex for word boundaries"
    ),
    omission: Optional[str] = typer.Option(
        None, "--omission", "-o", help="Marker for omitted content"
    ),
    config_path: Optional[Path] = config_option(),
) -> None:
    """Truncate text to a display width."""
    truncator = Truncator(ConfigStorage(config_path).load())

    overrides: dict = {}
    if length is not None:
        overrides["length"] = length
    if position is not None:
        overrides["position"] = parse_position(position)
    if separator is not None:
        overrides["separator"] = separator
    if omission is not None:
        overrides["omission"] = omission

    lines = [text] if text not in (None, "-") else (line.rstrip("\n") for line in sys.stdin)

    try:
        for line in lines:
            typer.echo(truncator.truncate(line, **overrides))
    except UnsupportedPositionError as e:
        logger.debug(f"Rejected position {e.position!r}")
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=2)


@config_app.command("show")
def config_show(config_path: Optional[Path] = config_option()) -> None:
    """Print the effective configuration."""
    config = ConfigStorage(config_path).load()
    typer.echo(
        yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False, allow_unicode=True),
        nl=False,
    )


@config_app.command("init")
def config_init(
    config_path: Optional[Path] = config_option(),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write the default configuration file."""
    storage = ConfigStorage(config_path)
    if storage.exists and not force:
        console.print(f"[yellow]{escape(str(storage.config_path))} already exists (use --force)[/yellow]")
        raise typer.Exit(code=1)

    storage.reset()
    console.print(f"[green]Wrote {escape(str(storage.config_path))}[/green]")


if __name__ == "__main__":
    app()
