"""Root Typer app — global options and command group registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.logging import RichHandler

from netbox_mapper import __version__
from netbox_mapper.client.errors import err_console
from netbox_mapper.commands import config_cmd, resource

app = typer.Typer(
    name="netbox-mapper",
    help="Typed CRUD client for the NetBox REST API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"netbox-mapper {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route the package loggers through Rich; DEBUG when verbose."""
    logger = logging.getLogger("netbox_mapper")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every API request."),
) -> None:
    """netbox-mapper — manage NetBox objects from the command line."""
    setup_logging(verbose)


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(resource.app, name="resource")
app.command("kinds")(resource.kinds)


def main() -> None:
    app()
