"""CLI for stockpile.

Usage:
    python -m stockpile                  # Interactive menu
    python -m stockpile --max-items 25   # Override capacity
    python -m stockpile --plain          # Disable colour output
    python -m stockpile --verbose        # Debug diagnostics on stderr
    python -m stockpile --version
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from stockpile import __version__
from stockpile.config import ENV_MAX_ITEMS, ConfigError, load_settings
from stockpile.errors import InputClosed
from stockpile.menu import Menu
from stockpile.store import InventoryStore

app = typer.Typer(
    name="stockpile",
    help="In-memory inventory tracker with an interactive menu",
    add_completion=False,
)
console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"stockpile {__version__}")
        raise typer.Exit()


@app.command()
def main(
    max_items: Optional[int] = typer.Option(
        None, "--max-items", min=1, help="Maximum number of items (env STOCKPILE_MAX_ITEMS, default 10)",
    ),
    plain: bool = typer.Option(False, "--plain", help="Disable colour output (env STOCKPILE_PLAIN)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug diagnostics to stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Start the interactive inventory menu."""
    env = dict(os.environ)
    if max_items is not None:
        # the option wins, so a bad env value must not block it
        env.pop(ENV_MAX_ITEMS, None)
    try:
        settings = load_settings(env)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {e}")
        raise typer.Exit(2)

    if max_items is not None:
        settings.max_items = max_items
    if plain:
        settings.plain = True

    _configure_logging(verbose)
    log = logging.getLogger("stockpile")
    log.debug("starting session: max_items=%d plain=%s", settings.max_items, settings.plain)

    out = Console(color_system=None if settings.plain else "auto", highlight=False)
    menu = Menu(InventoryStore(max_items=settings.max_items), out)
    try:
        menu.run()
    except InputClosed:
        console.print("[yellow]Input closed before Exit was chosen.[/yellow]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
