#!/usr/bin/env python3
"""
Heyo Notes CLI.

Terminal client for the notes API, plus server and migration commands.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    python cli.py --help

    # Notes (requires running server)
    python cli.py notes home
    python cli.py notes create -t "Hi" -c "World" -C Sely
    python cli.py notes list --search hi --category Sely
    python cli.py notes show <id>
    python cli.py notes edit <id> --title "New title"
    python cli.py notes favorite <id>
    python cli.py notes delete <id> --yes
    python cli.py notes export -o backups/

    # Server and database
    python cli.py server start --reload
    python cli.py db upgrade

Options:
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
"""

import sys
from pathlib import Path

import typer
from rich.console import Console

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from heyo.cli.commands import db_app, notes_app, server_app  # noqa: E402

app = typer.Typer(
    name="cli",
    help="Heyo Notes CLI - notes, server and database commands.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(notes_app, name="notes")
app.add_typer(server_app, name="server")
app.add_typer(db_app, name="db")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Heyo Notes CLI.

    Notes screens talk to the backend over HTTP; server and db
    commands manage the backend itself.
    """
    from heyo.backend.core.config import validate_project_root
    from heyo.backend.core.logging import setup_logging

    validate_project_root()

    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging(level="WARNING", format_type="console")


if __name__ == "__main__":
    app()
