"""
Notesy CLI.

Command-line client for notes and the scribble pad.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    python cli.py --help                          # Show help

    # Notes
    python cli.py notes list                      # Default order
    python cli.py notes list -o title --asc       # Sorted by title
    python cli.py notes add "Groceries" -c "Milk" --color "#FFAB91"
    python cli.py notes show <id>
    python cli.py notes edit <id> --title "New title"
    python cli.py notes delete <id>               # Permanent

    # Scribble pad
    python cli.py scribble show
    python cli.py scribble load drawing.json
    python cli.py scribble clear

    # Database
    python cli.py db init

    # Interactive mode (live list, undoable deletes)
    python cli.py shell

Options:
    --verbose, -v     Enable verbose output
    --debug           Enable debug mode (detailed logging)
    --help            Show help message
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console

from notesy.cli.commands import db_app, notes_app, scribble_app

app = typer.Typer(
    name="notesy",
    help="Notesy CLI - notes, ordering, undoable deletes and a scribble pad.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(notes_app, name="notes")
app.add_typer(scribble_app, name="scribble")
app.add_typer(db_app, name="db")


@app.command()
def shell(
    order: Optional[str] = typer.Option(
        None, "--order", "-o", help="Initial order: title, date or color (optionally field:asc|desc)",
    ),
) -> None:
    """
    Start interactive shell mode.

    Keeps a live note list and lets you undo deletes.
    """
    from notesy.cli.commands.notes import resolve_order
    from notesy.cli.shell import run_shell
    from notesy.core.exceptions import ApplicationError

    try:
        initial = resolve_order(order, None)
    except ApplicationError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    asyncio.run(run_shell(initial))


@app.command()
def version() -> None:
    """
    Show the application version.
    """
    from notesy import __version__

    console.print(f"notesy {__version__}")


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
    Notesy CLI.

    Notes with interchangeable orderings, undoable deletes and a scribble pad.
    """
    from notesy.core.config import find_project_root
    from notesy.core.logging import setup_logging

    try:
        find_project_root()
    except RuntimeError:
        console.print("[red]Error: .project_root not found. Run from project root.[/red]")
        raise typer.Exit(1)

    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging()
