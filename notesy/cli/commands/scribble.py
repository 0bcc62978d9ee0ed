"""
Scribble Commands.

Inspect, load and clear the scribble pad.
"""

from pathlib import Path

import typer
from pydantic import ValidationError as SchemaValidationError
from rich.console import Console

from notesy.cli.render import scribble_panel
from notesy.cli.runner import run_with_database
from notesy.core.exceptions import ApplicationError, NotFoundError
from notesy.schemas.scribble import Scribble

app = typer.Typer(help="Scribble pad commands")
console = Console()


@app.command()
def show() -> None:
    """
    Show a summary of the stored scribble.
    """
    from notesy.core.dependencies import get_scribble_service

    try:
        scribble = run_with_database(lambda: get_scribble_service().get_scribble())
    except NotFoundError:
        console.print("[dim]The scribble pad is empty.[/dim]")
        return
    except ApplicationError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    console.print(scribble_panel(scribble))


@app.command()
def load(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Scribble JSON file"),
) -> None:
    """
    Replace the scribble with a drawing from a JSON file.
    """
    from notesy.core.dependencies import get_scribble_service

    try:
        scribble = Scribble.model_validate_json(path.read_text(encoding="utf-8"))
    except SchemaValidationError as e:
        console.print(f"[red]Invalid scribble file: {e.error_count()} error(s)[/red]")
        raise typer.Exit(1)

    try:
        run_with_database(lambda: get_scribble_service().store_scribble(scribble))
    except ApplicationError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Scribble stored[/green] ({len(scribble.strokes)} strokes)")


@app.command()
def clear() -> None:
    """
    Clear the scribble pad.
    """
    from notesy.core.dependencies import get_scribble_service

    try:
        run_with_database(lambda: get_scribble_service().delete_scribble())
    except ApplicationError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    console.print("[yellow]Scribble cleared[/yellow]")
