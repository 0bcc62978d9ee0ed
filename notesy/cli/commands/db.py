"""
Database Commands.
"""

import typer
from rich.console import Console
from sqlalchemy.exc import SQLAlchemyError

from notesy.cli.runner import run_with_database
from notesy.core.exceptions import ApplicationError

app = typer.Typer(help="Database commands")
console = Console()


@app.command()
def init() -> None:
    """
    Create the database tables.

    Safe to run repeatedly; existing tables and data are kept.
    """
    from notesy.core.config import get_database_url

    async def _noop() -> None:
        return None

    try:
        run_with_database(_noop)
    except (ApplicationError, SQLAlchemyError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Database ready:[/green] {get_database_url()}")
