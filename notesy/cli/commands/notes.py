"""
Note Commands.

One-shot note operations. Deletes made here are permanent: the undo
slot only lives as long as the process, so use the shell for undo.
"""

from typing import NoReturn, Optional

import typer
from pydantic import ValidationError as SchemaValidationError
from rich.console import Console

from notesy.cli.render import note_panel, notes_table, parse_color
from notesy.cli.runner import run_with_database
from notesy.core.exceptions import ApplicationError
from notesy.core.utils import now_millis
from notesy.schemas.note import Note, NoteCreate
from notesy.schemas.order import NoteOrder, OrderDirection, note_order_from_str

app = typer.Typer(help="Create, list and delete notes")
console = Console()


def resolve_order(order: Optional[str], ascending: Optional[bool]) -> NoteOrder | None:
    """Build a NoteOrder from CLI options; None means the configured default."""
    if order is None and ascending is None:
        return None

    from notesy.core.dependencies import get_default_order

    default = get_default_order()
    direction = default.direction
    if ascending is not None:
        direction = OrderDirection.ASCENDING if ascending else OrderDirection.DESCENDING

    if order is None:
        return default.with_direction(direction)
    return note_order_from_str(order, direction)


def _fail(error: ApplicationError) -> NoReturn:
    console.print(f"[red]Error: {error.message}[/red]")
    raise typer.Exit(1)


@app.command("list")
def list_notes(
    order: Optional[str] = typer.Option(
        None, "--order", "-o", help="Sort by title, date or color (optionally field:asc|desc)",
    ),
    ascending: Optional[bool] = typer.Option(
        None, "--asc/--desc", help="Sort direction",
    ),
) -> None:
    """
    List notes.

    Shows every note sorted by the requested order.
    """
    from notesy.core.dependencies import get_default_order, get_note_service

    async def _list() -> tuple[list[Note], NoteOrder]:
        effective = resolve_order(order, ascending) or get_default_order()
        stream = get_note_service().observe_notes(effective)
        try:
            snapshot = await anext(stream)
        finally:
            await stream.aclose()
        return snapshot, effective

    try:
        notes, effective = run_with_database(_list)
    except ApplicationError as e:
        _fail(e)

    if not notes:
        console.print("[dim]No notes yet.[/dim]")
        return
    console.print(notes_table(notes, title=f"Notes ({effective})"))


@app.command()
def add(
    title: str = typer.Argument(..., help="Note title"),
    content: str = typer.Option("", "--content", "-c", help="Note content"),
    color: Optional[str] = typer.Option(None, "--color", help="#RRGGBB, #AARRGGBB or integer"),
) -> None:
    """
    Add a note.
    """
    from notesy.core.dependencies import get_note_service

    try:
        data = NoteCreate(
            title=title,
            content=content,
            color=parse_color(color) if color else 0,
        )
        note = run_with_database(lambda: get_note_service().insert_note(data.to_note()))
    except ApplicationError as e:
        _fail(e)
    except SchemaValidationError as e:
        console.print(f"[red]Invalid note: {e.error_count()} error(s)[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Note added:[/green] {note.id}")


@app.command()
def show(note_id: str = typer.Argument(..., help="Note ID")) -> None:
    """
    Show a single note.
    """
    from notesy.core.dependencies import get_note_service

    try:
        note = run_with_database(lambda: get_note_service().get_note(note_id))
    except ApplicationError as e:
        _fail(e)

    console.print(note_panel(note))


@app.command()
def edit(
    note_id: str = typer.Argument(..., help="Note ID"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="New content"),
    color: Optional[str] = typer.Option(None, "--color", help="New color"),
) -> None:
    """
    Replace fields of an existing note.

    The note is stored again as a whole with a fresh timestamp.
    """
    from notesy.core.dependencies import get_note_service

    async def _edit() -> Note:
        service = get_note_service()
        current = await service.get_note(note_id)
        changes: dict = {"timestamp": now_millis()}
        if title is not None:
            changes["title"] = title
        if content is not None:
            changes["content"] = content
        if color is not None:
            changes["color"] = parse_color(color)
        return await service.insert_note(current.model_copy(update=changes))

    try:
        note = run_with_database(_edit)
    except ApplicationError as e:
        _fail(e)

    console.print(note_panel(note))


@app.command()
def delete(note_id: str = typer.Argument(..., help="Note ID")) -> None:
    """
    Delete a note permanently.

    Deleting a note that does not exist is not an error.
    """
    from notesy.core.dependencies import get_note_service

    try:
        run_with_database(lambda: get_note_service().delete_note(Note(id=note_id)))
    except ApplicationError as e:
        _fail(e)

    console.print(f"[yellow]Note deleted:[/yellow] {note_id}")
