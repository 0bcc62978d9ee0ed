"""
Interactive Shell Mode.

REPL on top of the notes state coordinator. Unlike the one-shot
commands, the shell keeps a live, ordered view of the notes and an undo
slot, so a delete can be taken back with ``undo`` while the restore
window is open.
"""

import asyncio
import shlex
from typing import Callable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from notesy.cli.render import note_panel, notes_table
from notesy.core.exceptions import ApplicationError, NotFoundError
from notesy.core.logging import get_logger, log_with_source
from notesy.schemas.note import Note
from notesy.schemas.order import NoteOrder, note_order_from_str
from notesy.services.notes_state import (
    DeleteNote,
    DismissRestore,
    NotesStateCoordinator,
    OrderNotes,
    RestoreNote,
)

console = Console()
logger = get_logger(__name__)


class NotesShell:
    """
    Interactive shell for working with notes.

    Notes are addressed by their position in the last listing (#1, #2, ...)
    or by a prefix of their ID.

    Usage:
        shell = NotesShell(coordinator)
        await shell.run()
    """

    def __init__(self, coordinator: NotesStateCoordinator) -> None:
        """Initialize the shell around a started or unstarted coordinator."""
        self.coordinator = coordinator
        self.running = False
        self.commands: dict[str, Callable] = {
            "help": self._cmd_help,
            "list": self._cmd_list,
            "ls": self._cmd_list,
            "add": self._cmd_add,
            "show": self._cmd_show,
            "delete": self._cmd_delete,
            "rm": self._cmd_delete,
            "undo": self._cmd_undo,
            "dismiss": self._cmd_dismiss,
            "order": self._cmd_order,
            "clear": self._cmd_clear,
            "quit": self._cmd_quit,
            "exit": self._cmd_quit,
        }

    async def run(self) -> None:
        """Run the interactive shell."""
        self.running = True
        await self.coordinator.start()

        console.print(Panel(
            "[bold]Notesy Shell[/bold]\n"
            "Type [cyan]help[/cyan] for available commands, [cyan]quit[/cyan] to exit.",
            title="Welcome",
        ))
        console.print()

        while self.running:
            try:
                # read in a worker thread so the undo timer and note stream keep running
                user_input = (await asyncio.to_thread(console.input, "[bold cyan]>[/bold cyan] ")).strip()

                if not user_input:
                    continue

                parts = shlex.split(user_input)
                command = parts[0].lower()
                args = parts[1:]

                if command in self.commands:
                    await self.commands[command](args)
                else:
                    console.print(f"[red]Unknown command: {command}[/red]")
                    console.print("Type [cyan]help[/cyan] for available commands.")

            except KeyboardInterrupt:
                console.print("\n[dim]Use 'quit' to exit[/dim]")
            except EOFError:
                break
            except ApplicationError as e:
                console.print(f"[red]Error: {e.message}[/red]")
            except ValueError as e:
                console.print(f"[red]Error: {e}[/red]")

        console.print("[dim]Goodbye![/dim]")

    def resolve(self, ref: str) -> Note:
        """
        Find a note in the current view by list position ("#2") or ID prefix.

        Raises:
            NotFoundError: If nothing or more than one note matches
        """
        notes = self.coordinator.state.notes
        if ref.startswith("#"):
            position = ref[1:]
            if not position.isdigit() or not 1 <= int(position) <= len(notes):
                raise NotFoundError(f"No note at position {ref}")
            return notes[int(position) - 1]

        matches = [note for note in notes if note.id.startswith(ref)]
        if len(matches) != 1:
            raise NotFoundError(f"No single note matches {ref!r}")
        return matches[0]

    async def _cmd_help(self, args: list[str]) -> None:
        """Display help information."""
        table = Table(title="Available Commands", show_header=True)
        table.add_column("Command", style="cyan")
        table.add_column("Description")

        table.add_row("list", "Show notes in the active order")
        table.add_row("add <title> [content]", "Add a note")
        table.add_row("show <#n|id>", "Show one note")
        table.add_row("delete <#n|id>", "Delete a note (undoable for a short while)")
        table.add_row("undo", "Restore the last deleted note")
        table.add_row("dismiss", "Forget the last deleted note")
        table.add_row("order <field>[:asc|desc]", "Sort by title, date or color")
        table.add_row("clear", "Clear the screen")
        table.add_row("quit / exit", "Exit the shell")

        console.print(table)

    async def _cmd_list(self, args: list[str]) -> None:
        """Render the latest state."""
        state = self.coordinator.state
        if not state.notes:
            console.print("[dim]No notes yet.[/dim]")
            return
        console.print(notes_table(state.notes, title=f"Notes ({state.order})"))

    async def _cmd_add(self, args: list[str]) -> None:
        """Add a note."""
        if not args:
            console.print("[red]Usage: add <title> [content][/red]")
            return
        note = Note(title=args[0], content=" ".join(args[1:]))
        stored = await self.coordinator.service.insert_note(note)
        log_with_source(logger, "shell", "info", "Note added", note_id=stored.id)
        console.print(f"[green]Note added:[/green] {stored.id[:8]}")

    async def _cmd_show(self, args: list[str]) -> None:
        """Show one note, re-read from the store."""
        if not args:
            console.print("[red]Usage: show <#n|id>[/red]")
            return
        note = await self.coordinator.service.get_note(self.resolve(args[0]).id)
        console.print(note_panel(note))

    async def _cmd_delete(self, args: list[str]) -> None:
        """Delete a note and offer undo."""
        if not args:
            console.print("[red]Usage: delete <#n|id>[/red]")
            return
        note = self.resolve(args[0])
        await self.coordinator.on_event(DeleteNote(note))
        log_with_source(logger, "shell", "info", "Note deleted", note_id=note.id)

        window = self.coordinator.undo_buffer.window_seconds
        hint = f" within {window:g}s" if window is not None else ""
        console.print(f"[yellow]Note deleted.[/yellow] Type [cyan]undo[/cyan]{hint} to restore it.")

    async def _cmd_undo(self, args: list[str]) -> None:
        """Restore the last deleted note."""
        restored = await self.coordinator.on_event(RestoreNote())
        if restored is None:
            console.print("[dim]Nothing to restore.[/dim]")
            return
        log_with_source(logger, "shell", "info", "Note restored", note_id=restored.id)
        console.print(f"[green]Restored:[/green] {restored.title or restored.id[:8]}")

    async def _cmd_dismiss(self, args: list[str]) -> None:
        """Drop the pending undo."""
        await self.coordinator.on_event(DismissRestore())
        console.print("[dim]Undo dismissed.[/dim]")

    async def _cmd_order(self, args: list[str]) -> None:
        """Change the active order."""
        if not args:
            console.print(f"Current order: [cyan]{self.coordinator.order}[/cyan]")
            return
        order = note_order_from_str(args[0], self.coordinator.order.direction)
        await self.coordinator.on_event(OrderNotes(order))
        console.print(f"Order: [cyan]{order}[/cyan]")

    async def _cmd_clear(self, args: list[str]) -> None:
        """Clear the screen."""
        console.clear()

    async def _cmd_quit(self, args: list[str]) -> None:
        """Exit the shell."""
        self.running = False


async def run_shell(order: NoteOrder | None = None) -> None:
    """Run the interactive shell against the configured database."""
    from notesy.core.database import dispose_engine, init_models
    from notesy.core.dependencies import create_notes_coordinator, get_note_store
    from notesy.events.broker import close_event_broker

    await init_models()
    coordinator = create_notes_coordinator(order)
    try:
        await NotesShell(coordinator).run()
    finally:
        await coordinator.close()
        await close_event_broker()
        await dispose_engine()
        get_note_store.cache_clear()
