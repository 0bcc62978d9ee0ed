"""
Rich rendering helpers shared by commands and the shell.
"""

from collections.abc import Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from notesy.core.exceptions import ValidationError
from notesy.core.utils import format_millis
from notesy.schemas.note import Note
from notesy.schemas.scribble import Scribble


def parse_color(value: str) -> int:
    """
    Parse a color given as "#RRGGBB", "#AARRGGBB" or a decimal integer.

    RGB values get a fully opaque alpha channel.
    """
    raw = value.strip()
    try:
        if raw.startswith("#"):
            digits = raw[1:]
            if len(digits) not in (6, 8):
                raise ValueError(raw)
            color = int(digits, 16)
            return color | 0xFF000000 if len(digits) == 6 else color
        return int(raw)
    except ValueError:
        raise ValidationError(
            f"Invalid color: {value!r}",
            details={"expected": "#RRGGBB, #AARRGGBB or an integer"},
        ) from None


def format_color(color: int) -> str:
    return f"#{color & 0xFFFFFF:06X}"


def _color_swatch(color: int) -> Text:
    if not color:
        return Text("-", style="dim")
    hex_color = format_color(color)
    return Text.assemble(("■ ", hex_color), hex_color)


def notes_table(notes: Sequence[Note], title: str) -> Table:
    table = Table(title=title, show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Content", overflow="ellipsis", max_width=40)
    table.add_column("Color")
    table.add_column("Date", style="dim")

    for index, note in enumerate(notes, start=1):
        first_line = note.content.splitlines()[0] if note.content else ""
        table.add_row(
            str(index),
            note.id[:8],
            note.title or "[dim](untitled)[/dim]",
            first_line,
            _color_swatch(note.color),
            format_millis(note.timestamp),
        )
    return table


def note_panel(note: Note) -> Panel:
    body = note.content or "[dim](empty)[/dim]"
    subtitle = f"{format_millis(note.timestamp)}  {format_color(note.color)}"
    return Panel(body, title=note.title or "(untitled)", subtitle=subtitle)


def scribble_panel(scribble: Scribble) -> Panel:
    points = sum(len(stroke.points) for stroke in scribble.strokes)
    return Panel(
        f"Strokes: {len(scribble.strokes)}\n"
        f"Points: {points}\n"
        f"Saved: {format_millis(scribble.timestamp)}",
        title="Scribble Pad",
    )
