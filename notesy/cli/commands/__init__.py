"""
CLI Commands.

Organized by domain/feature area.
"""

from notesy.cli.commands.db import app as db_app
from notesy.cli.commands.notes import app as notes_app
from notesy.cli.commands.scribble import app as scribble_app

__all__ = [
    "db_app",
    "notes_app",
    "scribble_app",
]
