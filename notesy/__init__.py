"""
Notesy.

Personal note-taking core:

- core/: Configuration, logging, exceptions, database engine
- models/: SQLAlchemy records
- schemas/: Pydantic value types (notes, orderings, scribbles)
- repositories/: Session-bound SQL access
- stores/: Durable store adapters with change notifications
- services/: Ordering, notes service, undo buffer, state coordinator
- events/: Optional Redis event publishing
- cli/: Command-line client (Typer + Rich)
"""

__version__ = "0.1.0"
