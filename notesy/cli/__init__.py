"""
CLI Client Module.

Command-line client built with Typer and Rich.

Architecture:
- CLI is a thin presentation layer
- All business logic lives in notesy.services
- One-shot commands open the database per invocation
- The shell keeps a NotesStateCoordinator alive for undo

Usage:
    python cli.py --help
    python cli.py notes list
    python cli.py shell  # Interactive mode
"""
