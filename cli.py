#!/usr/bin/env python3
"""
Notesy CLI entry point.

Usage:
    python cli.py --help
    python cli.py notes list --order title --asc
    python cli.py shell
"""

import sys
from pathlib import Path

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from notesy.cli.app import app  # noqa: E402

if __name__ == "__main__":
    app()
