"""
CLI Commands.

Organized by feature area.
"""

from heyo.cli.commands.db import app as db_app
from heyo.cli.commands.notes import app as notes_app
from heyo.cli.commands.server import app as server_app

__all__ = [
    "db_app",
    "notes_app",
    "server_app",
]
