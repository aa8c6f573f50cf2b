"""
Notes Export.

Local JSON backup of fetched notes. There is no server endpoint for this;
the file is written straight to disk.
"""

import json
from collections.abc import Sequence
from datetime import date, datetime
from pathlib import Path
from typing import Any

from heyo.backend.core.utils import utc_now
from heyo.backend.schemas.note import NoteResponse

EXPORT_PREFIX = "heyo-notes-backup"


def export_filename(day: date) -> str:
    """Backup file name for the given day, e.g. heyo-notes-backup-2026-10-19.json."""
    return f"{EXPORT_PREFIX}-{day.isoformat()}.json"


def build_export(
    notes: Sequence[NoteResponse],
    exported_at: datetime | None = None,
) -> dict[str, Any]:
    """
    Build the backup document.

    Returns:
        {"exportedAt", "totalNotes", "notes": [{id, title, content,
        category, isFavorite, createdAt}, ...]}
    """
    exported_at = exported_at or utc_now()
    return {
        "exportedAt": exported_at.isoformat(),
        "totalNotes": len(notes),
        "notes": [
            note.model_dump(mode="json", by_alias=True)
            for note in notes
        ],
    }


def write_export(
    notes: Sequence[NoteResponse],
    directory: Path,
    exported_at: datetime | None = None,
) -> Path:
    """
    Write the backup file into `directory` and return its path.

    An existing file for the same day is overwritten.
    """
    exported_at = exported_at or utc_now()
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_filename(exported_at.date())
    document = build_export(notes, exported_at)
    path.write_text(json.dumps(document, indent=2), encoding="utf-8")
    return path
