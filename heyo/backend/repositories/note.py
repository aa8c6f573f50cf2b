"""
Note Repository.

Data access layer for notes. Handles all database operations
for the Note model.
"""

from sqlalchemy import select

from heyo.backend.models.note import Note
from heyo.backend.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """Repository for Note model."""

    model = Note

    async def get_all(self) -> list[Note]:
        """
        Get every note, newest first.

        Clients apply their own ordering; this one only keeps
        responses deterministic.
        """
        result = await self.session.execute(
            select(Note).order_by(Note.created_at.desc(), Note.id)
        )
        return list(result.scalars().all())
