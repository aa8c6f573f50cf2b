"""
Note Service.

Business logic layer for notes. Wraps the repository, turns missing
records into NotFoundError and store failures into DatabaseError.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from heyo.backend.core.exceptions import NotFoundError
from heyo.backend.models.note import Note
from heyo.backend.repositories.note import NoteRepository
from heyo.backend.schemas.note import NoteCreate, NoteUpdate
from heyo.backend.services.base import BaseService

NOTE_NOT_FOUND = "Note not found"


class NoteService(BaseService):
    """Service for note creation, retrieval, update and deletion."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = NoteRepository(session)

    async def create_note(self, data: NoteCreate) -> Note:
        """
        Create a new note.

        Args:
            data: Validated note creation data

        Returns:
            Created note with generated id and created_at
        """
        self._log_operation("Creating note", category=data.category)

        note = await self._execute_db_operation(
            "create_note",
            self.repo.create(
                title=data.title,
                content=data.content,
                category=data.category,
                is_favorite=data.is_favorite,
            ),
            failure_message="Failed to create note",
        )

        self._log_debug("Note created", note_id=note.id)
        return note

    async def list_notes(self) -> list[Note]:
        """Return every stored note."""
        return await self._execute_db_operation(
            "list_notes",
            self.repo.get_all(),
            failure_message="Failed to fetch notes",
        )

    async def get_note(self, note_id: str) -> Note:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If note not found
        """
        note = await self._execute_db_operation(
            "get_note",
            self.repo.get_by_id_or_none(note_id),
            failure_message="Failed to fetch note",
        )
        if note is None:
            raise NotFoundError(NOTE_NOT_FOUND)
        return note

    async def update_note(self, note_id: str, data: NoteUpdate) -> Note:
        """
        Apply a partial update.

        Only fields present in the request are written; an empty
        update returns the note unchanged.

        Raises:
            NotFoundError: If note not found
        """
        changes = data.changes()

        if not changes:
            return await self.get_note(note_id)

        self._log_operation(
            "Updating note",
            note_id=note_id,
            fields=sorted(changes),
        )

        note = await self._execute_db_operation(
            "update_note",
            self.repo.update(note_id, **changes),
            failure_message="Failed to update note",
        )
        if note is None:
            raise NotFoundError(NOTE_NOT_FOUND)
        return note

    async def delete_note(self, note_id: str) -> None:
        """
        Permanently delete a note.

        Raises:
            NotFoundError: If note not found
        """
        self._log_operation("Deleting note", note_id=note_id)

        deleted = await self._execute_db_operation(
            "delete_note",
            self.repo.delete(note_id),
            failure_message="Failed to delete note",
        )
        if not deleted:
            raise NotFoundError(NOTE_NOT_FOUND)

    async def count_notes(self) -> int:
        """Number of stored notes."""
        return await self._execute_db_operation(
            "count_notes",
            self.repo.count(),
        )
