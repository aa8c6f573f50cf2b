"""
Notes Client.

Client data layer for notes. Reads are served from a ResponseCache until
invalidated; every successful mutation invalidates the affected note and
the listing so the next read refetches confirmed server state. Failed
mutations leave the cache alone and raise for the caller to report.
No retries.
"""

from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from heyo.backend.core.logging import get_logger, log_with_source
from heyo.backend.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from heyo.client.api import APIClient
from heyo.client.cache import CacheKey, ResponseCache

logger = get_logger(__name__)

NOTES_PATH = "/api/notes"


class NotesAPIError(Exception):
    """Raised when the backend answers a notes request with an error status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.details = details or []
        super().__init__(f"{status_code}: {message}")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @classmethod
    def from_response(cls, response: httpx.Response) -> "NotesAPIError":
        """Build from an error response, tolerating non-JSON bodies."""
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        message = body.get("error") or response.reason_phrase or "Request failed"
        return cls(response.status_code, message, body.get("details"))


class ClientValidationError(Exception):
    """Raised when input fails the note contract before anything is sent."""

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        self.errors = errors
        fields = ", ".join(
            ".".join(str(loc) for loc in error.get("loc", ())) for error in errors
        )
        super().__init__(f"Invalid note data: {fields}")


def list_key() -> CacheKey:
    return (NOTES_PATH,)


def note_key(note_id: str) -> CacheKey:
    return (NOTES_PATH, note_id)


class NotesClient:
    """
    Notes operations over HTTP with a per-client response cache.

    Usage:
        client = NotesClient(APIClient())
        notes = await client.list_notes()
        note = await client.create_note({"title": "Hi", "content": "World"})
    """

    def __init__(
        self,
        api: APIClient,
        cache: ResponseCache | None = None,
    ) -> None:
        self.api = api
        self.cache = cache if cache is not None else ResponseCache()

    async def close(self) -> None:
        await self.api.close()

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def list_notes(self) -> list[NoteResponse]:
        """
        All notes, from cache when available.

        The cache holds a tuple; callers get a fresh list they may reorder.
        """
        key = list_key()
        cached = self.cache.get(key)
        if cached is not None:
            return list(cached)

        response = await self.api.get(NOTES_PATH)
        self._raise_for_status(response)
        notes = [NoteResponse.model_validate(item) for item in response.json()]
        self.cache.set(key, tuple(notes))
        return notes

    async def get_note(self, note_id: str) -> NoteResponse:
        """
        One note, from cache when available.

        Raises:
            NotesAPIError: 404 when the note does not exist
        """
        key = note_key(note_id)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        response = await self.api.get(f"{NOTES_PATH}/{note_id}")
        self._raise_for_status(response)
        note = NoteResponse.model_validate(response.json())
        self.cache.set(key, note)
        return note

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    async def create_note(self, data: NoteCreate | dict[str, Any]) -> NoteResponse:
        """Create a note and invalidate the listing."""
        payload = self._validate(NoteCreate, data)

        response = await self.api.post(
            NOTES_PATH,
            json=payload.model_dump(mode="json", by_alias=True),
        )
        self._raise_for_status(response)
        note = NoteResponse.model_validate(response.json())

        self._invalidate(note.id)
        log_with_source(logger, self.api.frontend, "info", "Note created", note_id=note.id)
        return note

    async def update_note(
        self,
        note_id: str,
        data: NoteUpdate | dict[str, Any],
    ) -> NoteResponse:
        """Send a partial update; only fields the caller set are sent."""
        payload = self._validate(NoteUpdate, data)

        response = await self.api.patch(
            f"{NOTES_PATH}/{note_id}",
            json=payload.model_dump(mode="json", by_alias=True, exclude_unset=True),
        )
        self._raise_for_status(response)
        note = NoteResponse.model_validate(response.json())

        self._invalidate(note_id)
        log_with_source(logger, self.api.frontend, "info", "Note updated", note_id=note_id)
        return note

    async def toggle_favorite(self, note: NoteResponse) -> NoteResponse:
        """Flip the favorite flag of a fetched note."""
        return await self.update_note(note.id, {"isFavorite": not note.is_favorite})

    async def delete_note(self, note_id: str) -> None:
        """Permanently delete a note and invalidate it and the listing."""
        response = await self.api.delete(f"{NOTES_PATH}/{note_id}")
        self._raise_for_status(response)

        self._invalidate(note_id)
        log_with_source(logger, self.api.frontend, "info", "Note deleted", note_id=note_id)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _invalidate(self, note_id: str) -> None:
        self.cache.invalidate(note_key(note_id))
        self.cache.invalidate(list_key())

    @staticmethod
    def _validate(schema: type, data: Any) -> Any:
        if isinstance(data, schema):
            return data
        try:
            return schema.model_validate(data)
        except PydanticValidationError as e:
            raise ClientValidationError(e.errors()) from e

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        error = NotesAPIError.from_response(response)
        log_with_source(
            logger,
            self.api.frontend,
            "warning",
            "Notes request rejected",
            status_code=error.status_code,
            error=error.message,
        )
        raise error


_notes_client: NotesClient | None = None


def get_notes_client() -> NotesClient:
    """Get or create the process-wide NotesClient."""
    global _notes_client
    if _notes_client is None:
        _notes_client = NotesClient(APIClient())
    return _notes_client


async def close_notes_client() -> None:
    global _notes_client
    if _notes_client is not None:
        await _notes_client.close()
        _notes_client = None
