"""
Response Cache.

Keyed store of the last fetched response per resource. Keys are tuples
of path segments, e.g. ("/api/notes",) for the listing and
("/api/notes", note_id) for a single note.
"""

from typing import Any, Hashable

CacheKey = tuple[Hashable, ...]


class ResponseCache:
    """In-memory cache of parsed API responses, invalidated explicitly."""

    def __init__(self) -> None:
        self._entries: dict[CacheKey, Any] = {}

    def get(self, key: CacheKey) -> Any | None:
        """Return the cached value, or None when absent."""
        return self._entries.get(key)

    def set(self, key: CacheKey, value: Any) -> None:
        self._entries[key] = value

    def invalidate(self, key: CacheKey) -> bool:
        """
        Drop one entry so the next read refetches.

        Returns:
            True if an entry was removed
        """
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
