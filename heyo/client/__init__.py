"""
Client Data Layer.

Talks to the backend over HTTP, caches responses per resource key,
and derives the filtered listing and JSON export from fetched notes.
"""

from heyo.client.api import APIClient, close_api_client, get_api_client
from heyo.client.cache import ResponseCache
from heyo.client.export import build_export, export_filename, write_export
from heyo.client.filtering import ALL_CATEGORIES, filter_notes
from heyo.client.notes import (
    ClientValidationError,
    NotesAPIError,
    NotesClient,
    close_notes_client,
    get_notes_client,
)

__all__ = [
    "ALL_CATEGORIES",
    "APIClient",
    "ClientValidationError",
    "NotesAPIError",
    "NotesClient",
    "ResponseCache",
    "build_export",
    "close_api_client",
    "close_notes_client",
    "export_filename",
    "filter_notes",
    "get_api_client",
    "get_notes_client",
    "write_export",
]
