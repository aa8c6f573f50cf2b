"""
Listing Filter.

Derives the listing screen's rows from the fetched notes, the search
query and the category filter. Pure function; nothing is stored.
"""

from collections.abc import Iterable

from heyo.backend.schemas.note import NoteResponse

ALL_CATEGORIES = "all"


def filter_notes(
    notes: Iterable[NoteResponse],
    query: str = "",
    category: str = ALL_CATEGORIES,
) -> list[NoteResponse]:
    """
    Filter and order notes for display.

    1. A non-blank query keeps notes whose title or content contains it,
       ignoring case.
    2. A category other than "all" keeps notes with exactly that category.
    3. Favorites come first; each group is ordered newest first.

    Args:
        notes: Notes as fetched from the API
        query: Free-text search string
        category: Category name, or "all"

    Returns:
        A new list; the input is not modified
    """
    result = list(notes)

    if query.strip():
        needle = query.lower()
        result = [
            note
            for note in result
            if needle in note.title.lower() or needle in note.content.lower()
        ]

    if category != ALL_CATEGORIES:
        result = [note for note in result if note.category == category]

    # Two stable passes: newest first, then favorites ahead of the rest
    result.sort(key=lambda note: note.created_at, reverse=True)
    result.sort(key=lambda note: not note.is_favorite)
    return result
