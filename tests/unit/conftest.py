"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests never touch a real database or server.
"""

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from heyo.backend.schemas.note import NoteResponse


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    Mock database session for unit tests.

    Usage:
        def test_repository(mock_db_session: AsyncMock):
            repo = NoteRepository(mock_db_session)
    """
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock()
    session.add = MagicMock()
    session.delete = AsyncMock()
    return session


@pytest.fixture
def make_note():
    """
    Factory for NoteResponse objects.

    Usage:
        note = make_note(title="Hi", is_favorite=True, created_at=datetime(2026, 1, 1))
    """
    counter = {"n": 0}

    def factory(**overrides: Any) -> NoteResponse:
        counter["n"] += 1
        fields: dict[str, Any] = {
            "id": f"note-{counter['n']}",
            "title": f"Note {counter['n']}",
            "content": "Some content",
            "category": None,
            "is_favorite": False,
            "created_at": datetime(2026, 1, counter["n"] % 28 + 1, 12, 0, 0),
        }
        fields.update(overrides)
        return NoteResponse(**fields)

    return factory
