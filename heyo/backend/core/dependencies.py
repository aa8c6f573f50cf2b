"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from heyo.backend.core.database import get_db_session
from heyo.backend.services.note import NoteService

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_note_service(db: DbSession) -> NoteService:
    """Build a NoteService bound to the request's session."""
    return NoteService(db)


NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]
