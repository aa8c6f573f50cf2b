# Pydantic schemas package
from heyo.backend.schemas.base import ErrorResponse, ValidationErrorItem
from heyo.backend.schemas.note import (
    CATEGORIES,
    Category,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)

__all__ = [
    "CATEGORIES",
    "Category",
    "ErrorResponse",
    "NoteCreate",
    "NoteResponse",
    "NoteUpdate",
    "ValidationErrorItem",
]
