# SQLAlchemy models package
from heyo.backend.models.base import Base
from heyo.backend.models.note import Note

__all__ = ["Base", "Note"]
