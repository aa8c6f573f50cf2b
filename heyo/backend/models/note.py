"""
Note Model.

Database model for notes, the only persisted entity.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from heyo.backend.models.base import Base, CreatedAtMixin, UUIDMixin


class Note(UUIDMixin, CreatedAtMixin, Base):
    """
    Note database model.

    A short text memo with an optional author category and a favorite
    flag. Notes carry no updated_at: edits leave timestamps untouched.
    """

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    category: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        index=True,
    )
    is_favorite: Mapped[bool] = mapped_column(
        default=False,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
