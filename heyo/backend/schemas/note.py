"""
Note Schemas.

The note contract shared by the API layer and the client data layer.
Both sides validate with these models, so a payload the client accepts
is exactly one the server accepts.

Wire keys are camelCase (isFavorite, createdAt); snake_case names are
accepted on input too.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    """Author names a note can be filed under."""

    SELY = "Sely"
    HEYO = "Heyo"
    MIKA = "Mika"
    NOOR = "Noor"


CATEGORIES: tuple[str, ...] = tuple(category.value for category in Category)

TITLE_REQUIRED = "Please add a title for your note"
CONTENT_REQUIRED = "Your note cannot be empty"


class _NoteSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class NoteCreate(_NoteSchema):
    """Schema for creating a new note."""

    title: str = Field(
        description="Note title",
        examples=["Hi"],
    )
    content: str = Field(
        description="Note content",
        examples=["World"],
    )
    category: Category | None = Field(
        default=None,
        description="Author category; omitted and null both mean none",
        examples=["Sely"],
    )
    is_favorite: bool = Field(
        default=False,
        strict=True,
        description="Pin the note to the top of listings",
    )

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(TITLE_REQUIRED)
        return value

    @field_validator("content")
    @classmethod
    def _content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(CONTENT_REQUIRED)
        return value


class NoteUpdate(_NoteSchema):
    """
    Schema for a partial update.

    Any subset of the creation fields; each present field is validated
    the same way as on create. Only category may be explicitly null.
    """

    title: str | None = Field(default=None, description="Note title")
    content: str | None = Field(default=None, description="Note content")
    category: Category | None = Field(
        default=None,
        description="Author category; null clears it",
    )
    is_favorite: bool | None = Field(
        default=None,
        strict=True,
        description="Favorite flag",
    )

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str | None) -> str:
        if value is None or not value.strip():
            raise ValueError(TITLE_REQUIRED)
        return value

    @field_validator("content")
    @classmethod
    def _content_not_blank(cls, value: str | None) -> str:
        if value is None or not value.strip():
            raise ValueError(CONTENT_REQUIRED)
        return value

    @field_validator("is_favorite")
    @classmethod
    def _favorite_not_null(cls, value: bool | None) -> bool:
        if value is None:
            raise ValueError("isFavorite must be true or false")
        return value

    def changes(self) -> dict:
        """Fields the caller actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class NoteResponse(_NoteSchema):
    """Schema for a note in API responses."""

    id: str = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    category: str | None = Field(default=None, description="Author category")
    is_favorite: bool = Field(description="Whether the note is pinned")
    created_at: datetime = Field(description="Creation timestamp (UTC)")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
