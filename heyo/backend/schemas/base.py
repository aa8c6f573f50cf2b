"""
Base Schemas.

Error body shared by every endpoint.
"""

from pydantic import BaseModel


class ValidationErrorItem(BaseModel):
    """One failing field in a rejected request body."""

    field: str
    message: str
    type: str


class ErrorResponse(BaseModel):
    """
    Error response body.

    `details` is only present for validation failures.
    """

    error: str
    code: str
    details: list[ValidationErrorItem] | None = None
