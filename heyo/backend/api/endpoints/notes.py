"""
Notes API Endpoints.

REST endpoints for note management. Handlers are stateless:
validate, delegate to NoteService, respond.
"""

from fastapi import APIRouter, Response

from heyo.backend.core.dependencies import NoteServiceDep
from heyo.backend.schemas.base import ErrorResponse
from heyo.backend.schemas.note import NoteCreate, NoteResponse, NoteUpdate

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Note not found"}}
_INVALID = {400: {"model": ErrorResponse, "description": "Invalid data"}}
_STORE_FAILURE = {500: {"model": ErrorResponse, "description": "Store failure"}}


@router.get(
    "",
    response_model=list[NoteResponse],
    summary="List notes",
    description="Get every note. Ordering is up to the client.",
    responses=_STORE_FAILURE,
)
async def list_notes(service: NoteServiceDep) -> list[NoteResponse]:
    """List all notes."""
    notes = await service.list_notes()
    return [NoteResponse.model_validate(note) for note in notes]


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    summary="Get a note",
    responses={**_NOT_FOUND, **_STORE_FAILURE},
)
async def get_note(note_id: str, service: NoteServiceDep) -> NoteResponse:
    """Get a note by ID."""
    note = await service.get_note(note_id)
    return NoteResponse.model_validate(note)


@router.post(
    "",
    response_model=NoteResponse,
    status_code=201,
    summary="Create a note",
    description="Create a note. Title and content are required and non-empty.",
    responses={**_INVALID, **_STORE_FAILURE},
)
async def create_note(data: NoteCreate, service: NoteServiceDep) -> NoteResponse:
    """Create a new note."""
    note = await service.create_note(data)
    return NoteResponse.model_validate(note)


@router.patch(
    "/{note_id}",
    response_model=NoteResponse,
    summary="Update a note",
    description="Update an existing note. Only provided fields are updated.",
    responses={**_INVALID, **_NOT_FOUND, **_STORE_FAILURE},
)
async def update_note(
    note_id: str,
    data: NoteUpdate,
    service: NoteServiceDep,
) -> NoteResponse:
    """Update a note."""
    note = await service.update_note(note_id, data)
    return NoteResponse.model_validate(note)


@router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a note",
    description="Permanently delete a note.",
    responses={**_NOT_FOUND, **_STORE_FAILURE},
)
async def delete_note(note_id: str, service: NoteServiceDep) -> Response:
    """Delete a note."""
    await service.delete_note(note_id)
    return Response(status_code=204)
