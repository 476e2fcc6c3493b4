"""Notes API endpoints."""

from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.repositories import NoteRepository
from ..core.schemas.common import ErrorResponse, MessageResponse
from ..core.schemas.notes import (
    NoteCreate,
    NoteCreatedResponse,
    NoteEnvelope,
    NoteListEnvelope,
    NoteUpdate,
)
from ..core.services import NoteService
from ..middleware.auth import bearer_token
from ..security import TokenIssuer
from .deps import get_db_session, get_token_issuer

router = APIRouter(tags=["notes"])

_errors = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


def get_note_service(
    session: AsyncSession = Depends(get_db_session),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> NoteService:
    return NoteService(NoteRepository(session), tokens)


@router.post("/postNote", response_model=NoteCreatedResponse, responses=_errors)
async def create_note(
    request: NoteCreate,
    token: Optional[str] = Depends(bearer_token),
    note_service: NoteService = Depends(get_note_service),
):
    """Create a new note."""
    note_id = await note_service.create_note(token, request.title, request.content)
    return NoteCreatedResponse(response="Note added successfully.", insertedId=note_id)


@router.get("/getNote/{note_id}", response_model=NoteEnvelope, responses=_errors)
async def get_note(
    note_id: str,
    token: Optional[str] = Depends(bearer_token),
    note_service: NoteService = Depends(get_note_service),
):
    """Get a specific note."""
    note = await note_service.get_note(token, note_id)
    return NoteEnvelope(response=note)


@router.get("/getAllNotes", response_model=NoteListEnvelope, responses=_errors)
async def list_notes(
    token: Optional[str] = Depends(bearer_token),
    note_service: NoteService = Depends(get_note_service),
):
    """List all notes of the caller."""
    notes = await note_service.list_notes(token)
    return NoteListEnvelope(response=notes)


# GET kept next to DELETE/PATCH for clients of the original routes
@router.api_route(
    "/deleteNote/{note_id}",
    methods=["GET", "DELETE"],
    response_model=MessageResponse,
    responses=_errors,
)
async def delete_note(
    note_id: str,
    token: Optional[str] = Depends(bearer_token),
    note_service: NoteService = Depends(get_note_service),
):
    """Delete a note."""
    note = await note_service.delete_note(token, note_id)
    return MessageResponse(response=f"Document with ID {note.id} deleted successfully.")


@router.api_route(
    "/editNote/{note_id}",
    methods=["GET", "PATCH"],
    response_model=MessageResponse,
    responses=_errors,
)
async def edit_note(
    note_id: str,
    request: Optional[NoteUpdate] = Body(default=None),
    token: Optional[str] = Depends(bearer_token),
    note_service: NoteService = Depends(get_note_service),
):
    """Update title and/or content of a note."""
    request = request or NoteUpdate()
    note = await note_service.update_note(token, note_id, request.title, request.content)
    return MessageResponse(response=f"Document with ID {note.id} properly updated.")
