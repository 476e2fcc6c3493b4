"""Note service implementation."""

import logging
from typing import List, Optional
from uuid import UUID

from ...security import TokenIssuer
from ..exceptions import (
    InvalidIdError,
    InvalidInputError,
    InvalidTokenError,
    NotFoundError,
    UnauthorizedError,
)
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteResponse
from .interfaces import INoteService

logger = logging.getLogger(__name__)


def parse_note_id(note_id: str) -> UUID:
    """Parse a note id from the URL, raising InvalidIdError when malformed."""
    if isinstance(note_id, UUID):
        return note_id
    try:
        return UUID(str(note_id))
    except ValueError as exc:
        raise InvalidIdError() from exc


class NoteService(INoteService):
    """Note service implementation.

    Each operation resolves the caller from the bearer token before touching
    the store, and every store call is filtered by that caller. Notes of
    other users are reported as not found, never as forbidden.
    """

    def __init__(self, notes: NoteRepository, tokens: TokenIssuer):
        self.notes = notes
        self.tokens = tokens

    def _current_user(self, token: Optional[str]) -> str:
        try:
            return self.tokens.verify(token)
        except InvalidTokenError as exc:
            logger.debug(f"Rejected token: {exc}")
            raise UnauthorizedError() from exc

    async def create_note(
        self, token: Optional[str], title: Optional[str], content: Optional[str]
    ) -> UUID:
        """Create new note owned by the caller."""
        owner = self._current_user(token)
        if not title or not content:
            raise InvalidInputError("Title and content are both required.")

        note = await self.notes.create_note(owner, title, content)
        logger.info(f"Created note {note.id} for {owner}")
        return note.id

    async def get_note(self, token: Optional[str], note_id: str) -> NoteResponse:
        """Get note by ID."""
        owner = self._current_user(token)
        nid = parse_note_id(note_id)

        note = await self.notes.get_by_id_and_owner(nid, owner)
        if not note:
            raise NotFoundError()
        return NoteResponse.model_validate(note)

    async def list_notes(self, token: Optional[str]) -> List[NoteResponse]:
        """List all notes of the caller (possibly none)."""
        owner = self._current_user(token)
        notes = await self.notes.list_owner_notes(owner)
        return [NoteResponse.model_validate(note) for note in notes]

    async def update_note(
        self,
        token: Optional[str],
        note_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> NoteResponse:
        """Update title and/or content. Empty values keep the old ones."""
        owner = self._current_user(token)
        nid = parse_note_id(note_id)

        if not title and not content:
            raise InvalidInputError("A title or content are needed to update the note.")

        # a concurrent delete shows up as no match here
        note = await self.notes.update_note(
            nid, owner, title=title or None, content=content or None
        )
        if not note:
            raise NotFoundError()

        logger.info(f"Updated note {nid}")
        return NoteResponse.model_validate(note)

    async def delete_note(self, token: Optional[str], note_id: str) -> NoteResponse:
        """Delete note and return what was removed."""
        owner = self._current_user(token)
        nid = parse_note_id(note_id)

        note = await self.notes.delete_note(nid, owner)
        if not note:
            raise NotFoundError()
        return NoteResponse.model_validate(note)
