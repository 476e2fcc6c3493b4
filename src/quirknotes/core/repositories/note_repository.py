"""Note repository for database operations."""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import StoreUnavailableError
from ..models.note import Note

logger = logging.getLogger(__name__)


class NoteRepository:
    """Repository for note database operations.

    Every lookup filters on the owner as well as the id, so a note owned by
    somebody else looks exactly like a missing one.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, owner: str, title: str, content: str) -> Note:
        """Create new note."""
        note = Note(owner=owner, title=title, content=content)
        self.session.add(note)
        try:
            await self.session.commit()
            await self.session.refresh(note)
        except SQLAlchemyError as exc:
            await self._rollback("create note", exc)
            raise StoreUnavailableError() from exc
        return note

    async def get_by_id_and_owner(self, note_id: UUID, owner: str) -> Optional[Note]:
        """Get note by ID if owned by user."""
        stmt = select(Note).where(and_(Note.id == note_id, Note.owner == owner))
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            await self._rollback("fetch note", exc)
            raise StoreUnavailableError() from exc
        return result.scalar_one_or_none()

    async def list_owner_notes(self, owner: str) -> List[Note]:
        """List all notes of a user, oldest first."""
        stmt = select(Note).where(Note.owner == owner).order_by(Note.created_at)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            await self._rollback("list notes", exc)
            raise StoreUnavailableError() from exc
        return list(result.scalars())

    async def update_note(
        self,
        note_id: UUID,
        owner: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Optional[Note]:
        """Update note if owned by user. ``None`` fields keep their value.

        The write itself is filtered on id and owner, so a note deleted after
        the lookup gives ``None`` rather than a stale record.
        """
        note = await self.get_by_id_and_owner(note_id, owner)
        if not note:
            return None

        values = {}
        if title is not None:
            values["title"] = title
        if content is not None:
            values["content"] = content
        if not values:
            return note

        stmt = (
            update(Note)
            .where(and_(Note.id == note_id, Note.owner == owner))
            .values(**values)
            .returning(Note)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.session.execute(stmt)
            updated = result.scalar_one_or_none()
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self._rollback("update note", exc)
            raise StoreUnavailableError() from exc

        if updated is None:
            logger.warning(f"Note {note_id} vanished before update")
        return updated

    async def delete_note(self, note_id: UUID, owner: str) -> Optional[Note]:
        """Delete note if owned by user and return the removed record."""
        note = await self.get_by_id_and_owner(note_id, owner)
        if not note:
            logger.warning(f"Note {note_id} not found or not owned by {owner}")
            return None

        stmt = (
            delete(Note)
            .where(and_(Note.id == note_id, Note.owner == owner))
            .returning(Note)
        )
        try:
            result = await self.session.execute(stmt)
            deleted = result.scalar_one_or_none()
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self._rollback("delete note", exc)
            raise StoreUnavailableError() from exc

        if deleted is None:
            # removed by another request between lookup and delete
            logger.warning(f"Note {note_id} vanished before delete")
            return None

        logger.info(f"Deleted note {note_id}")
        return deleted

    async def _rollback(self, action: str, exc: SQLAlchemyError) -> None:
        logger.error(f"Failed to {action}: {exc}")
        await self.session.rollback()
