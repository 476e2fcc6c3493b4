"""
Service interfaces for QuirkNotes application.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..schemas.notes import NoteResponse


class IAuthService(ABC):
    """Auth service for registration, login and token checks."""

    @abstractmethod
    async def register(self, username: Optional[str], password: Optional[str]) -> str:
        """Register new user and return a token."""
        pass

    @abstractmethod
    async def login(self, username: Optional[str], password: Optional[str]) -> str:
        """Login user and return a token."""
        pass


class INoteService(ABC):
    """Note service for owner-scoped CRUD operations."""

    @abstractmethod
    async def create_note(
        self, token: Optional[str], title: Optional[str], content: Optional[str]
    ) -> UUID:
        """Create new note."""
        pass

    @abstractmethod
    async def get_note(self, token: Optional[str], note_id: str) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def list_notes(self, token: Optional[str]) -> List[NoteResponse]:
        """List all notes of the caller."""
        pass

    @abstractmethod
    async def update_note(
        self,
        token: Optional[str],
        note_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> NoteResponse:
        """Update existing note."""
        pass

    @abstractmethod
    async def delete_note(self, token: Optional[str], note_id: str) -> NoteResponse:
        """Delete note."""
        pass
