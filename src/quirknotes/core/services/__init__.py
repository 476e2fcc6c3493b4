"""
Service layer interfaces and implementations.
"""

from .interfaces import IAuthService, INoteService

from .auth_service import AuthService
from .note_service import NoteService

__all__ = [
    # Interfaces
    "IAuthService",
    "INoteService",

    # Implementations
    "AuthService",
    "NoteService",
]
