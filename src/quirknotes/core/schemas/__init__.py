"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import LoginRequest, RegisterRequest, TokenResponse
from .common import ErrorResponse, HealthResponse, MessageResponse
from .notes import (
    NoteCreate,
    NoteCreatedResponse,
    NoteEnvelope,
    NoteListEnvelope,
    NoteResponse,
    NoteUpdate,
)

__all__ = [
    # Auth schemas
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteCreatedResponse",
    "NoteEnvelope",
    "NoteListEnvelope",
    # Common schemas
    "MessageResponse",
    "ErrorResponse",
    "HealthResponse",
]
