"""
Database models for QuirkNotes.

SQLAlchemy ORM models that define the two tables of the application:
    - User: account with a unique username and a password hash
    - Note: title/content owned by one user
"""

from .base import BaseModel
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
]
