"""
Note management schemas.

These schemas define the API contracts for note CRUD operations.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: Optional[str] = Field(default=None, description="Note title")
    content: Optional[str] = Field(default=None, description="Note content")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Groceries",
                "content": "Milk, eggs, coffee",
            }
        }
    )


class NoteUpdate(BaseModel):
    """Note update request schema. At least one field must be non-empty."""

    title: Optional[str] = Field(default=None, description="Note title")
    content: Optional[str] = Field(default=None, description="Note content")


class NoteResponse(BaseModel):
    """Complete note response schema."""

    id: uuid.UUID = Field(description="Note unique identifier")
    owner: str = Field(description="Username of the note owner")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class NoteCreatedResponse(BaseModel):
    response: str = Field(description="Human readable outcome")
    insertedId: uuid.UUID = Field(description="Identifier of the new note")


class NoteEnvelope(BaseModel):
    """Single note wrapped in ``response``."""

    response: NoteResponse


class NoteListEnvelope(BaseModel):
    """All notes of the caller wrapped in ``response``."""

    response: List[NoteResponse]
