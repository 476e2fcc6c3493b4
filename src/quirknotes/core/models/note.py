# Note model for user content
from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class Note(BaseModel):
    """Note with a title and text content, owned by one user."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # owner reference (by username, never changes after creation)
    owner: Mapped[str] = mapped_column(
        String, ForeignKey("users.username", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        Index("idx_notes_owner", "owner"),
        Index("idx_notes_owner_created", "owner", "created_at"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', owner={self.owner})>"
