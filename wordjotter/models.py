"""Database models."""

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Integer, String, Text, false, func
from sqlalchemy.orm import Mapped, mapped_column

from wordjotter.database import Base


class SavedWord(Base):
    """A word saved to the notebook together with its review state."""

    __tablename__ = "saved_words"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    word: Mapped[str] = mapped_column(String(255), nullable=False)
    language: Mapped[str] = mapped_column(String(8), nullable=False, index=True)
    definition: Mapped[str | None] = mapped_column(Text, nullable=True)
    phonetic: Mapped[str | None] = mapped_column(String(255), nullable=True)
    example: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str] = mapped_column(
        String(100), nullable=False, default="default", index=True
    )
    mastery_level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    next_review_at: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of SavedWord."""
        return f"<SavedWord(id={self.id}, word='{self.word}', level={self.mastery_level})>"


class QuickNote(Base):
    """A word jotted down to be looked up and saved later."""

    __tablename__ = "quick_notes"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    word: Mapped[str] = mapped_column(String(255), nullable=False)
    language: Mapped[str] = mapped_column(String(8), nullable=False, default="en")
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    processed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(), index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of QuickNote."""
        return f"<QuickNote(id={self.id}, word='{self.word}', processed={self.processed})>"
