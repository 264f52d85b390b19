"""Repository for QuickNote domain entities."""

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from wordjotter.domain.common.value_objects import QuickNoteId
from wordjotter.domain.learning.entities.quick_note import QuickNote
from wordjotter.infrastructure.common.store_errors import store_errors
from wordjotter.infrastructure.learning.mappers.quick_note_mapper import QuickNoteMapper
from wordjotter.models import QuickNote as QuickNoteORM

STORE = "Quick note"


class QuickNoteRepository:
    """Repository for QuickNote domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = QuickNoteMapper()

    def find_all(self, include_processed: bool = False) -> list[QuickNote]:
        """
        Get quick notes ordered by created_at DESC.

        Args:
            include_processed: Also return notes that were already processed
        """
        stmt = select(QuickNoteORM).order_by(
            QuickNoteORM.created_at.desc(), QuickNoteORM.id.desc()
        )
        if not include_processed:
            stmt = stmt.where(QuickNoteORM.processed.is_(False))
        with store_errors(self.db, STORE, "find_all"):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, note_id: QuickNoteId) -> QuickNote | None:
        stmt = select(QuickNoteORM).where(QuickNoteORM.id == note_id.value)
        with store_errors(self.db, STORE, "find_by_id"):
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, note: QuickNote) -> QuickNote:
        """Insert a new note and return it with its database-generated values."""
        if note.id.is_persisted:
            raise ValueError(f"Quick note {note.id.value} is already saved")

        orm_model = self.mapper.to_orm(note)
        with store_errors(self.db, STORE, "save"):
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def mark_processed(self, note_id: QuickNoteId) -> bool:
        """
        Flag a note as processed.

        Returns:
            True if the note exists, False otherwise
        """
        stmt = (
            update(QuickNoteORM).where(QuickNoteORM.id == note_id.value).values(processed=True)
        )
        with store_errors(self.db, STORE, "mark_processed"):
            result = self.db.execute(stmt)
            self.db.commit()
        return bool(result.rowcount)

    def delete(self, note_id: QuickNoteId) -> bool:
        """
        Delete a note.

        Returns:
            True if deleted, False if not found
        """
        stmt = delete(QuickNoteORM).where(QuickNoteORM.id == note_id.value)
        with store_errors(self.db, STORE, "delete"):
            result = self.db.execute(stmt)
            self.db.commit()
        return bool(result.rowcount)
