"""Mapper for QuickNote ORM ↔ QuickNote domain conversion."""

from typing import cast

from wordjotter.domain.common.value_objects import QuickNoteId
from wordjotter.domain.learning.entities.quick_note import QuickNote
from wordjotter.domain.learning.entities.vocabulary_item import Language
from wordjotter.models import QuickNote as QuickNoteORM


class QuickNoteMapper:
    def to_domain(self, orm_model: QuickNoteORM) -> QuickNote:
        return QuickNote.create_with_id(
            id=QuickNoteId(orm_model.id),
            word=orm_model.word,
            language=cast(Language, orm_model.language),
            notes=orm_model.notes or "",
            processed=bool(orm_model.processed),
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: QuickNote) -> QuickNoteORM:
        """Build a new ORM row; the database assigns the id."""
        return QuickNoteORM(
            word=domain_entity.word,
            language=domain_entity.language,
            notes=domain_entity.notes,
            processed=domain_entity.processed,
        )
