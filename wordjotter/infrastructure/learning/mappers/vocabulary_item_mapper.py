"""Mapper for SavedWord ORM ↔ VocabularyItem domain conversion."""

from typing import cast

from wordjotter.domain.common.value_objects import VocabularyItemId
from wordjotter.domain.learning.entities.vocabulary_item import Language, VocabularyItem
from wordjotter.models import SavedWord as SavedWordORM


class VocabularyItemMapper:
    """Mapper for SavedWord ORM ↔ VocabularyItem conversion."""

    def to_domain(self, orm_model: SavedWordORM) -> VocabularyItem:
        """Convert ORM model to domain entity."""
        return VocabularyItem.create_with_id(
            id=VocabularyItemId(orm_model.id),
            word=orm_model.word,
            language=cast(Language, orm_model.language),
            definition=orm_model.definition,
            phonetic=orm_model.phonetic,
            example=orm_model.example,
            notes=orm_model.notes or "",
            category=orm_model.category,
            mastery_level=orm_model.mastery_level or 0,
            next_review_at=orm_model.next_review_at,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: VocabularyItem) -> SavedWordORM:
        """Build a new ORM row; the database assigns the id."""
        return SavedWordORM(
            word=domain_entity.word,
            language=domain_entity.language,
            definition=domain_entity.definition,
            phonetic=domain_entity.phonetic,
            example=domain_entity.example,
            notes=domain_entity.notes,
            category=domain_entity.category,
            mastery_level=domain_entity.mastery_level,
            next_review_at=domain_entity.next_review_at,
        )
