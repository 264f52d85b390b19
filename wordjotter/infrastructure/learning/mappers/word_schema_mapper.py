"""Mappers from learning domain entities to API schemas."""

from wordjotter.domain.learning.entities.quick_note import QuickNote
from wordjotter.domain.learning.entities.vocabulary_item import VocabularyItem
from wordjotter.infrastructure.learning.schemas import QuickNote as QuickNoteSchema
from wordjotter.infrastructure.learning.schemas import Word


def to_word_schema(item: VocabularyItem) -> Word:
    """Manually construct the Pydantic schema from a domain entity."""
    return Word(
        id=item.id.value,
        word=item.word,
        language=item.language,
        definition=item.definition,
        phonetic=item.phonetic,
        example=item.example,
        notes=item.notes,
        category=item.category,
        mastery_level=item.mastery_level,
        next_review_at=item.next_review_at,
        created_at=item.created_at,
    )


def to_quick_note_schema(note: QuickNote) -> QuickNoteSchema:
    return QuickNoteSchema(
        id=note.id.value,
        word=note.word,
        language=note.language,
        notes=note.notes,
        processed=note.processed,
        created_at=note.created_at,
    )
