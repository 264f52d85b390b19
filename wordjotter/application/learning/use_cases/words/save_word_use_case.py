"""Use case for saving words to the notebook."""

import structlog

from wordjotter.application.learning.protocols.quick_note_store import QuickNoteStoreProtocol
from wordjotter.application.learning.protocols.vocabulary_store import VocabularyStoreProtocol
from wordjotter.domain.common.value_objects import QuickNoteId
from wordjotter.domain.learning.entities.vocabulary_item import Language, VocabularyItem
from wordjotter.exceptions import QuickNoteNotFoundError

logger = structlog.get_logger(__name__)


class SaveWordUseCase:
    """Use case for saving a new word."""

    def __init__(
        self,
        vocabulary_store: VocabularyStoreProtocol,
        quick_note_store: QuickNoteStoreProtocol,
    ) -> None:
        """Initialize use case with the vocabulary and quick note stores."""
        self.vocabulary_store = vocabulary_store
        self.quick_note_store = quick_note_store

    def save_word(
        self,
        word: str,
        language: Language,
        definition: str | None = None,
        phonetic: str | None = None,
        example: str | None = None,
        notes: str = "",
        category: str | None = None,
        quick_note_id: int | None = None,
    ) -> VocabularyItem:
        """
        Save a word to the notebook as a never-reviewed item.

        Args:
            word: The word itself
            language: Language code ('en' or 'fi')
            definition: Definition text, if looked up
            phonetic: Pronunciation, if known
            example: Example sentence
            notes: Free-form user notes
            category: Category, e.g. part of speech (defaults to 'default')
            quick_note_id: Quick note the word was looked up from, marked
                processed once the word is saved

        Returns:
            Saved vocabulary item

        Raises:
            ValidationError: If the word is blank or the language unsupported
            QuickNoteNotFoundError: If quick_note_id does not exist
        """
        item = VocabularyItem.create(
            word=word,
            language=language,
            definition=definition,
            phonetic=phonetic,
            example=example,
            notes=notes,
            category=category,
        )

        note_id = QuickNoteId(quick_note_id) if quick_note_id is not None else None
        if note_id is not None and self.quick_note_store.find_by_id(note_id) is None:
            raise QuickNoteNotFoundError(quick_note_id)

        item = self.vocabulary_store.save(item)
        if note_id is not None:
            self.quick_note_store.mark_processed(note_id)

        logger.info(
            "saved_word",
            item_id=item.id.value,
            language=item.language,
            category=item.category,
            quick_note_id=quick_note_id,
        )
        return item
