"""Use case for jotting down a word to look up later."""

import structlog

from wordjotter.application.learning.protocols.quick_note_store import QuickNoteStoreProtocol
from wordjotter.domain.learning.entities.quick_note import QuickNote
from wordjotter.domain.learning.entities.vocabulary_item import Language

logger = structlog.get_logger(__name__)


class JotQuickNoteUseCase:
    """Use case for capturing a quick note."""

    def __init__(self, quick_note_store: QuickNoteStoreProtocol) -> None:
        self.quick_note_store = quick_note_store

    def jot(self, word: str, language: Language = "en", notes: str = "") -> QuickNote:
        """
        Store an unprocessed quick note.

        Raises:
            ValidationError: If the word is blank or the language unsupported
        """
        note = self.quick_note_store.save(QuickNote.create(word, language, notes))

        logger.info("jotted_quick_note", note_id=note.id.value, language=note.language)
        return note
