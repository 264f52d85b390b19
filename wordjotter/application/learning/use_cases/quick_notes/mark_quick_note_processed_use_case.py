"""Use case for marking a quick note as processed."""

import structlog

from wordjotter.application.learning.protocols.quick_note_store import QuickNoteStoreProtocol
from wordjotter.domain.common.value_objects import QuickNoteId
from wordjotter.domain.learning.entities.quick_note import QuickNote
from wordjotter.exceptions import QuickNoteNotFoundError

logger = structlog.get_logger(__name__)


class MarkQuickNoteProcessedUseCase:
    """Use case for marking a quick note as processed."""

    def __init__(self, quick_note_store: QuickNoteStoreProtocol) -> None:
        self.quick_note_store = quick_note_store

    def mark_processed(self, note_id: int) -> QuickNote:
        """
        Flag a note as processed. Marking an already processed note is a no-op.

        Args:
            note_id: ID of the quick note

        Returns:
            The processed note

        Raises:
            QuickNoteNotFoundError: If the note does not exist
        """
        quick_note_id = QuickNoteId(note_id)
        note = self.quick_note_store.find_by_id(quick_note_id)
        if note is None:
            raise QuickNoteNotFoundError(note_id)

        if not note.processed:
            if not self.quick_note_store.mark_processed(quick_note_id):
                raise QuickNoteNotFoundError(note_id)
            note.mark_processed()
            logger.info("processed_quick_note", note_id=note_id)
        return note
