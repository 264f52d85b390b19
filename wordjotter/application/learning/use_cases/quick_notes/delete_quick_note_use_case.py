"""Use case for deleting quick notes."""

import structlog

from wordjotter.application.learning.protocols.quick_note_store import QuickNoteStoreProtocol
from wordjotter.domain.common.value_objects import QuickNoteId
from wordjotter.exceptions import QuickNoteNotFoundError

logger = structlog.get_logger(__name__)


class DeleteQuickNoteUseCase:
    """Use case for deleting quick notes."""

    def __init__(self, quick_note_store: QuickNoteStoreProtocol) -> None:
        self.quick_note_store = quick_note_store

    def delete_quick_note(self, note_id: int) -> None:
        """
        Delete a quick note.

        Raises:
            QuickNoteNotFoundError: If the note does not exist
        """
        if not self.quick_note_store.delete(QuickNoteId(note_id)):
            raise QuickNoteNotFoundError(note_id)

        logger.info("deleted_quick_note", note_id=note_id)
