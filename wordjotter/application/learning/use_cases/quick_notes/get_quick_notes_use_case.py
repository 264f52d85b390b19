"""Use case for listing quick notes."""

from wordjotter.application.learning.protocols.quick_note_store import QuickNoteStoreProtocol
from wordjotter.domain.learning.entities.quick_note import QuickNote


class GetQuickNotesUseCase:
    def __init__(self, quick_note_store: QuickNoteStoreProtocol) -> None:
        self.quick_note_store = quick_note_store

    def get_quick_notes(
        self, include_processed: bool = False, query: str | None = None
    ) -> list[QuickNote]:
        """
        List quick notes, newest first.

        Args:
            include_processed: Also return notes that were already processed
            query: Keep only notes whose word contains this text (case-insensitive)

        Returns:
            Matching quick notes
        """
        notes = self.quick_note_store.find_all(include_processed=include_processed)
        return [note for note in notes if note.matches(query)]
