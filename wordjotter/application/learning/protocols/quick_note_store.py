"""Protocol for the quick note store in learning context."""

from typing import Protocol

from wordjotter.domain.common.value_objects import QuickNoteId
from wordjotter.domain.learning.entities.quick_note import QuickNote


class QuickNoteStoreProtocol(Protocol):
    """
    Protocol for quick note store operations.

    Implementations raise StoreUnavailableError when the underlying storage
    cannot be read or written.
    """

    def find_all(self, include_processed: bool = False) -> list[QuickNote]:
        """
        Get quick notes, newest first.

        Args:
            include_processed: Also return notes that were already processed
        """
        ...

    def find_by_id(self, note_id: QuickNoteId) -> QuickNote | None: ...

    def save(self, note: QuickNote) -> QuickNote:
        """Insert a new note and return it with its database-generated values."""
        ...

    def mark_processed(self, note_id: QuickNoteId) -> bool:
        """
        Flag a note as processed.

        Returns:
            True if the note exists, False otherwise
        """
        ...

    def delete(self, note_id: QuickNoteId) -> bool:
        """
        Delete a note.

        Returns:
            True if deleted, False if not found
        """
        ...
