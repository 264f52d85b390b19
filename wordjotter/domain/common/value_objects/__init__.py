"""Common value objects shared across all domain modules."""

from .ids import QuickNoteId, VocabularyItemId

__all__ = [
    "QuickNoteId",
    "VocabularyItemId",
]
