from .quick_note_store import QuickNoteStoreProtocol
from .vocabulary_store import VocabularyStoreProtocol

__all__ = ["QuickNoteStoreProtocol", "VocabularyStoreProtocol"]
