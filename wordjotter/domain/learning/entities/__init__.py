"""Learning context entities."""

from .quick_note import QuickNote
from .vocabulary_item import DEFAULT_CATEGORY, SUPPORTED_LANGUAGES, Language, VocabularyItem

__all__ = [
    "DEFAULT_CATEGORY",
    "SUPPORTED_LANGUAGES",
    "Language",
    "QuickNote",
    "VocabularyItem",
]
