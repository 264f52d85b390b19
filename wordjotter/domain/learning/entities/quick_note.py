"""
QuickNote entity: a word jotted down to be looked up later.
"""

from dataclasses import dataclass
from datetime import datetime

from wordjotter.domain.common.entity import Entity
from wordjotter.domain.common.exceptions import ValidationError
from wordjotter.domain.common.value_objects import QuickNoteId
from wordjotter.domain.learning.entities.vocabulary_item import SUPPORTED_LANGUAGES, Language


@dataclass(eq=False)
class QuickNote(Entity[QuickNoteId]):
    """
    A word captured in passing, before it has a definition.

    Business Rules:
    - Word cannot be empty
    - Language must be one of the supported languages
    - Once processed, a note stays processed
    """

    id: QuickNoteId
    word: str
    language: Language = "en"
    notes: str = ""
    processed: bool = False
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.word or not self.word.strip():
            raise ValidationError("Word cannot be empty", field="word")
        if self.language not in SUPPORTED_LANGUAGES:
            raise ValidationError("Unsupported language", field="language", value=self.language)

    def mark_processed(self) -> None:
        self.processed = True

    def matches(self, query: str | None) -> bool:
        """Case-insensitive substring match on the word. A blank query matches all."""
        if not query or not query.strip():
            return True
        return query.strip().casefold() in self.word.casefold()

    @classmethod
    def create(cls, word: str, language: Language = "en", notes: str = "") -> "QuickNote":
        """Create a new unprocessed note (ID will be 0 until persisted)."""
        return cls(
            id=QuickNoteId.generate(),
            word=word.strip(),
            language=language,
            notes=notes or "",
            processed=False,
        )

    @classmethod
    def create_with_id(
        cls,
        id: QuickNoteId,
        word: str,
        language: Language,
        notes: str,
        processed: bool,
        created_at: datetime | None,
    ) -> "QuickNote":
        """Reconstitute a note from persistence."""
        return cls(
            id=id,
            word=word,
            language=language,
            notes=notes,
            processed=processed,
            created_at=created_at,
        )
