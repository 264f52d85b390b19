"""
VocabularyItem entity for spaced repetition learning.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Literal

from wordjotter.domain.common.entity import Entity
from wordjotter.domain.common.exceptions import ValidationError
from wordjotter.domain.common.value_objects import VocabularyItemId

Language = Literal["en", "fi"]

SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "fi")
DEFAULT_CATEGORY = "default"


@dataclass(eq=False)
class VocabularyItem(Entity[VocabularyItemId]):
    """
    A single learnable word in the user's notebook.

    Business Rules:
    - Word cannot be empty
    - Language must be one of the supported languages
    - A missing next_review_at means the word was never reviewed
    - Mastery state changes only through a recorded review outcome
    """

    id: VocabularyItemId
    word: str
    language: Language
    definition: str | None = None
    phonetic: str | None = None
    example: str | None = None
    notes: str = ""
    category: str = DEFAULT_CATEGORY
    mastery_level: int = 0
    next_review_at: date | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.word or not self.word.strip():
            raise ValidationError("Word cannot be empty", field="word")
        if self.language not in SUPPORTED_LANGUAGES:
            raise ValidationError("Unsupported language", field="language", value=self.language)

    @property
    def is_new(self) -> bool:
        """Whether the word has never been reviewed."""
        return self.next_review_at is None

    def with_mastery_state(self, mastery_level: int, next_review_at: date) -> "VocabularyItem":
        """Return a copy carrying a new mastery state."""
        return replace(self, mastery_level=mastery_level, next_review_at=next_review_at)

    @classmethod
    def create(
        cls,
        word: str,
        language: Language,
        definition: str | None = None,
        phonetic: str | None = None,
        example: str | None = None,
        notes: str = "",
        category: str | None = None,
    ) -> "VocabularyItem":
        """Create a new, never-reviewed item (ID will be 0 until persisted)."""
        return cls(
            id=VocabularyItemId.generate(),
            word=word.strip(),
            language=language,
            definition=definition,
            phonetic=phonetic,
            example=example,
            notes=notes,
            category=(category or DEFAULT_CATEGORY).strip() or DEFAULT_CATEGORY,
            mastery_level=0,
            next_review_at=None,
        )

    @classmethod
    def create_with_id(
        cls,
        id: VocabularyItemId,
        word: str,
        language: Language,
        definition: str | None,
        phonetic: str | None,
        example: str | None,
        notes: str,
        category: str,
        mastery_level: int,
        next_review_at: date | None,
        created_at: datetime | None,
    ) -> "VocabularyItem":
        """Reconstitute an item from persistence."""
        return cls(
            id=id,
            word=word,
            language=language,
            definition=definition,
            phonetic=phonetic,
            example=example,
            notes=notes,
            category=category,
            mastery_level=mastery_level,
            next_review_at=next_review_at,
            created_at=created_at,
        )
