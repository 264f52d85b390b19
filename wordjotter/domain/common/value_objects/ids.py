from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class VocabularyItemId(EntityId):
    """Strongly-typed vocabulary item identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("VocabularyItemId must be non-negative")

    @classmethod
    def generate(cls) -> "VocabularyItemId":
        return cls(0)  # Database assigns real ID


@dataclass(frozen=True)
class QuickNoteId(EntityId):
    """Strongly-typed quick note identifier."""
