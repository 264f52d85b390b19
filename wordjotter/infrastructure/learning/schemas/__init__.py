"""Learning context schemas."""

from wordjotter.infrastructure.learning.schemas.quick_note_schemas import (
    QuickNote,
    QuickNoteCreateRequest,
    QuickNoteDeleteResponse,
    QuickNoteResponse,
    QuickNotesListResponse,
)
from wordjotter.infrastructure.learning.schemas.vocabulary_schemas import (
    NotebookStatsResponse,
    ReviewOutcomeRequest,
    ReviewOutcomeResponse,
    ReviewSessionResponse,
    Word,
    WordBase,
    WordCreateRequest,
    WordCreateResponse,
    WordDeleteResponse,
    WordsListResponse,
)

__all__ = [
    "NotebookStatsResponse",
    "QuickNote",
    "QuickNoteCreateRequest",
    "QuickNoteDeleteResponse",
    "QuickNoteResponse",
    "QuickNotesListResponse",
    "ReviewOutcomeRequest",
    "ReviewOutcomeResponse",
    "ReviewSessionResponse",
    "Word",
    "WordBase",
    "WordCreateRequest",
    "WordCreateResponse",
    "WordDeleteResponse",
    "WordsListResponse",
]
