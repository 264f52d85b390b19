"""Custom exception hierarchy for WordJotter application."""


class WordJotterError(Exception):
    """Base exception for all WordJotter errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(WordJotterError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class VocabularyItemNotFoundError(NotFoundError):
    """Vocabulary item not found error."""

    def __init__(self, item_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with item ID or custom message."""
        self.item_id = item_id
        if message:
            super().__init__(message)
        elif item_id is not None:
            super().__init__(f"Word with id {item_id} not found")
        else:
            super().__init__("Word not found")


class QuickNoteNotFoundError(NotFoundError):
    """Quick note not found error."""

    def __init__(self, note_id: int | None = None) -> None:
        self.note_id = note_id
        if note_id is not None:
            super().__init__(f"Quick note with id {note_id} not found")
        else:
            super().__init__("Quick note not found")


class StoreUnavailableError(WordJotterError):
    """The notebook store could not be read or written."""

    def __init__(self, message: str = "Vocabulary store is unavailable") -> None:
        """Initialize with message and 503 status code."""
        super().__init__(message, status_code=503)
