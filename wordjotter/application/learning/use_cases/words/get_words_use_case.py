"""Use case for listing notebook words."""

from wordjotter.application.learning.protocols.vocabulary_store import VocabularyStoreProtocol
from wordjotter.domain.learning.entities.vocabulary_item import VocabularyItem


class GetWordsUseCase:
    """Use case for reading the saved word collection."""

    def __init__(self, vocabulary_store: VocabularyStoreProtocol) -> None:
        self.vocabulary_store = vocabulary_store

    def get_words(self, category: str | None = None) -> list[VocabularyItem]:
        """List saved words, newest first, optionally limited to one category."""
        if category:
            return self.vocabulary_store.find_by_category(category)
        return self.vocabulary_store.find_all()

    def get_recent_words(self, limit: int) -> list[VocabularyItem]:
        return self.vocabulary_store.find_all()[: max(limit, 0)]
