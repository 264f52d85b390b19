"""Use case for deleting words."""

import structlog

from wordjotter.application.learning.protocols.vocabulary_store import VocabularyStoreProtocol
from wordjotter.domain.common.value_objects import VocabularyItemId
from wordjotter.exceptions import VocabularyItemNotFoundError

logger = structlog.get_logger(__name__)


class DeleteWordUseCase:
    """Use case for deleting words."""

    def __init__(self, vocabulary_store: VocabularyStoreProtocol) -> None:
        """Initialize use case with the vocabulary store."""
        self.vocabulary_store = vocabulary_store

    def delete_word(self, item_id: int) -> None:
        """
        Delete a word and its review history.

        Args:
            item_id: ID of the word to delete

        Raises:
            VocabularyItemNotFoundError: If the word does not exist
        """
        deleted = self.vocabulary_store.delete(VocabularyItemId(item_id))
        if not deleted:
            raise VocabularyItemNotFoundError(item_id)

        logger.info("deleted_word", item_id=item_id)
